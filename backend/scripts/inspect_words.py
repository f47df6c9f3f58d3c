from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app.core.config import load_settings
from app.services.matching import ConceptMatcher
from app.words.loader import load_word_repository
from app.words.records import find_duplicate_concept_ids


def build_report(source_lang: str | None, target_lang: str | None) -> dict[str, object]:
    settings = load_settings()
    repository = load_word_repository(settings)
    matcher = ConceptMatcher(repository)
    global_facets = matcher.global_facets

    report: dict[str, object] = {
        "words_dir": str(settings.words_dir),
        **repository.metadata(),
        "duplicates": {
            code: [str(concept_id) for concept_id in find_duplicate_concept_ids(repository.get_lemmas(code))]
            for code in repository.language_codes()
        },
        "levels": list(global_facets.levels),
        "categories": list(global_facets.categories),
    }

    if source_lang and target_lang:
        facets = matcher.compute_facets(source_lang, target_lang)
        report["pair"] = {
            "source_lang": source_lang,
            "target_lang": target_lang,
            "total_concepts": facets.total_concepts,
            "total_with_translations": facets.total_with_translations,
            "levels": list(facets.levels),
            "categories": list(facets.categories),
        }
    return report


def main() -> int:
    parser = argparse.ArgumentParser(description="Summarize the Wordflow word lists.")
    parser.add_argument("--source", help="Source language code for a pair summary.")
    parser.add_argument("--target", help="Target language code for a pair summary.")
    args = parser.parse_args()

    print(json.dumps(build_report(args.source, args.target), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
