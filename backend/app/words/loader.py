from __future__ import annotations

import json
import logging
from pathlib import Path

from app.core.config import Settings
from app.words.records import find_duplicate_concept_ids
from app.words.repository import InMemoryWordRepository, normalize_lang_code


logger = logging.getLogger(__name__)

CATEGORIES_FILE = "categories.json"
INFLECTED_SUFFIX = "_inflected"


class WordDataError(RuntimeError):
    """Raised when the static word lists cannot be loaded."""


def _read_json_list(path: Path) -> list:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise WordDataError(f"Could not read word list {path.name}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise WordDataError(f"Invalid JSON in {path.name}: {exc}") from exc

    if not isinstance(payload, list):
        raise WordDataError(f"{path.name} must contain a JSON list, got {type(payload).__name__}")
    return payload


def discover_word_files(words_dir: Path) -> tuple[dict[str, Path], dict[str, Path]]:
    """Map language codes to their lemma and inflected-form files.

    Lemma lists are named ``<CODE>.json`` and optional override tables
    ``<CODE>_inflected.json``; ``categories.json`` is not a language.
    """
    lemma_files: dict[str, Path] = {}
    inflected_files: dict[str, Path] = {}
    for path in sorted(words_dir.glob("*.json")):
        if path.name == CATEGORIES_FILE:
            continue
        stem = path.stem
        if stem.lower().endswith(INFLECTED_SUFFIX):
            inflected_files[normalize_lang_code(stem[: -len(INFLECTED_SUFFIX)])] = path
        else:
            lemma_files[normalize_lang_code(stem)] = path
    return lemma_files, inflected_files


def load_word_repository(settings: Settings) -> InMemoryWordRepository:
    words_dir = settings.words_dir
    if not words_dir.is_dir():
        raise WordDataError(f"Words directory not found: {words_dir}")

    lemma_files, inflected_files = discover_word_files(words_dir)
    if not lemma_files:
        raise WordDataError(f"No word lists found in {words_dir}")

    for code in sorted(set(inflected_files) - set(lemma_files)):
        logger.warning(
            "word_list_orphan_inflections",
            extra={"language": code, "path": str(inflected_files[code])},
        )

    categories_path = words_dir / CATEGORIES_FILE
    categories = _read_json_list(categories_path) if categories_path.exists() else []

    repository = InMemoryWordRepository.from_raw(
        {code: _read_json_list(path) for code, path in lemma_files.items()},
        inflected_by_language={
            code: _read_json_list(path)
            for code, path in inflected_files.items()
            if code in lemma_files
        },
        categories=categories,
    )

    language_metadata = repository.metadata()["languages"]
    for code in repository.language_codes():
        duplicates = find_duplicate_concept_ids(repository.get_lemmas(code))
        if duplicates:
            if settings.reject_duplicate_concepts:
                raise WordDataError(
                    f"Duplicate concept ids in '{code}' word list: "
                    + ", ".join(str(concept_id) for concept_id in duplicates[:10])
                )
            logger.warning(
                "word_list_duplicate_concepts",
                extra={"language": code, "duplicates": [str(c) for c in duplicates[:10]]},
            )
        logger.info(
            "word_list_loaded",
            extra={"language": code, **language_metadata[code]},
        )

    return repository
