from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Mapping, Union


ConceptId = Union[int, str]

DEFAULT_LEVEL = "A1"
DEFAULT_CATEGORY = "general"
DEFAULT_TYPE = "word"

# Older asset exports misspell the definition field.
DEFINITION_KEYS = ("definition", "definiton")


@dataclass(frozen=True)
class LemmaRecord:
    concept_id: ConceptId
    lemma: str
    level: str = DEFAULT_LEVEL
    category: str = DEFAULT_CATEGORY
    type: str = DEFAULT_TYPE
    definition: str | None = None
    example_sentence: str | None = None


@dataclass(frozen=True)
class InflectedOverride:
    concept_id: ConceptId
    form: str


def _text(raw: Mapping[str, object], *keys: str) -> str | None:
    for key in keys:
        value = raw.get(key)
        if value is None:
            continue
        text = str(value)
        if text:
            return text
    return None


def _concept_id(raw: Mapping[str, object]) -> ConceptId | None:
    value = raw.get("concept_id")
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    return text or None


def normalize_lemma_record(raw: Mapping[str, object]) -> LemmaRecord | None:
    """Build a LemmaRecord from a raw asset entry, applying every field default.

    This is the only place level/category/type defaults are substituted, so
    filtering and facet code can compare metadata values directly. Entries
    without a concept id or a lemma carry nothing to join on and yield None.
    """
    concept_id = _concept_id(raw)
    lemma = _text(raw, "word_lemma", "lemma")
    if concept_id is None or lemma is None or not lemma.strip():
        return None

    return LemmaRecord(
        concept_id=concept_id,
        lemma=lemma,
        level=_text(raw, "level") or DEFAULT_LEVEL,
        category=_text(raw, "category") or DEFAULT_CATEGORY,
        type=_text(raw, "type") or DEFAULT_TYPE,
        definition=_text(raw, *DEFINITION_KEYS),
        example_sentence=_text(raw, "sentence", "example_sentence"),
    )


def normalize_inflected_override(raw: Mapping[str, object]) -> InflectedOverride | None:
    concept_id = _concept_id(raw)
    form = _text(raw, "word_inflected", "form")
    if concept_id is None or form is None or not form.strip():
        return None
    return InflectedOverride(concept_id=concept_id, form=form)


def find_duplicate_concept_ids(records: Iterable[LemmaRecord]) -> list[ConceptId]:
    counts = Counter(record.concept_id for record in records)
    return [concept_id for concept_id, count in counts.items() if count > 1]
