from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Iterable, Mapping, Sequence

from app.words.records import ConceptId, LemmaRecord
from app.words.repository import WordRepository


ALL = "all"

LEVEL_ORDER: dict[str, int] = {"A1": 1, "A2": 2, "B1": 3, "B2": 4, "C1": 5, "C2": 6}
UNKNOWN_LEVEL_RANK = 99


@dataclass(frozen=True)
class ConceptMetadata:
    level: str
    category: str
    type: str
    source_definition: str | None = None
    source_sentence: str | None = None
    target_definition: str | None = None
    target_sentence: str | None = None


@dataclass(frozen=True)
class ConceptPair:
    id: ConceptId
    key: str
    source_text: str
    target_text: str
    metadata: ConceptMetadata


@dataclass(frozen=True)
class FacetSummary:
    total_concepts: int
    total_with_translations: int
    levels: tuple[str, ...]
    categories: tuple[str, ...]


@dataclass(frozen=True)
class GlobalFacets:
    levels: tuple[str, ...]
    categories: tuple[str, ...]


@dataclass(frozen=True)
class _TargetEntry:
    lemma: str
    definition: str | None
    sentence: str | None


def level_sort_key(level: str) -> tuple[int, str]:
    return LEVEL_ORDER.get(level, UNKNOWN_LEVEL_RANK), level


def sort_levels(levels: Iterable[str]) -> tuple[str, ...]:
    return tuple(sorted(set(levels), key=level_sort_key))


def sort_categories(categories: Iterable[str]) -> tuple[str, ...]:
    return tuple(sorted(set(categories)))


def _target_lookup(lemmas: Sequence[LemmaRecord]) -> Mapping[ConceptId, _TargetEntry]:
    lookup: dict[ConceptId, _TargetEntry] = {}
    for record in lemmas:
        # Later duplicates overwrite earlier ones.
        lookup[record.concept_id] = _TargetEntry(
            lemma=record.lemma,
            definition=record.definition,
            sentence=record.example_sentence,
        )
    return lookup


def filter_concepts(
    concepts: Sequence[ConceptPair],
    level: str = ALL,
    category: str = ALL,
) -> list[ConceptPair]:
    """Keep the pairs matching ``level`` and ``category`` in their original order.

    ``"all"`` lifts the constraint on that axis; any other value must match the
    pair's metadata exactly.
    """
    return [
        concept
        for concept in concepts
        if (level == ALL or concept.metadata.level == level)
        and (category == ALL or concept.metadata.category == category)
    ]


class ConceptMatcher:
    """Joins two languages' word lists on concept id and derives filter facets."""

    def __init__(self, repository: WordRepository):
        self._repository = repository

    def join(self, source_lang: str, target_lang: str) -> list[ConceptPair]:
        source_lemmas = self._repository.get_lemmas(source_lang)
        targets = _target_lookup(self._repository.get_lemmas(target_lang))
        use_inflections = self._repository.has_inflections(source_lang)

        concepts: list[ConceptPair] = []
        for record in source_lemmas:
            target = targets.get(record.concept_id)
            if target is None:
                continue

            source_text = record.lemma
            if use_inflections:
                source_text = (
                    self._repository.get_inflected_form(source_lang, record.concept_id) or record.lemma
                )

            concepts.append(
                ConceptPair(
                    id=record.concept_id,
                    key=record.lemma.lower(),
                    source_text=source_text,
                    target_text=target.lemma,
                    metadata=ConceptMetadata(
                        level=record.level,
                        category=record.category,
                        type=record.type,
                        source_definition=record.definition,
                        source_sentence=record.example_sentence,
                        target_definition=target.definition,
                        target_sentence=target.sentence,
                    ),
                )
            )
        return concepts

    def query(
        self,
        source_lang: str,
        target_lang: str,
        level: str = ALL,
        category: str = ALL,
    ) -> list[ConceptPair]:
        return filter_concepts(self.join(source_lang, target_lang), level, category)

    def compute_facets(self, source_lang: str, target_lang: str) -> FacetSummary:
        source_lemmas = self._repository.get_lemmas(source_lang)
        targets = _target_lookup(self._repository.get_lemmas(target_lang))

        translated = [record for record in source_lemmas if record.concept_id in targets]
        return FacetSummary(
            total_concepts=len(source_lemmas),
            total_with_translations=len(translated),
            levels=sort_levels(record.level for record in translated),
            categories=sort_categories(record.category for record in translated),
        )

    @cached_property
    def global_facets(self) -> GlobalFacets:
        # Word lists never change after load, so this is computed once per matcher.
        levels: set[str] = set()
        categories: set[str] = set(self._repository.supplementary_categories())
        for lang_code in self._repository.language_codes():
            for record in self._repository.get_lemmas(lang_code):
                levels.add(record.level)
                categories.add(record.category)
        return GlobalFacets(levels=sort_levels(levels), categories=sort_categories(categories))
