from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Protocol, Sequence

from app.words.records import (
    ConceptId,
    InflectedOverride,
    LemmaRecord,
    normalize_inflected_override,
    normalize_lemma_record,
)


class WordRepository(Protocol):
    def language_codes(self) -> list[str]:
        ...

    def get_lemmas(self, lang_code: str) -> Sequence[LemmaRecord]:
        ...

    def get_inflected_form(self, lang_code: str, concept_id: ConceptId) -> str | None:
        ...

    def has_inflections(self, lang_code: str) -> bool:
        ...

    def supplementary_categories(self) -> Sequence[str]:
        ...

    def metadata(self) -> dict[str, object]:
        ...


@dataclass(frozen=True)
class LanguageWords:
    code: str
    lemmas: tuple[LemmaRecord, ...]
    inflected: Mapping[ConceptId, str] | None = None
    skipped: int = 0


def normalize_lang_code(lang_code: str) -> str:
    return lang_code.strip().lower()


def build_inflection_table(overrides: Iterable[InflectedOverride]) -> Mapping[ConceptId, str]:
    table: dict[ConceptId, str] = {}
    for override in overrides:
        # The first override listed for a concept is the one shown.
        table.setdefault(override.concept_id, override.form)
    return MappingProxyType(table)


class InMemoryWordRepository:
    """Read-only word lists held in process memory for the app lifetime."""

    def __init__(
        self,
        languages: Iterable[LanguageWords],
        categories: Iterable[str] = (),
    ):
        self._languages: dict[str, LanguageWords] = {
            normalize_lang_code(language.code): language for language in languages
        }
        self._categories = tuple(category for category in categories if category)

    @classmethod
    def from_raw(
        cls,
        lemmas_by_language: Mapping[str, Iterable[Mapping[str, object]]],
        inflected_by_language: Mapping[str, Iterable[Mapping[str, object]]] | None = None,
        categories: Iterable[Mapping[str, object] | str] = (),
    ) -> InMemoryWordRepository:
        inflected_by_language = {
            normalize_lang_code(code): entries
            for code, entries in (inflected_by_language or {}).items()
        }
        languages: list[LanguageWords] = []
        for code, raw_entries in lemmas_by_language.items():
            code = normalize_lang_code(code)
            lemmas: list[LemmaRecord] = []
            skipped = 0
            for raw in raw_entries:
                record = normalize_lemma_record(raw) if isinstance(raw, Mapping) else None
                if record is None:
                    skipped += 1
                    continue
                lemmas.append(record)

            inflected = None
            if code in inflected_by_language:
                inflected = build_inflection_table(
                    override
                    for override in (
                        normalize_inflected_override(raw)
                        for raw in inflected_by_language[code]
                        if isinstance(raw, Mapping)
                    )
                    if override is not None
                )

            languages.append(
                LanguageWords(code=code, lemmas=tuple(lemmas), inflected=inflected, skipped=skipped)
            )

        category_names: list[str] = []
        for entry in categories:
            if isinstance(entry, str):
                name = entry
            elif isinstance(entry, Mapping):
                name = entry.get("category")
            else:
                continue
            if name:
                category_names.append(str(name))

        return cls(languages, categories=category_names)

    def language_codes(self) -> list[str]:
        return list(self._languages)

    def get_lemmas(self, lang_code: str) -> Sequence[LemmaRecord]:
        language = self._languages.get(normalize_lang_code(lang_code))
        if language is None:
            return ()
        return language.lemmas

    def get_inflected_form(self, lang_code: str, concept_id: ConceptId) -> str | None:
        language = self._languages.get(normalize_lang_code(lang_code))
        if language is None or language.inflected is None:
            return None
        return language.inflected.get(concept_id)

    def has_inflections(self, lang_code: str) -> bool:
        language = self._languages.get(normalize_lang_code(lang_code))
        return bool(language is not None and language.inflected is not None)

    def supplementary_categories(self) -> Sequence[str]:
        return self._categories

    def metadata(self) -> dict[str, object]:
        return {
            "languages": {
                code: {
                    "lemmas": len(language.lemmas),
                    "skipped": language.skipped,
                    "inflected": len(language.inflected) if language.inflected is not None else None,
                }
                for code, language in self._languages.items()
            },
            "supplementary_categories": len(self._categories),
        }
