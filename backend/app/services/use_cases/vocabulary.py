from __future__ import annotations

import logging
from dataclasses import asdict

from app.api.schemas.v1.vocabulary import (
    ConceptListResponse,
    ConceptMetadataModel,
    ConceptModel,
    FacetSummaryResponse,
    FilterOptionModel,
    GlobalFiltersResponse,
    LanguageListResponse,
    LanguageSummary,
)
from app.services.catalog import FilterOption, category_options, language_info, level_options
from app.services.matching import ALL, ConceptMatcher, ConceptPair
from app.words.repository import WordRepository, normalize_lang_code


logger = logging.getLogger(__name__)


def _option_models(options: list[FilterOption]) -> list[FilterOptionModel]:
    return [FilterOptionModel(**asdict(option)) for option in options]


def _concept_model(concept: ConceptPair) -> ConceptModel:
    return ConceptModel(
        id=concept.id,
        key=concept.key,
        source_text=concept.source_text,
        target_text=concept.target_text,
        metadata=ConceptMetadataModel(**asdict(concept.metadata)),
    )


class VocabularyUseCase:
    def __init__(self, repository: WordRepository, matcher: ConceptMatcher):
        self._repository = repository
        self._matcher = matcher

    def list_languages(self) -> LanguageListResponse:
        items: list[LanguageSummary] = []
        for code in self._repository.language_codes():
            info = language_info(code)
            items.append(
                LanguageSummary(
                    code=code,
                    name=info.name,
                    native_name=info.native_name,
                    flag=info.flag,
                    lemma_count=len(self._repository.get_lemmas(code)),
                    has_inflections=self._repository.has_inflections(code),
                )
            )
        return LanguageListResponse(items=items)

    def list_filters(self) -> GlobalFiltersResponse:
        facets = self._matcher.global_facets
        return GlobalFiltersResponse(
            levels=list(facets.levels),
            categories=list(facets.categories),
            level_options=_option_models(level_options(facets.levels)),
            category_options=_option_models(category_options(facets.categories)),
        )

    def get_facets(self, source_lang: str, target_lang: str) -> FacetSummaryResponse:
        source_lang = normalize_lang_code(source_lang)
        target_lang = normalize_lang_code(target_lang)
        summary = self._matcher.compute_facets(source_lang, target_lang)

        logger.info(
            "vocabulary_facets_query",
            extra={
                "source_lang": source_lang,
                "target_lang": target_lang,
                "total_concepts": summary.total_concepts,
                "total_with_translations": summary.total_with_translations,
            },
        )

        return FacetSummaryResponse(
            source_lang=source_lang,
            target_lang=target_lang,
            total_concepts=summary.total_concepts,
            total_with_translations=summary.total_with_translations,
            levels=list(summary.levels),
            categories=list(summary.categories),
            level_options=_option_models(level_options(summary.levels)),
            category_options=_option_models(category_options(summary.categories)),
        )

    def list_concepts(
        self,
        source_lang: str,
        target_lang: str,
        level: str = ALL,
        category: str = ALL,
    ) -> ConceptListResponse:
        source_lang = normalize_lang_code(source_lang)
        target_lang = normalize_lang_code(target_lang)
        concepts = self._matcher.query(source_lang, target_lang, level, category)

        logger.info(
            "vocabulary_concepts_query",
            extra={
                "source_lang": source_lang,
                "target_lang": target_lang,
                "level": level,
                "category": category,
                "returned": len(concepts),
            },
        )

        return ConceptListResponse(
            source_lang=source_lang,
            target_lang=target_lang,
            level=level,
            category=category,
            count=len(concepts),
            items=[_concept_model(concept) for concept in concepts],
        )
