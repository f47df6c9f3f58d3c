from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Request

from app.api.schemas.v1.vocabulary import (
    ConceptListResponse,
    FacetSummaryResponse,
    GlobalFiltersResponse,
    LanguageListResponse,
)
from app.services.matching import ALL
from app.services.use_cases import VocabularyUseCase

router = APIRouter()


def require_words_ready(request: Request) -> None:
    if not bool(getattr(request.app.state, "words_ready", False)):
        raise HTTPException(
            status_code=503,
            detail="Word lists unavailable. Check backend logs and words directory configuration.",
        )


def _vocabulary_use_case(request: Request) -> VocabularyUseCase:
    return VocabularyUseCase(
        repository=request.app.state.word_repository,
        matcher=request.app.state.concept_matcher,
    )


@router.get("/languages", response_model=LanguageListResponse)
def list_languages(request: Request) -> LanguageListResponse:
    require_words_ready(request)
    return _vocabulary_use_case(request).list_languages()


@router.get("/filters", response_model=GlobalFiltersResponse)
def list_filters(request: Request) -> GlobalFiltersResponse:
    require_words_ready(request)
    return _vocabulary_use_case(request).list_filters()


@router.get(
    "/vocabulary/{source_lang}/{target_lang}/facets",
    response_model=FacetSummaryResponse,
)
def get_facets(source_lang: str, target_lang: str, request: Request) -> FacetSummaryResponse:
    require_words_ready(request)
    return _vocabulary_use_case(request).get_facets(source_lang, target_lang)


@router.get(
    "/vocabulary/{source_lang}/{target_lang}/concepts",
    response_model=ConceptListResponse,
)
def list_concepts(
    source_lang: str,
    target_lang: str,
    request: Request,
    level: str = Query(ALL, min_length=1),
    category: str = Query(ALL, min_length=1),
) -> ConceptListResponse:
    require_words_ready(request)
    return _vocabulary_use_case(request).list_concepts(
        source_lang,
        target_lang,
        level=level,
        category=category,
    )
