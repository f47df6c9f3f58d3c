from app.api.schemas.v1 import (
    CheckAnswersRequest,
    CheckAnswersResponse,
    ConceptListResponse,
    FacetSummaryResponse,
    GlobalFiltersResponse,
    LanguageListResponse,
)

__all__ = [
    "CheckAnswersRequest",
    "CheckAnswersResponse",
    "ConceptListResponse",
    "FacetSummaryResponse",
    "GlobalFiltersResponse",
    "LanguageListResponse",
]
