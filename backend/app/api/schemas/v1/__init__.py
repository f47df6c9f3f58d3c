from app.api.schemas.v1.quiz import (
    AnswerResult,
    CheckAnswersRequest,
    CheckAnswersResponse,
    QuizAnswer,
)
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

__all__ = [
    "AnswerResult",
    "CheckAnswersRequest",
    "CheckAnswersResponse",
    "QuizAnswer",
    "ConceptListResponse",
    "ConceptMetadataModel",
    "ConceptModel",
    "FacetSummaryResponse",
    "FilterOptionModel",
    "GlobalFiltersResponse",
    "LanguageListResponse",
    "LanguageSummary",
]
