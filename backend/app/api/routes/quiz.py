from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request

from app.api.routes.vocabulary import require_words_ready
from app.api.schemas.v1.quiz import CheckAnswersRequest, CheckAnswersResponse
from app.services.use_cases import QuizUseCase

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/quiz/check", response_model=CheckAnswersResponse)
def check_answers(payload: CheckAnswersRequest, request: Request) -> CheckAnswersResponse:
    require_words_ready(request)

    use_case = QuizUseCase(matcher=request.app.state.concept_matcher)
    try:
        result = use_case.check_answers(payload.source_lang, payload.target_lang, payload.answers)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    logger.info(
        "quiz_answers_checked",
        extra={
            "source_lang": payload.source_lang,
            "target_lang": payload.target_lang,
            "correct_count": result.correct_count,
            "total": result.total,
        },
    )
    return result
