from __future__ import annotations

from pydantic import BaseModel, Field


class QuizAnswer(BaseModel):
    concept_id: int | str
    answer: str | None = None


class CheckAnswersRequest(BaseModel):
    source_lang: str = Field(..., min_length=1)
    target_lang: str = Field(..., min_length=1)
    answers: list[QuizAnswer] = Field(default_factory=list)


class AnswerResult(BaseModel):
    concept_id: int | str
    source_text: str
    answer: str | None
    expected: str
    correct: bool


class CheckAnswersResponse(BaseModel):
    correct_count: int
    total: int
    percentage: int
    message: str
    results: list[AnswerResult]
