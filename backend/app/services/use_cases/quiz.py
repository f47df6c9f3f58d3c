from __future__ import annotations

from typing import Sequence

from app.api.schemas.v1.quiz import AnswerResult, CheckAnswersResponse, QuizAnswer
from app.services.grading import is_correct_answer, score_answers
from app.services.matching import ConceptMatcher


class QuizUseCase:
    def __init__(self, matcher: ConceptMatcher):
        self._matcher = matcher

    def check_answers(
        self,
        source_lang: str,
        target_lang: str,
        answers: Sequence[QuizAnswer],
    ) -> CheckAnswersResponse:
        concepts = {
            concept.id: concept for concept in self._matcher.join(source_lang, target_lang)
        }

        results: list[AnswerResult] = []
        for answer in answers:
            concept = concepts.get(answer.concept_id)
            if concept is None:
                raise ValueError(
                    f"Concept '{answer.concept_id}' has no {source_lang}->{target_lang} translation"
                )
            results.append(
                AnswerResult(
                    concept_id=concept.id,
                    source_text=concept.source_text,
                    answer=answer.answer,
                    expected=concept.target_text,
                    correct=is_correct_answer(answer.answer, concept.target_text),
                )
            )

        score = score_answers(result.correct for result in results)
        return CheckAnswersResponse(
            correct_count=score.correct_count,
            total=score.total,
            percentage=score.percentage,
            message=score.message,
            results=results,
        )
