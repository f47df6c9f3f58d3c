from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable


GOOD_SCORE_PERCENT = 70

PERFECT_MESSAGE = "Perfect score! Well done!"
GOOD_MESSAGE = "Good job! Keep practicing!"
KEEP_LEARNING_MESSAGE = "Keep learning! Practice makes perfect!"
EMPTY_MESSAGE = "No answers to check."


@dataclass(frozen=True)
class QuizScore:
    correct_count: int
    total: int
    percentage: int
    message: str


def is_correct_answer(answer: str | None, expected: str) -> bool:
    if answer is None:
        return False
    return answer.strip().lower() == expected.lower()


def score_percentage(correct_count: int, total: int) -> int:
    if total <= 0:
        return 0
    # Round half up, not to even.
    return math.floor(correct_count * 100 / total + 0.5)


def score_message(correct_count: int, total: int) -> str:
    if total <= 0:
        return EMPTY_MESSAGE
    if correct_count == total:
        return PERFECT_MESSAGE
    if correct_count * 100 >= total * GOOD_SCORE_PERCENT:
        return GOOD_MESSAGE
    return KEEP_LEARNING_MESSAGE


def score_answers(outcomes: Iterable[bool]) -> QuizScore:
    outcomes = list(outcomes)
    correct_count = sum(1 for outcome in outcomes if outcome)
    total = len(outcomes)
    return QuizScore(
        correct_count=correct_count,
        total=total,
        percentage=score_percentage(correct_count, total),
        message=score_message(correct_count, total),
    )
