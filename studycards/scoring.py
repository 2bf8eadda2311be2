"""Score a completed quiz."""
from __future__ import annotations

import math
from collections.abc import Sequence

from studycards.models import QuizQuestion, ScoreResult


class AnswerSetMismatchError(ValueError):
    pass


def percent(part: int, whole: int) -> int:
    """Whole-number percentage, rounding halves up; 0 when *whole* is 0."""
    if not whole:
        return 0
    return math.floor(part * 100 / whole + 0.5)


def score(answers: Sequence[int | None], questions: Sequence[QuizQuestion]) -> ScoreResult:
    """Count answers that hit ``correct_answer``; unanswered slots (None) never do.

    An empty quiz scores 0%.
    """
    if len(answers) != len(questions):
        raise AnswerSetMismatchError(
            f"expected {len(questions)} answers, got {len(answers)}"
        )

    correct = sum(
        1 for answer, q in zip(answers, questions)
        if answer is not None and answer == q.correct_answer
    )
    total = len(questions)
    return ScoreResult(correct=correct, total=total, percentage=percent(correct, total))


def feedback(result: ScoreResult) -> str:
    if result.percentage >= 80:
        return "Excellent work!"
    if result.percentage >= 60:
        return "Good job!"
    return "Keep studying!"
