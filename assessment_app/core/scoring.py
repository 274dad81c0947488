"""Scoring rules for a completed (or partially completed) attempt."""

from __future__ import annotations

from typing import Sequence

from assessment_app.constants.assessment_constants import PASS_THRESHOLD
from assessment_app.core.models import Question, Score


def compute_score(
    questions: Sequence[Question],
    answers: Sequence[int],
    pass_threshold: int = PASS_THRESHOLD,
) -> Score:
    """Count the questions whose recorded answer matches the correct option.

    Questions without a recorded answer never count as hits, and answers beyond
    the last question are ignored. The pass threshold is an absolute count of
    correct answers, not a percentage of ``len(questions)``.
    """
    correct = sum(
        1
        for index, question in enumerate(questions)
        if index < len(answers) and answers[index] == question.correct_index
    )
    return Score(
        correct_count=correct,
        total_count=len(questions),
        passed=correct >= pass_threshold,
    )


def format_time(seconds: int) -> str:
    """Format a countdown value as ``MM:SS``."""
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"
