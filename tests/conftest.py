from __future__ import annotations

import json
from typing import Any

import pytest

from assessment_app.core.models import Question
from assessment_app.core.services.countdown import ManualTicker
from assessment_app.core.session_machine import AssessmentSession


def make_question(number: int, correct_index: int = 0) -> Question:
    return Question(
        prompt=f"Scenario {number}: a vessel is sighted fine on the starboard bow.",
        options=(f"Option A{number}", f"Option B{number}", f"Option C{number}", f"Option D{number}"),
        correct_index=correct_index,
        explanation=f"Rule {number} applies.",
    )


def make_questions(count: int = 10, correct_index: int = 0) -> tuple[Question, ...]:
    return tuple(make_question(number, correct_index) for number in range(1, count + 1))


def question_payload(count: int = 10, **overrides: Any) -> list[dict[str, Any]]:
    items = []
    for number in range(1, count + 1):
        item: dict[str, Any] = {
            "question": f"Scenario {number}",
            "options": ["Alter to starboard", "Alter to port", "Stand on", "Stop engines"],
            "correctAnswerIndex": number % 4,
            "explanation": f"See Rule {number}.",
        }
        item.update(overrides)
        items.append(item)
    return items


def question_payload_json(count: int = 10, **overrides: Any) -> str:
    return json.dumps(question_payload(count, **overrides))


class StaticGenerator:
    """Returns a prepared set; counts how often it was asked."""

    def __init__(self, questions: Any) -> None:
        self.questions = questions
        self.calls = 0

    def generate(self) -> Any:
        self.calls += 1
        return self.questions


class FailingGenerator:
    def __init__(self, error: Exception) -> None:
        self.error = error

    def generate(self) -> Any:
        raise self.error


@pytest.fixture
def ticker() -> ManualTicker:
    return ManualTicker()


@pytest.fixture
def session(ticker: ManualTicker) -> AssessmentSession:
    return AssessmentSession(ticker)


@pytest.fixture
def running_session(session: AssessmentSession) -> AssessmentSession:
    ticket = session.submit_profile("Jane Doe", "Chief Officer", "Pride of Hull")
    assert session.apply_generated_questions(ticket, make_questions())
    return session
