"""Domain models for the competency assessment."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from assessment_app.constants.assessment_constants import (
    OPTIONS_PER_QUESTION,
    SESSION_DURATION_SECONDS,
)


class SessionState(Enum):
    """Lifecycle of a single assessment attempt."""

    INTAKE = "intake"
    GENERATING = "generating"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(frozen=True, slots=True)
class Profile:
    """Candidate details captured before the assessment starts."""

    name: str
    rank: str
    vessel: str

    def missing_fields(self) -> list[str]:
        return [
            field_name
            for field_name, value in (("name", self.name), ("rank", self.rank), ("vessel", self.vessel))
            if not value.strip()
        ]


@dataclass(frozen=True, slots=True)
class Question:
    """Scenario question with exactly four options and one correct answer."""

    prompt: str
    options: tuple[str, ...]
    correct_index: int
    explanation: str

    def __post_init__(self) -> None:
        if len(self.options) != OPTIONS_PER_QUESTION:
            raise ValueError(f"Each question must have exactly {OPTIONS_PER_QUESTION} options.")
        if not 0 <= self.correct_index < len(self.options):
            raise ValueError("Correct option index must be between 0 and 3.")

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_index]


@dataclass(frozen=True, slots=True)
class Score:
    """Derived result of an attempt."""

    correct_count: int
    total_count: int
    passed: bool

    @property
    def percentage(self) -> int:
        if self.total_count <= 0:
            return 0
        # Half-up rounding so 0.5 boundaries never depend on banker's rounding.
        return int((self.correct_count * 100 * 2 + self.total_count) // (self.total_count * 2))


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Read-only view of the session handed to views and the report compiler."""

    state: SessionState
    profile: Profile | None = None
    questions: tuple[Question, ...] = ()
    answers: tuple[int, ...] = ()
    current_index: int = 0
    remaining_seconds: int = SESSION_DURATION_SECONDS
    last_error: str | None = None

    @property
    def current_question(self) -> Question | None:
        if self.state is not SessionState.IN_PROGRESS:
            return None
        if not 0 <= self.current_index < len(self.questions):
            return None
        return self.questions[self.current_index]
