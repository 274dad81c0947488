"""State machine that owns a single assessment attempt.

Flow: INTAKE -> GENERATING -> IN_PROGRESS -> COMPLETED, with ``restart``
returning to a fresh INTAKE from any state and a generation failure falling
back to INTAKE. Every mutation happens under one lock, so countdown ticks and
user actions are serialized against the same session.
"""

from __future__ import annotations

from datetime import date
import logging
from threading import Lock
from typing import Any, Callable, Sequence

from assessment_app.constants.assessment_constants import (
    GENERATION_FAILED_MESSAGE,
    OPTIONS_PER_QUESTION,
    PASS_THRESHOLD,
    PROFILE_INCOMPLETE_MESSAGE,
    QUESTION_COUNT,
    SESSION_DURATION_SECONDS,
)
from assessment_app.core.models import Profile, Question, Score, SessionSnapshot, SessionState
from assessment_app.core.question_set import QuestionSetError, parse_question_set
from assessment_app.core.report_compiler import ReportDocument, compile_report
from assessment_app.core.scoring import compute_score
from assessment_app.core.services.countdown import CountdownController, Ticker
from assessment_app.core.services.question_generator import GenerationError, QuestionGenerator

logger = logging.getLogger(__name__)

SessionListener = Callable[[SessionSnapshot], None]


class ProfileValidationError(ValueError):
    """Raised when a profile is submitted with missing fields."""

    def __init__(self, missing_fields: list[str]) -> None:
        super().__init__(PROFILE_INCOMPLETE_MESSAGE)
        self.missing_fields = missing_fields


class SessionStateError(RuntimeError):
    """Raised when an operation is not accepted in the current state."""


class AssessmentSession:
    """Sole owner and writer of the mutable session state."""

    def __init__(
        self,
        ticker: Ticker,
        *,
        duration_seconds: int = SESSION_DURATION_SECONDS,
        question_count: int = QUESTION_COUNT,
        pass_threshold: int = PASS_THRESHOLD,
    ) -> None:
        if duration_seconds <= 0:
            raise ValueError("duration_seconds must be > 0")
        if question_count <= 0:
            raise ValueError("question_count must be > 0")

        self._lock = Lock()
        self._duration_seconds = duration_seconds
        self._question_count = question_count
        self._pass_threshold = pass_threshold
        self._countdown = CountdownController(ticker, self.tick)
        self._listeners: list[SessionListener] = []

        # Bumped on every submission and restart so late generation results are dropped.
        self._generation = 0
        self._reset_fields()

    # --- Queries ---

    @property
    def state(self) -> SessionState:
        with self._lock:
            return self._state

    @property
    def remaining_seconds(self) -> int:
        with self._lock:
            return self._remaining_seconds

    @property
    def pass_threshold(self) -> int:
        return self._pass_threshold

    def is_countdown_armed(self) -> bool:
        return self._countdown.is_armed()

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return self._snapshot_locked()

    def current_question(self) -> Question | None:
        return self.snapshot().current_question

    def score(self) -> Score:
        snapshot = self.snapshot()
        return compute_score(snapshot.questions, snapshot.answers, self._pass_threshold)

    def compile_report(self, report_date: date | None = None) -> ReportDocument:
        snapshot = self.snapshot()
        if snapshot.state is not SessionState.COMPLETED or snapshot.profile is None:
            raise SessionStateError("A report is only available once the assessment is completed.")
        score = compute_score(snapshot.questions, snapshot.answers, self._pass_threshold)
        return compile_report(
            snapshot.profile,
            snapshot.questions,
            snapshot.answers,
            score,
            report_date or date.today(),
        )

    # --- Listeners ---

    def add_listener(self, listener: SessionListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # --- Transitions ---

    def submit_profile(self, name: str, rank: str, vessel: str) -> int:
        """Accept the candidate profile and move to GENERATING.

        Returns the ticket that the generation result must be applied with.
        """
        profile = Profile(name=name.strip(), rank=rank.strip(), vessel=vessel.strip())
        missing = profile.missing_fields()
        with self._lock:
            if self._state is not SessionState.INTAKE:
                raise SessionStateError(f"Cannot submit a profile while {self._state.value}.")
            if missing:
                self._last_error = PROFILE_INCOMPLETE_MESSAGE
            else:
                self._profile = profile
                self._last_error = None
                self._state = SessionState.GENERATING
                self._generation += 1
                ticket = self._generation
        self._notify()
        if missing:
            raise ProfileValidationError(missing)
        logger.info("Profile accepted for %s; requesting questions (ticket %d)", profile.name, ticket)
        return ticket

    def apply_generated_questions(self, ticket: int, raw: Sequence[Question] | str | list[Any]) -> bool:
        """Start the timed quiz with a generated question set.

        ``raw`` may be domain questions or an unvalidated service response.
        A non-conforming set is treated as a generation failure. Returns False
        when the set was rejected or the ticket is stale.
        """
        try:
            questions = self._validate_questions(raw)
        except QuestionSetError as exc:
            logger.warning("Rejected generated question set: %s", exc)
            self.fail_generation(ticket)
            return False

        with self._lock:
            if not self._accepts_generation_result(ticket):
                logger.info("Ignoring question set for stale ticket %d", ticket)
                return False
            self._questions = questions
            self._answers = []
            self._current_index = 0
            self._remaining_seconds = self._duration_seconds
            self._state = SessionState.IN_PROGRESS
            self._countdown.arm()
        logger.info("Assessment started with %d questions", len(questions))
        self._notify()
        return True

    def fail_generation(self, ticket: int, message: str = GENERATION_FAILED_MESSAGE) -> bool:
        """Return to INTAKE after a failed generation, discarding partial data."""
        with self._lock:
            if not self._accepts_generation_result(ticket):
                return False
            self._profile = None
            self._questions = ()
            self._answers = []
            self._current_index = 0
            self._state = SessionState.INTAKE
            self._last_error = message
        logger.warning("Question generation failed for ticket %d", ticket)
        self._notify()
        return True

    def run_generation(self, ticket: int, generator: QuestionGenerator) -> bool:
        """Generate synchronously and apply the outcome. Blocks the caller."""
        try:
            questions = generator.generate()
        except GenerationError as exc:
            logger.warning("Generation error: %s", exc)
            self.fail_generation(ticket)
            return False
        return self.apply_generated_questions(ticket, questions)

    def submit_answer(self, option_index: int) -> bool:
        """Record the answer for the current question.

        Returns False, recording nothing, when the quiz is not in progress
        (for example after the countdown already expired).
        """
        if not 0 <= option_index < OPTIONS_PER_QUESTION:
            raise ValueError(f"Option index must be between 0 and {OPTIONS_PER_QUESTION - 1}.")
        with self._lock:
            if self._state is not SessionState.IN_PROGRESS:
                return False
            self._answers.append(option_index)
            if self._current_index < len(self._questions) - 1:
                self._current_index += 1
            else:
                self._complete_locked("final answer submitted")
        self._notify()
        return True

    def tick(self) -> None:
        """Advance the clock by one second. Inert outside IN_PROGRESS."""
        with self._lock:
            if self._state is not SessionState.IN_PROGRESS:
                return
            self._remaining_seconds = max(0, self._remaining_seconds - 1)
            logger.debug("Tick: %d seconds remaining", self._remaining_seconds)
            if self._remaining_seconds == 0:
                self._complete_locked("time expired")
        self._notify()

    def restart(self) -> None:
        """Discard the attempt and return to a fresh INTAKE session."""
        with self._lock:
            self._countdown.cancel()
            self._generation += 1
            self._reset_fields()
        logger.info("Session restarted")
        self._notify()

    # --- Internals ---

    def _reset_fields(self) -> None:
        self._state = SessionState.INTAKE
        self._profile: Profile | None = None
        self._questions: tuple[Question, ...] = ()
        self._answers: list[int] = []
        self._current_index = 0
        self._remaining_seconds = self._duration_seconds
        self._last_error: str | None = None

    def _accepts_generation_result(self, ticket: int) -> bool:
        return ticket == self._generation and self._state is SessionState.GENERATING

    def _complete_locked(self, reason: str) -> None:
        if self._state is SessionState.COMPLETED:
            return
        self._countdown.cancel()
        self._state = SessionState.COMPLETED
        logger.info(
            "Assessment completed (%s): %d/%d answered, %d seconds left",
            reason,
            len(self._answers),
            len(self._questions),
            self._remaining_seconds,
        )

    def _validate_questions(self, raw: Sequence[Question] | str | list[Any]) -> tuple[Question, ...]:
        if not isinstance(raw, str) and raw and all(isinstance(item, Question) for item in raw):
            questions = tuple(raw)
            if len(questions) != self._question_count:
                raise QuestionSetError(f"Expected {self._question_count} questions, received {len(questions)}.")
            return questions
        return parse_question_set(raw if isinstance(raw, str) else list(raw), self._question_count)

    def _snapshot_locked(self) -> SessionSnapshot:
        return SessionSnapshot(
            state=self._state,
            profile=self._profile,
            questions=self._questions,
            answers=tuple(self._answers),
            current_index=self._current_index,
            remaining_seconds=self._remaining_seconds,
            last_error=self._last_error,
        )

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
