from __future__ import annotations

from datetime import date

import pytest

from assessment_app.constants.assessment_constants import GENERATION_FAILED_MESSAGE, PROFILE_INCOMPLETE_MESSAGE
from assessment_app.core.models import SessionSnapshot, SessionState
from assessment_app.core.services.countdown import ManualTicker
from assessment_app.core.services.question_generator import GenerationError
from assessment_app.core.session_machine import (
    AssessmentSession,
    ProfileValidationError,
    SessionStateError,
)
from tests.conftest import FailingGenerator, StaticGenerator, make_questions, question_payload_json


def test_initial_state_is_intake(session: AssessmentSession, ticker: ManualTicker) -> None:
    snapshot = session.snapshot()

    assert snapshot.state is SessionState.INTAKE
    assert snapshot.remaining_seconds == 600
    assert snapshot.questions == ()
    assert snapshot.current_question is None
    assert not ticker.is_active()


def test_incomplete_profile_stays_in_intake(session: AssessmentSession) -> None:
    with pytest.raises(ProfileValidationError) as excinfo:
        session.submit_profile("Jane Doe", "   ", "")

    assert excinfo.value.missing_fields == ["rank", "vessel"]
    snapshot = session.snapshot()
    assert snapshot.state is SessionState.INTAKE
    assert snapshot.profile is None
    assert snapshot.last_error == PROFILE_INCOMPLETE_MESSAGE


def test_full_flow_to_completion_by_answers(session: AssessmentSession, ticker: ManualTicker) -> None:
    ticket = session.submit_profile(" Jane Doe ", "Chief Officer", "Pride of Hull")
    assert session.state is SessionState.GENERATING
    assert session.snapshot().profile.name == "Jane Doe"

    assert session.apply_generated_questions(ticket, make_questions(correct_index=1))
    assert session.state is SessionState.IN_PROGRESS
    assert ticker.is_active()
    assert ticker.interval_ms == 1000

    for position in range(10):
        assert session.current_question().prompt.startswith(f"Scenario {position + 1}:")
        assert session.submit_answer(1 if position < 7 else 3)

    snapshot = session.snapshot()
    assert snapshot.state is SessionState.COMPLETED
    assert len(snapshot.answers) == 10
    assert not ticker.is_active()
    score = session.score()
    assert (score.correct_count, score.total_count, score.passed) == (7, 10, True)


def test_countdown_expiry_completes_with_partial_answers(
    running_session: AssessmentSession, ticker: ManualTicker
) -> None:
    for _ in range(3):
        running_session.submit_answer(0)

    delivered = ticker.fire(1000)

    assert delivered == 600
    snapshot = running_session.snapshot()
    assert snapshot.state is SessionState.COMPLETED
    assert snapshot.remaining_seconds == 0
    assert snapshot.answers == (0, 0, 0)
    assert running_session.score().correct_count == 3
    assert not ticker.is_active()


def test_remaining_seconds_decrease_once_per_tick(running_session: AssessmentSession, ticker: ManualTicker) -> None:
    ticker.fire(5)

    assert running_session.remaining_seconds == 595
    assert running_session.state is SessionState.IN_PROGRESS


def test_clock_does_not_move_after_completion(running_session: AssessmentSession) -> None:
    for _ in range(10):
        running_session.submit_answer(0)
    remaining = running_session.remaining_seconds

    running_session.tick()
    running_session.tick()

    assert running_session.remaining_seconds == remaining
    assert running_session.state is SessionState.COMPLETED


def test_answer_after_expiry_is_not_recorded(running_session: AssessmentSession, ticker: ManualTicker) -> None:
    ticker.fire(600)

    assert not running_session.submit_answer(2)
    assert running_session.snapshot().answers == ()


def test_completion_is_idempotent(ticker: ManualTicker) -> None:
    session = AssessmentSession(ticker, duration_seconds=1)
    ticket = session.submit_profile("A", "B", "C")
    session.apply_generated_questions(ticket, make_questions())
    completed: list[SessionSnapshot] = []
    session.add_listener(lambda snap: completed.append(snap) if snap.state is SessionState.COMPLETED else None)

    session.tick()
    session.tick()
    assert not session.submit_answer(0)

    assert len(completed) == 1


def test_out_of_range_answer_is_rejected(running_session: AssessmentSession) -> None:
    with pytest.raises(ValueError):
        running_session.submit_answer(4)
    with pytest.raises(ValueError):
        running_session.submit_answer(-1)
    assert running_session.snapshot().answers == ()


def test_answer_outside_quiz_returns_false(session: AssessmentSession) -> None:
    assert not session.submit_answer(0)


def test_profile_rejected_outside_intake(running_session: AssessmentSession) -> None:
    with pytest.raises(SessionStateError):
        running_session.submit_profile("X", "Y", "Z")


def test_generation_failure_returns_to_intake_with_message(session: AssessmentSession, ticker: ManualTicker) -> None:
    ticket = session.submit_profile("Jane Doe", "Master", "Hull")

    assert session.fail_generation(ticket)

    snapshot = session.snapshot()
    assert snapshot.state is SessionState.INTAKE
    assert snapshot.last_error == GENERATION_FAILED_MESSAGE
    assert snapshot.profile is None
    assert not ticker.is_active()


def test_malformed_question_set_is_a_generation_failure(session: AssessmentSession) -> None:
    ticket = session.submit_profile("Jane Doe", "Master", "Hull")

    assert not session.apply_generated_questions(ticket, question_payload_json(count=4))

    assert session.state is SessionState.INTAKE
    assert session.snapshot().last_error == GENERATION_FAILED_MESSAGE


def test_raw_json_question_set_is_accepted(session: AssessmentSession) -> None:
    ticket = session.submit_profile("Jane Doe", "Master", "Hull")

    assert session.apply_generated_questions(ticket, question_payload_json())

    assert session.state is SessionState.IN_PROGRESS
    assert session.current_question().prompt == "Scenario 1"


def test_run_generation_uses_generator(session: AssessmentSession) -> None:
    generator = StaticGenerator(make_questions())
    ticket = session.submit_profile("Jane Doe", "Master", "Hull")

    assert session.run_generation(ticket, generator)

    assert generator.calls == 1
    assert session.state is SessionState.IN_PROGRESS


def test_run_generation_failure(session: AssessmentSession) -> None:
    ticket = session.submit_profile("Jane Doe", "Master", "Hull")

    assert not session.run_generation(ticket, FailingGenerator(GenerationError("offline")))

    assert session.state is SessionState.INTAKE
    assert session.snapshot().last_error == GENERATION_FAILED_MESSAGE


def test_stale_generation_result_is_ignored(session: AssessmentSession, ticker: ManualTicker) -> None:
    stale_ticket = session.submit_profile("Jane Doe", "Master", "Hull")
    session.restart()
    fresh_ticket = session.submit_profile("John Roe", "Bosun", "Hull")

    assert not session.apply_generated_questions(stale_ticket, make_questions())
    assert not session.fail_generation(stale_ticket)
    assert session.state is SessionState.GENERATING
    assert not ticker.is_active()

    assert session.apply_generated_questions(fresh_ticket, make_questions())
    assert session.snapshot().profile.name == "John Roe"


def test_result_after_restart_does_not_leave_intake(session: AssessmentSession) -> None:
    ticket = session.submit_profile("Jane Doe", "Master", "Hull")
    session.restart()

    assert not session.apply_generated_questions(ticket, make_questions())

    assert session.state is SessionState.INTAKE
    assert session.snapshot().last_error is None


@pytest.mark.parametrize("stage", ["intake", "generating", "in_progress", "completed"])
def test_restart_from_any_state_gives_fresh_intake(stage: str, ticker: ManualTicker) -> None:
    session = AssessmentSession(ticker)
    if stage != "intake":
        ticket = session.submit_profile("Jane Doe", "Master", "Hull")
    if stage in ("in_progress", "completed"):
        session.apply_generated_questions(ticket, make_questions())
        session.submit_answer(0)
        ticker.fire(10)
    if stage == "completed":
        ticker.fire(600)

    session.restart()

    snapshot = session.snapshot()
    assert snapshot.state is SessionState.INTAKE
    assert snapshot.profile is None
    assert snapshot.questions == ()
    assert snapshot.answers == ()
    assert snapshot.current_index == 0
    assert snapshot.remaining_seconds == 600
    assert snapshot.last_error is None
    assert not ticker.is_active()


def test_countdown_is_rearmed_fresh_after_restart(running_session: AssessmentSession, ticker: ManualTicker) -> None:
    ticker.fire(100)
    running_session.restart()
    ticket = running_session.submit_profile("Jane Doe", "Master", "Hull")
    running_session.apply_generated_questions(ticket, make_questions())

    assert running_session.remaining_seconds == 600
    assert ticker.start_count == 2

    ticker.fire(1)
    assert running_session.remaining_seconds == 599


def test_listeners_receive_snapshots(session: AssessmentSession) -> None:
    seen: list[SessionState] = []
    session.add_listener(lambda snapshot: seen.append(snapshot.state))

    ticket = session.submit_profile("Jane Doe", "Master", "Hull")
    session.apply_generated_questions(ticket, make_questions())
    session.restart()

    assert seen == [SessionState.GENERATING, SessionState.IN_PROGRESS, SessionState.INTAKE]


def test_removed_listener_is_not_called(session: AssessmentSession) -> None:
    seen: list[SessionSnapshot] = []
    listener = seen.append
    session.add_listener(listener)
    session.remove_listener(listener)

    session.submit_profile("Jane Doe", "Master", "Hull")

    assert seen == []


def test_report_requires_completed_session(running_session: AssessmentSession) -> None:
    with pytest.raises(SessionStateError):
        running_session.compile_report()


def test_report_for_completed_attempt(ticker: ManualTicker) -> None:
    session = AssessmentSession(ticker)
    ticket = session.submit_profile("A B", "Master", "Hull")
    session.apply_generated_questions(ticket, make_questions(correct_index=0))
    for _ in range(7):
        session.submit_answer(0)
    ticker.fire(600)

    document = session.compile_report(date(2024, 3, 5))

    assert document.filename == "A_B_CLdN_COLREG_Report.pdf"
    texts = [p.text for block in document.blocks for p in block.primitives if hasattr(p, "text")]
    assert "Final Score: 7 / 10 (70%)" in texts
    assert "RESULT: PASS" in texts
    assert "Date: 05/03/2024" in texts
    assert texts.count("Your Answer: No Answer (time expired)") == 3


def test_invalid_construction_arguments(ticker: ManualTicker) -> None:
    with pytest.raises(ValueError):
        AssessmentSession(ticker, duration_seconds=0)
    with pytest.raises(ValueError):
        AssessmentSession(ticker, question_count=0)


def test_all_correct_example_attempt(ticker: ManualTicker) -> None:
    session = AssessmentSession(ticker)
    ticket = session.submit_profile("A B", "Officer", "MV X")
    session.apply_generated_questions(ticket, make_questions(correct_index=3))
    for _ in range(10):
        session.submit_answer(3)

    score = session.score()

    assert (score.correct_count, score.total_count, score.passed) == (10, 10, True)
    assert session.compile_report(date(2025, 1, 1)).filename == "A_B_CLdN_COLREG_Report.pdf"
