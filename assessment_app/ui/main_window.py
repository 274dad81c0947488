"""Qt main window that maps each session state onto one panel."""

from __future__ import annotations

import logging

from PySide6.QtCore import QThreadPool
from PySide6.QtWidgets import QMainWindow, QStackedWidget, QVBoxLayout, QWidget

from assessment_app.constants.ui_constants import (
    REPORT_SAVED_TEMPLATE,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from assessment_app.core.models import SessionSnapshot, SessionState
from assessment_app.core.services.question_generator import QuestionGenerator
from assessment_app.core.session_machine import (
    AssessmentSession,
    ProfileValidationError,
    SessionStateError,
)
from assessment_app.rendering.pdf_renderer import render_report_pdf
from assessment_app.styling.styles import Styles
from assessment_app.ui.components import GeneratingPanel, ProfilePanel, QuizPanel, ResultsPanel
from assessment_app.ui.dialog_helpers import ask_report_path, show_error, show_info
from assessment_app.ui.generation_task import GenerationTask

logger = logging.getLogger(__name__)


class AssessmentMainWindow(QMainWindow):
    """Renders the session; all state changes go through ``AssessmentSession``."""

    def __init__(self, session: AssessmentSession, generator: QuestionGenerator) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.session = session
        self.generator = generator
        self._thread_pool = QThreadPool.globalInstance()
        self._pending_tasks: dict[int, GenerationTask] = {}

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())
        self.session.add_listener(self._render)
        self._render(self.session.snapshot())

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)
        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.profile_panel = ProfilePanel(on_submit=self._handle_profile_submit, parent=self)
        self.generating_panel = GeneratingPanel(parent=self)
        self.quiz_panel = QuizPanel(on_answer=self._handle_answer, parent=self)
        self.results_panel = ResultsPanel(
            score_provider=self.session.score,
            on_download=self._handle_download_report,
            on_restart=self._handle_restart,
            parent=self,
        )

        self.mode_stack = QStackedWidget(self)
        self._views: dict[SessionState, ProfilePanel | GeneratingPanel | QuizPanel | ResultsPanel] = {
            SessionState.INTAKE: self.profile_panel,
            SessionState.GENERATING: self.generating_panel,
            SessionState.IN_PROGRESS: self.quiz_panel,
            SessionState.COMPLETED: self.results_panel,
        }
        for view in self._views.values():
            self.mode_stack.addWidget(view)
        root_layout.addWidget(self.mode_stack)

    def _render(self, snapshot: SessionSnapshot) -> None:
        view = self._views[snapshot.state]
        view.show_snapshot(snapshot)
        if self.mode_stack.currentWidget() is not view:
            self.mode_stack.setCurrentWidget(view)

    # --- Intake / generation ---

    def _handle_profile_submit(self, name: str, rank: str, vessel: str) -> None:
        try:
            ticket = self.session.submit_profile(name, rank, vessel)
        except ProfileValidationError as exc:
            logger.info("Profile rejected, missing: %s", ", ".join(exc.missing_fields))
            return
        except SessionStateError as exc:
            logger.warning("Ignored profile submission: %s", exc)
            return

        task = GenerationTask(ticket, self.generator)
        task.signals.succeeded.connect(self._handle_generation_succeeded)
        task.signals.failed.connect(self._handle_generation_failed)
        self._pending_tasks[ticket] = task
        self._thread_pool.start(task)

    def _handle_generation_succeeded(self, ticket: int, questions: object) -> None:
        self._pending_tasks.pop(ticket, None)
        self.session.apply_generated_questions(ticket, questions)

    def _handle_generation_failed(self, ticket: int, message: str) -> None:
        self._pending_tasks.pop(ticket, None)
        self.session.fail_generation(ticket)

    # --- Quiz ---

    def _handle_answer(self, option_index: int) -> None:
        if not self.session.submit_answer(option_index):
            logger.info("Answer ignored; assessment is no longer in progress")

    # --- Results ---

    def _handle_download_report(self) -> None:
        try:
            document = self.session.compile_report()
        except SessionStateError as exc:
            show_error(self, "Report unavailable", str(exc))
            return

        target = ask_report_path(self, document.filename)
        if target is None:
            return
        try:
            render_report_pdf(document, target)
        except OSError as exc:
            logger.exception("Could not write report to %s", target)
            show_error(self, "Report not saved", str(exc))
            return
        show_info(self, "Report saved", REPORT_SAVED_TEMPLATE.format(path=target))

    def _handle_restart(self) -> None:
        self.session.restart()
        self.profile_panel.clear_fields()

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        self.session.remove_listener(self._render)
        self.session.restart()
        super().closeEvent(event)
