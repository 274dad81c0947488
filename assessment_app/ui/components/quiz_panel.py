"""Component for the timed question delivery view."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QProgressBar, QPushButton, QVBoxLayout, QWidget

from assessment_app.constants.assessment_constants import OPTIONS_PER_QUESTION, TIME_WARNING_SECONDS
from assessment_app.constants.ui_constants import QUIZ_CANDIDATE_TEMPLATE, QUIZ_PROGRESS_TEMPLATE
from assessment_app.core.models import Question, SessionSnapshot
from assessment_app.core.scoring import format_time
from assessment_app.styling.styles import Styles
from assessment_app.ui.question_renderer import option_label, render_question_html


class QuizPanel(QWidget):
    """Header with candidate and countdown, progress bar, question and four options."""

    def __init__(self, on_answer: Callable[[int], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_answer = on_answer
        self._shown_question: Question | None = None
        self._warning_active: bool | None = None
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.candidate_label = QLabel("", self)
        header_row.addWidget(self.candidate_label)
        header_row.addStretch()
        self.timer_label = QLabel("", self)
        header_row.addWidget(self.timer_label)
        layout.addLayout(header_row)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setTextVisible(False)
        layout.addWidget(self.progress_bar)

        self.position_label = QLabel("", self)
        layout.addWidget(self.position_label)

        self.question_label = QLabel("", self)
        self.question_label.setTextFormat(Qt.RichText)
        self.question_label.setWordWrap(True)
        layout.addWidget(self.question_label)

        self.option_buttons: list[QPushButton] = []
        for index in range(OPTIONS_PER_QUESTION):
            button = QPushButton("", self)
            button.setMinimumHeight(56)
            button.clicked.connect(lambda _checked=False, idx=index: self.on_answer(idx))
            layout.addWidget(button)
            self.option_buttons.append(button)

        layout.addStretch()

    def show_snapshot(self, snapshot: SessionSnapshot) -> None:
        self._update_timer(snapshot.remaining_seconds)

        question = snapshot.current_question
        if question is None:
            self._shown_question = None
            return
        if question is self._shown_question:
            return

        self._shown_question = question
        total = len(snapshot.questions)
        if snapshot.profile is not None:
            self.candidate_label.setText(
                QUIZ_CANDIDATE_TEMPLATE.format(
                    name=snapshot.profile.name,
                    rank=snapshot.profile.rank,
                    vessel=snapshot.profile.vessel,
                )
            )
        self.progress_bar.setRange(0, total)
        self.progress_bar.setValue(snapshot.current_index + 1)
        self.position_label.setText(QUIZ_PROGRESS_TEMPLATE.format(number=snapshot.current_index + 1, total=total))
        self.question_label.setText(render_question_html(question.prompt))
        for index, button in enumerate(self.option_buttons):
            button.setText(option_label(index, question.options[index]))

    def _update_timer(self, remaining_seconds: int) -> None:
        self.timer_label.setText(format_time(remaining_seconds))
        warning = remaining_seconds < TIME_WARNING_SECONDS
        if warning != self._warning_active:
            self._warning_active = warning
            self.timer_label.setStyleSheet(Styles.get_timer_style(warning))
