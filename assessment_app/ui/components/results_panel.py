"""Component for the completed-assessment view."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from assessment_app.constants.ui_constants import (
    RESULTS_DOWNLOAD_BUTTON,
    RESULTS_FAILED,
    RESULTS_HEADING,
    RESULTS_PASSED,
    RESULTS_RESTART_BUTTON,
    RESULTS_SCORE_TEMPLATE,
    RESULTS_THANKS_TEMPLATE,
)
from assessment_app.core.models import Score, SessionSnapshot
from assessment_app.styling.styles import Styles


class ResultsPanel(QWidget):
    """Final score, verdict, report download and restart."""

    def __init__(
        self,
        score_provider: Callable[[], Score],
        on_download: Callable[[], None],
        on_restart: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.score_provider = score_provider
        self.on_download = on_download
        self.on_restart = on_restart
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        heading = QLabel(RESULTS_HEADING, self)
        heading.setAlignment(Qt.AlignCenter)
        heading.setStyleSheet(Styles.get_heading_style())
        layout.addWidget(heading)

        self.thanks_label = QLabel("", self)
        self.thanks_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.thanks_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        self.score_label.setStyleSheet("font-size: 36pt; font-weight: bold;")
        layout.addWidget(self.score_label)

        self.verdict_label = QLabel("", self)
        self.verdict_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.verdict_label)

        self.download_button = QPushButton(RESULTS_DOWNLOAD_BUTTON, self)
        self.download_button.setProperty("primary", True)
        self.download_button.clicked.connect(self.on_download)
        layout.addWidget(self.download_button)

        self.restart_button = QPushButton(RESULTS_RESTART_BUTTON, self)
        self.restart_button.clicked.connect(self.on_restart)
        layout.addWidget(self.restart_button)

    def show_snapshot(self, snapshot: SessionSnapshot) -> None:
        score = self.score_provider()
        name = snapshot.profile.name if snapshot.profile else ""
        self.thanks_label.setText(RESULTS_THANKS_TEMPLATE.format(name=name))
        self.score_label.setText(RESULTS_SCORE_TEMPLATE.format(correct=score.correct_count, total=score.total_count))
        self.verdict_label.setText(RESULTS_PASSED if score.passed else RESULTS_FAILED)
        self.verdict_label.setStyleSheet(Styles.get_verdict_style(score.passed))
