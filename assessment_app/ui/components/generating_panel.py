"""Busy view shown while a question set is being generated."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QProgressBar, QVBoxLayout, QWidget

from assessment_app.constants.ui_constants import GENERATING_DETAIL, GENERATING_HEADING
from assessment_app.core.models import SessionSnapshot
from assessment_app.styling.styles import Styles


class GeneratingPanel(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        heading = QLabel(GENERATING_HEADING, self)
        heading.setAlignment(Qt.AlignCenter)
        heading.setStyleSheet(Styles.get_heading_style())
        layout.addWidget(heading)

        busy = QProgressBar(self)
        # A zero range turns the bar into an indeterminate busy indicator.
        busy.setRange(0, 0)
        layout.addWidget(busy)

        detail = QLabel(GENERATING_DETAIL, self)
        detail.setAlignment(Qt.AlignCenter)
        layout.addWidget(detail)

    def show_snapshot(self, snapshot: SessionSnapshot) -> None:
        pass
