"""Component for capturing the candidate profile."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFormLayout, QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget

from assessment_app.constants.assessment_constants import QUESTION_COUNT, SESSION_DURATION_SECONDS
from assessment_app.constants.ui_constants import (
    PROFILE_HEADING,
    PROFILE_INFO_TEMPLATE,
    PROFILE_NAME_LABEL,
    PROFILE_NAME_PLACEHOLDER,
    PROFILE_RANK_LABEL,
    PROFILE_RANK_PLACEHOLDER,
    PROFILE_SUBHEADING,
    PROFILE_SUBMIT_BUTTON,
    PROFILE_VESSEL_LABEL,
    PROFILE_VESSEL_PLACEHOLDER,
)
from assessment_app.core.models import SessionSnapshot
from assessment_app.styling.styles import Styles


class ProfilePanel(QWidget):
    """Three text fields and a submit button; validation errors show inline."""

    def __init__(self, on_submit: Callable[[str, str, str], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_submit = on_submit
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        heading = QLabel(PROFILE_HEADING, self)
        heading.setAlignment(Qt.AlignCenter)
        heading.setStyleSheet(Styles.get_heading_style())
        layout.addWidget(heading)

        subheading = QLabel(PROFILE_SUBHEADING, self)
        subheading.setAlignment(Qt.AlignCenter)
        layout.addWidget(subheading)

        form = QFormLayout()
        self.name_input = QLineEdit(self)
        self.name_input.setPlaceholderText(PROFILE_NAME_PLACEHOLDER)
        form.addRow(PROFILE_NAME_LABEL, self.name_input)

        self.rank_input = QLineEdit(self)
        self.rank_input.setPlaceholderText(PROFILE_RANK_PLACEHOLDER)
        form.addRow(PROFILE_RANK_LABEL, self.rank_input)

        self.vessel_input = QLineEdit(self)
        self.vessel_input.setPlaceholderText(PROFILE_VESSEL_PLACEHOLDER)
        form.addRow(PROFILE_VESSEL_LABEL, self.vessel_input)
        layout.addLayout(form)

        self.error_label = QLabel("", self)
        self.error_label.setAlignment(Qt.AlignCenter)
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(Styles.get_error_label_style())
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        info_label = QLabel(
            PROFILE_INFO_TEMPLATE.format(minutes=SESSION_DURATION_SECONDS // 60, count=QUESTION_COUNT),
            self,
        )
        info_label.setStyleSheet(Styles.get_info_box_style())
        layout.addWidget(info_label)

        self.submit_button = QPushButton(PROFILE_SUBMIT_BUTTON, self)
        self.submit_button.setProperty("primary", True)
        self.submit_button.clicked.connect(self._handle_submit)
        layout.addWidget(self.submit_button)

        for line_edit in (self.name_input, self.rank_input, self.vessel_input):
            line_edit.returnPressed.connect(self._handle_submit)

    def _handle_submit(self) -> None:
        self.on_submit(self.name_input.text(), self.rank_input.text(), self.vessel_input.text())

    def show_snapshot(self, snapshot: SessionSnapshot) -> None:
        self.error_label.setText(snapshot.last_error or "")
        self.error_label.setVisible(bool(snapshot.last_error))

    def clear_fields(self) -> None:
        for line_edit in (self.name_input, self.rank_input, self.vessel_input):
            line_edit.clear()
        self.name_input.setFocus()
