"""Helper functions for common dialog patterns."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtWidgets import QFileDialog, QMessageBox, QWidget

from assessment_app.constants.ui_constants import REPORT_DIALOG_TITLE, REPORT_FILE_FILTER


def ask_report_path(parent: QWidget, suggested_name: str) -> Path | None:
    """Ask where to save the report, defaulting to ``suggested_name`` in the home folder.

    Returns:
        The chosen path, or None if the dialog was cancelled
    """
    file_path, _ = QFileDialog.getSaveFileName(
        parent,
        REPORT_DIALOG_TITLE,
        str(Path.home() / suggested_name),
        REPORT_FILE_FILTER,
    )
    if not file_path:
        return None
    return Path(file_path)


def show_error(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.information(parent, title, message)
