"""Qt UI for the assessment application."""

from .dialog_helpers import ask_report_path, show_error, show_info
from .main_window import AssessmentMainWindow
from .qt_ticker import QtTicker

__all__ = [
    "AssessmentMainWindow",
    "QtTicker",
    "ask_report_path",
    "show_error",
    "show_info",
]
