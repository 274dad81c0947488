"""Application entry point for the COLREGs competency assessment."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from assessment_app.constants.about import APP_NAME, APP_ORGANIZATION, APP_VERSION
from assessment_app.core.services.question_generator import AnthropicQuestionGenerator
from assessment_app.core.session_machine import AssessmentSession
from assessment_app.ui.main_window import AssessmentMainWindow
from assessment_app.ui.qt_ticker import QtTicker
from assessment_app.utils.logging_config import configure_logging
from assessment_app.utils.settings import load_settings


def main() -> None:
    """Load settings, initialize logging, and launch the Qt UI."""
    settings = load_settings()
    logger = configure_logging(settings.log_level)
    logger.info("Starting %s v%s", APP_NAME, APP_VERSION)
    if settings.api_key is None:
        logger.warning("ANTHROPIC_API_KEY is not set; question generation will fail until it is configured.")

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_ORGANIZATION)

    session = AssessmentSession(QtTicker(app))
    generator = AnthropicQuestionGenerator(settings.api_key, settings.model)
    window = AssessmentMainWindow(session=session, generator=generator)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
