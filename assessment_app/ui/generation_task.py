"""Runs question generation off the GUI thread."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QRunnable, Signal

from assessment_app.core.services.question_generator import GenerationError, QuestionGenerator

logger = logging.getLogger(__name__)


class GenerationSignals(QObject):
    """Queued back to the GUI thread, carrying the session ticket."""

    succeeded = Signal(int, object)
    failed = Signal(int, str)


class GenerationTask(QRunnable):
    """One generation request for one ticket."""

    def __init__(self, ticket: int, generator: QuestionGenerator) -> None:
        super().__init__()
        self.ticket = ticket
        self.generator = generator
        self.signals = GenerationSignals()

    def run(self) -> None:
        try:
            questions = self.generator.generate()
        except GenerationError as exc:
            logger.warning("Generation task %d failed: %s", self.ticket, exc)
            self.signals.failed.emit(self.ticket, str(exc))
            return
        except Exception as exc:
            logger.exception("Generation task %d crashed", self.ticket)
            self.signals.failed.emit(self.ticket, str(exc))
            return
        self.signals.succeeded.emit(self.ticket, questions)
