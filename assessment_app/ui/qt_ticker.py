"""QTimer-backed ticker driving the session countdown on the GUI thread."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer


class QtTicker(QObject):
    """Adapts ``QTimer`` to the countdown ``Ticker`` protocol."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._timer = QTimer(self)
        self._callback: Callable[[], None] | None = None
        self._timer.timeout.connect(self._handle_timeout)

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._timer.setInterval(interval_ms)
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        self._callback = None

    def is_active(self) -> bool:
        return self._timer.isActive()

    def _handle_timeout(self) -> None:
        if self._callback is not None:
            self._callback()
