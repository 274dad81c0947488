"""Qt PDF sink: paints report primitives with QPainter onto a QPdfWriter."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QBuffer, QIODevice, QMarginsF, QPointF, QRectF
from PySide6.QtGui import QColor, QFont, QPageLayout, QPageSize, QPainter, QPdfWriter, QPen

from assessment_app.constants.report_constants import REPORT_FONT, REPORT_TITLE
from assessment_app.core.report_compiler import (
    LinePrimitive,
    RectPrimitive,
    ReportDocument,
    TextAlign,
    TextPrimitive,
)
from assessment_app.rendering.painter import paint_document

logger = logging.getLogger(__name__)

DEFAULT_RESOLUTION_DPI: int = 300


class QtPdfSink:
    """In-memory A4 PDF page stack; nothing touches disk until ``save``."""

    def __init__(self, resolution_dpi: int = DEFAULT_RESOLUTION_DPI) -> None:
        self._scale = resolution_dpi / 25.4
        self._buffer = QBuffer()
        self._buffer.open(QIODevice.OpenModeFlag.WriteOnly)
        self._writer = QPdfWriter(self._buffer)
        self._writer.setResolution(resolution_dpi)
        self._writer.setTitle(REPORT_TITLE)
        self._writer.setPageSize(QPageSize(QPageSize.PageSizeId.A4))
        self._writer.setPageMargins(QMarginsF(0, 0, 0, 0), QPageLayout.Unit.Millimeter)
        self._painter = QPainter(self._writer)

    def draw_text(self, primitive: TextPrimitive) -> None:
        font = QFont(REPORT_FONT)
        font.setPointSizeF(primitive.size)
        font.setBold(primitive.bold)
        self._painter.setFont(font)
        self._painter.setPen(QColor(*primitive.color))

        x = self._mm(primitive.x)
        if primitive.align is not TextAlign.LEFT:
            advance = self._painter.fontMetrics().horizontalAdvance(primitive.text)
            x -= advance if primitive.align is TextAlign.RIGHT else advance / 2
        self._painter.drawText(QPointF(x, self._mm(primitive.y)), primitive.text)

    def draw_line(self, primitive: LinePrimitive) -> None:
        pen = QPen(QColor(*primitive.color))
        pen.setWidthF(self._mm(primitive.width))
        self._painter.setPen(pen)
        self._painter.drawLine(
            QPointF(self._mm(primitive.x1), self._mm(primitive.y1)),
            QPointF(self._mm(primitive.x2), self._mm(primitive.y2)),
        )

    def fill_rect(self, primitive: RectPrimitive) -> None:
        rect = QRectF(
            self._mm(primitive.x),
            self._mm(primitive.y),
            self._mm(primitive.width),
            self._mm(primitive.height),
        )
        self._painter.fillRect(rect, QColor(*primitive.color))

    def new_page(self) -> None:
        self._writer.newPage()

    def save(self, filename: str) -> None:
        if self._painter.isActive():
            self._painter.end()
        self._buffer.close()
        path = Path(filename)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(bytes(self._buffer.data()))

    def _mm(self, value: float) -> float:
        return value * self._scale


def render_report_pdf(document: ReportDocument, target: Path) -> Path:
    """Paint ``document`` and write it to ``target``. Requires a running QGuiApplication."""
    sink = QtPdfSink()
    pages = paint_document(document, sink)
    sink.save(str(target))
    logger.info("Saved %d-page report to %s", pages, target)
    return target
