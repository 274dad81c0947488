"""Walks a compiled report and forwards each primitive to a drawing sink."""

from __future__ import annotations

from typing import Callable, Protocol

from assessment_app.core.report_compiler import (
    BlockKind,
    LinePrimitive,
    Primitive,
    RectPrimitive,
    ReportDocument,
    TextPrimitive,
)


class ReportSink(Protocol):
    """Drawing surface measured in millimetres from the page's top-left corner."""

    def draw_text(self, primitive: TextPrimitive) -> None:
        ...

    def draw_line(self, primitive: LinePrimitive) -> None:
        ...

    def fill_rect(self, primitive: RectPrimitive) -> None:
        ...

    def new_page(self) -> None:
        ...

    def save(self, filename: str) -> None:
        ...


def _dispatch_table(sink: ReportSink) -> dict[type, Callable[[Primitive], None]]:
    return {
        TextPrimitive: sink.draw_text,
        LinePrimitive: sink.draw_line,
        RectPrimitive: sink.fill_rect,
    }


def paint_document(document: ReportDocument, sink: ReportSink) -> int:
    """Paint every block in order; returns the number of pages painted."""
    handlers = _dispatch_table(sink)
    pages = 1
    for block in document.blocks:
        if block.kind is BlockKind.PAGE_BREAK:
            sink.new_page()
            pages += 1
            continue
        for primitive in block.primitives:
            handlers[type(primitive)](primitive)
    return pages
