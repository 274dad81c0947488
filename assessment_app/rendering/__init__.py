"""Renderers that paint compiled report documents."""

from .painter import ReportSink, paint_document

__all__ = ["ReportSink", "paint_document"]
