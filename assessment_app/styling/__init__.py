"""Styling module for the assessment application."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
