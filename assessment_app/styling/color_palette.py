"""Color palette for the assessment application supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#1F2937", dark="#F5F5F5")
    TEXT_SECONDARY = ThemeColors(light="#6B7280", dark="#AAAAAA")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BACKGROUND_SECONDARY = ThemeColors(light="#F3F4F6", dark="#2D2D2D")
    BACKGROUND_INFO = ThemeColors(light="#EFF6FF", dark="#1E293B")

    # Brand navy
    ACCENT_PRIMARY = ThemeColors(light="#003366", dark="#4A9EFF")

    SUCCESS = ThemeColors(light="#16A34A", dark="#6FCF6F")
    ERROR = ThemeColors(light="#DC2626", dark="#FF6B6B")
    ERROR_BACKGROUND = ThemeColors(light="#FEE2E2", dark="#4B1F1F")

    BORDER_PRIMARY = ThemeColors(light="#D1D5DB", dark="#555555")

    BUTTON_PRIMARY_BG = ThemeColors(light="#003366", dark="#4A9EFF")
    BUTTON_PRIMARY_HOVER_BG = ThemeColors(light="#1E3A8A", dark="#74B4FF")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")
    BUTTON_SECONDARY_BG = ThemeColors(light="#FFFFFF", dark="#3A3A3A")
    BUTTON_HOVER_BG = ThemeColors(light="#F9FAFB", dark="#505050")
