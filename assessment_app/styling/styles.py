"""Centralized stylesheets for the application."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QLineEdit {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 6px 10px;
            }}
            QLineEdit:focus {{
                border: 2px solid {ColorPalette.ACCENT_PRIMARY.get(theme)};
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                border: 2px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 8px;
                padding: 10px 14px;
                text-align: left;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
                border-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
            }}
            QPushButton[primary="true"] {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: none;
                font-weight: bold;
                text-align: center;
            }}
            QPushButton[primary="true"]:hover {{
                background-color: {ColorPalette.BUTTON_PRIMARY_HOVER_BG.get(theme)};
            }}
            QProgressBar {{
                background-color: {ColorPalette.BORDER_PRIMARY.get(theme)};
                border: none;
                max-height: 6px;
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
            }}
        """

    @staticmethod
    def get_heading_style(theme: Theme = Theme.LIGHT) -> str:
        return f"font-size: 22pt; font-weight: bold; color: {ColorPalette.ACCENT_PRIMARY.get(theme)};"

    @staticmethod
    def get_info_box_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.BACKGROUND_INFO.get(theme)};"
            f" color: {ColorPalette.ACCENT_PRIMARY.get(theme)}; border-radius: 6px; padding: 10px;"
        )

    @staticmethod
    def get_error_label_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.ERROR.get(theme)};"

    @staticmethod
    def get_timer_style(warning: bool, theme: Theme = Theme.LIGHT) -> str:
        base = "font-family: monospace; font-size: 18pt; font-weight: bold; padding: 2px 10px; border-radius: 4px;"
        if warning:
            return base + (
                f" color: {ColorPalette.ERROR.get(theme)};"
                f" background-color: {ColorPalette.ERROR_BACKGROUND.get(theme)};"
            )
        return base + (
            f" color: {ColorPalette.ACCENT_PRIMARY.get(theme)};"
            f" background-color: {ColorPalette.BACKGROUND_INFO.get(theme)};"
        )

    @staticmethod
    def get_verdict_style(passed: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.SUCCESS if passed else ColorPalette.ERROR
        return f"font-size: 18pt; font-weight: bold; color: {color.get(theme)};"
