"""Centralized Qt stylesheets for the application."""

from .color_palette import ColorPalette, Theme

_SCORE_BAND_COLORS = {
    "high": ColorPalette.SCORE_HIGH,
    "medium": ColorPalette.SCORE_MEDIUM,
    "low": ColorPalette.SCORE_LOW,
}


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
            }}
            QPushButton {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 8px 14px;
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                color: {ColorPalette.ACCENT_TEXT.get(theme)};
                border: 1px solid {ColorPalette.ACCENT_PRIMARY.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_MUTED.get(theme)};
            }}
        """

    @staticmethod
    def get_headline_style() -> str:
        return "font-size: 24pt; font-weight: bold;"

    @staticmethod
    def get_timer_style(running_low: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.SCORE_LOW if running_low else ColorPalette.TEXT_PRIMARY
        return f"font-size: 16pt; font-weight: bold; color: {color.get(theme)};"

    @staticmethod
    def get_score_style(band: str, theme: Theme = Theme.LIGHT) -> str:
        color = _SCORE_BAND_COLORS.get(band, ColorPalette.TEXT_PRIMARY)
        return f"font-size: 32pt; font-weight: bold; color: {color.get(theme)};"

    @staticmethod
    def get_badge_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"color: {ColorPalette.ACCENT_TEXT.get(theme)}; "
            f"background-color: {ColorPalette.SCORE_HIGH.get(theme)}; "
            "border-radius: 8px; padding: 4px 10px; font-weight: bold;"
        )
