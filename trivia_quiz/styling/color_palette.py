"""Color palette for Trivia Quiz supporting light and dark themes."""

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
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#111827", dark="#F5F5F5")
    TEXT_MUTED = ThemeColors(light="#6B7280", dark="#AAAAAA")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BACKGROUND_SECONDARY = ThemeColors(light="#F3F4F6", dark="#2D2D2D")
    BORDER_PRIMARY = ThemeColors(light="#D1D5DB", dark="#4A4A4A")

    # Selection and score bands
    ACCENT_PRIMARY = ThemeColors(light="#2563EB", dark="#4A9EFF")
    ACCENT_TEXT = ThemeColors(light="#FFFFFF", dark="#FFFFFF")
    SCORE_HIGH = ThemeColors(light="#059669", dark="#34D399")
    SCORE_MEDIUM = ThemeColors(light="#2563EB", dark="#60A5FA")
    SCORE_LOW = ThemeColors(light="#DC2626", dark="#F87171")
