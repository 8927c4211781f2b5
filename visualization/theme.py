"""Shared Plotly theme tokens for Day2Day charts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeTokens:
    time_format: str = "%d/%m"
    label_font: str = "Inter"
    brand_blue: str = "#007AFF"
    brand_blue_soft: str = "rgba(0, 122, 255, 0.12)"
    brand_blue_focus: str = "#0062CC"
    neutral_grey: str = "#94A3B8"
    neutral_white: str = "#FFFFFF"
    neutral_background: str = "rgba(148, 163, 184, 0.25)"


_TOKENS = ThemeTokens()


def theme_tokens() -> ThemeTokens:
    """Return the shared visualization tokens.

    The tokens are frozen to keep styling consistent between charts.
    """

    return _TOKENS
