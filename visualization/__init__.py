"""Visualization utilities for the Day2Day screen."""

from .charts import build_cumulative_chart, build_spending_chart
from .theme import theme_tokens

__all__ = [
    "build_cumulative_chart",
    "build_spending_chart",
    "theme_tokens",
]
