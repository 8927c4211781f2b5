"""Analytics helpers shared across Day2Day views."""

from analytics.forecasting import (
    build_daily_and_cumulative_frames,
    build_daily_spend,
    month_bounds,
)

__all__ = [
    "build_daily_and_cumulative_frames",
    "build_daily_spend",
    "month_bounds",
]
