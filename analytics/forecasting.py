"""Daily spend frames feeding the Day2Day charts."""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Tuple

import pandas as pd

from core.analytics import bucket_by_day
from core.models import Expense, MonthlyStats

__all__ = [
    "build_daily_spend",
    "build_daily_and_cumulative_frames",
    "month_bounds",
]


def month_bounds(year: int, month: int) -> Tuple[pd.Timestamp, pd.Timestamp]:
    """Return the first and last day of a month as normalized timestamps."""

    period = pd.Period(year=year, month=month, freq="M")
    return period.start_time.normalize(), period.end_time.normalize()


def build_daily_spend(expenses: Iterable[Expense], year: int, month: int) -> pd.Series:
    """Construct a daily spend series covering every day of the month."""

    month_start, month_end = month_bounds(year, month)
    index = pd.date_range(month_start, month_end, freq="D")
    buckets = bucket_by_day(expenses, year, month)

    series = pd.Series(
        [float(buckets.get(day.day, 0)) for day in index],
        index=index,
        dtype=float,
    )
    series.index.name = "Day"
    return series


def build_daily_and_cumulative_frames(
    daily_spend: pd.Series,
    stats: MonthlyStats,
    reference_date: date,
    now: date | datetime,
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Return long-form frames of actual and projected spend.

    Actual rows run from the first of the month up to today for the current
    month, or through the whole month otherwise. Projected rows only exist for
    the current month and continue at the projected daily average.
    """

    daily_records: list[dict[str, object]] = []
    cumulative_records: list[dict[str, object]] = []

    is_current_month = (reference_date.year, reference_date.month) == (now.year, now.month)
    if is_current_month:
        cutoff = pd.Timestamp(year=now.year, month=now.month, day=now.day)
        actual = daily_spend[daily_spend.index <= cutoff]
    else:
        actual = daily_spend

    for day, value in actual.items():
        daily_records.append({"Day": day, "Spend": float(value), "Series": "Actual"})

    cumulative_actual = actual.cumsum()
    for day, value in cumulative_actual.items():
        cumulative_records.append({"Day": day, "Total": float(value), "Series": "Actual"})

    if is_current_month and stats.remaining_days > 0:
        projected_daily = float(stats.projected_daily_average)
        anchor_total = float(cumulative_actual.iloc[-1]) if not cumulative_actual.empty else 0.0
        if not actual.empty:
            anchor_day = actual.index[-1]
            daily_records.append(
                {"Day": anchor_day, "Spend": float(actual.iloc[-1]), "Series": "Projected"}
            )
            cumulative_records.append({"Day": anchor_day, "Total": anchor_total, "Series": "Projected"})

        future_days = daily_spend.index[daily_spend.index > cutoff]
        running_total = anchor_total
        for day in future_days:
            running_total += projected_daily
            daily_records.append({"Day": day, "Spend": projected_daily, "Series": "Projected"})
            cumulative_records.append({"Day": day, "Total": running_total, "Series": "Projected"})

    daily_df = pd.DataFrame(daily_records, columns=["Day", "Spend", "Series"])
    if not daily_df.empty:
        daily_df = daily_df.sort_values("Day", kind="stable").reset_index(drop=True)

    cumulative_df = pd.DataFrame(cumulative_records, columns=["Day", "Total", "Series"])
    if not cumulative_df.empty:
        cumulative_df = cumulative_df.sort_values("Day", kind="stable").reset_index(drop=True)

    return daily_df, cumulative_df
