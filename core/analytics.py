"""Expense statistics used by the Day2Day screen.

Everything here is a pure function of an expense snapshot and the dates
passed in. Results are recomputed from scratch on every call; nothing is
cached between calls.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Union

from core.models import Expense, MonthlyStats, to_cents

__all__ = [
    "DEFAULT_PROJECTION_WINDOW",
    "ExpenseStatsCalculator",
    "bucket_by_day",
    "compute_monthly_stats",
    "compute_today_total",
    "days_in_month",
    "filter_month",
]

logger = logging.getLogger(__name__)

DEFAULT_PROJECTION_WINDOW = 5
ZERO = Decimal("0")

DateLike = Union[date, datetime]


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def _same_day(moment: DateLike, day: DateLike) -> bool:
    return (moment.year, moment.month, moment.day) == (day.year, day.month, day.day)


def compute_today_total(expenses: Iterable[Expense], reference_date: DateLike) -> Decimal:
    """Return the summed amount of expenses on ``reference_date``'s calendar day."""

    return sum(
        (expense.amount for expense in expenses if _same_day(expense.timestamp, reference_date)),
        ZERO,
    )


def filter_month(expenses: Iterable[Expense], year: int, month: int) -> list[Expense]:
    return [
        expense
        for expense in expenses
        if expense.timestamp.year == year and expense.timestamp.month == month
    ]


def bucket_by_day(expenses: Iterable[Expense], year: int, month: int) -> dict[int, Decimal]:
    """Sum expenses of the given month per day-of-month.

    Only days with at least one expense appear as keys.
    """

    buckets: dict[int, Decimal] = {}
    for expense in filter_month(expenses, year, month):
        day = expense.timestamp.day
        buckets[day] = buckets.get(day, ZERO) + expense.amount
    return buckets


def compute_monthly_stats(
    expenses: Iterable[Expense],
    reference_date: DateLike,
    now: DateLike,
    window: int = DEFAULT_PROJECTION_WINDOW,
) -> MonthlyStats:
    """Compute month-to-date statistics and the month-end projection.

    The projected daily average is the mean of the ``window`` active days with
    the highest day-of-month number. This is a recency proxy, not a rolling
    window: sparse months can pull in days that are far apart in time.

    ``remaining_days`` and the projection only apply when ``reference_date``
    falls in the same month as ``now``; for any other month the projected
    total equals the amount already spent.
    """

    if window < 1:
        raise ValueError("window must be at least 1")

    year, month = reference_date.year, reference_date.month
    month_length = days_in_month(year, month)
    is_current_month = (now.year, now.month) == (year, month)
    remaining_days = month_length - now.day if is_current_month else 0

    buckets = bucket_by_day(expenses, year, month)
    total_spent = sum(buckets.values(), ZERO)
    days_with_expenses = len(buckets)

    if days_with_expenses:
        real_daily_average = to_cents(total_spent / days_with_expenses)
    else:
        real_daily_average = ZERO

    recent_days = sorted(buckets, reverse=True)[:window]
    if recent_days:
        projected_daily_average = to_cents(
            sum((buckets[day] for day in recent_days), ZERO) / len(recent_days)
        )
    else:
        projected_daily_average = real_daily_average

    if is_current_month:
        projected_month_total = total_spent + projected_daily_average * remaining_days
    else:
        projected_month_total = total_spent

    logger.debug(
        "Monthly stats for %04d-%02d: %d active days, total %s, %d days remaining",
        year,
        month,
        days_with_expenses,
        total_spent,
        remaining_days,
    )

    return MonthlyStats(
        days_in_month=month_length,
        remaining_days=remaining_days,
        days_with_expenses=days_with_expenses,
        real_daily_average=real_daily_average,
        projected_daily_average=projected_daily_average,
        total_spent=to_cents(total_spent),
        projected_month_total=to_cents(projected_month_total),
    )


class ExpenseStatsCalculator:
    """Bind the projection window once and expose both statistics."""

    def __init__(self, window: int = DEFAULT_PROJECTION_WINDOW):
        if window < 1:
            raise ValueError("window must be at least 1")
        self.window = window

    def today_total(self, expenses: Iterable[Expense], reference_date: DateLike) -> Decimal:
        return compute_today_total(expenses, reference_date)

    def monthly_stats(
        self,
        expenses: Iterable[Expense],
        reference_date: DateLike,
        now: DateLike,
    ) -> MonthlyStats:
        return compute_monthly_stats(expenses, reference_date, now, window=self.window)
