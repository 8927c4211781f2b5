"""In-memory expense ledger backing a single Day2Day session."""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Callable, Optional

from core.amount_input import parse_amount
from core.analytics import DEFAULT_PROJECTION_WINDOW, ExpenseStatsCalculator, days_in_month
from core.exceptions import ValidationError
from core.models import Expense, MonthlyStats

__all__ = ["ExpenseLedger"]

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class ExpenseLedger:
    """Own the expense collection and the date the screen is focused on.

    The collection is append-only and kept most-recent-first. Statistics are
    never stored; every read recomputes them from the current snapshot.
    """

    def __init__(
        self,
        clock: Clock = datetime.now,
        window: int = DEFAULT_PROJECTION_WINDOW,
    ):
        self._clock = clock
        self._calculator = ExpenseStatsCalculator(window)
        self._expenses: list[Expense] = []
        self._reference_date: date = clock().date()

    @property
    def expenses(self) -> tuple[Expense, ...]:
        return tuple(self._expenses)

    @property
    def reference_date(self) -> date:
        return self._reference_date

    def now(self) -> datetime:
        return self._clock()

    def add_expense(
        self,
        amount: Decimal,
        timestamp: Optional[datetime] = None,
        description: Optional[str] = None,
    ) -> Expense:
        """Record an expense and return it.

        Without an explicit ``timestamp`` the expense lands on the selected
        reference date at the current time of day.
        """

        if timestamp is None:
            now = self.now()
            if now.date() == self._reference_date:
                timestamp = now
            else:
                timestamp = datetime.combine(self._reference_date, now.time())

        expense = Expense.create(amount, timestamp=timestamp, description=description)
        self._expenses.insert(0, expense)
        logger.info("Recorded expense %s of %s on %s", expense.id, expense.amount, expense.timestamp.date())
        return expense

    def add_from_input(self, text: str, description: Optional[str] = None) -> Expense:
        try:
            amount = parse_amount(text)
        except ValidationError as exc:
            logger.warning("Rejected amount input %r: %s", text, exc.message)
            raise
        return self.add_expense(amount, description=description)

    def select_date(self, day: date) -> None:
        if isinstance(day, datetime):
            day = day.date()
        self._reference_date = day

    def select_month(self, year: int, month: int) -> None:
        """Move the reference date to another month, keeping the day when possible."""

        day = min(self._reference_date.day, days_in_month(year, month))
        self._reference_date = date(year, month, day)

    def reset_to_today(self) -> None:
        self._reference_date = self.now().date()

    def today_total(self) -> Decimal:
        return self._calculator.today_total(self._expenses, self._reference_date)

    def monthly_stats(self) -> MonthlyStats:
        return self._calculator.monthly_stats(self._expenses, self._reference_date, self.now())
