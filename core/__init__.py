"""Core domain package for the Day2Day expense tracker."""

from .analytics import ExpenseStatsCalculator, compute_monthly_stats, compute_today_total
from .exceptions import Day2DayError, ValidationError
from .ledger import ExpenseLedger
from .models import Expense, MonthlyStats

__all__ = [
    "Day2DayError",
    "Expense",
    "ExpenseLedger",
    "ExpenseStatsCalculator",
    "MonthlyStats",
    "ValidationError",
    "compute_monthly_stats",
    "compute_today_total",
]
