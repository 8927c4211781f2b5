"""Shared data model definitions for Day2Day."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from core.exceptions import ValidationError

__all__ = [
    "CENTS",
    "DEFAULT_DESCRIPTION",
    "Expense",
    "MAX_AMOUNT",
    "MonthlyStats",
    "to_cents",
]

CENTS = Decimal("0.01")
MAX_AMOUNT = Decimal("999999999.99")
DEFAULT_DESCRIPTION = "Sem descrição"


def to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def _new_expense_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Expense:
    """A single recorded outflow.

    ``amount`` must be strictly positive; instances are never mutated once
    created, so the ledger can hand out snapshots freely.
    """

    amount: Decimal
    timestamp: datetime
    description: str = DEFAULT_DESCRIPTION
    id: str = field(default_factory=_new_expense_id)

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError("Expense amount must be a Decimal", error_code="amount_type")
        if not self.amount.is_finite() or self.amount <= 0:
            raise ValidationError("Expense amount must be greater than zero", error_code="amount_range")
        if self.amount > MAX_AMOUNT:
            raise ValidationError("Expense amount is too large", error_code="amount_range")
        if self.amount.as_tuple().exponent < -2:
            raise ValidationError("Expense amount has more than two decimal places", error_code="precision")
        object.__setattr__(self, "amount", to_cents(self.amount))
        if not self.description or not self.description.strip():
            object.__setattr__(self, "description", DEFAULT_DESCRIPTION)

    @classmethod
    def create(
        cls,
        amount: Decimal,
        timestamp: Optional[datetime] = None,
        description: Optional[str] = None,
    ) -> "Expense":
        return cls(
            amount=amount,
            timestamp=timestamp if timestamp is not None else datetime.now(),
            description=(description or "").strip() or DEFAULT_DESCRIPTION,
        )


@dataclass(frozen=True)
class MonthlyStats:
    days_in_month: int
    remaining_days: int
    days_with_expenses: int
    real_daily_average: Decimal
    projected_daily_average: Decimal
    total_spent: Decimal
    projected_month_total: Decimal
