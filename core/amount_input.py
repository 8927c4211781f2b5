"""Amount entry handling: keystroke masking and parsing into ``Decimal``."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from core.exceptions import ValidationError
from core.models import MAX_AMOUNT

__all__ = [
    "MAX_AMOUNT",
    "MAX_INPUT_LENGTH",
    "is_submittable",
    "mask_amount_input",
    "parse_amount",
]

MAX_INPUT_LENGTH = 10

_NON_AMOUNT_CHARS = re.compile(r"[^0-9,]")


def mask_amount_input(text: str, previous: str = "", max_length: int = MAX_INPUT_LENGTH) -> str:
    """Return the text the amount field should hold after an edit.

    Everything except digits and a comma is dropped. An edit that would add a
    second comma or a third decimal digit is refused and ``previous`` is kept.
    """

    cleaned = _NON_AMOUNT_CHARS.sub("", text or "")
    parts = cleaned.split(",")
    if len(parts) > 2:
        return previous
    if len(parts) == 2 and len(parts[1]) > 2:
        return previous
    return cleaned[:max_length]


def parse_amount(text: str) -> Decimal:
    """Parse a masked amount such as ``"12,50"`` into a positive ``Decimal``."""

    if not text or not text.strip():
        raise ValidationError("Amount cannot be empty", error_code="empty")

    normalized = text.strip().replace(",", ".")
    try:
        amount = Decimal(normalized)
    except InvalidOperation:
        raise ValidationError(f"Invalid amount: {text!r}", error_code="format") from None

    if not amount.is_finite():
        raise ValidationError(f"Invalid amount: {text!r}", error_code="format")
    if amount <= 0:
        raise ValidationError("Amount must be greater than zero", error_code="range")
    if amount.as_tuple().exponent < -2:
        raise ValidationError("Amount accepts at most two decimal places", error_code="precision")
    if amount > MAX_AMOUNT:
        raise ValidationError("Amount is too large", error_code="range")
    return amount


def is_submittable(text: str) -> bool:
    try:
        parse_amount(text)
    except ValidationError:
        return False
    return True
