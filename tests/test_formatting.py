"""Tests for display formatting helpers."""

from __future__ import annotations

import sys
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.formatting import format_currency, format_date, format_month_label, format_stats_lines
from core.models import MonthlyStats


def _stats(remaining_days: int) -> MonthlyStats:
    return MonthlyStats(
        days_in_month=30,
        remaining_days=remaining_days,
        days_with_expenses=2,
        real_daily_average=Decimal("15.00"),
        projected_daily_average=Decimal("15.00"),
        total_spent=Decimal("30.00"),
        projected_month_total=Decimal("450.00"),
    )


def test_format_currency_uses_brazilian_separators():
    assert format_currency(Decimal("1234.5")) == "R$ 1.234,50"
    assert format_currency(Decimal("1234567.891")) == "R$ 1.234.567,89"
    assert format_currency(0) == "R$ 0,00"
    assert format_currency(Decimal("-3.2"), symbol="US$") == "-US$ 3,20"
    assert format_currency(Decimal("9.99"), symbol="") == "9,99"


def test_format_date_and_month_label():
    assert format_date(date(2026, 10, 19)) == "19/10/2026"
    assert format_date(datetime(2024, 1, 5, 13, 45)) == "05/01/2024"
    assert format_month_label(2026, 10) == "outubro de 2026"
    assert format_month_label(2024, 3) == "março de 2024"


def test_format_stats_lines_includes_remaining_days_for_current_month():
    labels = [label for label, _ in format_stats_lines(_stats(28))]

    assert "Dias restantes" in labels
    assert dict(format_stats_lines(_stats(28)))["Projeção do mês"] == "R$ 450,00"


def test_format_stats_lines_skips_remaining_days_for_closed_month():
    lines = dict(format_stats_lines(_stats(0)))

    assert "Dias restantes" not in lines
    assert lines["Dias com gastos"] == "2 de 30"


def test_format_currency_separates_symbol_with_plain_space():
    assert format_currency(Decimal("1")) == "R$ 1,00"
    assert "\xa0" not in format_currency(Decimal("1234.56"))
