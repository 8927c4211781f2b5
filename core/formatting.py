"""Formatting helpers for Day2Day display strings."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Union

from core.models import MonthlyStats, to_cents

__all__ = [
    "MONTH_NAMES",
    "format_currency",
    "format_date",
    "format_month_label",
    "format_stats_lines",
]

MONTH_NAMES: tuple[str, ...] = (
    "janeiro",
    "fevereiro",
    "março",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
)


def format_currency(value: Union[Decimal, float, int], symbol: str = "R$") -> str:
    """Render ``value`` with Brazilian grouping, e.g. ``R$ 1.234,56``."""

    amount = to_cents(Decimal(str(value)))
    sign = "-" if amount < 0 else ""
    grouped = f"{abs(amount):,.2f}"
    localized = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    prefix = f"{symbol} " if symbol else ""
    return f"{sign}{prefix}{localized}"


def format_date(day: date) -> str:
    return f"{day:%d/%m/%Y}"


def format_month_label(year: int, month: int) -> str:
    return f"{MONTH_NAMES[month - 1]} de {year}"


def format_stats_lines(stats: MonthlyStats, symbol: str = "R$") -> list[tuple[str, str]]:
    lines = [
        ("Total do mês", format_currency(stats.total_spent, symbol)),
        ("Dias com gastos", f"{stats.days_with_expenses} de {stats.days_in_month}"),
        ("Média diária real", format_currency(stats.real_daily_average, symbol)),
        ("Média diária projetada", format_currency(stats.projected_daily_average, symbol)),
    ]
    if stats.remaining_days > 0:
        lines.append(("Dias restantes", str(stats.remaining_days)))
    lines.append(("Projeção do mês", format_currency(stats.projected_month_total, symbol)))
    return lines
