"""Tests for chart frames and Plotly figures."""

from __future__ import annotations

import sys
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

import pandas as pd
import plotly.graph_objects as go
import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from analytics.forecasting import build_daily_and_cumulative_frames, build_daily_spend, month_bounds
from core.analytics import compute_monthly_stats
from core.models import Expense
from visualization import build_cumulative_chart, build_spending_chart


@pytest.fixture()
def april_expenses() -> list[Expense]:
    return [
        Expense(amount=Decimal("10.00"), timestamp=datetime(2024, 4, 1, 9)),
        Expense(amount=Decimal("20.00"), timestamp=datetime(2024, 4, 2, 9)),
        Expense(amount=Decimal("99.00"), timestamp=datetime(2024, 5, 2, 9)),
    ]


def test_month_bounds():
    start, end = month_bounds(2024, 2)

    assert start == pd.Timestamp("2024-02-01")
    assert end == pd.Timestamp("2024-02-29")


def test_build_daily_spend_covers_whole_month(april_expenses):
    series = build_daily_spend(april_expenses, 2024, 4)

    assert len(series) == 30
    assert series.index[0] == pd.Timestamp("2024-04-01")
    assert series.index[-1] == pd.Timestamp("2024-04-30")
    assert series.loc[pd.Timestamp("2024-04-02")] == pytest.approx(20.0)
    assert series.sum() == pytest.approx(30.0)


def test_current_month_frames_include_projection(april_expenses):
    reference, now = date(2024, 4, 2), datetime(2024, 4, 2, 18)
    stats = compute_monthly_stats(april_expenses, reference, now)
    series = build_daily_spend(april_expenses, 2024, 4)

    daily_df, cumulative_df = build_daily_and_cumulative_frames(series, stats, reference, now)

    actual = cumulative_df[cumulative_df["Series"] == "Actual"]
    projected = cumulative_df[cumulative_df["Series"] == "Projected"]
    assert len(actual) == 2
    assert len(projected) == 29
    assert projected["Total"].iloc[-1] == pytest.approx(float(stats.projected_month_total))
    assert (daily_df[daily_df["Series"] == "Projected"]["Spend"].iloc[1:] == 15.0).all()


def test_past_month_frames_have_no_projection(april_expenses):
    reference, now = date(2024, 4, 15), datetime(2024, 6, 1)
    stats = compute_monthly_stats(april_expenses, reference, now)
    series = build_daily_spend(april_expenses, 2024, 4)

    daily_df, cumulative_df = build_daily_and_cumulative_frames(series, stats, reference, now)

    assert set(daily_df["Series"]) == {"Actual"}
    assert len(daily_df) == 30
    assert cumulative_df["Total"].iloc[-1] == pytest.approx(30.0)


def test_charts_handle_empty_frames():
    empty = pd.DataFrame(columns=["Day", "Spend", "Series"])

    fig = build_spending_chart(empty)

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 0
    assert fig.layout.annotations


def test_charts_render_actual_and_projection(april_expenses):
    reference, now = date(2024, 4, 2), datetime(2024, 4, 2, 18)
    stats = compute_monthly_stats(april_expenses, reference, now)
    series = build_daily_spend(april_expenses, 2024, 4)
    daily_df, cumulative_df = build_daily_and_cumulative_frames(series, stats, reference, now)

    spending = build_spending_chart(daily_df)
    cumulative = build_cumulative_chart(cumulative_df, currency_symbol="R$")

    assert [trace.name for trace in spending.data] == ["Gasto diário", "Projeção"]
    assert "Projeção" in [trace.name for trace in cumulative.data]
