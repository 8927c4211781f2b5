"""Plotly chart builders for the Day2Day screen."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from .theme import theme_tokens

TOKENS = theme_tokens()

__all__ = [
    "build_spending_chart",
    "build_cumulative_chart",
]


def _empty_plotly_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        annotations=[
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(color=TOKENS.neutral_grey, size=14, family=TOKENS.label_font),
            )
        ],
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        margin=dict(l=0, r=0, t=20, b=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def _split_series(frame: pd.DataFrame, value_column: str) -> tuple[pd.DataFrame, pd.DataFrame]:
    df = frame.copy()
    df["Day"] = pd.to_datetime(df["Day"], errors="coerce").dt.normalize()
    df = df.dropna(subset=["Day"])
    df["Series"] = df["Series"].astype(str).str.lower()

    actual = df[df["Series"] == "actual"].sort_values("Day")[["Day", value_column]]
    projected = df[df["Series"] == "projected"].sort_values("Day")[["Day", value_column]]
    return actual, projected


def _apply_layout(fig: go.Figure, yaxis_title: str) -> None:
    fig.update_layout(
        title="",
        xaxis_title="Dia",
        yaxis_title=yaxis_title,
        margin=dict(l=0, r=0, t=20, b=0),
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1.0),
        xaxis=dict(showgrid=False, tickformat=TOKENS.time_format),
        yaxis=dict(showgrid=True, gridcolor=TOKENS.neutral_background, zeroline=False),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )


def build_spending_chart(
    spending_df: pd.DataFrame,
    currency_symbol: str | None = "R$",
) -> go.Figure:
    """Render daily spend bars with the projected pace as a dashed line."""

    if spending_df.empty:
        return _empty_plotly_figure("Nenhum gasto neste mês.")

    actual, projected = _split_series(spending_df, "Spend")
    if actual.empty:
        return _empty_plotly_figure("Nenhum gasto neste mês.")

    currency_prefix = f"{currency_symbol} " if currency_symbol else ""
    hover_template = f"%{{x|{TOKENS.time_format}}}<br>{currency_prefix}%{{y:,.2f}}<extra></extra>"

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=actual["Day"],
            y=actual["Spend"],
            name="Gasto diário",
            marker=dict(color=TOKENS.brand_blue),
            hovertemplate=hover_template,
        )
    )

    if not projected.empty:
        fig.add_trace(
            go.Scatter(
                x=projected["Day"],
                y=projected["Spend"],
                mode="lines",
                name="Projeção",
                line=dict(color=TOKENS.neutral_grey, width=2, dash="dash"),
                hovertemplate=hover_template,
            )
        )

    _apply_layout(fig, "Gasto")
    return fig


def build_cumulative_chart(
    cumulative_df: pd.DataFrame,
    currency_symbol: str | None = "R$",
) -> go.Figure:
    """Render month-to-date spend and its projection to month end."""

    if cumulative_df.empty:
        return _empty_plotly_figure("Sem dados acumulados.")

    actual, projected = _split_series(cumulative_df, "Total")
    if actual.empty:
        return _empty_plotly_figure("Sem dados acumulados.")

    currency_prefix = f"{currency_symbol} " if currency_symbol else ""
    hover_template = f"%{{x|{TOKENS.time_format}}}<br>{currency_prefix}%{{y:,.2f}}<extra></extra>"

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=actual["Day"],
            y=actual["Total"],
            mode="lines",
            name="Total real",
            line=dict(color=TOKENS.brand_blue, width=3, shape="spline", smoothing=0.4),
            fill="tozeroy",
            fillcolor=TOKENS.brand_blue_soft,
            hovertemplate=hover_template,
        )
    )

    if not projected.empty:
        fig.add_trace(
            go.Scatter(
                x=projected["Day"],
                y=projected["Total"],
                mode="lines+markers",
                name="Projeção",
                line=dict(color=TOKENS.neutral_grey, width=2, dash="dash"),
                marker=dict(size=5, color=TOKENS.neutral_grey, line=dict(color=TOKENS.neutral_white, width=1)),
                hovertemplate=hover_template,
            )
        )

    latest_point = actual.iloc[[-1]]
    fig.add_trace(
        go.Scatter(
            x=latest_point["Day"],
            y=latest_point["Total"],
            mode="markers",
            marker=dict(
                size=11,
                color=TOKENS.brand_blue_focus,
                symbol="circle",
                line=dict(color=TOKENS.neutral_white, width=2),
            ),
            hovertemplate=hover_template,
            name="Hoje",
            showlegend=False,
        )
    )

    _apply_layout(fig, "Total do mês")
    return fig
