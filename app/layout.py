"""Shared layout primitives for the Day2Day Streamlit app."""

from __future__ import annotations

from contextlib import contextmanager
from datetime import date

import streamlit as st

from core.formatting import MONTH_NAMES, format_date
from core.ledger import ExpenseLedger

DATE_PICKER_KEY = "date_picker"
MONTH_PICKER_KEY = "month_picker"
YEAR_PICKER_KEY = "year_picker"


def inject_css() -> None:
    """Inject global CSS tokens and card styling into the Streamlit app."""

    st.markdown(
        """
        <style>
          :root {
            --gap: 16px;
            --radius: 16px;
            --card-bg: #FFFFFF;
            --border: #E0E0E0;
            --shadow: 0 2px 4px rgba(0, 0, 0, 0.1);
          }

          body, [data-testid="stAppViewContainer"] > .main {
            background: #F5F5F5;
          }

          .block-container {
            max-width: 720px;
            padding-top: 2rem;
            padding-bottom: 4rem;
          }

          .d2d-title {
            font-size: 2rem;
            font-weight: 700;
            color: #1A1A1A;
            margin-bottom: 0;
          }

          .d2d-date {
            color: #666666;
            margin-bottom: 1.5rem;
          }

          .d2d-total {
            text-align: center;
            font-size: 2.6rem;
            font-weight: 700;
            color: #1A1A1A;
          }

          .d2d-stat-row {
            display: flex;
            justify-content: space-between;
            color: #4B5563;
            padding: 2px 0;
          }

          .d2d-stat-row strong {
            color: #111827;
          }

          .ps-card-anchor {
            display: none;
          }

          [data-testid="stVerticalBlock"]:has(> .ps-card-anchor) {
            background: var(--card-bg);
            border: 1px solid var(--border);
            border-radius: var(--radius);
            box-shadow: var(--shadow);
            padding: 16px;
            margin-bottom: var(--gap);
            display: flex;
            flex-direction: column;
            gap: 12px;
          }

          .ps-card__head {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 12px;
            font-weight: 600;
            color: #666666;
            margin-bottom: 4px;
          }

          .ps-chip {
            font-size: 12px;
            padding: 2px 8px;
            border-radius: 999px;
            border: 1px solid #D6DEFF;
            background: #F0F4FF;
            color: #007AFF;
            white-space: nowrap;
          }
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def card(title: str, suffix: str | None = None):
    """Render content inside a reusable card."""

    chip_html = f'<span class="ps-chip">{suffix}</span>' if suffix else ""
    container = st.container()
    with container:
        st.markdown('<div class="ps-card-anchor"></div>', unsafe_allow_html=True)
        st.markdown(
            f'<div class="ps-card__head"><span class="ps-card__title">{title}</span>'
            f"{chip_html}</div>",
            unsafe_allow_html=True,
        )
        yield


def render_header(reference_date: date) -> None:
    st.markdown('<p class="d2d-title">Day2Day</p>', unsafe_allow_html=True)
    st.markdown(f'<p class="d2d-date">{format_date(reference_date)}</p>', unsafe_allow_html=True)


def _sync_pickers(reference_date: date) -> None:
    st.session_state[DATE_PICKER_KEY] = reference_date
    st.session_state[MONTH_PICKER_KEY] = reference_date.month
    st.session_state[YEAR_PICKER_KEY] = reference_date.year


def _on_date_picked(ledger: ExpenseLedger) -> None:
    picked = st.session_state.get(DATE_PICKER_KEY)
    if picked is None:
        return
    ledger.select_date(picked)
    _sync_pickers(ledger.reference_date)


def _on_month_picked(ledger: ExpenseLedger) -> None:
    ledger.select_month(int(st.session_state[YEAR_PICKER_KEY]), int(st.session_state[MONTH_PICKER_KEY]))
    _sync_pickers(ledger.reference_date)


def _on_today_clicked(ledger: ExpenseLedger) -> None:
    ledger.reset_to_today()
    _sync_pickers(ledger.reference_date)


def render_sidebar_pickers(ledger: ExpenseLedger) -> None:
    """Render the date and month pickers that move the reference date."""

    if DATE_PICKER_KEY not in st.session_state:
        _sync_pickers(ledger.reference_date)

    with st.sidebar:
        st.markdown("### Data")
        st.date_input(
            "Dia",
            key=DATE_PICKER_KEY,
            format="DD/MM/YYYY",
            on_change=_on_date_picked,
            args=(ledger,),
        )
        st.markdown("### Mês")
        month_col, year_col = st.columns((3, 2))
        month_col.selectbox(
            "Mês",
            list(range(1, 13)),
            key=MONTH_PICKER_KEY,
            format_func=lambda month: MONTH_NAMES[month - 1].capitalize(),
            on_change=_on_month_picked,
            args=(ledger,),
            label_visibility="collapsed",
        )
        year_col.number_input(
            "Ano",
            min_value=1970,
            max_value=9999,
            step=1,
            key=YEAR_PICKER_KEY,
            on_change=_on_month_picked,
            args=(ledger,),
            label_visibility="collapsed",
        )
        st.button("Hoje", on_click=_on_today_clicked, args=(ledger,), use_container_width=True)
