"""The single Day2Day screen: today's total, amount entry and month stats."""

from __future__ import annotations

import streamlit as st

from analytics import build_daily_and_cumulative_frames, build_daily_spend
from app.layout import card
from config import Settings
from core import ExpenseLedger, MonthlyStats, ValidationError
from core.amount_input import is_submittable, mask_amount_input
from core.formatting import format_currency, format_date, format_month_label, format_stats_lines
from visualization import build_cumulative_chart, build_spending_chart

AMOUNT_KEY = "amount_input"
AMOUNT_PREVIOUS_KEY = "amount_previous"
DESCRIPTION_KEY = "description_input"
FEEDBACK_KEY = "amount_feedback"
TODAY_CARD_TITLE = "Total de Hoje"


def _on_amount_changed(settings: Settings) -> None:
    previous = st.session_state.get(AMOUNT_PREVIOUS_KEY, "")
    masked = mask_amount_input(st.session_state.get(AMOUNT_KEY, ""), previous, settings.max_input_length)
    st.session_state[AMOUNT_KEY] = masked
    st.session_state[AMOUNT_PREVIOUS_KEY] = masked


def _on_add_clicked(ledger: ExpenseLedger, settings: Settings) -> None:
    text = st.session_state.get(AMOUNT_KEY, "")
    description = st.session_state.get(DESCRIPTION_KEY) or settings.default_description
    try:
        ledger.add_from_input(text, description=description)
    except ValidationError as exc:
        st.session_state[FEEDBACK_KEY] = exc.message
        return
    st.session_state[FEEDBACK_KEY] = None
    st.session_state[AMOUNT_KEY] = ""
    st.session_state[AMOUNT_PREVIOUS_KEY] = ""
    st.session_state[DESCRIPTION_KEY] = ""


def _render_today_card(ledger: ExpenseLedger, settings: Settings) -> None:
    total = ledger.today_total()
    st.markdown(
        f'<div class="d2d-total">{format_currency(total, settings.currency_symbol)}</div>',
        unsafe_allow_html=True,
    )


def _render_entry_card(ledger: ExpenseLedger, settings: Settings) -> None:
    input_col, button_col = st.columns((4, 1), vertical_alignment="bottom")
    input_col.text_input(
        settings.currency_symbol,
        key=AMOUNT_KEY,
        placeholder="0,00",
        on_change=_on_amount_changed,
        args=(settings,),
    )
    button_col.button(
        "+",
        type="primary",
        use_container_width=True,
        disabled=not is_submittable(st.session_state.get(AMOUNT_KEY, "")),
        on_click=_on_add_clicked,
        args=(ledger, settings),
    )
    st.text_input("Descrição", key=DESCRIPTION_KEY, placeholder=settings.default_description)

    feedback = st.session_state.get(FEEDBACK_KEY)
    if feedback:
        st.warning(feedback)


def _render_month_card(stats: MonthlyStats, settings: Settings) -> None:
    for label, value in format_stats_lines(stats, settings.currency_symbol):
        st.markdown(
            f'<div class="d2d-stat-row"><span>{label}</span><strong>{value}</strong></div>',
            unsafe_allow_html=True,
        )


def _render_expense_list(ledger: ExpenseLedger, settings: Settings) -> None:
    if not ledger.expenses:
        st.info("Nenhum gasto registrado ainda.")
        return

    for expense in ledger.expenses:
        st.markdown(
            f'<div class="d2d-stat-row"><span>{format_date(expense.timestamp)} · {expense.description}</span>'
            f"<strong>{format_currency(expense.amount, settings.currency_symbol)}</strong></div>",
            unsafe_allow_html=True,
        )


def render_page(ledger: ExpenseLedger, settings: Settings) -> None:
    reference_date = ledger.reference_date
    now = ledger.now()
    stats = ledger.monthly_stats()
    month_label = format_month_label(reference_date.year, reference_date.month)

    with card(TODAY_CARD_TITLE, suffix=format_date(reference_date)):
        _render_today_card(ledger, settings)

    with card("Novo gasto"):
        _render_entry_card(ledger, settings)

    with card("Estatísticas do mês", suffix=month_label):
        _render_month_card(stats, settings)

    daily_spend = build_daily_spend(ledger.expenses, reference_date.year, reference_date.month)
    daily_df, cumulative_df = build_daily_and_cumulative_frames(daily_spend, stats, reference_date, now)

    with card("Gastos diários", suffix=month_label):
        st.plotly_chart(build_spending_chart(daily_df, settings.currency_symbol), use_container_width=True)

    if stats.remaining_days > 0:
        with card("Projeção acumulada", suffix="Previsão"):
            st.plotly_chart(
                build_cumulative_chart(cumulative_df, settings.currency_symbol),
                use_container_width=True,
            )

    with card("Últimos gastos"):
        _render_expense_list(ledger, settings)
