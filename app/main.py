"""Day2Day expense tracker entry point."""

from __future__ import annotations

import logging

import streamlit as st

from app.layout import inject_css, render_header, render_sidebar_pickers
from app.pages import render_overview_page
from config import configure_logging, get_settings
from core import ExpenseLedger

LEDGER_KEY = "ledger"

logger = logging.getLogger(__name__)


def _get_ledger(window: int) -> ExpenseLedger:
    """Return the session's ledger, creating it on first run."""

    if LEDGER_KEY not in st.session_state:
        st.session_state[LEDGER_KEY] = ExpenseLedger(window=window)
        logger.info("Started new expense session")
    return st.session_state[LEDGER_KEY]


def main() -> None:
    """Application entrypoint for the Day2Day screen."""

    settings = get_settings()
    configure_logging(settings)

    st.set_page_config(
        page_title="Day2Day",
        page_icon="💸",
        layout="centered",
        initial_sidebar_state="collapsed",
    )

    inject_css()
    ledger = _get_ledger(settings.projection_window)
    render_sidebar_pickers(ledger)
    render_header(ledger.reference_date)
    render_overview_page(ledger, settings)


if __name__ == "__main__":
    main()
