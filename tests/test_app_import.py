import importlib
import logging

import pydantic
import pytest
import streamlit as st

from config import Settings, configure_logging, get_settings


@pytest.fixture(autouse=True)
def clear_streamlit_secrets(monkeypatch):
    """Provide an empty secrets mapping so tests don't rely on Streamlit runtime."""

    monkeypatch.setattr(st, "secrets", {}, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_app_package_exports_main():
    module = importlib.import_module("app")

    assert hasattr(module, "main"), "app package should expose main entrypoint"


def test_settings_defaults():
    settings = get_settings()

    assert settings.currency_symbol == "R$"
    assert settings.projection_window == 5
    assert settings.max_input_length == 10
    assert settings.log_level == "INFO"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DAY2DAY_PROJECTION_WINDOW", "3")
    monkeypatch.setenv("DAY2DAY_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.projection_window == 3
    assert settings.log_level == "DEBUG"


def test_settings_prefer_streamlit_secrets(monkeypatch):
    monkeypatch.setattr(st, "secrets", {"day2day": {"currency_symbol": "US$"}}, raising=False)

    assert get_settings().currency_symbol == "US$"


def test_settings_reject_bad_values():
    with pytest.raises(pydantic.ValidationError):
        Settings(projection_window=0)
    with pytest.raises(pydantic.ValidationError):
        Settings(log_level="chatty")


def test_configure_logging_applies_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    configure_logging(Settings(log_level="WARNING"))

    assert calls["level"] == "WARNING"


def test_today_card_title_matches_screen():
    overview = importlib.import_module("app.pages.overview")

    assert overview.TODAY_CARD_TITLE == "Total de Hoje"
