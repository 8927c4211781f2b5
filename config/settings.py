"""Centralised configuration handling for Day2Day."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Mapping

import streamlit as st
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.models import DEFAULT_DESCRIPTION

DEFAULT_CURRENCY_SYMBOL = "R$"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _streamlit_section(name: str) -> Mapping[str, Any] | None:
    """Return a mapping from Streamlit secrets for the given section."""

    try:
        if hasattr(st, "secrets") and name in st.secrets:
            section = st.secrets[name]
            if isinstance(section, Mapping):
                return section
            return dict(section)
    except Exception:  # pragma: no cover - accessing secrets may fail in tests
        return None
    return None


class Settings(BaseSettings):
    """Application settings sourced from env vars and Streamlit secrets."""

    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    projection_window: int = Field(default=5, ge=1)
    max_input_length: int = Field(default=10, ge=1)
    default_description: str = DEFAULT_DESCRIPTION
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="DAY2DAY_", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings."""

    overrides: dict[str, Any] = {}
    secrets_section = _streamlit_section("day2day")
    if secrets_section:
        overrides = {
            "currency_symbol": secrets_section.get("currency_symbol"),
            "projection_window": secrets_section.get("projection_window"),
            "max_input_length": secrets_section.get("max_input_length"),
            "log_level": secrets_section.get("log_level"),
        }

    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the root logger."""

    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
