"""Streamlit front end for Day2Day."""

from .main import main

__all__ = ["main"]
