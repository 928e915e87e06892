"""Shared test fixtures for the numsys test suite.

WHY: Settings are cached process-wide and read from NUMSYS_* environment
variables (possibly populated from a developer's .env). Tests must start
from the defaults and must not leak overrides into each other.

HOW: An autouse fixture removes the NUMSYS_* variables and clears the
settings cache before and after every test. Alphabet fixtures provide the
sample alphabets used throughout the suite.

RULES:
- Every test sees width=64 and overflow="error" unless it sets env vars
- Tests that change settings use monkeypatch, never os.environ directly
"""

import pytest

from numsys.config import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run each test against default settings."""
    monkeypatch.delenv("NUMSYS_INT_WIDTH", raising=False)
    monkeypatch.delenv("NUMSYS_OVERFLOW", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def star_alphabet():
    """Two-symbol alphabet of non-ASCII characters (★ = 0, ☆ = 1)."""
    return ["★", "☆"]


@pytest.fixture
def sample_alphabets():
    """Alphabets of assorted bases, all duplicate-free."""
    return [
        ["a"],
        ["A", "B"],
        "012",
        "0123456789",
        "0123456789ABCDEF",
        "★☆",
        "rofl",
        "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz",
    ]
