"""Runtime settings and .env loading.

WHY: The original converter worked on the host's native unsigned integer
and left overflow undefined. Python integers never overflow, so the width
to emulate and what to do when a decoded value exceeds it are explicit
settings here, overridable without code changes.

HOW: python-dotenv loads the .env file on import. get_settings() reads the
NUMSYS_* environment variables once, validates them through the pydantic
NumsysSettings model and caches the result behind a lock. Per-call keyword
arguments on the conversion functions take precedence over these defaults.

RULES:
- NUMSYS_INT_WIDTH: one of 8, 16, 32, 64, 128 (default 64)
- NUMSYS_OVERFLOW: "error" (default) or "wrap"
- Invalid values raise ValueError naming the variable
- Settings are read-only once loaded; reset_settings() is for tests
"""

from __future__ import annotations

import logging
import os
import threading
from enum import Enum
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

# Load .env from the working directory (where the caller runs from)
load_dotenv(find_dotenv(usecwd=True))

SUPPORTED_WIDTHS = (8, 16, 32, 64, 128)
"""Unsigned integer widths the converter can emulate (u8 .. u128)."""

DEFAULT_INT_WIDTH = 64
DEFAULT_OVERFLOW = "error"


class OverflowPolicy(str, Enum):
    """What seq2dec does when the decoded total exceeds the width."""

    error = "error"
    wrap = "wrap"


class NumsysSettings(BaseModel):
    """Validated converter settings."""

    model_config = {"frozen": True}

    int_width: int = Field(
        default=DEFAULT_INT_WIDTH,
        description="Unsigned integer width in bits.",
    )
    overflow: OverflowPolicy = Field(
        default=OverflowPolicy.error,
        description="Overflow policy for seq2dec accumulation.",
    )

    @field_validator("int_width")
    @classmethod
    def _check_width(cls, value: int) -> int:
        if value not in SUPPORTED_WIDTHS:
            raise ValueError(
                "width must be one of {}".format(
                    ", ".join(str(w) for w in SUPPORTED_WIDTHS)
                )
            )
        return value

    @property
    def max_value(self) -> int:
        return (1 << self.int_width) - 1


_settings: Optional[NumsysSettings] = None
_settings_lock = threading.Lock()


def _load_from_env() -> NumsysSettings:
    raw_width = os.getenv("NUMSYS_INT_WIDTH", str(DEFAULT_INT_WIDTH)).strip()
    raw_overflow = os.getenv("NUMSYS_OVERFLOW", DEFAULT_OVERFLOW).strip().lower()
    try:
        settings = NumsysSettings(int_width=raw_width, overflow=raw_overflow)
    except ValidationError as exc:
        raise ValueError(
            "Invalid numsys configuration "
            "(NUMSYS_INT_WIDTH={!r}, NUMSYS_OVERFLOW={!r}): {}".format(
                raw_width, raw_overflow, exc
            )
        ) from exc
    logger.debug(
        "Loaded numsys settings: width=%d overflow=%s",
        settings.int_width,
        settings.overflow.value,
    )
    return settings


def get_settings() -> NumsysSettings:
    """Return the process-wide settings, loading them on first use.

    RULES:
    - Loads at most once, even under concurrent first access
    - Raises ValueError when the environment holds invalid values
    """
    global _settings
    if _settings is None:
        with _settings_lock:
            if _settings is None:
                _settings = _load_from_env()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next get_settings() re-reads the env."""
    global _settings
    with _settings_lock:
        _settings = None


def validate_width(width: int) -> int:
    """Check a per-call width override, returning it unchanged."""
    if isinstance(width, bool) or not isinstance(width, int):
        raise TypeError("width must be an int, got {}".format(type(width).__name__))
    if width not in SUPPORTED_WIDTHS:
        raise ValueError(
            "width must be one of {}, given {}".format(
                ", ".join(str(w) for w in SUPPORTED_WIDTHS), width
            )
        )
    return width
