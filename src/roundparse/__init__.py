"""Parse text into rounded integers, falling back to a default."""

from __future__ import annotations

import logging
import os

from .number import parse_rounded, parse_rounded_signed
from .rounding import RoundingMode, round_half
from .settings import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Install a basic root handler for scripts using this package."""

    if level is None:
        level = os.getenv("LOG_LEVEL") or settings.get("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)


__all__ = [
    "RoundingMode",
    "configure_logging",
    "parse_rounded",
    "parse_rounded_signed",
    "round_half",
    "settings",
]
