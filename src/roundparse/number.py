"""Helpers for parsing text into rounded integers with a fallback default."""

from __future__ import annotations

import logging
import math
import re

from roundparse.rounding import RoundingMode, round_half
from roundparse.settings import settings

logger = logging.getLogger(__name__)

# ASCII decimal notation only: no hex, underscores, nan/inf or non-Latin digits.
_DECIMAL_LITERAL = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?",
    re.ASCII,
)
# Control characters and space, U+0000 through U+0020.
_TRIM_CHARS = "".join(chr(code) for code in range(0x21))


def _parse_float(value: object) -> float | None:
    text = value if isinstance(value, str) else str(value)
    if settings.get("NUMBER.strip_whitespace", True):
        text = text.strip(_TRIM_CHARS)
    if not _DECIMAL_LITERAL.fullmatch(text):
        logger.debug("Not a decimal literal: %r", text)
        return None
    try:
        parsed = float(text)
    except (TypeError, ValueError, OverflowError):
        logger.debug("Float conversion failed: %r", text)
        return None
    if not math.isfinite(parsed):
        logger.debug("Value is not finite: %r", text)
        return None
    return parsed


def _resolve_rounding(rounding: RoundingMode | str | None) -> RoundingMode:
    if rounding is None:
        rounding = settings.get("NUMBER.rounding", RoundingMode.HALF_AWAY_FROM_ZERO)
    return RoundingMode.coerce(rounding)


def parse_rounded_signed(
    value: object | None,
    default: int | None = None,
    *,
    rounding: RoundingMode | str | None = None,
) -> int | None:
    """Return ``value`` read as a decimal and rounded to an int, or ``default``.

    ``"-3.9"`` gives ``-4``; ``"abc"``, ``""`` and ``"1R7"`` give ``default``.
    The sign of the result is unrestricted.
    """

    if value is None:
        logger.debug("No value given")
        return default
    parsed = _parse_float(value)
    if parsed is None:
        return default
    return round_half(parsed, _resolve_rounding(rounding))


def parse_rounded(
    value: object | None,
    default: int | None = None,
    *,
    rounding: RoundingMode | str | None = None,
) -> int | None:
    """Like :func:`parse_rounded_signed` but negative results become ``default``.

    ``"2.7"`` gives ``3``; ``"-3.9"`` gives ``default`` since ``-4 < 0``.
    """

    rounded = parse_rounded_signed(value, None, rounding=rounding)
    if rounded is None:
        return default
    if rounded < 0:
        logger.debug("Rounded value %d is negative, using default %r", rounded, default)
        return default
    return rounded


__all__ = [
    "RoundingMode",
    "round_half",
    "parse_rounded",
    "parse_rounded_signed",
]
