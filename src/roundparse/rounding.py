"""Tie-breaking rules for rounding floats to integers."""

from __future__ import annotations

from decimal import ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal
from enum import Enum


class RoundingMode(str, Enum):
    HALF_AWAY_FROM_ZERO = "half_away_from_zero"
    HALF_UP = "half_up"
    HALF_EVEN = "half_even"

    @classmethod
    def coerce(cls, value: RoundingMode | str) -> RoundingMode:
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", "_")
        try:
            return cls(key)
        except ValueError as exc:
            known = ", ".join(mode.value for mode in cls)
            raise ValueError(
                f"Unknown rounding mode {value!r}; expected one of: {known}"
            ) from exc


def round_half(
    number: float,
    rounding: RoundingMode | str = RoundingMode.HALF_AWAY_FROM_ZERO,
) -> int:
    """Round a finite ``number`` to the nearest int, resolving ties by ``rounding``.

    The float is converted to :class:`~decimal.Decimal` exactly and rounded
    with ``to_integral_value``, which ignores the context precision, so large
    values and values just below a tie (``0.49999999999999994``) stay exact.
    """

    mode = RoundingMode.coerce(rounding)
    exact = Decimal(number)
    if mode is RoundingMode.HALF_UP:
        # Ties toward +inf: away from zero above it, toward zero below.
        rule = ROUND_HALF_UP if exact >= 0 else ROUND_HALF_DOWN
    elif mode is RoundingMode.HALF_EVEN:
        rule = ROUND_HALF_EVEN
    else:
        # Decimal's ROUND_HALF_UP resolves ties away from zero.
        rule = ROUND_HALF_UP
    return int(exact.to_integral_value(rounding=rule))


__all__ = ["RoundingMode", "round_half"]
