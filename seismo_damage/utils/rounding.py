"""Rounding helpers with half-up semantics (0.5 always rounds toward +infinity)."""

from __future__ import annotations

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round to ndigits decimals, ties toward +infinity.

    Python's round() is banker's rounding (round(91.5) == 92 but round(82.5) == 82);
    every score in this package uses half-up instead.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Half-up rounding to an int."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
