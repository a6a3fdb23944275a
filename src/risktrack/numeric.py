"""Rounding helpers shared by the models and the scoring engine."""

from __future__ import annotations

import math


def round_half_up(value: float) -> float:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2).

    Non-finite values are returned unchanged so NaN propagates instead of raising.
    """
    if not math.isfinite(value):
        return value
    return float(math.floor(value + 0.5))


def round_to(value: float, places: int) -> float:
    """Half-up rounding to a fixed number of decimal places."""
    factor = 10**places
    return round_half_up(value * factor) / factor
