"""Monetary rounding."""

import math


def round_money(value: float) -> float:
    """Round to cents, halves up.

    Operates on the float's binary value, so 2.675 (stored just below the
    half) rounds to 2.67 while a configured 55.555 lands on 55.56.
    """
    return math.floor(value * 100 + 0.5) / 100
