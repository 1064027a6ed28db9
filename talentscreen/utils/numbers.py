"""
Numeric helpers.
"""
import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up (12.5 -> 13)."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))
