"""Numeric coercion and rounding helpers shared by the engine and the API boundary"""

import math
from typing import Any


def to_number(value: Any) -> float:
    """
    Coerce user input to a finite float.

    Anything that does not parse as a finite number (None, '', 'abc', NaN, inf)
    becomes 0.0 rather than raising.
    """
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round_half_up(value: float, places: int = 0) -> float:
    """
    Round halves upward (2.5 -> 3), unlike the builtin round().

    Works on the scaled float like JavaScript Math.round, so 1.005 stays 1.0
    because 1.005 * 100 is just below 100.5.
    """
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def round_money(value: float) -> float:
    """Round a currency amount to cents"""
    return round_half_up(value, 2)
