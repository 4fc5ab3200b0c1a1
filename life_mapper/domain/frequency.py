"""Cadence normalization - recurring amounts expressed per calendar month"""

from datetime import date
from typing import Dict, List

from life_mapper.domain.models import Frequency
from life_mapper.utils.date_utils import add_days, add_months

# Multiplier turning one occurrence into its average monthly value
MONTHLY_FACTORS: Dict[Frequency, float] = {
    Frequency.WEEKLY: 52 / 12,
    Frequency.FORTNIGHTLY: 26 / 12,
    Frequency.MONTHLY: 1.0,
    Frequency.QUARTERLY: 1 / 3,
    Frequency.YEARLY: 1 / 12,
}

STEP_DAYS: Dict[Frequency, int] = {
    Frequency.WEEKLY: 7,
    Frequency.FORTNIGHTLY: 14,
}

STEP_MONTHS: Dict[Frequency, int] = {
    Frequency.MONTHLY: 1,
    Frequency.QUARTERLY: 3,
    Frequency.YEARLY: 12,
}


def monthly_equivalent(amount: float, frequency: Frequency) -> float:
    """
    Convert a recurring amount into its monthly-equivalent figure.

    No rounding happens here; amounts are rounded only for display.
    Unknown cadences never reach this function, they are rejected by the
    request schemas.
    """
    return amount * MONTHLY_FACTORS[Frequency(frequency)]


def advance(from_date: date, frequency: Frequency, steps: int = 1) -> date:
    """Move a date forward by whole cadence intervals"""
    frequency = Frequency(frequency)
    if frequency in STEP_DAYS:
        return add_days(from_date, STEP_DAYS[frequency] * steps)
    return add_months(from_date, STEP_MONTHS[frequency] * steps)


def occurrences(start: date, frequency: Frequency, count: int) -> List[date]:
    """First `count` occurrence dates starting at start (inclusive)"""
    return [advance(start, frequency, i) for i in range(max(0, count))]
