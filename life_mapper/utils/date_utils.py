"""Date manipulation utilities"""

import calendar
from datetime import date, timedelta


def add_days(from_date: date, days: int) -> date:
    return from_date + timedelta(days=days)


def add_months(from_date: date, months: int) -> date:
    """
    Add calendar months to a date.

    The day is clamped to the last day of the target month, so
    Jan 31 + 1 month -> Feb 28 (or Feb 29 in a leap year).
    """
    month_index = from_date.month - 1 + months
    year = from_date.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(from_date.day, last_day))


def month_key(day: date) -> str:
    """Year-month key used for aggregation and snapshots, e.g. '2026-10'"""
    return f"{day.year:04d}-{day.month:02d}"


def parse_month_key(key: str) -> date:
    """Parse 'YYYY-MM' into the first day of that month"""
    year, month = key.split("-")
    return date(int(year), int(month), 1)


def month_name(key: str) -> str:
    """Human label for a month key, e.g. '2026-10' -> 'October 2026'"""
    first = parse_month_key(key)
    return f"{calendar.month_name[first.month]} {first.year}"
