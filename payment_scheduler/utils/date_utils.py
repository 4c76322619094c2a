"""Date manipulation utilities"""

from datetime import date, timedelta

SATURDAY = 5
SUNDAY = 6


def add_days(from_date: date, days: int) -> date:
    """Add calendar days to a date or datetime"""
    return from_date + timedelta(days=days)


def defer_to_weekday(value: date) -> date:
    """Move a Saturday or Sunday forward to the following Monday (no holiday calendar)"""
    weekday = value.weekday()
    if weekday == SATURDAY:
        return add_days(value, 2)
    if weekday == SUNDAY:
        return add_days(value, 1)
    return value
