"""Calendar utilities for Datavalida.

This module provides internal functions for calendar calculations in the
proleptic Gregorian calendar: leap years, month lengths and the day count
used to order dates.

Day count 1 = 0001-01-01 (January 1, year 1).

This module is not part of the public API.
"""

from __future__ import annotations

from datavalida._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_WEEK,
    MONTHS_PER_YEAR,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > MONTHS_PER_YEAR:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH: tuple[int, ...] = tuple(
    sum(DAYS_IN_MONTH[1:month]) for month in range(MONTHS_PER_YEAR + 1)
)


def _days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month.

    Args:
        year: The year (for leap year calculation).
        month: The month (1-12).

    Returns:
        Number of days before the month in that year.
    """
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def days_since_epoch(year: int, month: int, day: int) -> int:
    """Return the day count of a date, counting 0001-01-01 as day 1.

    The count is the sum of the lengths of all years before ``year``, the
    lengths of the months before ``month`` (with February's extra day in
    leap years) and ``day`` itself.

    Args:
        year: The year (1 or later).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The day count.

    Examples:
        >>> days_since_epoch(1, 1, 1)
        1
        >>> days_since_epoch(1, 12, 31)
        365
        >>> days_since_epoch(2024, 1, 15)
        738900
    """
    # Full years before `year`; equal to summing days_in_year(1..year-1)
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400

    return days_before_year + _days_before_month(year, month) + day


def weekday_index(year: int, month: int, day: int) -> int:
    """Return the day of the week as an index into WEEKDAY_NAMES.

    Returns:
        Day of week (0=Sunday, 6=Saturday).

    Examples:
        >>> weekday_index(1, 1, 1)  # Monday
        1
        >>> weekday_index(2024, 1, 21)  # Sunday
        0
    """
    return days_since_epoch(year, month, day) % DAYS_PER_WEEK


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_since_epoch",
    "weekday_index",
]
