"""Validation utilities for Datavalida.

One rule per date component. Each rule raises its own error kind so that
callers can tell which component was rejected. The day rule needs an
already accepted year and month, so the rules run in the order year,
month, day.

This module is not part of the public API.
"""

from __future__ import annotations

from datavalida._internal.calendar import days_in_month
from datavalida._internal.constants import MIN_YEAR, MONTHS_PER_YEAR
from datavalida.errors import InvalidDay, InvalidMonth, InvalidYear


def validate_year(year: int, max_year: int) -> None:
    """Validate that a year is between MIN_YEAR and ``max_year``.

    Args:
        year: The year to validate.
        max_year: The latest accepted year, normally the current year.

    Raises:
        InvalidYear: If year is outside MIN_YEAR to max_year.
    """
    if year < MIN_YEAR or year > max_year:
        raise InvalidYear(
            f"year must be between {MIN_YEAR} and {max_year}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Args:
        month: The month to validate.

    Raises:
        InvalidMonth: If month is outside 1-12.
    """
    if month < 1 or month > MONTHS_PER_YEAR:
        raise InvalidMonth(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        InvalidDay: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidDay(
            f"day must be between 1 and {max_day} for {year:04d}-{month:02d}, got {day}"
        )


def validate_date(year: int, month: int, day: int, max_year: int) -> None:
    """Validate all three components, failing on the first bad one.

    Raises:
        InvalidYear: If the year is rejected.
        InvalidMonth: If the month is rejected.
        InvalidDay: If the day is rejected.
    """
    validate_year(year, max_year)
    validate_month(month)
    validate_day(year, month, day)


__all__ = [
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_date",
]
