"""Datavalida: a self-validating calendar date.

A Date is built from year, month and day. Each component is checked
against the proleptic Gregorian calendar, with the year bounded by the
current system year. Dates know their weekday, order themselves by day
count and measure the distance in days to other dates.

Core Types:
    Date: Validated calendar date (year, month, day)

Format Functions:
    format_long: 'Segunda-feira, 15 de Janeiro de 2024'
    format_year_month_day: '2024/01/15'
    strftime: Format with %Y, %m, %d, %A, %B

Exceptions:
    DatavalidaError: Base exception
    ValidationError: Invalid date component
    InvalidYear: Year outside 1 to the current year
    InvalidMonth: Month outside 1-12
    InvalidDay: Day not in the month

Example:
    >>> from datavalida import Date
    >>> leap_day = Date(2024, 2, 29)
    >>> leap_day.difference_in_days(Date(2024, 3, 1))
    1
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from datavalida.core.date import Date

# Exceptions
from datavalida.errors import (
    DatavalidaError,
    InvalidDay,
    InvalidMonth,
    InvalidYear,
    ValidationError,
)

# Format functions
from datavalida.format import format_long, format_year_month_day, strftime

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    # Exceptions
    "DatavalidaError",
    "ValidationError",
    "InvalidYear",
    "InvalidMonth",
    "InvalidDay",
    # Format functions
    "format_long",
    "format_year_month_day",
    "strftime",
]
