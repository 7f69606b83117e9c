"""Internal utilities for Datavalida.

This module contains private implementation details:
    - Calendar tables and defaults
    - Calendar calculations (leap years, day counting)
    - Per-component validation rules
    - System clock access

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datavalida._internal.calendar import (
    days_in_month,
    days_since_epoch,
    is_leap_year,
    weekday_index,
)
from datavalida._internal.validation import (
    validate_date,
    validate_day,
    validate_month,
    validate_year,
)

__all__: list[str] = [
    "days_in_month",
    "days_since_epoch",
    "is_leap_year",
    "weekday_index",
    "validate_date",
    "validate_day",
    "validate_month",
    "validate_year",
]
