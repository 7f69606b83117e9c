"""Core date types.

This module provides:
    - Date: Validated calendar date in the proleptic Gregorian calendar
"""

from __future__ import annotations

from datavalida.core.date import Date

__all__: list[str] = [
    "Date",
]
