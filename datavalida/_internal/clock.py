"""System clock access for Datavalida.

The only place the package reads the host's current date. Tests replace
``system_today`` to pin the date.

This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime
import logging

logger = logging.getLogger(__name__)


def system_today() -> tuple[int, int, int]:
    """Return the host's local date as (year, month, day).

    The month is 1-based.
    """
    now = _datetime.date.today()
    logger.debug("System clock read: %04d-%02d-%02d", now.year, now.month, now.day)
    return (now.year, now.month, now.day)


def current_year() -> int:
    """Return the year of the host's local date."""
    year, _, _ = system_today()
    return year


__all__ = [
    "system_today",
    "current_year",
]
