"""Datavalida exception hierarchy.

All Datavalida-specific exceptions inherit from DatavalidaError. Each
validated date component has its own error kind so callers can react to
the component that was rejected.
"""

from __future__ import annotations


class DatavalidaError(Exception):
    """Base exception for all Datavalida errors."""

    pass


class ValidationError(DatavalidaError):
    """Invalid date component.

    Base class of InvalidYear, InvalidMonth and InvalidDay. Catch this
    to handle any rejected component.
    """

    pass


class InvalidYear(ValidationError):
    """Year outside 1 to the current system year.

    Examples:
        - Year 0 or a negative year
        - A year after the current one
    """

    pass


class InvalidMonth(ValidationError):
    """Month outside 1-12."""

    pass


class InvalidDay(ValidationError):
    """Day outside the valid range for its month and year.

    Examples:
        - Day 0
        - Day 31 in April
        - Day 29 in February of a non-leap year
    """

    pass


__all__ = [
    "DatavalidaError",
    "ValidationError",
    "InvalidYear",
    "InvalidMonth",
    "InvalidDay",
]
