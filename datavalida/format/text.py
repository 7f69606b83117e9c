"""Text formatting for dates.

This module turns a Date into text. It supports a small set of
strftime-style directives plus the two fixed layouts used by Date
itself.

Supported Directives:
    %Y - 4-digit year (e.g., 2024)
    %m - 2-digit month (01-12)
    %d - 2-digit day (01-31)
    %A - Weekday name (Domingo-Sábado)
    %B - Month name (Janeiro-Dezembro)
    %% - Literal %

Functions:
    format_long: Format as 'Segunda-feira, 15 de Janeiro de 2024'.
    format_year_month_day: Format as '2024/01/15'.
    strftime: Format a date using a strftime-style format string.

Examples:
    >>> from datavalida import Date
    >>> from datavalida.format import strftime

    >>> strftime(Date(2024, 1, 15), "%d/%m/%Y")
    '15/01/2024'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datavalida.core.date import Date

_SUPPORTED = "%Y, %m, %d, %A, %B, %%"


def format_long(value: Date) -> str:
    """Return the long form of a date.

    Examples:
        >>> format_long(Date(2024, 1, 15))
        'Segunda-feira, 15 de Janeiro de 2024'
    """
    return f"{value.weekday()}, {value.day} de {value.month_name} de {value.year}"


def format_year_month_day(value: Date) -> str:
    """Return the date as YYYY/MM/DD.

    Examples:
        >>> format_year_month_day(Date(2024, 1, 5))
        '2024/01/05'
    """
    return f"{value.year:04d}/{value.month:02d}/{value.day:02d}"


def strftime(value: Date, fmt: str) -> str:
    """Format a date using strftime-style format string.

    Args:
        value: The Date to format.
        fmt: Format string with %-directives.

    Returns:
        Formatted string.

    Raises:
        ValueError: If format contains unsupported directives.
        TypeError: If value is not a Date.

    Examples:
        >>> strftime(Date(2024, 1, 15), "%Y-%m-%d")
        '2024-01-15'

        >>> strftime(Date(2024, 1, 15), "%A, %d de %B")
        'Segunda-feira, 15 de Janeiro'
    """
    from datavalida.core.date import Date

    if not isinstance(value, Date):
        raise TypeError(f"expected Date, got {type(value).__name__}")

    result = []
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            directive = fmt[i : i + 2]
            result.append(_format_directive(value, directive))
            i += 2
        else:
            result.append(fmt[i])
            i += 1

    return "".join(result)


def _format_directive(value: Date, directive: str) -> str:
    """Format a single directive.

    Raises:
        ValueError: If directive is unsupported.
    """
    if directive == "%%":
        return "%"
    elif directive == "%Y":
        return f"{value.year:04d}"
    elif directive == "%m":
        return f"{value.month:02d}"
    elif directive == "%d":
        return f"{value.day:02d}"
    elif directive == "%A":
        return value.weekday()
    elif directive == "%B":
        return value.month_name
    else:
        raise ValueError(
            f"unsupported strftime directive: {directive}. Supported: {_SUPPORTED}"
        )


__all__ = [
    "format_long",
    "format_year_month_day",
    "strftime",
]
