"""Date formatting.

Functions:
    format_long: Format as 'Segunda-feira, 15 de Janeiro de 2024'.
    format_year_month_day: Format as 'YYYY/MM/DD'.
    strftime: Format a date using a strftime pattern.
"""

from __future__ import annotations

from datavalida.format.text import format_long, format_year_month_day, strftime

__all__: list[str] = [
    "format_long",
    "format_year_month_day",
    "strftime",
]
