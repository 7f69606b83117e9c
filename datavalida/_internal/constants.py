"""Internal constants for Datavalida.

Calendar tables and default values shared by every Date. All tables are
tuples and are never mutated. This module is not part of the public API.
"""

from __future__ import annotations

# Year limits. The upper limit is the current system year, read at
# validation time (see datavalida._internal.clock).
MIN_YEAR: int = 1

# Default date: 0001-01-01
DEFAULT_YEAR: int = 1
DEFAULT_MONTH: int = 1
DEFAULT_DAY: int = 1

MONTHS_PER_YEAR: int = 12
DAYS_PER_WEEK: int = 7

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

MONTH_NAMES: tuple[str, ...] = (
    "Inválido",  # Placeholder for 1-indexed access
    "Janeiro",
    "Fevereiro",
    "Março",
    "Abril",
    "Maio",
    "Junho",
    "Julho",
    "Agosto",
    "Setembro",
    "Outubro",
    "Novembro",
    "Dezembro",
)

# Indexed by day count mod 7. Day 1 (0001-01-01) is a Monday.
WEEKDAY_NAMES: tuple[str, ...] = (
    "Domingo",
    "Segunda-feira",
    "Terça-feira",
    "Quarta-feira",
    "Quinta-feira",
    "Sexta-feira",
    "Sábado",
)


__all__ = [
    "MIN_YEAR",
    "DEFAULT_YEAR",
    "DEFAULT_MONTH",
    "DEFAULT_DAY",
    "MONTHS_PER_YEAR",
    "DAYS_PER_WEEK",
    "DAYS_IN_MONTH",
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
]
