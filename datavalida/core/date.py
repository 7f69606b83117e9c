"""Date class representing a validated calendar date.

This module provides the Date class for representing calendar dates in
the proleptic Gregorian calendar, from 0001-01-01 up to the current
system year.
"""

from __future__ import annotations

from typing import overload

from datavalida._internal import clock
from datavalida._internal.calendar import (
    days_in_month,
    days_since_epoch,
    is_leap_year,
    weekday_index,
)
from datavalida._internal.constants import (
    DEFAULT_DAY,
    DEFAULT_MONTH,
    DEFAULT_YEAR,
    MONTH_NAMES,
    WEEKDAY_NAMES,
)
from datavalida._internal.validation import (
    validate_date,
    validate_day,
    validate_month,
    validate_year,
)


class Date:
    """A validated calendar date in the proleptic Gregorian calendar.

    Date holds year, month and day components. Every component is checked
    when the date is built: the year must be between 1 and the current
    system year, the month between 1 and 12, and the day must exist in
    that month (February has 29 days in leap years).

    Dates are ordered by their day count, the number of days from
    0001-01-01 (day 1) up to and including the date.

    Attributes:
        year: The year (1 to the current year).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> d.year
        2024
        >>> d.weekday()
        'Segunda-feira'

        >>> Date(2024, 2, 29)  # Valid leap year date
        Date(2024, 2, 29)

        >>> Date(2023, 2, 29)
        Traceback (most recent call last):
        ...
        InvalidDay: day must be between 1 and 28 for 2023-02, got 29
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(
        self,
        year: int = DEFAULT_YEAR,
        month: int = DEFAULT_MONTH,
        day: int = DEFAULT_DAY,
    ) -> None:
        """Create a Date from year, month, and day.

        Without arguments the date is 0001-01-01.

        Args:
            year: The year (1 to the current year).
            month: The month (1-12).
            day: The day of the month.

        Raises:
            InvalidYear: If the year is out of range.
            InvalidMonth: If the month is out of range.
            InvalidDay: If the day does not exist in that month.
        """
        self.set_date(year, month, day)

    @classmethod
    def parse(cls, year: int, month: int, day: int) -> Date:
        """Create a Date from components, validating each one.

        Equivalent to calling the constructor.

        Raises:
            InvalidYear: If the year is out of range.
            InvalidMonth: If the month is out of range.
            InvalidDay: If the day does not exist in that month.

        Examples:
            >>> Date.parse(2024, 1, 15)
            Date(2024, 1, 15)
        """
        return cls(year, month, day)

    @classmethod
    def _from_trusted_components(cls, year: int, month: int, day: int) -> Date:
        """Create a Date without validating the components.

        Only for components already known to form a valid date, such as
        the fields of another Date or the system clock.
        """
        date = cls.__new__(cls)
        date._year = year
        date._month = month
        date._day = day
        return date

    @classmethod
    def today(cls) -> Date:
        """Return today's date from the system clock.

        The clock always gives a valid date, so it is not validated. This
        also keeps year validation, which asks for the current year, from
        recursing back into validation.

        Examples:
            >>> d = Date.today()  # Returns current date
            >>> d.year >= 2024
            True
        """
        year, month, day = clock.system_today()
        return cls._from_trusted_components(year, month, day)

    @staticmethod
    def is_leap_year(year: int) -> bool:
        """Return True if ``year`` is a leap year.

        Examples:
            >>> Date.is_leap_year(2000)
            True
            >>> Date.is_leap_year(1900)
            False
        """
        return is_leap_year(year)

    def copy(self) -> Date:
        """Return a new Date with the same components.

        The copy is not validated again.
        """
        return Date._from_trusted_components(self._year, self._month, self._day)

    def __copy__(self) -> Date:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Date:
        return self.copy()

    def set_date(self, year: int, month: int, day: int) -> None:
        """Replace all three components.

        The components are validated in the order year, month, day, and
        the first rejected one raises. The date is left unchanged when any
        component is rejected.

        Raises:
            InvalidYear: If the year is out of range.
            InvalidMonth: If the month is out of range.
            InvalidDay: If the day does not exist in that month.
        """
        validate_date(year, month, day, clock.current_year())
        self._year = year
        self._month = month
        self._day = day

    @property
    def year(self) -> int:
        """Return the year component."""
        return self._year

    @year.setter
    def year(self, year: int) -> None:
        """Set the year after checking it against the current year.

        Only the year rule is checked; the day is not re-checked against
        the new year.

        Raises:
            InvalidYear: If the year is out of range.
        """
        validate_year(year, clock.current_year())
        self._year = year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return self._month

    @month.setter
    def month(self, month: int) -> None:
        """Set the month.

        Raises:
            InvalidMonth: If the month is outside 1-12.
        """
        validate_month(month)
        self._month = month

    @property
    def day(self) -> int:
        """Return the day of the month."""
        return self._day

    @day.setter
    def day(self, day: int) -> None:
        """Set the day, checked against the current year and month.

        Set the year and month first when changing all three.

        Raises:
            InvalidDay: If the day does not exist in the current month.
        """
        validate_day(self._year, self._month, day)
        self._day = day

    @property
    def leap_year(self) -> bool:
        """Return True if this date is in a leap year.

        Examples:
            >>> Date(2024, 1, 1).leap_year
            True
            >>> Date(2023, 1, 1).leap_year
            False
        """
        return is_leap_year(self._year)

    @property
    def days_in_month(self) -> int:
        """Return the number of days in this date's month."""
        return days_in_month(self._year, self._month)

    @property
    def month_name(self) -> str:
        """Return the month name.

        Examples:
            >>> Date(2024, 3, 1).month_name
            'Março'
        """
        return MONTH_NAMES[self._month]

    def days_since_epoch(self) -> int:
        """Return the number of days from 0001-01-01 up to this date.

        0001-01-01 itself is day 1.

        Examples:
            >>> Date(1, 1, 1).days_since_epoch()
            1
            >>> Date(2024, 1, 15).days_since_epoch()
            738900
        """
        return days_since_epoch(self._year, self._month, self._day)

    def weekday_index(self) -> int:
        """Return the day of the week (0=Sunday, 6=Saturday)."""
        return weekday_index(self._year, self._month, self._day)

    def weekday(self) -> str:
        """Return the name of the day of the week.

        Examples:
            >>> Date(2024, 1, 15).weekday()
            'Segunda-feira'
        """
        return WEEKDAY_NAMES[self.weekday_index()]

    def is_greater_than(self, other: Date) -> bool:
        """Return True if this date is later than ``other``.

        Examples:
            >>> Date(2024, 1, 16).is_greater_than(Date(2024, 1, 15))
            True
            >>> Date(2024, 1, 15).is_greater_than(Date(2024, 1, 15))
            False
        """
        return self.days_since_epoch() > other.days_since_epoch()

    def compare_to(self, other: Date) -> int:
        """Compare this date with another.

        Returns:
            -1 if ``other`` is later, 1 if ``other`` is earlier, 0 if both
            fall on the same day.

        Examples:
            >>> Date(2024, 1, 15).compare_to(Date(2024, 1, 16))
            -1
        """
        if other.is_greater_than(self):
            return -1
        if self.is_greater_than(other):
            return 1
        return 0

    def equals(self, other: object) -> bool:
        """Return True if ``other`` is a Date with the same components."""
        if self is other:
            return True
        if not isinstance(other, Date):
            return False
        return (
            self._year == other._year
            and self._month == other._month
            and self._day == other._day
        )

    @overload
    def difference_in_days(self, other: Date) -> int: ...

    @overload
    def difference_in_days(self, other: int, month: int, day: int) -> int: ...

    def difference_in_days(
        self,
        other: Date | int,
        month: int | None = None,
        day: int | None = None,
    ) -> int:
        """Return the number of days between this date and another.

        The other date is either a Date or its year, month and day. Raw
        components are validated first.

        Returns:
            The absolute difference in days.

        Raises:
            InvalidYear: If raw components have an invalid year.
            InvalidMonth: If raw components have an invalid month.
            InvalidDay: If raw components have an invalid day.
            TypeError: If the arguments match neither form.

        Examples:
            >>> Date(2024, 2, 29).difference_in_days(Date(2024, 3, 1))
            1
            >>> Date(2024, 3, 1).difference_in_days(2024, 2, 29)
            1
        """
        if isinstance(other, Date):
            if month is not None or day is not None:
                raise TypeError(
                    "month and day are only accepted with a year, not a Date"
                )
            target = other
        elif month is None or day is None:
            raise TypeError("difference_in_days needs a Date or year, month and day")
        else:
            target = Date.parse(other, month, day)

        return abs(self.days_since_epoch() - target.days_since_epoch())

    def to_year_month_day_string(self) -> str:
        """Return the date as YYYY/MM/DD.

        Examples:
            >>> Date(2024, 1, 5).to_year_month_day_string()
            '2024/01/05'
        """
        from datavalida.format.text import format_year_month_day

        return format_year_month_day(self)

    def __eq__(self, other: object) -> bool:
        """Check component equality with another date.

        Examples:
            >>> Date(2024, 1, 15) == Date(2024, 1, 15)
            True
            >>> Date(2024, 1, 15) == Date(2024, 1, 16)
            False
        """
        if not isinstance(other, Date):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        """Check inequality with another date."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another.

        Examples:
            >>> Date(2024, 1, 15) < Date(2024, 1, 16)
            True
        """
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        """Check if this date is earlier than or equal to another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        """Check if this date is later than another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        """Check if this date is later than or equal to another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        """Return a hash based on the components."""
        return hash((self._year, self._month, self._day))

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'Date(2024, 1, 15)'.
        """
        return f"Date({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        """Return the long form, e.g. 'Segunda-feira, 15 de Janeiro de 2024'."""
        from datavalida.format.text import format_long

        return format_long(self)

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


__all__ = ["Date"]
