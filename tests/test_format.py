"""Tests for formatting module."""

import pytest

from datavalida import Date
from datavalida.format import format_long, format_year_month_day, strftime


class TestFormatLong:
    """Tests for format_long function."""

    def test_format_long(self):
        """Format with weekday and month names."""
        assert format_long(Date(2024, 1, 15)) == "Segunda-feira, 15 de Janeiro de 2024"

    def test_format_long_single_digit_day(self):
        """The day is not zero padded."""
        assert format_long(Date(2000, 1, 1)) == "Sábado, 1 de Janeiro de 2000"

    def test_format_long_matches_str(self):
        """str(Date) uses the long form."""
        d = Date(2024, 3, 1)
        assert str(d) == format_long(d) == "Sexta-feira, 1 de Março de 2024"


class TestFormatYearMonthDay:
    """Tests for format_year_month_day function."""

    def test_zero_padding(self):
        """Pad year to four digits, month and day to two."""
        assert format_year_month_day(Date(1, 2, 3)) == "0001/02/03"

    def test_full_width(self):
        """Format a date with no padding needed."""
        assert format_year_month_day(Date(2024, 12, 31)) == "2024/12/31"


class TestStrftime:
    """Tests for strftime function."""

    def test_numeric_directives(self):
        """Format %Y, %m, %d."""
        assert strftime(Date(2024, 1, 5), "%Y-%m-%d") == "2024-01-05"
        assert strftime(Date(2024, 1, 5), "%d/%m/%Y") == "05/01/2024"

    def test_name_directives(self):
        """Format %A and %B."""
        assert strftime(Date(2024, 1, 21), "%A, %d de %B") == "Domingo, 21 de Janeiro"

    def test_literal_percent(self):
        """Format %% as a literal percent sign."""
        assert strftime(Date(2024, 1, 5), "100%% %Y") == "100% 2024"

    def test_trailing_percent(self):
        """A lone trailing percent is kept."""
        assert strftime(Date(2024, 1, 5), "%Y%") == "2024%"

    def test_plain_text(self):
        """Text without directives is unchanged."""
        assert strftime(Date(2024, 1, 5), "hoje") == "hoje"

    def test_unsupported_directive(self):
        """Unsupported directives raise ValueError."""
        with pytest.raises(ValueError, match="unsupported strftime directive: %H"):
            strftime(Date(2024, 1, 5), "%H:%M")

    def test_non_date(self):
        """Non-Date values raise TypeError."""
        with pytest.raises(TypeError, match="expected Date"):
            strftime("2024-01-05", "%Y")
