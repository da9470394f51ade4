"""Tests for the Date class."""

from __future__ import annotations

import copy

import pytest

from calclock.core.date import Date
from calclock.errors import InvalidFormatError, RangeError
from calclock.format.registry import FormatterRegistry, DATE
from calclock.units.timezone import TimeZone


class TestDateConstruction:
    """Tests for Date construction and validation."""

    def test_basic_construction(self) -> None:
        """Test basic date construction."""
        d = Date(15, 1, 2024)
        assert d.year == 2024
        assert d.month == 1
        assert d.day_of_the_month == 15

    def test_first_supported_day(self) -> None:
        """Test that 1900-01-01 is day 0."""
        d = Date(1, 1, 1900)
        assert d.day_count == 0

    def test_last_supported_day(self) -> None:
        """Test construction of 9999-12-31."""
        d = Date(31, 12, 9999)
        assert d.year == 9999
        assert d.month == 12
        assert d.day_of_the_month == 31

    def test_leap_day(self) -> None:
        """Test construction of Feb 29 in a leap year."""
        d = Date(29, 2, 2024)
        assert (d.year, d.month, d.day_of_the_month) == (2024, 2, 29)

    def test_feb_29_non_leap_year(self) -> None:
        """Test that Feb 29 fails in a non-leap year."""
        with pytest.raises(RangeError, match="day must be between 1 and 28"):
            Date(29, 2, 2023)

    def test_feb_29_1900(self) -> None:
        """Test that 1900 has no leap day."""
        with pytest.raises(RangeError, match="day must be between 1 and 28"):
            Date(29, 2, 1900)

    def test_day_31_in_april(self) -> None:
        """Test that April has 30 days."""
        with pytest.raises(RangeError, match="day must be between 1 and 30"):
            Date(31, 4, 2024)

    def test_day_zero(self) -> None:
        """Test that day 0 raises RangeError."""
        with pytest.raises(RangeError, match="day must be between 1 and"):
            Date(0, 1, 2024)

    def test_month_zero(self) -> None:
        """Test that month 0 raises RangeError."""
        with pytest.raises(RangeError, match="month must be between 1 and 12"):
            Date(1, 0, 2024)

    def test_month_13(self) -> None:
        """Test that month 13 raises RangeError."""
        with pytest.raises(RangeError, match="month must be between 1 and 12"):
            Date(1, 13, 2024)

    def test_year_before_1900(self) -> None:
        """Test that years before 1900 are rejected."""
        with pytest.raises(RangeError, match="year must be between 1900 and 9999"):
            Date(31, 12, 1899)

    def test_year_after_9999(self) -> None:
        """Test that years after 9999 are rejected."""
        with pytest.raises(RangeError, match="year must be between 1900 and 9999"):
            Date(1, 1, 10000)


class TestDateFromDayCount:
    """Tests for Date.from_day_count."""

    def test_epoch(self) -> None:
        """Test day 0."""
        assert Date.from_day_count(0) == Date(1, 1, 1900)

    def test_unix_epoch(self) -> None:
        """Test the day of the Unix epoch."""
        assert Date.from_day_count(25567) == Date(1, 1, 1970)

    def test_roundtrip(self) -> None:
        """Test that the day-count reproduces the date."""
        d = Date(29, 2, 2024)
        assert Date.from_day_count(d.day_count) == d

    def test_negative_count_rejected(self) -> None:
        """Test that a count before 1900 raises RangeError."""
        with pytest.raises(RangeError):
            Date.from_day_count(-1)


class TestDateNow:
    """Tests for reading the current date."""

    def test_now_returns_date(self) -> None:
        """Test that now() returns a supported date."""
        d = Date.now()
        assert isinstance(d, Date)
        assert 1900 <= d.year <= 9999

    def test_now_offsets_within_one_day(self) -> None:
        """Test that the date at two offsets differs by at most one day."""
        east = Date.now(TimeZone.EAST_12)
        west = Date.now(TimeZone.WEST_12)
        assert 0 <= east.day_count - west.day_count <= 1

    def test_local_date(self) -> None:
        """Test that local_date() returns a date."""
        assert isinstance(Date.local_date(), Date)


class TestDateParsing:
    """Tests for Date.from_string."""

    def test_hyphenated(self) -> None:
        """Test the YYYY-MM-DD layout."""
        assert Date.from_string("2024-02-29") == Date(29, 2, 2024)

    def test_compact(self) -> None:
        """Test the YYYYMMDD layout."""
        assert Date.from_string("20240229") == Date(29, 2, 2024)

    def test_layouts_agree(self) -> None:
        """Test that both layouts name the same day."""
        assert Date.from_string("2024-02-29") == Date.from_string("20240229")

    def test_wrong_length(self) -> None:
        """Test that a 9-character string is rejected."""
        with pytest.raises(InvalidFormatError, match="8 .* or 10"):
            Date.from_string("2024-0229")

    def test_empty(self) -> None:
        """Test that an empty string is rejected."""
        with pytest.raises(InvalidFormatError):
            Date.from_string("")

    def test_letter_in_digits(self) -> None:
        """Test that a non-digit is rejected."""
        with pytest.raises(InvalidFormatError, match="digits for month"):
            Date.from_string("2024-0a-01")

    def test_wrong_separator(self) -> None:
        """Test that a slash where a hyphen belongs is rejected."""
        with pytest.raises(InvalidFormatError, match="expected '-' at position 4"):
            Date.from_string("2024/02/29")

    def test_invalid_month(self) -> None:
        """Test that a well-formed string with month 13 is a RangeError."""
        with pytest.raises(RangeError, match="month must be between 1 and 12"):
            Date.from_string("2024-13-01")

    def test_invalid_day(self) -> None:
        """Test that Feb 30 is a RangeError."""
        with pytest.raises(RangeError):
            Date.from_string("20240230")

    def test_year_before_1900(self) -> None:
        """Test that a parsed year before 1900 is a RangeError."""
        with pytest.raises(RangeError):
            Date.from_string("1899-12-31")


class TestDateTryFromString:
    """Tests for the Result-returning parser."""

    def test_success(self) -> None:
        """Test a successful parse."""
        result = Date.try_from_string("2024-02-29")
        assert result.ok
        assert result.value == Date(29, 2, 2024)
        assert result.kind is None

    def test_range_error(self) -> None:
        """Test that an out-of-range month reports RangeError."""
        result = Date.try_from_string("2024-13-01")
        assert not result.ok
        assert result.kind == "RangeError"
        assert "month" in result.detail

    def test_invalid_format(self) -> None:
        """Test that a malformed string reports InvalidFormat."""
        result = Date.try_from_string("2024-1-1")
        assert result.kind == "InvalidFormat"


class TestDateProperties:
    """Tests for derived Date properties."""

    def test_day_of_the_week_epoch(self) -> None:
        """Test that 1900-01-01 was a Monday."""
        assert Date(1, 1, 1900).day_of_the_week == 0

    def test_day_of_the_week_sunday(self) -> None:
        """Test that 2026-10-18 is a Sunday."""
        assert Date(18, 10, 2026).day_of_the_week == 6

    def test_day_of_the_week_leap_day(self) -> None:
        """Test that 2024-02-29 was a Thursday."""
        assert Date(29, 2, 2024).day_of_the_week == 3

    def test_day_of_year(self) -> None:
        """Test day of year across the leap day."""
        assert Date(1, 1, 2024).day_of_year == 1
        assert Date(1, 3, 2024).day_of_year == 61
        assert Date(1, 3, 2023).day_of_year == 60
        assert Date(31, 12, 2024).day_of_year == 366

    def test_is_weekend(self) -> None:
        """Test that Saturday and Sunday are weekend days."""
        assert Date(17, 10, 2026).is_weekend
        assert Date(18, 10, 2026).is_weekend

    def test_is_not_weekend(self) -> None:
        """Test that Monday through Friday are not weekend days."""
        for day in range(12, 17):
            assert not Date(day, 10, 2026).is_weekend

    def test_is_leap_year(self) -> None:
        """Test the leap year flag."""
        assert Date(1, 6, 2024).is_leap_year
        assert not Date(1, 6, 2023).is_leap_year
        assert not Date(1, 6, 1900).is_leap_year
        assert Date(1, 6, 2000).is_leap_year

    def test_components(self) -> None:
        """Test that components() returns (year, month, day)."""
        assert Date(5, 3, 2024).components() == (2024, 3, 5)


class TestDateDayArithmetic:
    """Tests for adding and subtracting days."""

    def test_add_days_mutates(self) -> None:
        """Test that add_days changes the instance and returns None."""
        d = Date(28, 2, 2024)
        assert d.add_days(1) is None
        assert d == Date(29, 2, 2024)

    def test_subtract_across_leap_day(self) -> None:
        """Test that Mar 1 minus one day is Feb 29 in a leap year."""
        d = Date(1, 3, 2024)
        d.subtract_days(1)
        assert d == Date(29, 2, 2024)

    def test_subtract_across_non_leap(self) -> None:
        """Test that Mar 1 minus one day is Feb 28 in a common year."""
        d = Date(1, 3, 2023)
        d.subtract_days(1)
        assert d == Date(28, 2, 2023)

    def test_add_year_of_days(self) -> None:
        """Test adding 366 days across a leap year."""
        d = Date(1, 1, 2024)
        d.add_days(366)
        assert d == Date(1, 1, 2025)

    def test_zero_is_noop(self) -> None:
        """Test that zero days changes nothing."""
        d = Date(15, 1, 2024)
        d.add_days(0)
        d.subtract_days(0)
        assert d == Date(15, 1, 2024)

    def test_negative_add_subtracts(self) -> None:
        """Test that a negative amount moves the other way."""
        d = Date(15, 1, 2024)
        d.add_days(-15)
        assert d == Date(31, 12, 2023)
        d.subtract_days(-1)
        assert d == Date(1, 1, 2024)

    def test_below_1900_does_not_fail(self) -> None:
        """Test that arithmetic may move before 1900."""
        d = Date(1, 1, 1900)
        d.subtract_days(1)
        assert d.day_count == -1
        assert d.components() == (1899, 12, 31)


class TestDateMonthArithmetic:
    """Tests for adding and subtracting months."""

    def test_add_one_month(self) -> None:
        """Test a plain month step."""
        d = Date(15, 1, 2024)
        d.add_months(1)
        assert d == Date(15, 2, 2024)

    def test_clamp_to_leap_february(self) -> None:
        """Test that Jan 31 plus one month lands on Feb 29 in 2024."""
        d = Date(31, 1, 2024)
        d.add_months(1)
        assert d == Date(29, 2, 2024)

    def test_clamp_to_common_february(self) -> None:
        """Test that Jan 31 plus one month lands on Feb 28 in 2023."""
        d = Date(31, 1, 2023)
        d.add_months(1)
        assert d == Date(28, 2, 2023)

    def test_twelve_months(self) -> None:
        """Test that twelve months is one year."""
        d = Date(31, 1, 2024)
        d.add_months(12)
        assert d == Date(31, 1, 2025)

    def test_across_year_end(self) -> None:
        """Test that months carry into the next year."""
        d = Date(30, 11, 2024)
        d.add_months(3)
        assert d == Date(28, 2, 2025)

    def test_subtract_months(self) -> None:
        """Test that months borrow from the previous year."""
        d = Date(31, 3, 2024)
        d.subtract_months(4)
        assert d == Date(30, 11, 2023)

    def test_subtract_clamps(self) -> None:
        """Test that Mar 31 minus one month clamps to the end of February."""
        d = Date(31, 3, 2024)
        d.subtract_months(1)
        assert d == Date(29, 2, 2024)

    def test_negative_add(self) -> None:
        """Test that adding negative months subtracts."""
        d = Date(15, 1, 2024)
        d.add_months(-1)
        assert d == Date(15, 12, 2023)

    def test_zero_is_noop(self) -> None:
        """Test that zero months changes nothing."""
        d = Date(31, 1, 2024)
        d.add_months(0)
        d.subtract_months(0)
        assert d == Date(31, 1, 2024)


class TestDateYearArithmetic:
    """Tests for adding and subtracting years."""

    def test_add_one_year(self) -> None:
        """Test a plain year step."""
        d = Date(15, 6, 2023)
        d.add_years(1)
        assert d == Date(15, 6, 2024)

    def test_leap_day_to_common_year(self) -> None:
        """Test that Feb 29 plus one year becomes Feb 28."""
        d = Date(29, 2, 2024)
        d.add_years(1)
        assert d == Date(28, 2, 2025)

    def test_leap_day_to_leap_year(self) -> None:
        """Test that Feb 29 plus four years stays Feb 29."""
        d = Date(29, 2, 2024)
        d.add_years(4)
        assert d == Date(29, 2, 2028)

    def test_leap_day_across_1900_rule(self) -> None:
        """Test that Feb 29 2096 plus four years lands on Feb 28 2100."""
        d = Date(29, 2, 2096)
        d.add_years(4)
        assert d == Date(28, 2, 2100)

    def test_subtract_years(self) -> None:
        """Test subtracting years."""
        d = Date(29, 2, 2024)
        d.subtract_years(4)
        assert d == Date(29, 2, 2020)
        d.subtract_years(1)
        assert d == Date(28, 2, 2019)

    def test_negative_add(self) -> None:
        """Test that adding negative years subtracts."""
        d = Date(1, 3, 2024)
        d.add_years(-24)
        assert d == Date(1, 3, 2000)

    def test_march_keeps_its_day(self) -> None:
        """Test that days after February keep their place."""
        d = Date(1, 3, 2023)
        d.add_years(1)
        assert d == Date(1, 3, 2024)


class TestDateCopy:
    """Tests for copying dates."""

    def test_copy_is_independent(self) -> None:
        """Test that mutating a copy leaves the original alone."""
        d = Date(15, 1, 2024)
        c = d.copy()
        c.add_days(1)
        assert d == Date(15, 1, 2024)
        assert c == Date(16, 1, 2024)

    def test_copy_module(self) -> None:
        """Test that copy.copy uses the same copy."""
        d = Date(15, 1, 2024)
        c = copy.copy(d)
        assert c == d
        assert c is not d

    def test_copy_keeps_local_formatter(self) -> None:
        """Test that the local formatter travels with the copy."""
        d = Date(15, 1, 2024)
        d.set_local_formatter(lambda x: "local")
        assert d.copy().to_string() == "local"


class TestDateComparison:
    """Tests for Date comparison."""

    def test_equality(self) -> None:
        """Test equal and unequal dates."""
        assert Date(15, 1, 2024) == Date(15, 1, 2024)
        assert Date(15, 1, 2024) != Date(16, 1, 2024)

    def test_ordering(self) -> None:
        """Test ordering follows the calendar."""
        a = Date(31, 12, 2023)
        b = Date(1, 1, 2024)
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert a <= a.copy()
        assert a >= a.copy()

    def test_not_equal_to_other_types(self) -> None:
        """Test comparison with a non-Date."""
        assert Date(1, 1, 2024) != "2024-01-01"
        with pytest.raises(TypeError):
            Date(1, 1, 2024) < "2024-01-01"  # noqa: B015

    def test_not_hashable(self) -> None:
        """Test that mutable dates cannot be hashed."""
        with pytest.raises(TypeError):
            hash(Date(1, 1, 2024))


class TestDateFormatting:
    """Tests for rendering dates."""

    def test_default(self) -> None:
        """Test the built-in YYYY-MM-DD renderer."""
        assert Date(5, 3, 2024).to_string() == "2024-03-05"
        assert str(Date(5, 3, 2024)) == "2024-03-05"

    def test_repr(self) -> None:
        """Test the constructor-shaped repr."""
        assert repr(Date(5, 3, 2024)) == "Date(5, 3, 2024)"

    def test_local_formatter(self) -> None:
        """Test that a local formatter overrides the registry."""
        d = Date(5, 3, 2024)
        d.set_local_formatter(lambda x: f"{x.day_of_the_month}.{x.month}.{x.year}")
        assert d.to_string() == "5.3.2024"
        assert Date(5, 3, 2024).to_string() == "2024-03-05"

    def test_remove_local_formatter(self) -> None:
        """Test that None restores registry formatting."""
        d = Date(5, 3, 2024)
        d.set_local_formatter(lambda x: "x")
        d.set_local_formatter(None)
        assert d.to_string() == "2024-03-05"

    def test_global_formatter(self) -> None:
        """Test that the global formatter applies to every Date."""
        Date.set_global_formatter(lambda x: f"{x.year}/{x.month:02d}")
        assert Date(5, 3, 2024).to_string() == "2024/03"
        Date.set_global_formatter(None)
        assert Date(5, 3, 2024).to_string() == "2024-03-05"

    def test_local_beats_global(self) -> None:
        """Test precedence of the local formatter."""
        Date.set_global_formatter(lambda x: "global")
        d = Date(5, 3, 2024)
        d.set_local_formatter(lambda x: "local")
        assert d.to_string() == "local"
        assert Date(6, 3, 2024).to_string() == "global"

    def test_explicit_registry(self) -> None:
        """Test rendering through a private registry."""
        registry = FormatterRegistry()
        registry.register(DATE, lambda x: "private")
        assert Date(5, 3, 2024).to_string(registry) == "private"
        assert Date(5, 3, 2024).to_string() == "2024-03-05"

    def test_year_padding(self) -> None:
        """Test that the year is four digits."""
        assert Date(1, 1, 1900).to_string() == "1900-01-01"
