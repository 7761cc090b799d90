# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for day-of-year, previous-day and leap-year computation."""
from datetime import date, timedelta

import pytest

from msisdrag.domain.day_of_year import (
    COMMON_YEAR_OFFSETS,
    LEAP_YEAR_OFFSETS,
    DayOfYearResult,
    compute_day_of_year,
    day_of_year_for,
    days_in_year,
    is_leap_year,
)
from msisdrag.domain.epoch import parse_utc_datestamp
from msisdrag.errors import InvalidCalendarDate, UnsupportedMonth


class TestLeapYear:

    @pytest.mark.parametrize("year", [1992, 1996, 2000, 2004, 2020, 2024, 2400, 2996])
    def test_leap(self, year):
        assert is_leap_year(year)

    @pytest.mark.parametrize("year", [1900, 2021, 2022, 2023, 2100, 2200])
    def test_common(self, year):
        assert not is_leap_year(year)

    def test_days_in_year(self):
        assert days_in_year(2024) == 366
        assert days_in_year(2023) == 365


class TestOffsetTables:

    def test_tables_read_only(self):
        with pytest.raises(TypeError):
            COMMON_YEAR_OFFSETS[1] = 5
        with pytest.raises(TypeError):
            LEAP_YEAR_OFFSETS[13] = 365

    def test_november_offsets(self):
        assert COMMON_YEAR_OFFSETS[11] == 304
        assert LEAP_YEAR_OFFSETS[11] == 305

    def test_leap_offsets_shift_after_february(self):
        for month in range(1, 13):
            extra = 1 if month >= 3 else 0
            assert LEAP_YEAR_OFFSETS[month] == COMMON_YEAR_OFFSETS[month] + extra


class TestDayOfYear:

    def test_leap_year_march_first(self):
        """2024-03-01 → day 61, previous day 60 of 2024."""
        assert compute_day_of_year(2024, 3, 1) == DayOfYearResult(
            day_of_year=61, previous_day=60, previous_day_year=2024,
        )

    def test_common_year_new_year(self):
        """2023-01-01 → day 1, previous day 365 of 2022."""
        assert compute_day_of_year(2023, 1, 1) == DayOfYearResult(
            day_of_year=1, previous_day=365, previous_day_year=2022,
        )

    def test_new_year_after_leap_year(self):
        """Rollback into a leap year lands on day 366."""
        result = compute_day_of_year(2025, 1, 1)
        assert result.previous_day == 366
        assert result.previous_day_year == 2024

    def test_new_year_of_leap_year(self):
        result = compute_day_of_year(2024, 1, 1)
        assert result.previous_day == 365
        assert result.previous_day_year == 2023

    def test_january_second(self):
        result = compute_day_of_year(2023, 1, 2)
        assert (result.day_of_year, result.previous_day, result.previous_day_year) == (2, 1, 2023)

    def test_december_31(self):
        assert compute_day_of_year(2023, 12, 31).day_of_year == 365
        assert compute_day_of_year(2024, 12, 31).day_of_year == 366

    def test_february_29(self):
        assert compute_day_of_year(2024, 2, 29).day_of_year == 60

    @pytest.mark.parametrize("year", [2000, 2023, 2024])
    def test_matches_calendar_every_day(self, year):
        d = date(year, 1, 1)
        while d.year == year:
            result = compute_day_of_year(d.year, d.month, d.day)
            assert result.day_of_year == d.timetuple().tm_yday
            prev = d - timedelta(days=1)
            assert result.previous_day == prev.timetuple().tm_yday
            assert result.previous_day_year == prev.year
            assert 1 <= result.day_of_year <= 366
            d += timedelta(days=1)

    def test_from_calendar_fields(self):
        fields = parse_utc_datestamp("01/03/2024 12:00:00")
        assert day_of_year_for(fields).day_of_year == 61


class TestInvalidDates:

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_unsupported_month(self, month):
        with pytest.raises(UnsupportedMonth) as exc_info:
            compute_day_of_year(2024, month, 1)
        assert exc_info.value.month == month

    def test_february_29_in_common_year(self):
        with pytest.raises(InvalidCalendarDate):
            compute_day_of_year(2023, 2, 29)

    def test_day_zero(self):
        with pytest.raises(InvalidCalendarDate):
            compute_day_of_year(2023, 5, 0)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            compute_day_of_year(2023, 13, 1)
        with pytest.raises(ValueError):
            compute_day_of_year(2023, 4, 31)
