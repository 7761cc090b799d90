# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Day-of-year and previous-day computation.

Solar flux tables are indexed by the day preceding the epoch, so alongside
the day of year this module also reports the previous day and the year that
owns it (rolling back into December 31 of the prior year on January 1).

Leap years follow the Gregorian rule rather than a fixed list of years.
"""
from dataclasses import dataclass
from types import MappingProxyType

from msisdrag.domain.epoch import CalendarFields
from msisdrag.errors import InvalidCalendarDate, UnsupportedMonth

# Cumulative days before the first of each month.
COMMON_YEAR_OFFSETS = MappingProxyType({
    1: 0, 2: 31, 3: 59, 4: 90, 5: 120, 6: 151,
    7: 181, 8: 212, 9: 243, 10: 273, 11: 304, 12: 334,
})
LEAP_YEAR_OFFSETS = MappingProxyType({
    1: 0, 2: 31, 3: 60, 4: 91, 5: 121, 6: 152,
    7: 182, 8: 213, 9: 244, 10: 274, 11: 305, 12: 335,
})

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(frozen=True)
class DayOfYearResult:
    """Day of year with the preceding day and its owning year.

    day_of_year: 1-based ordinal day in [1, 366].
    previous_day: ordinal of the preceding day in [1, 366].
    previous_day_year: year the preceding day belongs to.
    """
    day_of_year: int
    previous_day: int
    previous_day_year: int


def is_leap_year(year: int) -> bool:
    """Gregorian leap year: divisible by 4, not by 100 unless by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def _days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def compute_day_of_year(year: int, month: int, day: int) -> DayOfYearResult:
    """Day of year, previous day and previous day's year for a calendar date.

    Raises:
        UnsupportedMonth: If month has no offset table entry.
        InvalidCalendarDate: If day is outside the month.
    """
    offsets = LEAP_YEAR_OFFSETS if is_leap_year(year) else COMMON_YEAR_OFFSETS
    if month not in offsets:
        raise UnsupportedMonth(month)
    if not 1 <= day <= _days_in_month(year, month):
        raise InvalidCalendarDate(f"Day {day} outside month {month} of {year}")

    day_of_year = offsets[month] + day
    if day_of_year > 1:
        return DayOfYearResult(
            day_of_year=day_of_year,
            previous_day=day_of_year - 1,
            previous_day_year=year,
        )
    return DayOfYearResult(
        day_of_year=day_of_year,
        previous_day=days_in_year(year - 1),
        previous_day_year=year - 1,
    )


def day_of_year_for(fields: CalendarFields) -> DayOfYearResult:
    """compute_day_of_year for decomposed epoch fields."""
    return compute_day_of_year(fields.year, fields.month, fields.day)
