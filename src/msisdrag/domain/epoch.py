# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
UTC datestamp decomposition into calendar fields.

Propagator epochs arrive as text in a handful of layouts, all day-first:

    01/03/2024 12:00:00
    01/03/2024, 12:00:00 UTC
    01/03 2024 12:00:00
     1/ 3/2024, 12:00:00 UTC

The time token is the first one containing ':'. Everything before it is the
date, which must contain '/' and exactly three digit groups (day, month,
year). At most one qualifier token (time zone) may follow the time.
"""
import re
from dataclasses import dataclass

from msisdrag.errors import MalformedTimestamp

_DATE_PATTERN = re.compile(r"^[0-9/,\s]+$")
_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{1,2}):(\d{1,2})(?:\.\d*)?,?$")

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600


@dataclass(frozen=True)
class CalendarFields:
    """Calendar breakdown of one epoch.

    second_of_day = second + 60 * minute + 3600 * hour
    """
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second_of_day: int

    @property
    def second(self) -> int:
        """Whole seconds within the minute."""
        return (
            self.second_of_day
            - self.hour * SECONDS_PER_HOUR
            - self.minute * SECONDS_PER_MINUTE
        )


def _split_date(date_text: str, source: str) -> tuple[int, int, int]:
    if "/" not in date_text or not _DATE_PATTERN.match(date_text):
        raise MalformedTimestamp(f"Date part of {source!r} is not day/month/year")

    groups = re.findall(r"\d+", date_text)
    if len(groups) != 3:
        raise MalformedTimestamp(
            f"Expected day, month and year in {source!r}, found {len(groups)} fields"
        )
    day_text, month_text, year_text = groups
    if len(year_text) < 4:
        raise MalformedTimestamp(f"Year field {year_text!r} in {source!r} is too short")

    return int(year_text[-4:]), int(month_text), int(day_text)


def _split_time(time_text: str, source: str) -> tuple[int, int, int]:
    match = _TIME_PATTERN.match(time_text)
    if match is None:
        raise MalformedTimestamp(f"Time field {time_text!r} in {source!r} is not hh:mm:ss")
    # Fractional seconds are dropped; the model takes integer seconds of day.
    return int(match.group(1)), int(match.group(2)), int(match.group(3))


def parse_utc_datestamp(text: str) -> CalendarFields:
    """Decompose a UTC datestamp string into calendar fields.

    Args:
        text: Datestamp in one of the 2-, 3- or 4-token layouts.

    Returns:
        CalendarFields with the time expressed as seconds of day.

    Raises:
        MalformedTimestamp: If separators are missing, fields are not
            numeric, or a field is out of range.
    """
    tokens = text.split()
    if not 2 <= len(tokens) <= 4:
        raise MalformedTimestamp(
            f"Expected 2 to 4 tokens in datestamp {text!r}, got {len(tokens)}"
        )

    time_index = next((i for i, token in enumerate(tokens) if ":" in token), None)
    if time_index is None:
        raise MalformedTimestamp(f"No ':' separated time field in {text!r}")
    if time_index == 0:
        raise MalformedTimestamp(f"No date before the time field in {text!r}")
    if len(tokens) - time_index - 1 > 1:
        raise MalformedTimestamp(f"Unexpected tokens after the time field in {text!r}")

    year, month, day = _split_date(" ".join(tokens[:time_index]), text)
    hour, minute, second = _split_time(tokens[time_index], text)

    if not 1 <= month <= 12:
        raise MalformedTimestamp(f"Month {month} out of range in {text!r}")
    if not 1 <= day <= 31:
        raise MalformedTimestamp(f"Day {day} out of range in {text!r}")
    if hour > 23 or minute > 59 or second > 60:
        raise MalformedTimestamp(f"Time of day out of range in {text!r}")

    return CalendarFields(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second_of_day=second + SECONDS_PER_MINUTE * minute + SECONDS_PER_HOUR * hour,
    )


def format_utc_datestamp(fields: CalendarFields) -> str:
    """Render calendar fields in the canonical 'dd/mm/yyyy hh:mm:ss' layout."""
    return (
        f"{fields.day:02d}/{fields.month:02d}/{fields.year:04d} "
        f"{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d}"
    )
