# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Historical space weather table formats and record lookup.

Two flat-file tables feed the atmosphere model:

Solar flux table (whitespace delimited, one row per day):
    YYYY DDD  JulianDay  F10  F81c ...
    Rows are found by the substring '<year> <day right-aligned to 3>' so
    that day 6 does not match inside day 60 or 160. F10.7 and F10.7A are the
    4th and 5th whitespace-delimited fields.

Geomagnetic table (fixed columns, one row per day):
    cols 1-6    yymmdd
    cols 7-10   Bartels rotation number
    cols 11-12  day within rotation
    cols 13-28  eight 3-hourly Kp values (2 chars, tenths)
    cols 29-31  daily Kp sum
    cols 32-55  eight 3-hourly ap values (3 chars each)
    cols 56-58  daily Ap

Both lookups scan every row and keep the last match.

This module only parses text; opening files is left to the adapters.
"""
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, timedelta

from msisdrag.errors import MalformedRecord, NoMatchingRecord

SOLAR_FLUX_F107_FIELD = 3
SOLAR_FLUX_F107A_FIELD = 4

AP_COLUMN_START = 31
AP_COLUMN_END = 55
AP_FIELD_WIDTH = 3
AP_FIELD_COUNT = 8

_JD_2000_01_01 = 2451544.5

# Kp (tenths) against the lowest ap that reaches it, Bartels (1957).
_AP_TO_KP10: tuple[tuple[int, int], ...] = (
    (0, 0), (2, 3), (3, 7), (4, 10), (5, 13), (6, 17), (7, 20), (9, 23),
    (12, 27), (15, 30), (18, 33), (22, 37), (27, 40), (32, 43), (39, 47),
    (48, 50), (56, 53), (67, 57), (80, 60), (94, 63), (111, 67), (132, 70),
    (154, 73), (179, 77), (207, 80), (236, 83), (300, 87), (400, 90),
)


@dataclass(frozen=True)
class SolarFluxRecord:
    """Solar radio flux for one day.

    f107: daily 10.7 cm flux (SFU).
    f107a: 81-day centred average of F10.7 (SFU).
    """
    year: int
    day_of_year: int
    f107: float
    f107a: float


@dataclass(frozen=True)
class GeomagneticRecord:
    """Eight 3-hourly ap sub-indices for one day, keyed by yymmdd."""
    date_key: str
    sub_indices: tuple[int, ...]

    @property
    def daily_ap(self) -> int:
        return daily_ap(self.sub_indices)


@dataclass(frozen=True)
class SpaceWeather:
    """Solar and geomagnetic activity inputs for one atmosphere evaluation."""
    f107: float
    f107a: float
    ap: int


def daily_ap(sub_indices: Sequence[int]) -> int:
    """Mean of the 3-hourly ap values rounded half up to an integer.

    >>> daily_ap([4, 8, 12, 4, 7, 3, 2, 5])
    6
    """
    if not sub_indices:
        raise ValueError("Cannot average an empty set of ap sub-indices")
    return int(math.floor(sum(sub_indices) / len(sub_indices) + 0.5))


# --------------------------------------------------------------------------- #
# Solar flux table
# --------------------------------------------------------------------------- #

def solar_flux_search_key(year: int, day_of_year: int) -> str:
    """Search key '<year> <day>' with the day right-aligned to 3 characters."""
    return f"{year} {day_of_year:>3d}"


def parse_solar_flux_line(line: str, year: int, day_of_year: int) -> SolarFluxRecord:
    """Read F10.7 and F10.7A from a matched solar flux row."""
    fields = line.split()
    if len(fields) <= SOLAR_FLUX_F107A_FIELD:
        raise MalformedRecord(
            f"Solar flux row for {year} day {day_of_year} has {len(fields)} fields: {line!r}"
        )
    try:
        f107 = float(fields[SOLAR_FLUX_F107_FIELD])
        f107a = float(fields[SOLAR_FLUX_F107A_FIELD])
    except ValueError as exc:
        raise MalformedRecord(
            f"Non-numeric flux in solar flux row for {year} day {day_of_year}: {line!r}"
        ) from exc
    return SolarFluxRecord(year=year, day_of_year=day_of_year, f107=f107, f107a=f107a)


def find_solar_flux(lines: Iterable[str], year: int, day_of_year: int) -> SolarFluxRecord:
    """Scan solar flux rows for year/day; the last matching row wins.

    Raises:
        NoMatchingRecord: If no row contains the search key.
        MalformedRecord: If the matching row lacks numeric flux fields.
    """
    key = solar_flux_search_key(year, day_of_year)
    matched = None
    for line in lines:
        if key in line:
            matched = line
    if matched is None:
        raise NoMatchingRecord(f"No solar flux row matching {key!r}")
    return parse_solar_flux_line(matched, year, day_of_year)


def index_solar_flux_table(lines: Iterable[str]) -> dict[tuple[int, int], str]:
    """Map (year, day) to the raw row; later rows replace earlier ones."""
    index: dict[tuple[int, int], str] = {}
    for line in lines:
        fields = line.split()
        if len(fields) < 2 or not (fields[0].isdigit() and fields[1].isdigit()):
            continue
        index[(int(fields[0]), int(fields[1]))] = line
    return index


def format_solar_flux_line(record: SolarFluxRecord) -> str:
    """Render a record as a solar flux table row (no trailing newline)."""
    day = date(record.year, 1, 1) + timedelta(days=record.day_of_year - 1)
    julian_day = _JD_2000_01_01 + (day - date(2000, 1, 1)).days
    return (
        f"{record.year:6d}{record.day_of_year:4d} {julian_day:11.1f}"
        f" {record.f107:6.1f} {record.f107a:6.1f}"
    )


# --------------------------------------------------------------------------- #
# Geomagnetic table
# --------------------------------------------------------------------------- #

def geomagnetic_search_key(year: int, month: int, day: int) -> str:
    """Six-character yymmdd key with zero-padded month and day."""
    return f"{year % 100:02d}{month:02d}{day:02d}"


def parse_geomagnetic_line(line: str) -> GeomagneticRecord:
    """Read the eight 3-hourly ap values from a geomagnetic table row."""
    row = line.rstrip("\r\n")
    columns = row[AP_COLUMN_START:AP_COLUMN_END]
    if len(columns) < AP_COLUMN_END - AP_COLUMN_START:
        raise MalformedRecord(f"Geomagnetic row too short for ap columns: {row!r}")
    try:
        values = tuple(
            int(columns[i:i + AP_FIELD_WIDTH])
            for i in range(0, AP_FIELD_COUNT * AP_FIELD_WIDTH, AP_FIELD_WIDTH)
        )
    except ValueError as exc:
        raise MalformedRecord(f"Non-numeric ap value in geomagnetic row: {row!r}") from exc
    return GeomagneticRecord(date_key=row[:6], sub_indices=values)


def find_geomagnetic(lines: Iterable[str], year: int, month: int, day: int) -> GeomagneticRecord:
    """Scan geomagnetic rows for the yymmdd key; the last matching row wins.

    Raises:
        NoMatchingRecord: If no row starts with the key.
        MalformedRecord: If the matching row lacks eight numeric ap values.
    """
    key = geomagnetic_search_key(year, month, day)
    matched = None
    for line in lines:
        if line[:6] == key:
            matched = line
    if matched is None:
        raise NoMatchingRecord(f"No geomagnetic row matching {key!r}")
    return parse_geomagnetic_line(matched)


def index_geomagnetic_table(lines: Iterable[str]) -> dict[str, str]:
    """Map yymmdd to the raw row; later rows replace earlier ones."""
    index: dict[str, str] = {}
    for line in lines:
        key = line[:6]
        if len(key) == 6 and key.isdigit():
            index[key] = line
    return index


def _ap_to_kp10(ap: int) -> int:
    kp10 = 0
    for threshold, value in _AP_TO_KP10:
        if ap >= threshold:
            kp10 = value
    return kp10


def format_geomagnetic_line(
    day: date,
    sub_indices: Sequence[int],
    bartels_rotation: int = 0,
    rotation_day: int = 1,
) -> str:
    """Render a geomagnetic table row for one day (no trailing newline).

    Kp columns are derived from the ap values with the Bartels table.
    """
    if len(sub_indices) != AP_FIELD_COUNT:
        raise ValueError(f"Expected {AP_FIELD_COUNT} ap sub-indices, got {len(sub_indices)}")
    kp10 = [_ap_to_kp10(ap) for ap in sub_indices]
    return (
        geomagnetic_search_key(day.year, day.month, day.day)
        + f"{bartels_rotation:4d}{rotation_day:2d}"
        + "".join(f"{kp:2d}" for kp in kp10)
        + f"{sum(kp10) // 10:3d}"
        + "".join(f"{ap:3d}" for ap in sub_indices)
        + f"{daily_ap(sub_indices):3d}"
    )
