# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Flat-file space weather adapters.

FlatFileSpaceWeather reopens and scans each table on every lookup.
IndexedSpaceWeather reads both tables once and answers from memory; for
well-formed tables the two return identical records.
"""
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from msisdrag.domain.space_weather import (
    GeomagneticRecord,
    SolarFluxRecord,
    find_geomagnetic,
    find_solar_flux,
    geomagnetic_search_key,
    index_geomagnetic_table,
    index_solar_flux_table,
    parse_geomagnetic_line,
    parse_solar_flux_line,
    solar_flux_search_key,
)
from msisdrag.errors import DataSourceUnavailable, NoMatchingRecord

_log = logging.getLogger(__name__)


@contextmanager
def _open_table(path: Path, label: str) -> Iterator[TextIO]:
    try:
        handle = open(path, encoding="ascii", errors="replace")
    except OSError as exc:
        raise DataSourceUnavailable(f"Unable to open {label} table {path}: {exc}") from exc
    with handle:
        yield handle


class FlatFileSpaceWeather:
    """Space weather lookups that scan the table files on every call."""

    def __init__(self, solar_flux_path: str | Path, geomagnetic_path: str | Path) -> None:
        self._solar_flux_path = Path(solar_flux_path)
        self._geomagnetic_path = Path(geomagnetic_path)

    def solar_flux(self, year: int, day_of_year: int) -> SolarFluxRecord:
        with _open_table(self._solar_flux_path, "solar flux") as table:
            record = find_solar_flux(table, year, day_of_year)
        _log.debug("Solar flux %d/%03d: %s", year, day_of_year, record)
        return record

    def geomagnetic(self, year: int, month: int, day: int) -> GeomagneticRecord:
        with _open_table(self._geomagnetic_path, "geomagnetic") as table:
            record = find_geomagnetic(table, year, month, day)
        _log.debug("Geomagnetic %s: %s", record.date_key, record.sub_indices)
        return record


class IndexedSpaceWeather:
    """Space weather lookups served from tables indexed at construction."""

    def __init__(self, solar_flux_path: str | Path, geomagnetic_path: str | Path) -> None:
        with _open_table(Path(solar_flux_path), "solar flux") as table:
            self._solar_flux = index_solar_flux_table(table)
        with _open_table(Path(geomagnetic_path), "geomagnetic") as table:
            self._geomagnetic = index_geomagnetic_table(table)
        _log.debug(
            "Indexed %d solar flux rows and %d geomagnetic rows",
            len(self._solar_flux), len(self._geomagnetic),
        )

    def solar_flux(self, year: int, day_of_year: int) -> SolarFluxRecord:
        line = self._solar_flux.get((year, day_of_year))
        if line is None:
            raise NoMatchingRecord(
                f"No solar flux row matching {solar_flux_search_key(year, day_of_year)!r}"
            )
        return parse_solar_flux_line(line, year, day_of_year)

    def geomagnetic(self, year: int, month: int, day: int) -> GeomagneticRecord:
        key = geomagnetic_search_key(year, month, day)
        line = self._geomagnetic.get(key)
        if line is None:
            raise NoMatchingRecord(f"No geomagnetic row matching {key!r}")
        return parse_geomagnetic_line(line)
