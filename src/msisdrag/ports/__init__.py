# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for the density pipeline's external collaborators.

Adapters implement these against flat files and the model executable.
"""
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from msisdrag.domain.space_weather import GeomagneticRecord, SolarFluxRecord


@runtime_checkable
class SpaceWeatherSource(Protocol):
    """Port for historical solar flux and geomagnetic index lookups."""

    def solar_flux(self, year: int, day_of_year: int) -> SolarFluxRecord:
        """Return F10.7 / F10.7A for the given year and day of year."""
        ...

    def geomagnetic(self, year: int, month: int, day: int) -> GeomagneticRecord:
        """Return the 3-hourly ap values for the given calendar date."""
        ...


@runtime_checkable
class AtmosphereModelRunner(Protocol):
    """Port for running the external atmosphere model."""

    def run(self, arguments: Sequence[str]) -> str:
        """Run the model with positional arguments and return its stdout."""
        ...
