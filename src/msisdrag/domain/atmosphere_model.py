# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line contract of the external NRLMSISE-00 density executable.

The executable takes ten positional arguments:

    doy year sec  alt  lat  lon  0  f107  f107a  ap

and prints the total mass density in g/cm³ as a single scientific-notation
number (e.g. '5.000000e-10'). Conversion to kg/m³ adds 3 to the exponent.
Degenerate output ('inf', 'nan', empty, signed, not scientific notation) is
replaced by a fallback density and reported as a warning.
"""
import logging
import math
import re
from dataclasses import dataclass

from msisdrag.domain.coordinates import GeodeticTokens
from msisdrag.domain.space_weather import SpaceWeather

logger = logging.getLogger(__name__)

FALLBACK_DENSITY_KG_M3 = 1.000e-13
G_CM3_TO_KG_M3_EXPONENT = 3

# Seventh positional argument; the executable expects a literal zero.
_MODEL_FLAG = "0"

_SCIENTIFIC = re.compile(r"^(\d+(?:\.\d*)?)[eE]([+-]?\d+)$")


def _format_index(value: float) -> str:
    # Always carries a decimal point: a table token '150' is passed as '150.0'.
    return repr(float(value))


@dataclass(frozen=True)
class AtmosphereQuery:
    """Fully assembled input for one atmosphere model evaluation."""
    day_of_year: int
    year: int
    second_of_day: int
    coordinates: GeodeticTokens
    space_weather: SpaceWeather

    def arguments(self) -> list[str]:
        """Positional arguments in the order the executable reads them."""
        sw = self.space_weather
        return [
            str(self.day_of_year),
            str(self.year),
            str(self.second_of_day),
            self.coordinates.altitude,
            self.coordinates.latitude,
            self.coordinates.longitude,
            _MODEL_FLAG,
            _format_index(sw.f107),
            _format_index(sw.f107a),
            str(sw.ap),
        ]

    def command_line(self, executable: str) -> str:
        """Shell command string with the executable's expected spacing."""
        (doy, year, sec, alt, lat, lon, flag, f107, f107a, ap) = self.arguments()
        return (
            f"{executable} {doy} {year} {sec}  {alt}  {lat}  {lon}"
            f"  {flag}  {f107}  {f107a}  {ap}"
        )


@dataclass(frozen=True)
class DensityReading:
    """Parsed model output.

    density_kg_m3: mass density after unit conversion (or the fallback).
    raw_output: the stdout line the density was read from.
    fallback_used: True when the output was degenerate.
    """
    density_kg_m3: float
    raw_output: str
    fallback_used: bool = False


def _fallback(raw: str) -> DensityReading:
    logger.warning(
        "%.3e kg/m3 substituted for degenerate density output %r from nrlmsise",
        FALLBACK_DENSITY_KG_M3, raw,
    )
    return DensityReading(
        density_kg_m3=FALLBACK_DENSITY_KG_M3,
        raw_output=raw,
        fallback_used=True,
    )


def parse_density_output(text: str) -> DensityReading:
    """Convert the executable's stdout (g/cm³) to a density in kg/m³.

    The last non-empty line is parsed. The exponent is shifted by +3 and the
    number reassembled before conversion, so '5.000e-10' reads as 5.000e-07.
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    raw = lines[-1] if lines else ""

    match = _SCIENTIFIC.match(raw)
    if match is None:
        return _fallback(raw)

    mantissa, exponent = match.groups()
    density = float(f"{mantissa}e{int(exponent) + G_CM3_TO_KG_M3_EXPONENT}")
    if not math.isfinite(density):
        return _fallback(raw)
    return DensityReading(density_kg_m3=density, raw_output=raw)
