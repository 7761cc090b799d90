"""
msisdrag

NRLMSISE-00 atmospheric drag for orbit propagators. Decomposes the epoch,
looks up historical solar flux (F10.7, F10.7A) and geomagnetic (Ap) indices
from flat-file tables, runs the external NRLMSISE-00 density executable and
accumulates the resulting drag acceleration into the propagator state.
"""

from msisdrag.errors import (
    DensityPipelineError,
    MalformedTimestamp,
    UnsupportedMonth,
    InvalidCalendarDate,
    SpaceWeatherError,
    DataSourceUnavailable,
    NoMatchingRecord,
    MalformedRecord,
    ModelInvocationFailed,
    ModelInvocationTimeout,
    ConfigurationError,
)
from msisdrag.domain.epoch import (
    CalendarFields,
    parse_utc_datestamp,
    format_utc_datestamp,
)
from msisdrag.domain.day_of_year import (
    DayOfYearResult,
    is_leap_year,
    compute_day_of_year,
    day_of_year_for,
)
from msisdrag.domain.coordinates import (
    GeodeticTokens,
    format_geodetic,
)
from msisdrag.domain.space_weather import (
    SolarFluxRecord,
    GeomagneticRecord,
    SpaceWeather,
    daily_ap,
    find_solar_flux,
    find_geomagnetic,
)
from msisdrag.domain.atmosphere_model import (
    FALLBACK_DENSITY_KG_M3,
    AtmosphereQuery,
    DensityReading,
    parse_density_output,
)
from msisdrag.domain.drag import (
    OrbitalState,
    DragConfig,
    DensityEvaluation,
    DensityPipeline,
    AtmosphericDragForce,
)

__version__ = "1.0.0"

__all__ = [
    "DensityPipelineError",
    "MalformedTimestamp",
    "UnsupportedMonth",
    "InvalidCalendarDate",
    "SpaceWeatherError",
    "DataSourceUnavailable",
    "NoMatchingRecord",
    "MalformedRecord",
    "ModelInvocationFailed",
    "ModelInvocationTimeout",
    "ConfigurationError",
    "CalendarFields",
    "parse_utc_datestamp",
    "format_utc_datestamp",
    "DayOfYearResult",
    "is_leap_year",
    "compute_day_of_year",
    "day_of_year_for",
    "GeodeticTokens",
    "format_geodetic",
    "SolarFluxRecord",
    "GeomagneticRecord",
    "SpaceWeather",
    "daily_ap",
    "find_solar_flux",
    "find_geomagnetic",
    "FALLBACK_DENSITY_KG_M3",
    "AtmosphereQuery",
    "DensityReading",
    "parse_density_output",
    "OrbitalState",
    "DragConfig",
    "DensityEvaluation",
    "DensityPipeline",
    "AtmosphericDragForce",
]
