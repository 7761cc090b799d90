# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Atmospheric drag from NRLMSISE-00 density, evaluated once per integration step.

The density pipeline turns (epoch, geodetic position) into a mass density:

    datestamp -> calendar fields -> day of year / previous day
              -> solar flux (previous day) + daily Ap (epoch day)
              -> model arguments -> external model -> kg/m³

AtmosphericDragForce applies that density to the propagator's state:

    a = -0.5 * Cd * (A/m) * rho * |v_rel| * v_rel

with velocities in km/s and acceleration in km/s², hence the factor of 1000
folded into DragConfig.drag_factor.
"""
import logging
from dataclasses import dataclass, field

import numpy as np

from msisdrag.domain.atmosphere_model import (
    AtmosphereQuery,
    DensityReading,
    parse_density_output,
)
from msisdrag.domain.coordinates import format_geodetic
from msisdrag.domain.day_of_year import DayOfYearResult, day_of_year_for
from msisdrag.domain.epoch import CalendarFields, parse_utc_datestamp
from msisdrag.domain.space_weather import SpaceWeather
from msisdrag.ports import AtmosphereModelRunner, SpaceWeatherSource

logger = logging.getLogger(__name__)

MIN_ALTITUDE_KM = 100.0
M_PER_KM = 1000.0


@dataclass
class OrbitalState:
    """Propagator state read and updated by the drag force each step.

    Positions are geodetic (km, deg); velocities and accelerations are ECEF
    in km/s and km/s². errors and warnings are append-only logs.
    """
    altitude_km: float
    latitude_deg: float
    longitude_deg: float
    epoch: str
    relative_velocity_ecef: tuple[float, float, float]
    total_acceleration_ecef: tuple[float, float, float] = (0.0, 0.0, 0.0)
    atmos_density: float = 0.0
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DragConfig:
    """Drag configuration for a satellite.

    cd: drag coefficient (dimensionless, typically 2.0-2.5)
    area_m2: cross-sectional area (m²)
    mass_kg: satellite mass (kg)
    """
    cd: float
    area_m2: float
    mass_kg: float

    @property
    def ballistic_coefficient(self) -> float:
        """Ballistic coefficient B_c = C_d * A / m (m²/kg)."""
        return self.cd * self.area_m2 / self.mass_kg

    @property
    def drag_factor(self) -> float:
        """-0.5 * B_c scaled for km/s velocities and km/s² acceleration."""
        return -0.5 * self.ballistic_coefficient * M_PER_KM


@dataclass(frozen=True)
class DensityEvaluation:
    """Intermediate products of one density pipeline run."""
    calendar: CalendarFields
    day_of_year: DayOfYearResult
    query: AtmosphereQuery
    reading: DensityReading


class DensityPipeline:
    """Epoch and position in, NRLMSISE-00 mass density out."""

    def __init__(
        self,
        space_weather: SpaceWeatherSource,
        model: AtmosphereModelRunner,
    ) -> None:
        self._space_weather = space_weather
        self._model = model

    def _query(
        self,
        calendar: CalendarFields,
        doy: DayOfYearResult,
        altitude_km: float,
        latitude_deg: float,
        longitude_deg: float,
    ) -> AtmosphereQuery:
        # Flux tables are keyed by the day before the epoch, Ap by the epoch day.
        flux = self._space_weather.solar_flux(doy.previous_day_year, doy.previous_day)
        geomagnetic = self._space_weather.geomagnetic(
            calendar.year, calendar.month, calendar.day,
        )
        return AtmosphereQuery(
            day_of_year=doy.day_of_year,
            year=calendar.year,
            second_of_day=calendar.second_of_day,
            coordinates=format_geodetic(altitude_km, latitude_deg, longitude_deg),
            space_weather=SpaceWeather(
                f107=flux.f107,
                f107a=flux.f107a,
                ap=geomagnetic.daily_ap,
            ),
        )

    def build_query(
        self,
        altitude_km: float,
        latitude_deg: float,
        longitude_deg: float,
        epoch: str,
    ) -> AtmosphereQuery:
        """Assemble model input without running the model."""
        calendar = parse_utc_datestamp(epoch)
        return self._query(
            calendar, day_of_year_for(calendar),
            altitude_km, latitude_deg, longitude_deg,
        )

    def evaluate(
        self,
        altitude_km: float,
        latitude_deg: float,
        longitude_deg: float,
        epoch: str,
    ) -> DensityEvaluation:
        """Run the full pipeline and keep every intermediate result.

        Raises:
            MalformedTimestamp: Epoch text could not be decomposed.
            UnsupportedMonth: Month has no day offset.
            SpaceWeatherError: Table missing or no matching record.
            ModelInvocationFailed: Model could not run or timed out.
        """
        calendar = parse_utc_datestamp(epoch)
        doy = day_of_year_for(calendar)
        query = self._query(calendar, doy, altitude_km, latitude_deg, longitude_deg)

        logger.debug("Running atmosphere model with %s", query.arguments())
        stdout = self._model.run(query.arguments())
        reading = parse_density_output(stdout)

        return DensityEvaluation(
            calendar=calendar,
            day_of_year=doy,
            query=query,
            reading=reading,
        )

    def density(
        self,
        altitude_km: float,
        latitude_deg: float,
        longitude_deg: float,
        epoch: str,
    ) -> float:
        """Mass density in kg/m³."""
        return self.evaluate(
            altitude_km, latitude_deg, longitude_deg, epoch,
        ).reading.density_kg_m3


class AtmosphericDragForce:
    """Drag acceleration accumulated into an OrbitalState.

    Low altitude is reported in state.errors but does not stop the step;
    pipeline failures propagate to the caller.
    """

    def __init__(self, drag_config: DragConfig, pipeline: DensityPipeline) -> None:
        self._config = drag_config
        self._pipeline = pipeline
        self._state: OrbitalState | None = None
        self._last_evaluation: DensityEvaluation | None = None

    @property
    def last_evaluation(self) -> DensityEvaluation | None:
        """Pipeline products from the most recent compute_acceleration()."""
        return self._last_evaluation

    def setup(self, state: OrbitalState) -> None:
        """Bind the propagator state updated by compute_acceleration()."""
        self._state = state

    def compute_acceleration(
        self, state: OrbitalState | None = None,
    ) -> tuple[float, float, float]:
        """Evaluate density, store it on the state and add the drag term.

        Returns:
            This step's drag acceleration (ax, ay, az) in km/s².
        """
        if state is None:
            state = self._state
        if state is None:
            raise ValueError("No orbital state bound; call setup() or pass a state")

        if state.altitude_km < MIN_ALTITUDE_KM:
            message = f"Drag: altitude too low, {state.altitude_km:.16g} km."
            state.errors.append(message)
            logger.warning(message)

        evaluation = self._pipeline.evaluate(
            state.altitude_km, state.latitude_deg, state.longitude_deg, state.epoch,
        )
        self._last_evaluation = evaluation
        reading = evaluation.reading
        rho = reading.density_kg_m3
        state.atmos_density = rho
        if reading.fallback_used:
            state.warnings.append(
                f"Drag: fallback density {rho:.3e} kg/m3 substituted for "
                f"model output {reading.raw_output!r} at {state.epoch}."
            )

        vr = np.asarray(state.relative_velocity_ecef, dtype=float)
        v_rel = float(np.linalg.norm(vr))
        a = self._config.drag_factor * rho * v_rel * vr

        total = np.asarray(state.total_acceleration_ecef, dtype=float) + a
        state.total_acceleration_ecef = (float(total[0]), float(total[1]), float(total[2]))
        return (float(a[0]), float(a[1]), float(a[2]))
