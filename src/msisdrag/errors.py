# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Typed errors raised by the density pipeline.

Every failure that aborts a drag evaluation surfaces as a subclass of
DensityPipelineError so a propagator can catch one type per step.
"""


class DensityPipelineError(Exception):
    """Base class for all density pipeline failures."""


class MalformedTimestamp(DensityPipelineError, ValueError):
    """UTC datestamp could not be split into calendar fields."""


class UnsupportedMonth(DensityPipelineError, ValueError):
    """Month index has no cumulative day offset."""

    def __init__(self, month: int) -> None:
        super().__init__(f"Month {month} not found in day offset table")
        self.month = month


class InvalidCalendarDate(DensityPipelineError, ValueError):
    """Day does not exist in the given month and year."""


class SpaceWeatherError(DensityPipelineError):
    """Base class for space weather table failures."""


class DataSourceUnavailable(SpaceWeatherError):
    """Space weather table file could not be opened."""


class NoMatchingRecord(SpaceWeatherError):
    """No row in a space weather table matched the search key."""


class MalformedRecord(NoMatchingRecord):
    """A row matched the search key but its fields could not be parsed."""


class ModelInvocationFailed(DensityPipelineError):
    """External atmosphere model could not be run or exited with an error."""


class ModelInvocationTimeout(ModelInvocationFailed):
    """External atmosphere model did not finish within the timeout."""


class ConfigurationError(DensityPipelineError, ValueError):
    """Pipeline configuration is missing or invalid."""
