# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for space weather tables and the atmosphere model executable.

External dependencies (file I/O, subprocess, environment) are confined to
this layer.
"""
from msisdrag.adapters.space_weather_files import (
    FlatFileSpaceWeather,
    IndexedSpaceWeather,
)
from msisdrag.adapters.msis_subprocess import SubprocessAtmosphereModel
from msisdrag.adapters.config import PipelineConfig, build_density_pipeline

__all__ = [
    "FlatFileSpaceWeather",
    "IndexedSpaceWeather",
    "SubprocessAtmosphereModel",
    "PipelineConfig",
    "build_density_pipeline",
]
