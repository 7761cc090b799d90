# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Pipeline configuration and adapter wiring.

Table and executable locations come from explicit arguments or environment
variables; nothing is resolved relative to a particular machine.

    MSISDRAG_SOLAR_FLUX_FILE    solar flux table (required)
    MSISDRAG_AP_INDEX_FILE      geomagnetic ap table (required)
    MSISDRAG_MODEL_EXECUTABLE   NRLMSISE-00 density executable (required)
    MSISDRAG_MODEL_DIR          model working directory (default: executable's)
    MSISDRAG_MODEL_TIMEOUT      seconds per model run (default: 30)
    MSISDRAG_INDEX_TABLES       1/true/yes to index tables once at startup
"""
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from msisdrag.adapters.msis_subprocess import DEFAULT_TIMEOUT_S, SubprocessAtmosphereModel
from msisdrag.adapters.space_weather_files import FlatFileSpaceWeather, IndexedSpaceWeather
from msisdrag.domain.drag import DensityPipeline
from msisdrag.errors import ConfigurationError

ENV_SOLAR_FLUX_FILE = "MSISDRAG_SOLAR_FLUX_FILE"
ENV_AP_INDEX_FILE = "MSISDRAG_AP_INDEX_FILE"
ENV_MODEL_EXECUTABLE = "MSISDRAG_MODEL_EXECUTABLE"
ENV_MODEL_DIR = "MSISDRAG_MODEL_DIR"
ENV_MODEL_TIMEOUT = "MSISDRAG_MODEL_TIMEOUT"
ENV_INDEX_TABLES = "MSISDRAG_INDEX_TABLES"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})


@dataclass(frozen=True)
class PipelineConfig:
    """Locations and limits for the density pipeline's external resources."""
    solar_flux_path: Path
    geomagnetic_path: Path
    model_executable: Path
    model_directory: Path | None = None
    timeout_s: float = DEFAULT_TIMEOUT_S
    index_tables: bool = False

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> "PipelineConfig":
        """Build a configuration from MSISDRAG_* environment variables.

        Raises:
            ConfigurationError: If a required variable is unset or a value
                cannot be parsed.
        """
        if environ is None:
            environ = os.environ

        def required(name: str) -> Path:
            value = environ.get(name, "").strip()
            if not value:
                raise ConfigurationError(f"Environment variable {name} is not set")
            return Path(value)

        model_dir = environ.get(ENV_MODEL_DIR, "").strip()

        timeout_text = environ.get(ENV_MODEL_TIMEOUT, "").strip()
        try:
            timeout_s = float(timeout_text) if timeout_text else DEFAULT_TIMEOUT_S
        except ValueError:
            raise ConfigurationError(
                f"{ENV_MODEL_TIMEOUT} must be a number of seconds, got {timeout_text!r}"
            ) from None

        index_text = environ.get(ENV_INDEX_TABLES, "").strip().lower()
        if index_text in _TRUE_VALUES:
            index_tables = True
        elif index_text in _FALSE_VALUES:
            index_tables = False
        else:
            raise ConfigurationError(
                f"{ENV_INDEX_TABLES} must be a boolean flag, got {index_text!r}"
            )

        config = cls(
            solar_flux_path=required(ENV_SOLAR_FLUX_FILE),
            geomagnetic_path=required(ENV_AP_INDEX_FILE),
            model_executable=required(ENV_MODEL_EXECUTABLE),
            model_directory=Path(model_dir) if model_dir else None,
            timeout_s=timeout_s,
            index_tables=index_tables,
        )
        config.validate()
        return config

    def validate(self) -> None:
        if not self.timeout_s > 0:
            raise ConfigurationError(f"Model timeout must be positive, got {self.timeout_s}")


def build_density_pipeline(config: PipelineConfig) -> DensityPipeline:
    """Wire file and subprocess adapters into a DensityPipeline."""
    config.validate()
    if config.index_tables:
        space_weather = IndexedSpaceWeather(config.solar_flux_path, config.geomagnetic_path)
    else:
        space_weather = FlatFileSpaceWeather(config.solar_flux_path, config.geomagnetic_path)
    model = SubprocessAtmosphereModel(
        config.model_executable,
        working_directory=config.model_directory,
        timeout_s=config.timeout_s,
    )
    return DensityPipeline(space_weather, model)
