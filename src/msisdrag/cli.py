# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for single-epoch density and drag evaluation.

Usage:
    # Table and model locations from MSISDRAG_* environment variables
    msisdrag --epoch "01/03/2024 12:00:00" --altitude 400 --latitude 10 --longitude 20

    # Explicit locations, index tables once, print the model command
    msisdrag --epoch "01/03/2024, 12:00:00 UTC" --altitude 400 \\
        --latitude 10 --longitude 20 \\
        --solar-flux SOLFSMY.TXT --ap-index apindex \\
        --model ./nrlmsise_density --indexed --show-query

    # Drag acceleration for a relative ECEF velocity (km/s)
    msisdrag --epoch "01/03/2024 12:00:00" --altitude 400 --latitude 10 \\
        --longitude 20 --velocity 7.6 0.0 0.0 --cd 2.2 --area 10 --mass 500
"""
import argparse
import dataclasses
import logging
import os
import sys

from msisdrag.adapters.config import (
    ENV_AP_INDEX_FILE,
    ENV_MODEL_DIR,
    ENV_MODEL_EXECUTABLE,
    ENV_MODEL_TIMEOUT,
    ENV_SOLAR_FLUX_FILE,
    PipelineConfig,
    build_density_pipeline,
)
from msisdrag.domain.drag import (
    AtmosphericDragForce,
    DensityEvaluation,
    DragConfig,
    OrbitalState,
)
from msisdrag.errors import DensityPipelineError


def _config_from_args(args: argparse.Namespace) -> PipelineConfig:
    """Environment configuration with command-line flags taking precedence."""
    environ = dict(os.environ)
    overrides = {
        ENV_SOLAR_FLUX_FILE: args.solar_flux,
        ENV_AP_INDEX_FILE: args.ap_index,
        ENV_MODEL_EXECUTABLE: args.model,
        ENV_MODEL_DIR: args.model_dir,
        ENV_MODEL_TIMEOUT: None if args.timeout is None else str(args.timeout),
    }
    for name, value in overrides.items():
        if value is not None:
            environ[name] = value
    config = PipelineConfig.from_environment(environ)
    if args.indexed:
        config = dataclasses.replace(config, index_tables=True)
    return config


def _print_query(evaluation: DensityEvaluation) -> None:
    print(f"Query: {' '.join(evaluation.query.arguments())}")


def run(args: argparse.Namespace) -> None:
    pipeline = build_density_pipeline(_config_from_args(args))

    if args.velocity is None:
        evaluation = pipeline.evaluate(args.altitude, args.latitude, args.longitude, args.epoch)
        if args.show_query:
            _print_query(evaluation)
        print(f"Density: {evaluation.reading.density_kg_m3:.6e} kg/m3")
        if evaluation.reading.fallback_used:
            print("Warning: fallback density substituted for model output", file=sys.stderr)
        return

    state = OrbitalState(
        altitude_km=args.altitude,
        latitude_deg=args.latitude,
        longitude_deg=args.longitude,
        epoch=args.epoch,
        relative_velocity_ecef=tuple(args.velocity),
    )
    force = AtmosphericDragForce(
        DragConfig(cd=args.cd, area_m2=args.area, mass_kg=args.mass), pipeline,
    )
    ax, ay, az = force.compute_acceleration(state)
    if args.show_query:
        _print_query(force.last_evaluation)
    print(f"Density: {state.atmos_density:.6e} kg/m3")
    print(f"Acceleration: {ax:.6e} {ay:.6e} {az:.6e} km/s2")
    for message in state.errors + state.warnings:
        print(f"Warning: {message}", file=sys.stderr)


def main():
    parser = argparse.ArgumentParser(
        description="Evaluate NRLMSISE-00 density and drag for one epoch and position"
    )
    parser.add_argument(
        '--epoch', required=True,
        help="UTC datestamp, day first (e.g. '01/03/2024 12:00:00')"
    )
    parser.add_argument(
        '--altitude', type=float, required=True,
        help="Geodetic altitude in km"
    )
    parser.add_argument(
        '--latitude', type=float, default=0.0,
        help="Geodetic latitude in degrees (default: 0)"
    )
    parser.add_argument(
        '--longitude', type=float, default=0.0,
        help="Geodetic longitude in degrees (default: 0)"
    )
    parser.add_argument(
        '--show-query', action='store_true', default=False,
        help="Print the model arguments before running it"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Log table lookups and model invocations"
    )

    source_group = parser.add_argument_group('data sources (override MSISDRAG_* variables)')
    source_group.add_argument(
        '--solar-flux',
        help="Solar flux table (F10.7, F10.7A)"
    )
    source_group.add_argument(
        '--ap-index',
        help="Geomagnetic ap index table"
    )
    source_group.add_argument(
        '--model',
        help="NRLMSISE-00 density executable"
    )
    source_group.add_argument(
        '--model-dir',
        help="Working directory for the model (default: executable's directory)"
    )
    source_group.add_argument(
        '--timeout', type=float,
        help="Seconds allowed per model run (default: 30)"
    )
    source_group.add_argument(
        '--indexed', action='store_true', default=False,
        help="Read the tables once instead of scanning per lookup"
    )

    drag_group = parser.add_argument_group('drag acceleration')
    drag_group.add_argument(
        '--velocity', type=float, nargs=3, metavar=('VX', 'VY', 'VZ'),
        help="Relative ECEF velocity in km/s; prints drag acceleration"
    )
    drag_group.add_argument(
        '--cd', type=float, default=2.2,
        help="Drag coefficient (default: 2.2)"
    )
    drag_group.add_argument(
        '--area', type=float, default=1.0,
        help="Cross-sectional area in m^2 (default: 1)"
    )
    drag_group.add_argument(
        '--mass', type=float, default=100.0,
        help="Mass in kg (default: 100)"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        run(args)
    except DensityPipelineError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
