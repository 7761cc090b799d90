#!/usr/bin/env python3
# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Generate synthetic solar flux and geomagnetic tables for the density pipeline.

Deterministic (seeded RNG). Writes one row per day in the same layouts as the
historical tables the pipeline reads:

- solar flux: 'YYYY DDD JulianDay F10 F81c'
- geomagnetic: fixed columns, eight 3-hourly ap values at columns 32-55

F10.7 follows a single sinusoidal solar cycle with ±10% day-to-day noise;
F10.7A is its 81-day centred running mean. ap values are drawn from a
geometric distribution with occasional storm days.

Usage:
    python scripts/generate_space_weather_tables.py OUT_DIR [--start 2020-01-01] [--days 1461]
"""
import argparse
import math
from datetime import date, timedelta
from pathlib import Path

import numpy as np

from msisdrag.domain.space_weather import (
    SolarFluxRecord,
    format_geomagnetic_line,
    format_solar_flux_line,
)

_CYCLE_START = 2019.9  # solar cycle 25 minimum
_CYCLE_YEARS = 11.0
_F107_MIN = 70.0
_F107_AMPLITUDE = 110.0
_STORM_PROBABILITY = 0.03


def _decimal_year(d: date) -> float:
    year_start = date(d.year, 1, 1)
    year_end = date(d.year + 1, 1, 1)
    return d.year + (d - year_start).days / (year_end - year_start).days


def _base_f107(d: date) -> float:
    phase = (_decimal_year(d) - _CYCLE_START) / _CYCLE_YEARS
    return _F107_MIN + _F107_AMPLITUDE * math.sin(math.pi * (phase % 1.0)) ** 2


def generate(out_dir: Path, start: date, days: int, seed: int = 20240301) -> tuple[Path, Path]:
    rng = np.random.default_rng(seed=seed)
    dates = [start + timedelta(days=i) for i in range(days)]

    f107 = np.array([_base_f107(d) for d in dates])
    f107 *= 1.0 + 0.1 * rng.standard_normal(days)
    f107 = np.clip(f107, 65.0, None)

    # 81-day centred mean, edges padded with the nearest value
    padded = np.pad(f107, 40, mode="edge")
    f107a = np.convolve(padded, np.ones(81) / 81.0, mode="valid")

    ap = rng.geometric(p=0.15, size=(days, 8)) - 1
    storms = rng.random(days) < _STORM_PROBABILITY
    ap[storms] += rng.integers(30, 150, size=(int(storms.sum()), 8))
    ap = np.clip(ap, 0, 400)

    out_dir.mkdir(parents=True, exist_ok=True)
    flux_path = out_dir / "SOLFSMY.TXT"
    ap_path = out_dir / "apindex"

    with open(flux_path, "w", encoding="ascii") as f:
        f.write("# YYYY DDD   JulianDay    F10    F81c\n")
        for d, daily, average in zip(dates, f107, f107a):
            record = SolarFluxRecord(
                year=d.year,
                day_of_year=d.timetuple().tm_yday,
                f107=round(float(daily), 1),
                f107a=round(float(average), 1),
            )
            f.write(format_solar_flux_line(record) + "\n")

    with open(ap_path, "w", encoding="ascii") as f:
        for i, d in enumerate(dates):
            rotation, rotation_day = divmod(i, 27)
            f.write(format_geomagnetic_line(
                d, [int(v) for v in ap[i]],
                bartels_rotation=2580 + rotation,
                rotation_day=rotation_day + 1,
            ) + "\n")

    return flux_path, ap_path


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("out_dir", type=Path)
    parser.add_argument("--start", type=date.fromisoformat, default=date(2020, 1, 1))
    parser.add_argument("--days", type=int, default=1461)
    parser.add_argument("--seed", type=int, default=20240301)
    args = parser.parse_args()

    flux_path, ap_path = generate(args.out_dir, args.start, args.days, args.seed)
    print(f"wrote={flux_path}")
    print(f"wrote={ap_path}")


if __name__ == "__main__":
    main()
