# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Shared fixtures: synthetic space weather tables and a stub model executable."""
import os
import stat
from pathlib import Path

import pytest


# 2024-03-01 is day 61 of a leap year; solar flux is read for day 60.
SOLAR_FLUX_ROWS = [
    "# YYYY DDD   JulianDay    F10    F81c",
    "  2023 365   2460309.5  140.0  145.5",
    "  2024   1   2460310.5  142.3  146.0",
    "  2024   6   2460315.5  130.1  147.2",
    "  2024  59   2460368.5  148.1  150.2",
    "  2024  60   2460369.5  155.0  152.4",
    "  2024  61   2460370.5  160.2  153.0",
    "  2024 160   2460469.5  171.7  166.4",
]

STORM_AP = [27, 32, 39, 48, 56, 48, 39, 32]
QUIET_AP = [4, 8, 12, 4, 7, 3, 2, 5]


def ap_row(key: str, values: list[int]) -> str:
    """Fixed-column geomagnetic row with the ap values at columns 32-55."""
    header = key + "2598" + " 5" + " 0" * 8 + "  0"
    assert len(header) == 31
    daily = round(sum(values) / 8)
    return header + "".join(f"{v:3d}" for v in values) + f"{daily:3d}"


GEOMAGNETIC_ROWS = [
    ap_row("231231", [3, 3, 2, 2, 4, 5, 3, 2]),
    ap_row("240229", STORM_AP),
    ap_row("240301", QUIET_AP),
    ap_row("240302", [9, 9, 9, 9, 9, 9, 9, 9]),
    ap_row("241231", [1, 1, 1, 1, 1, 1, 1, 1]),
]


def write_lines(path: Path, lines: list[str]) -> Path:
    path.write_text("".join(line + "\n" for line in lines), encoding="ascii")
    return path


@pytest.fixture
def solar_flux_path(tmp_path):
    return write_lines(tmp_path / "SOLFSMY.TXT", SOLAR_FLUX_ROWS)


@pytest.fixture
def geomagnetic_path(tmp_path):
    return write_lines(tmp_path / "apindex", GEOMAGNETIC_ROWS)


@pytest.fixture
def make_stub_model(tmp_path):
    """Factory writing a /bin/sh stand-in for the density executable.

    The stub records its arguments and working directory next to itself,
    prints `output` and exits with `exit_code`.
    """
    def _make(output="5.000e-10", exit_code=0, sleep_s=None, name="nrlmsise_stub"):
        model_dir = tmp_path / "msis"
        model_dir.mkdir(exist_ok=True)
        script = model_dir / name
        lines = [
            "#!/bin/sh",
            f'echo "$@" > "{model_dir}/args.txt"',
            f'pwd > "{model_dir}/cwd.txt"',
        ]
        if sleep_s is not None:
            lines.append(f"exec sleep {sleep_s}")
        lines.append(f"printf '%s\\n' '{output}'")
        if exit_code:
            lines.append("echo 'coefficient file missing' >&2")
        lines.append(f"exit {exit_code}")
        script.write_text("\n".join(lines) + "\n", encoding="ascii")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _make


@pytest.fixture
def model_env(monkeypatch, solar_flux_path, geomagnetic_path, make_stub_model):
    """MSISDRAG_* variables pointing at the synthetic tables and stub model."""
    script = make_stub_model()
    for name in list(os.environ):
        if name.startswith("MSISDRAG_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("MSISDRAG_SOLAR_FLUX_FILE", str(solar_flux_path))
    monkeypatch.setenv("MSISDRAG_AP_INDEX_FILE", str(geomagnetic_path))
    monkeypatch.setenv("MSISDRAG_MODEL_EXECUTABLE", str(script))
    return script
