# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the subprocess adapter around the density executable."""
import os
from pathlib import Path

import pytest

from msisdrag.adapters.msis_subprocess import DEFAULT_TIMEOUT_S, SubprocessAtmosphereModel
from msisdrag.errors import (
    DensityPipelineError,
    ModelInvocationFailed,
    ModelInvocationTimeout,
)

_ARGS = ["61", "2024", "43200", "400.0000", "10.00000", "20.00000", "0", "155.0", "152.4", "6"]


class TestRun:

    def test_returns_stdout(self, make_stub_model):
        model = SubprocessAtmosphereModel(make_stub_model(output="5.000e-10"))
        assert model.run(_ARGS).strip() == "5.000e-10"

    def test_arguments_passed_in_order(self, make_stub_model):
        script = make_stub_model()
        SubprocessAtmosphereModel(script).run(_ARGS)
        recorded = (script.parent / "args.txt").read_text().split()
        assert recorded == _ARGS

    def test_runs_in_executable_directory(self, make_stub_model):
        script = make_stub_model()
        SubprocessAtmosphereModel(script).run(_ARGS)
        child_cwd = (script.parent / "cwd.txt").read_text().strip()
        assert Path(child_cwd).resolve() == script.parent.resolve()

    def test_explicit_working_directory(self, make_stub_model, tmp_path):
        script = make_stub_model()
        elsewhere = tmp_path / "coefficients"
        elsewhere.mkdir()
        model = SubprocessAtmosphereModel(script, working_directory=elsewhere)
        model.run(_ARGS)
        child_cwd = (script.parent / "cwd.txt").read_text().strip()
        assert Path(child_cwd).resolve() == elsewhere.resolve()
        assert model.working_directory == elsewhere

    def test_caller_directory_unchanged(self, make_stub_model):
        before = os.getcwd()
        SubprocessAtmosphereModel(make_stub_model()).run(_ARGS)
        assert os.getcwd() == before

    def test_default_timeout(self, make_stub_model):
        script = make_stub_model()
        model = SubprocessAtmosphereModel(script)
        assert DEFAULT_TIMEOUT_S == 30.0
        assert model.executable == script
        assert model.working_directory == script.parent


class TestUndecodableOutput:

    def test_non_ascii_bytes_fall_back(self, tmp_path):
        from msisdrag.domain.atmosphere_model import FALLBACK_DENSITY_KG_M3, parse_density_output
        script = tmp_path / "nrlmsise_binary"
        script.write_text("#!/bin/sh\nprintf '\\377\\376garbage\\n'\n", encoding="ascii")
        script.chmod(0o755)

        stdout = SubprocessAtmosphereModel(script).run(_ARGS)

        assert "garbage" in stdout
        reading = parse_density_output(stdout)
        assert reading.fallback_used
        assert reading.density_kg_m3 == FALLBACK_DENSITY_KG_M3


class TestFailures:

    def test_missing_executable(self, tmp_path):
        model = SubprocessAtmosphereModel(tmp_path / "no_such_model")
        with pytest.raises(ModelInvocationFailed):
            model.run(_ARGS)

    def test_non_zero_exit(self, make_stub_model):
        model = SubprocessAtmosphereModel(make_stub_model(exit_code=3))
        with pytest.raises(ModelInvocationFailed) as exc_info:
            model.run(_ARGS)
        message = str(exc_info.value)
        assert "status 3" in message
        assert "coefficient file missing" in message

    def test_timeout(self, make_stub_model):
        model = SubprocessAtmosphereModel(make_stub_model(sleep_s=5), timeout_s=0.2)
        with pytest.raises(ModelInvocationTimeout):
            model.run(_ARGS)

    def test_timeout_is_invocation_failure(self):
        assert issubclass(ModelInvocationTimeout, ModelInvocationFailed)
        assert issubclass(ModelInvocationFailed, DensityPipelineError)

    @pytest.mark.parametrize("timeout_s", [0, -1.0])
    def test_invalid_timeout(self, tmp_path, timeout_s):
        with pytest.raises(ValueError):
            SubprocessAtmosphereModel(tmp_path / "model", timeout_s=timeout_s)


class TestPortConformance:

    def test_is_atmosphere_model_runner(self, make_stub_model):
        from msisdrag.ports import AtmosphereModelRunner
        assert isinstance(SubprocessAtmosphereModel(make_stub_model()), AtmosphereModelRunner)
