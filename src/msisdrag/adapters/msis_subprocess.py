# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Subprocess adapter for the NRLMSISE-00 density executable.

The executable reads its coefficient files relative to its install
directory, so it runs with that directory as its working directory. The
directory is passed to the child process only; the caller's working
directory is never changed. Output is decoded as ASCII with undecodable
bytes replaced, so stray bytes reach the density parser as degenerate text.
"""
import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from msisdrag.errors import ModelInvocationFailed, ModelInvocationTimeout

_log = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 30.0


class SubprocessAtmosphereModel:
    """Runs the density executable once per call and returns its stdout."""

    def __init__(
        self,
        executable: str | Path,
        working_directory: str | Path | None = None,
        timeout_s: float = DEFAULT_TIMEOUT_S,
    ) -> None:
        if timeout_s <= 0:
            raise ValueError(f"timeout_s must be positive, got {timeout_s}")
        self._executable = Path(executable)
        if working_directory is None:
            working_directory = self._executable.parent
        self._working_directory = Path(working_directory)
        self._timeout_s = timeout_s

    @property
    def executable(self) -> Path:
        return self._executable

    @property
    def working_directory(self) -> Path:
        return self._working_directory

    def run(self, arguments: Sequence[str]) -> str:
        """Run the executable with positional arguments.

        Raises:
            ModelInvocationTimeout: If the process exceeds the timeout.
            ModelInvocationFailed: If the process cannot start or exits non-zero.
        """
        command = [str(self._executable), *arguments]
        _log.debug("nrlmsise: %s (cwd=%s)", " ".join(command), self._working_directory)
        try:
            proc = subprocess.run(
                command,
                cwd=self._working_directory,
                encoding="ascii",
                errors="replace",
                capture_output=True,
                check=False,
                timeout=self._timeout_s,
            )
        except subprocess.TimeoutExpired as exc:
            raise ModelInvocationTimeout(
                f"{self._executable} did not finish within {self._timeout_s} s"
            ) from exc
        except OSError as exc:
            raise ModelInvocationFailed(f"Unable to run {self._executable}: {exc}") from exc

        if proc.returncode != 0:
            raise ModelInvocationFailed(
                f"{self._executable} exited with status {proc.returncode}: "
                f"{proc.stderr.strip()}"
            )
        return proc.stdout
