"""Subprocess execution and executable lookup with Result-based errors.

Usage:
    match resolve_launch_path(["swiftlint", "version"], project_path):
        case Ok(launch_path):
            result = run([str(launch_path), "version"], cwd=project_path)
        case Err(error):
            print(error.reason)
"""

from __future__ import annotations

import os
import shutil
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from pgen.core.result import Err, Ok, Result

__all__ = [
    "ProcessError",
    "ResolutionError",
    "is_path_like",
    "resolve_launch_path",
    "run",
    "run_silent",
    "which",
]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: Exit code, or -1 if the process could not be started.
        stdout: Standard output (may be empty).
        stderr: Standard error, or the launch error message.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def launched(self) -> bool:
        """True if the process started and exited on its own."""
        return self.returncode >= 0

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        if not self.launched:
            return f"{cmd_str} could not be started: {self.stderr}"
        return f"{cmd_str} failed (exit {self.returncode})"


@dataclass(frozen=True, slots=True)
class ResolutionError:
    """The launch path of a command could not be determined."""

    executable: str
    reason: str

    def __str__(self) -> str:
        return f"{self.executable}: {self.reason}"


def is_path_like(token: str) -> bool:
    """True if ``token`` names a path rather than a tool on PATH."""
    if "/" in token:
        return True
    return os.sep != "/" and os.sep in token


def which(name: str) -> Result[Path, ResolutionError]:
    """Look up ``name`` on the search path."""
    found = shutil.which(name)
    if found is None:
        return Err(ResolutionError(executable=name, reason="not found on PATH"))
    return Ok(Path(found).absolute())


def resolve_launch_path(
    command: Sequence[str], project_path: Path
) -> Result[Path, ResolutionError]:
    """Return the absolute path of the executable a command starts with.

    A first token containing a path separator is taken relative to
    ``project_path`` (absolute tokens are kept as they are); a bare name is
    looked up with :func:`which`.
    """
    if not command:
        return Err(ResolutionError(executable="", reason="empty command"))

    launch_argument = command[0]
    if not launch_argument:
        return Err(ResolutionError(executable="", reason="empty executable name"))
    if is_path_like(launch_argument):
        try:
            return Ok(Path(os.path.normpath(project_path.absolute() / launch_argument)))
        except (TypeError, ValueError) as e:
            return Err(ResolutionError(executable=launch_argument, reason=str(e)))
    return which(launch_argument)


def run(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
) -> Result[str, ProcessError]:
    """Execute a command, capturing output.

    Output that is not valid UTF-8 is decoded with replacement characters.

    Returns:
        Ok(stdout) on a zero exit status, Err(ProcessError) otherwise.
        Launch failures (missing binary, permission denied, bad cwd) are
        reported with returncode -1.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=env,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except (OSError, ValueError) as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
            )
        )

    return Ok(proc.stdout)


def run_silent(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
) -> Result[None, ProcessError]:
    """Execute a command with output streaming to the terminal."""
    try:
        proc = subprocess.run(cmd, cwd=str(cwd), env=env, check=False)
    except (OSError, ValueError) as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(command=tuple(cmd), returncode=proc.returncode, stdout="", stderr="")
        )

    return Ok(None)
