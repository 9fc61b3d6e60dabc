# SPDX-License-Identifier: MIT
"""Custom setup step: a probe command plus a command that satisfies it."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from pgen.core.result import Err, Ok, Result
from pgen.core.structured import as_str_list
from pgen.logging import get_logger
from pgen.platform.process import resolve_launch_path, run_silent

from .base import CheckOutcome, probe, validate_command
from .errors import CommandFailed, MissingOrInvalidField, UpConfigurationError, UpError

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class UpCustom:
    """Setup step that runs ``meet_command`` when ``is_met_command`` fails.

    Both commands are ``[executable, *arguments]``; executables given as
    paths are resolved against the project directory.
    """

    name: str
    meet_command: tuple[str, ...]
    is_met_command: tuple[str, ...]

    def __post_init__(self) -> None:
        for attr, field in (("meet_command", "meet"), ("is_met_command", "is_met")):
            match validate_command(self.name, getattr(self, attr), field):
                case Err(error):
                    raise UpConfigurationError(error)
                case Ok(command):
                    object.__setattr__(self, attr, command)

    @classmethod
    def from_dict(
        cls, data: Mapping[str, object], project_path: Path | None = None
    ) -> Result[UpCustom, UpError]:
        name = data.get("name")
        if not isinstance(name, str):
            return Err(MissingOrInvalidField(key="name", expected="string"))

        commands: dict[str, tuple[str, ...]] = {}
        for key in ("meet", "is_met"):
            command = as_str_list(data.get(key))
            if command is None:
                return Err(MissingOrInvalidField(key=key, expected="list of strings"))
            match validate_command(name, command, key):
                case Err(error):
                    return Err(error)
                case Ok(valid):
                    commands[key] = valid

        return Ok(cls(name=name, meet_command=commands["meet"], is_met_command=commands["is_met"]))

    def check(self, project_path: Path) -> CheckOutcome:
        return probe(self.name, self.is_met_command, project_path)

    def is_met(self, project_path: Path) -> bool:
        return self.check(project_path).met

    def meet(self, project_path: Path) -> Result[None, UpError]:
        """Run the meet command in the project directory, streaming its output."""
        match resolve_launch_path(self.meet_command, project_path):
            case Err(error):
                return Err(CommandFailed(name=self.name, cause=error))
            case Ok(launch_path):
                arguments = [str(launch_path), *self.meet_command[1:]]

        log.info("setup_step_meet", step=self.name, command=arguments)
        result = run_silent(arguments, cwd=project_path)
        if isinstance(result, Err):
            return Err(CommandFailed(name=self.name, cause=result.error))
        return Ok(None)
