# SPDX-License-Identifier: MIT
"""Precondition that has to be met before setup can succeed."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from pgen.core.result import Err, Ok, Result
from pgen.core.structured import as_str_list

from .base import CheckOutcome, probe, validate_command
from .errors import MissingOrInvalidField, PreconditionUnfulfilled, UpConfigurationError, UpError


@dataclass(frozen=True, slots=True)
class UpPrecondition:
    """A setup requirement the tool can check but not fix.

    Attributes:
        name: Name of the step, shown to the user.
        advice: Shown to the user if the condition isn't met.
        is_met_command: Shell command that exits 0 if the condition is met,
            as ``[executable, *arguments]``. Must not be empty.
    """

    name: str
    advice: str
    is_met_command: tuple[str, ...]

    def __post_init__(self) -> None:
        match validate_command(self.name, self.is_met_command, "is_met"):
            case Err(error):
                raise UpConfigurationError(error)
            case Ok(command):
                object.__setattr__(self, "is_met_command", command)

    @classmethod
    def from_dict(
        cls, data: Mapping[str, object], project_path: Path | None = None
    ) -> Result[UpPrecondition, UpError]:
        """Build a precondition from its manifest representation.

        Expects ``name`` and ``advice`` strings and a non-empty ``is_met``
        list of strings. ``project_path`` is accepted for parity with other
        setup steps; preconditions hold no paths of their own.
        """
        name = data.get("name")
        if not isinstance(name, str):
            return Err(MissingOrInvalidField(key="name", expected="string"))
        advice = data.get("advice")
        if not isinstance(advice, str):
            return Err(MissingOrInvalidField(key="advice", expected="string"))
        command = as_str_list(data.get("is_met"))
        if command is None:
            return Err(MissingOrInvalidField(key="is_met", expected="list of strings"))

        match validate_command(name, command, "is_met"):
            case Err(error):
                return Err(error)
            case Ok(_):
                return Ok(cls(name=name, advice=advice, is_met_command=tuple(command)))

    def check(self, project_path: Path) -> CheckOutcome:
        """Probe the condition, keeping the reason it is or isn't met."""
        return probe(self.name, self.is_met_command, project_path)

    def is_met(self, project_path: Path) -> bool:
        """Return True when the precondition is already satisfied.

        Resolution and launch failures count as not met; this never raises.
        The command runs again on every call.
        """
        return self.check(project_path).met

    def meet(self, project_path: Path) -> Result[None, UpError]:
        """Always fails with the configured advice.

        Meeting a precondition is up to the user.
        """
        return Err(PreconditionUnfulfilled(name=self.name, advice=self.advice))
