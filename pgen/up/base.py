# SPDX-License-Identifier: MIT
"""Capability interface and check outcomes shared by setup steps."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Protocol

from pgen.core.result import Err, Ok, Result
from pgen.logging import get_logger
from pgen.platform.process import resolve_launch_path, run

from .errors import InvalidConfiguration, UpError

log = get_logger(__name__)


class OutcomeKind(Enum):
    MET = auto()
    """The probe command exited with status 0."""

    NOT_MET = auto()
    """The probe command ran and exited non-zero."""

    CHECK_FAILED = auto()
    """The probe command could not be resolved or started."""


@dataclass(frozen=True, slots=True)
class CheckOutcome:
    """Result of probing a setup step.

    Callers outside this package only see :attr:`met`; the kind and reason
    are kept for logs and diagnostics.
    """

    kind: OutcomeKind
    reason: str = ""

    @property
    def met(self) -> bool:
        return self.kind == OutcomeKind.MET

    @classmethod
    def success(cls) -> CheckOutcome:
        return cls(kind=OutcomeKind.MET)

    @classmethod
    def not_met(cls, reason: str) -> CheckOutcome:
        return cls(kind=OutcomeKind.NOT_MET, reason=reason)

    @classmethod
    def failed(cls, reason: str) -> CheckOutcome:
        return cls(kind=OutcomeKind.CHECK_FAILED, reason=reason)


class UpRequired(Protocol):
    """A named setup step that can be probed and, when unmet, met."""

    @property
    def name(self) -> str: ...

    def check(self, project_path: Path) -> CheckOutcome:
        """Probe the step, keeping why it is or isn't met."""
        ...

    def is_met(self, project_path: Path) -> bool:
        """Return True when the step does not need to run."""
        ...

    def meet(self, project_path: Path) -> Result[None, UpError]:
        """Satisfy the step, or explain why it can't be."""
        ...


def validate_command(
    name: str, command: Sequence[str], field: str
) -> Result[tuple[str, ...], InvalidConfiguration]:
    """Check that ``command`` has an executable to launch."""
    if isinstance(command, str):
        return Err(InvalidConfiguration(name=name, reason=f"'{field}' must be a list of arguments"))
    if not command:
        return Err(InvalidConfiguration(name=name, reason=f"'{field}' must not be empty"))
    if not command[0].strip():
        return Err(InvalidConfiguration(name=name, reason=f"'{field}' has an empty executable"))
    return Ok(tuple(command))


def probe(name: str, command: Sequence[str], project_path: Path) -> CheckOutcome:
    """Resolve and run ``command``, reporting whether it exits 0.

    Never raises: resolution and launch failures become ``CHECK_FAILED``.
    """
    match resolve_launch_path(command, project_path):
        case Err(error):
            outcome = CheckOutcome.failed(str(error))
        case Ok(launch_path):
            arguments = [str(launch_path), *command[1:]]
            match run(arguments, cwd=project_path):
                case Ok(_):
                    outcome = CheckOutcome.success()
                case Err(error) if error.launched:
                    outcome = CheckOutcome.not_met(str(error))
                case Err(error):
                    outcome = CheckOutcome.failed(str(error))

    log.debug(
        "setup_step_probed",
        step=name,
        outcome=outcome.kind.name.lower(),
        reason=outcome.reason or None,
    )
    return outcome
