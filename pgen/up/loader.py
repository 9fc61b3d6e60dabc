# SPDX-License-Identifier: MIT
"""Decoding setup steps from manifest dictionaries.

Each dictionary names its kind with an optional ``type`` key:

    {"name": "Xcode", "advice": "Install Xcode", "is_met": ["xcode-select", "-p"]}
    {"type": "custom", "name": "Hooks", "meet": ["./hooks/install"], "is_met": ["./hooks/check"]}

``type`` defaults to ``precondition``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from pgen.core.result import Err, Ok, Result

from .base import UpRequired
from .custom import UpCustom
from .errors import MissingOrInvalidField, UpError
from .precondition import UpPrecondition

__all__ = ["STEP_TYPES", "StepDecodeError", "load_steps", "up_from_dict"]

_Decoder = Callable[[Mapping[str, object], Path | None], Result[UpRequired, UpError]]

STEP_TYPES: dict[str, _Decoder] = {
    "precondition": UpPrecondition.from_dict,
    "custom": UpCustom.from_dict,
}


@dataclass(frozen=True, slots=True)
class StepDecodeError:
    """A setup step at ``index`` could not be decoded."""

    index: int
    error: UpError

    @property
    def message(self) -> str:
        return f"up[{self.index}]: {self.error.message}"

    def __str__(self) -> str:
        return self.message


def up_from_dict(
    data: Mapping[str, object], project_path: Path | None = None
) -> Result[UpRequired, UpError]:
    """Decode one setup step, dispatching on its ``type``."""
    kind = data.get("type", "precondition")
    decoder = STEP_TYPES.get(kind) if isinstance(kind, str) else None
    if decoder is None:
        return Err(MissingOrInvalidField(key="type", expected=" or ".join(STEP_TYPES)))
    return decoder(data, project_path)


def load_steps(
    entries: Iterable[Mapping[str, object]], project_path: Path | None = None
) -> Result[list[UpRequired], StepDecodeError]:
    """Decode setup steps in order, stopping at the first invalid one."""
    steps: list[UpRequired] = []
    for index, entry in enumerate(entries):
        match up_from_dict(entry, project_path):
            case Ok(step):
                steps.append(step)
            case Err(error):
                return Err(StepDecodeError(index=index, error=error))
    return Ok(steps)
