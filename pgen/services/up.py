from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from pgen.core.result import Err, Ok, Result
from pgen.logging import get_logger
from pgen.output.console import ConsoleProtocol, Style
from pgen.up.base import CheckOutcome, OutcomeKind, UpRequired
from pgen.up.errors import UpError

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class StepStatus:
    name: str
    outcome: CheckOutcome
    met_by_command: bool = False

    @property
    def met(self) -> bool:
        return self.outcome.met or self.met_by_command


def _empty_statuses() -> list[StepStatus]:
    return []


@dataclass(frozen=True, slots=True)
class UpReport:
    steps: list[StepStatus] = field(default_factory=_empty_statuses)

    def has_unmet(self) -> bool:
        return any(not s.met for s in self.steps)

    def unmet(self) -> list[StepStatus]:
        return [s for s in self.steps if not s.met]


class UpService:
    """Checks setup steps in order and meets the ones that are not met.

    Steps are probed one after another; nothing is cached between runs.
    """

    def __init__(self, *, project_path: Path, console: ConsoleProtocol) -> None:
        self._project_path = project_path
        self._console = console

    def check(self, steps: Sequence[UpRequired]) -> UpReport:
        """Probe every step without trying to meet any of them."""
        self._console.header("Setup")
        report = UpReport()
        for step in steps:
            outcome = step.check(self._project_path)
            report.steps.append(StepStatus(name=step.name, outcome=outcome))
            self._print_outcome(step.name, outcome)
        return report

    def run(self, steps: Sequence[UpRequired]) -> Result[UpReport, UpError]:
        """Probe each step and meet it when needed.

        Stops at the first step that cannot be met; its error carries the
        text to show the user (for preconditions, the configured advice).
        """
        self._console.header("Setup")
        report = UpReport()
        for step in steps:
            outcome = step.check(self._project_path)
            if outcome.met:
                report.steps.append(StepStatus(name=step.name, outcome=outcome))
                self._print_outcome(step.name, outcome)
                continue

            self._console.info(f"Validating {step.name}")
            result = step.meet(self._project_path)
            if isinstance(result, Err):
                log.info("setup_step_unmet", step=step.name, error=result.error.message)
                return result
            report.steps.append(
                StepStatus(name=step.name, outcome=outcome, met_by_command=True)
            )
            self._console.success(step.name)

        return Ok(report)

    def _print_outcome(self, name: str, outcome: CheckOutcome) -> None:
        if outcome.met:
            self._console.success(name)
            return
        self._console.print(f"{name}: not met", Style.ERROR)
        if outcome.kind == OutcomeKind.CHECK_FAILED and outcome.reason:
            self._console.print(f"  {outcome.reason}", Style.DIM)
