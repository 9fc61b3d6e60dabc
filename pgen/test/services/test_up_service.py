"""Tests for UpService."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pgen.core.result import Err, Ok, Result
from pgen.output.console import MockConsole, Style
from pgen.services.up import UpService
from pgen.up import CheckOutcome, PreconditionUnfulfilled, UpError, UpPrecondition


def _calls() -> list[str]:
    return []


@dataclass
class FakeStep:
    """Setup step with scripted outcomes, recording calls."""

    name: str
    outcome: CheckOutcome
    meet_result: Result[None, UpError] = Ok(None)
    calls: list[str] = field(default_factory=_calls)

    def check(self, project_path: Path) -> CheckOutcome:
        self.calls.append("check")
        return self.outcome

    def is_met(self, project_path: Path) -> bool:
        return self.check(project_path).met

    def meet(self, project_path: Path) -> Result[None, UpError]:
        self.calls.append("meet")
        return self.meet_result


def _service(tmp_path: Path) -> tuple[UpService, MockConsole]:
    console = MockConsole()
    return UpService(project_path=tmp_path, console=console), console


class TestCheck:
    def test_reports_each_step(self, tmp_path: Path) -> None:
        service, console = _service(tmp_path)
        steps = [
            FakeStep("git", CheckOutcome.success()),
            FakeStep("xcode", CheckOutcome.not_met("xcode-select -p failed (exit 2)")),
        ]

        report = service.check(steps)

        assert [s.name for s in report.steps] == ["git", "xcode"]
        assert report.has_unmet()
        assert [s.name for s in report.unmet()] == ["xcode"]
        assert console.find("OK git")
        assert console.find("xcode: not met")

    def test_never_meets(self, tmp_path: Path) -> None:
        service, _ = _service(tmp_path)
        step = FakeStep("xcode", CheckOutcome.not_met("exit 1"))

        service.check([step])

        assert step.calls == ["check"]

    def test_check_failure_reason_shown(self, tmp_path: Path) -> None:
        service, console = _service(tmp_path)

        service.check([FakeStep("lint", CheckOutcome.failed("swiftlint: not found on PATH"))])

        dim = [o.message for o in console.outputs if o.style == Style.DIM]
        assert dim == ["  swiftlint: not found on PATH"]


class TestRun:
    def test_met_steps_are_not_met_again(self, tmp_path: Path) -> None:
        service, _ = _service(tmp_path)
        step = FakeStep("git", CheckOutcome.success())

        result = service.run([step])

        assert isinstance(result, Ok)
        assert step.calls == ["check"]
        assert not result.value.has_unmet()

    def test_unmet_step_is_met(self, tmp_path: Path) -> None:
        service, console = _service(tmp_path)
        step = FakeStep("hooks", CheckOutcome.not_met("exit 1"))

        result = service.run([step])

        assert isinstance(result, Ok)
        assert step.calls == ["check", "meet"]
        assert result.value.steps[0].met_by_command
        assert console.find("Validating hooks")

    def test_stops_at_first_failure(self, tmp_path: Path) -> None:
        service, _ = _service(tmp_path)
        failing = FakeStep(
            "xcode",
            CheckOutcome.not_met("exit 2"),
            meet_result=Err(PreconditionUnfulfilled(name="xcode", advice="Install Xcode")),
        )
        after = FakeStep("git", CheckOutcome.success())

        result = service.run([failing, after])

        assert result == Err(PreconditionUnfulfilled(name="xcode", advice="Install Xcode"))
        assert after.calls == []

    def test_real_precondition_advice(self, tmp_path: Path) -> None:
        service, _ = _service(tmp_path)
        precondition = UpPrecondition(
            name="tool",
            advice="brew install definitely-not-a-real-binary-xyz",
            is_met_command=["definitely-not-a-real-binary-xyz"],
        )

        result = service.run([precondition])

        assert isinstance(result, Err)
        assert result.error.hint == "brew install definitely-not-a-real-binary-xyz"
