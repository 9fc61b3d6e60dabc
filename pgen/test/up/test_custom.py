# SPDX-License-Identifier: MIT
"""Tests for UpCustom and setup step decoding."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from pgen.core.result import Err, Ok
from pgen.up import (
    CommandFailed,
    InvalidConfiguration,
    MissingOrInvalidField,
    StepDecodeError,
    UpConfigurationError,
    UpCustom,
    UpPrecondition,
    load_steps,
    up_from_dict,
)

PY = sys.executable


class TestUpCustom:
    def test_meet_runs_command_in_project(self, tmp_path: Path) -> None:
        step = UpCustom(
            name="marker",
            meet_command=[PY, "-c", "open('done', 'w').close()"],
            is_met_command=[PY, "-c", "import os; raise SystemExit(0 if os.path.exists('done') else 1)"],
        )
        assert step.is_met(tmp_path) is False

        assert step.meet(tmp_path) == Ok(None)

        assert (tmp_path / "done").exists()
        assert step.is_met(tmp_path) is True

    def test_meet_failure(self, tmp_path: Path) -> None:
        step = UpCustom(
            name="broken",
            meet_command=[PY, "-c", "raise SystemExit(2)"],
            is_met_command=[PY, "-c", "raise SystemExit(1)"],
        )

        result = step.meet(tmp_path)

        assert isinstance(result, Err)
        assert isinstance(result.error, CommandFailed)
        assert result.error.name == "broken"
        assert "exit 2" in result.error.message

    def test_meet_tool_not_found(self, tmp_path: Path) -> None:
        step = UpCustom(
            name="missing",
            meet_command=["definitely-not-a-real-binary-xyz"],
            is_met_command=["definitely-not-a-real-binary-xyz"],
        )
        result = step.meet(tmp_path)
        assert isinstance(result, Err)
        assert isinstance(result.error, CommandFailed)

    def test_empty_meet_command_rejected(self) -> None:
        with pytest.raises(UpConfigurationError, match="meet"):
            UpCustom(name="x", meet_command=[], is_met_command=["true"])

    def test_from_dict(self) -> None:
        result = UpCustom.from_dict(
            {"name": "Hooks", "meet": ["./hooks/install"], "is_met": ["./hooks/check", "-q"]}
        )
        assert result == Ok(
            UpCustom(
                name="Hooks",
                meet_command=("./hooks/install",),
                is_met_command=("./hooks/check", "-q"),
            )
        )

    def test_from_dict_missing_meet(self) -> None:
        result = UpCustom.from_dict({"name": "Hooks", "is_met": ["true"]})
        assert result == Err(MissingOrInvalidField(key="meet", expected="list of strings"))


class TestUpFromDict:
    def test_defaults_to_precondition(self) -> None:
        result = up_from_dict({"name": "git", "advice": "Install git", "is_met": ["git"]})
        assert result == Ok(UpPrecondition(name="git", advice="Install git", is_met_command=["git"]))

    def test_explicit_precondition(self) -> None:
        result = up_from_dict(
            {"type": "precondition", "name": "git", "advice": "Install git", "is_met": ["git"]}
        )
        assert isinstance(result, Ok)
        assert isinstance(result.value, UpPrecondition)

    def test_custom(self) -> None:
        result = up_from_dict(
            {"type": "custom", "name": "Hooks", "meet": ["make", "hooks"], "is_met": ["test", "-f", "x"]}
        )
        assert isinstance(result, Ok)
        assert isinstance(result.value, UpCustom)

    @pytest.mark.parametrize("kind", ["homebrew", 3])
    def test_unknown_type(self, kind: object) -> None:
        result = up_from_dict({"type": kind, "name": "x"})
        assert isinstance(result, Err)
        assert isinstance(result.error, MissingOrInvalidField)
        assert result.error.key == "type"


class TestLoadSteps:
    def test_in_order(self) -> None:
        result = load_steps(
            [
                {"name": "a", "advice": "A", "is_met": ["a"]},
                {"type": "custom", "name": "b", "meet": ["b"], "is_met": ["b"]},
            ]
        )
        assert isinstance(result, Ok)
        assert [step.name for step in result.value] == ["a", "b"]

    def test_reports_index_of_first_invalid(self) -> None:
        result = load_steps(
            [
                {"name": "a", "advice": "A", "is_met": ["a"]},
                {"name": "b", "advice": "B", "is_met": []},
                {"name": "c"},
            ]
        )
        assert isinstance(result, Err)
        assert isinstance(result.error, StepDecodeError)
        assert result.error.index == 1
        assert isinstance(result.error.error, InvalidConfiguration)
        assert result.error.message.startswith("up[1]: ")

    def test_empty(self) -> None:
        assert load_steps([]) == Ok([])
