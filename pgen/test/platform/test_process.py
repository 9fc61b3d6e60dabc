"""Tests for pgen.platform.process module."""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from pgen.core.result import Err, Ok
from pgen.platform.process import (
    ProcessError,
    ResolutionError,
    is_path_like,
    resolve_launch_path,
    run,
    run_silent,
    which,
)


class TestProcessError:
    def test_str_short_command(self) -> None:
        error = ProcessError(command=("git", "status"), returncode=1, stdout="", stderr="")
        assert str(error) == "git status failed (exit 1)"

    def test_str_long_command_truncated(self) -> None:
        error = ProcessError(
            command=("xcodebuild", "-scheme", "App", "-sdk", "iphoneos"),
            returncode=65,
            stdout="",
            stderr="",
        )
        assert str(error) == "xcodebuild -scheme App ... failed (exit 65)"

    def test_not_launched(self) -> None:
        error = ProcessError(command=("nope",), returncode=-1, stdout="", stderr="No such file")
        assert error.launched is False
        assert "could not be started" in str(error)


class TestIsPathLike:
    @pytest.mark.parametrize("token", ["./scripts/check.sh", "bin/tool", "/usr/bin/true"])
    def test_paths(self, token: str) -> None:
        assert is_path_like(token)

    @pytest.mark.parametrize("token", ["git", "xcode-select", "swiftlint.sh"])
    def test_bare_names(self, token: str) -> None:
        assert not is_path_like(token)


class TestWhich:
    def test_found(self) -> None:
        with patch("pgen.platform.process.shutil.which", return_value="/usr/bin/git"):
            result = which("git")
        assert result == Ok(Path("/usr/bin/git"))

    def test_not_found(self) -> None:
        with patch("pgen.platform.process.shutil.which", return_value=None):
            result = which("definitely-not-a-real-binary-xyz")
        assert isinstance(result, Err)
        assert result.error.executable == "definitely-not-a-real-binary-xyz"


class TestResolveLaunchPath:
    def test_relative_path_resolves_against_project(self, tmp_path: Path) -> None:
        with patch("pgen.platform.process.shutil.which") as which_mock:
            result = resolve_launch_path(["./scripts/check.sh", "--strict"], tmp_path)

        assert result == Ok(tmp_path / "scripts" / "check.sh")
        which_mock.assert_not_called()

    def test_parent_segments_are_normalized(self, tmp_path: Path) -> None:
        project = tmp_path / "App"
        result = resolve_launch_path(["../tools/lint"], project)
        assert result == Ok(tmp_path / "tools" / "lint")

    def test_absolute_path_kept(self, tmp_path: Path) -> None:
        absolute = Path(sys.executable)
        result = resolve_launch_path([str(absolute)], tmp_path)
        assert result == Ok(absolute)

    def test_bare_name_uses_which(self, tmp_path: Path) -> None:
        with patch("pgen.platform.process.shutil.which", return_value="/opt/bin/swiftlint"):
            result = resolve_launch_path(["swiftlint", "version"], tmp_path)
        assert result == Ok(Path("/opt/bin/swiftlint"))

    def test_missing_tool(self, tmp_path: Path) -> None:
        result = resolve_launch_path(["definitely-not-a-real-binary-xyz"], tmp_path)
        assert isinstance(result, Err)
        assert isinstance(result.error, ResolutionError)

    def test_empty_command(self, tmp_path: Path) -> None:
        result = resolve_launch_path([], tmp_path)
        assert isinstance(result, Err)
        assert result.error.reason == "empty command"

    def test_relative_project_gives_absolute_path(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        result = resolve_launch_path(["./scripts/check.sh"], Path("proj"))

        assert result == Ok(tmp_path / "proj" / "scripts" / "check.sh")
        assert result.value.is_absolute()


class TestRun:
    def test_success_returns_stdout(self, tmp_path: Path) -> None:
        result = run([sys.executable, "-c", "print('hello')"], cwd=tmp_path)
        assert isinstance(result, Ok)
        assert "hello" in result.value

    def test_failure_returns_error(self, tmp_path: Path) -> None:
        result = run([sys.executable, "-c", "import sys; sys.exit(42)"], cwd=tmp_path)
        assert isinstance(result, Err)
        assert result.error.returncode == 42
        assert result.error.launched

    def test_command_not_found(self, tmp_path: Path) -> None:
        result = run([str(tmp_path / "missing")], cwd=tmp_path)
        assert isinstance(result, Err)
        assert result.error.returncode == -1
        assert result.error.stderr

    def test_uses_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "marker.txt").write_text("x")
        result = run([sys.executable, "-c", "import os; print(os.listdir('.'))"], cwd=tmp_path)
        assert isinstance(result, Ok)
        assert "marker.txt" in result.value

    def test_undecodable_output_is_replaced(self, tmp_path: Path) -> None:
        result = run(
            [sys.executable, "-c", "import sys; sys.stdout.buffer.write(b'ok \\xff')"],
            cwd=tmp_path,
        )
        assert result == Ok("ok \ufffd")


class TestRunSilent:
    def test_success(self, tmp_path: Path) -> None:
        assert run_silent([sys.executable, "-c", "pass"], cwd=tmp_path) == Ok(None)

    def test_failure(self, tmp_path: Path) -> None:
        result = run_silent([sys.executable, "-c", "import sys; sys.exit(3)"], cwd=tmp_path)
        assert isinstance(result, Err)
        assert result.error.returncode == 3
