from __future__ import annotations

from pathlib import Path

import typer

from pgen.cli.commands._helpers import exit_on_error
from pgen.cli.context import build_context
from pgen.core.config import CONFIG_FILENAME
from pgen.core.errors import ErrorCode
from pgen.services.up import UpService
from pgen.up.loader import load_steps


def up(
    path: Path | None = typer.Option(
        None, "--path", "-p", help="Project directory (defaults to the current directory)"
    ),
    check_only: bool = typer.Option(
        False, "--check", help="Only report which setup steps are met"
    ),
) -> None:
    """Check the project's setup steps and meet the ones that aren't met."""
    ctx = build_context(path)

    steps_result = load_steps(ctx.config.up, ctx.project_path)
    exit_on_error(steps_result, ctx, error_code=ErrorCode.USER_ERROR)
    steps = steps_result.unwrap()

    if not steps:
        ctx.console.info(f"no setup steps declared in {CONFIG_FILENAME}")
        return

    service = UpService(project_path=ctx.project_path, console=ctx.console)

    if check_only:
        report = service.check(steps)
        if report.has_unmet():
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        return

    exit_on_error(service.run(steps), ctx, error_code=ErrorCode.ENV_ERROR)
