"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from pgen.core.errors import ErrorCode
from pgen.core.result import Err, Result
from pgen.output.console import Style

if TYPE_CHECKING:
    from pgen.cli.context import CLIContext

T = TypeVar("T")
E = TypeVar("E")


def exit_on_error(
    result: Result[T, E],
    ctx: CLIContext,
    error_code: ErrorCode = ErrorCode.ENV_ERROR,
) -> None:
    """Print the error and exit if result is Err, otherwise return.

    Error objects may expose ``message`` and ``hint``; the hint is printed
    verbatim on its own line.
    """
    if isinstance(result, Err):
        error = result.error
        message: str = getattr(error, "message", str(error))
        hint: str | None = getattr(error, "hint", None)
        ctx.console.error(message)
        if hint:
            ctx.console.print(hint, Style.WARNING)
        raise typer.Exit(code=int(error_code))
