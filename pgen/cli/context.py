from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from pgen.core.config import CONFIG_FILENAME, Config, load_config, load_config_or_default
from pgen.core.errors import ErrorCode
from pgen.core.result import Err
from pgen.logging import configure_logging
from pgen.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    project_path: Path
    config: Config
    console: ConsoleProtocol


def build_context(path: Path | None = None) -> CLIContext:
    console = RichConsole()

    try:
        project_path = (path or Path.cwd()).expanduser().resolve()
    except OSError as e:
        console.error(f"invalid project path: {e}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))
    if not project_path.is_dir():
        console.error(f"project path is not a directory: {project_path}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    config_path = project_path / CONFIG_FILENAME
    if config_path.exists():
        config_result = load_config(config_path)
        if isinstance(config_result, Err):
            console.error(config_result.error.message)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        config = config_result.value
    else:
        config = load_config_or_default(config_path)

    configure_logging(level=config.log.level, json=config.log.json)

    return CLIContext(project_path=project_path, config=config, console=console)
