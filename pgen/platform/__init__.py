"""Platform abstraction layer."""

from .process import (
    ProcessError,
    ResolutionError,
    is_path_like,
    resolve_launch_path,
    run,
    run_silent,
    which,
)

__all__ = [
    "ProcessError",
    "ResolutionError",
    "is_path_like",
    "resolve_launch_path",
    "run",
    "run_silent",
    "which",
]
