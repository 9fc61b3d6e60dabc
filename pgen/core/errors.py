"""Exit codes for the pgen command line.

Values are process exit codes and must stay stable:
- 0: Success
- 1: User error (bad arguments, malformed manifest or config)
- 2: Environment error (a setup step is not met)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
