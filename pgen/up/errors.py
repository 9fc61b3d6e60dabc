# SPDX-License-Identifier: MIT
"""Errors produced by setup steps."""

from __future__ import annotations

from dataclasses import dataclass

from pgen.platform.process import ProcessError, ResolutionError

__all__ = [
    "CommandFailed",
    "InvalidConfiguration",
    "MissingOrInvalidField",
    "PreconditionUnfulfilled",
    "UpConfigurationError",
    "UpError",
]


@dataclass(frozen=True, slots=True)
class MissingOrInvalidField:
    """A manifest dictionary lacks a required key or holds the wrong shape."""

    key: str
    expected: str

    @property
    def message(self) -> str:
        return f"missing or invalid field '{self.key}' (expected {self.expected})"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class InvalidConfiguration:
    """A setup step is well-formed but cannot work, e.g. an empty command."""

    name: str
    reason: str

    @property
    def message(self) -> str:
        return f"{self.name}: {self.reason}"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class PreconditionUnfulfilled:
    """A precondition is not met; the user has to act on ``advice``."""

    name: str
    advice: str

    @property
    def message(self) -> str:
        return f"{self.name}: precondition not met"

    @property
    def hint(self) -> str:
        return self.advice

    def __str__(self) -> str:
        return self.advice


@dataclass(frozen=True, slots=True)
class CommandFailed:
    """The command meant to satisfy a setup step did not succeed."""

    name: str
    cause: ProcessError | ResolutionError

    @property
    def message(self) -> str:
        return f"{self.name}: {self.cause}"

    def __str__(self) -> str:
        return self.message


UpError = MissingOrInvalidField | InvalidConfiguration | PreconditionUnfulfilled | CommandFailed


class UpConfigurationError(ValueError):
    """Raised when a setup step is constructed in code with an invalid command."""

    def __init__(self, error: InvalidConfiguration) -> None:
        super().__init__(error.message)
        self.error = error
