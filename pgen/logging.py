"""Structured logging configuration.

structlog routed through the stdlib root logger, rendered either for the
console (default) or as JSON lines. Logs go to stderr so command output on
stdout stays clean.

Usage:
    from pgen.logging import configure_logging, get_logger

    configure_logging(level="DEBUG")
    log = get_logger(__name__)
    log.info("precondition_check", name="Xcode", outcome="met")
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

__all__ = ["configure_logging", "get_logger"]


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(*, level: int | str = logging.WARNING, json: bool = False) -> None:
    """Configure structlog and the stdlib root logger.

    Safe to call more than once; each call replaces the root handlers.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or logging constant.
            Unknown names fall back to WARNING.
        json: Render JSON lines instead of the console format.
    """
    log_level = _resolve_level(level)

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer: Processor
    if json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=_shared_processors(),
        )
    )

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to ``name``."""
    log: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return log
