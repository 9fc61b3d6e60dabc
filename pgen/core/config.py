"""Typed configuration loading for ``pgen.toml``.

Example file:

    [log]
    level = "DEBUG"
    format = "json"

    [[up]]
    name = "Xcode"
    advice = "Install Xcode from the App Store"
    is_met = ["xcode-select", "-p"]

Setup steps are kept as raw tables here; they are decoded into setup
checks by ``pgen.up``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_list, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "Config",
    "ConfigError",
    "LogConfig",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "pgen.toml"

LOG_LEVEL_ENV_VAR = "PGEN_LOG_LEVEL"
LOG_FORMAT_ENV_VAR = "PGEN_LOG_FORMAT"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMATS = ("console", "json")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class LogConfig:
    """Logging settings."""

    level: str = DEFAULT_LOG_LEVEL
    format: str = "console"

    @property
    def json(self) -> bool:
        return self.format == "json"

    def with_env(self, env: Mapping[str, str]) -> LogConfig:
        """Return a copy with PGEN_LOG_LEVEL / PGEN_LOG_FORMAT applied."""
        level = env.get(LOG_LEVEL_ENV_VAR, "").strip().upper() or self.level
        fmt = env.get(LOG_FORMAT_ENV_VAR, "").strip().lower() or self.format
        if fmt not in LOG_FORMATS:
            fmt = self.format
        return LogConfig(level=level, format=fmt)


def _no_steps() -> tuple[StrDict, ...]:
    return ()


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    log: LogConfig = field(default_factory=LogConfig)
    up: tuple[StrDict, ...] = field(default_factory=_no_steps)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: if ``up`` is not an array of tables or the log
                format is unknown.
        """
        log: StrDict = get_table(data, "log") or {}
        fmt = (get_str(log, "format") or "console").lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(f"log.format must be one of {', '.join(LOG_FORMATS)}")

        steps: list[StrDict] = []
        raw_steps = data.get("up")
        if raw_steps is not None:
            items = get_list(data, "up")
            if items is None:
                raise ValueError("up must be an array of tables")
            for index, item in enumerate(items):
                table = as_str_dict(item)
                if table is None:
                    raise ValueError(f"up[{index}] must be a table")
                steps.append(table)

        return cls(
            log=LogConfig(
                level=(get_str(log, "level") or DEFAULT_LOG_LEVEL).upper(),
                format=fmt,
            ),
            up=tuple(steps),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data = as_str_dict(tomllib.loads(path.read_bytes().decode("utf-8")))
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Environment overrides for logging are applied on top of the file.
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        config = Config.from_dict(result.value)
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))
    return Ok(Config(log=config.log.with_env(os.environ), up=config.up))


def load_config_or_default(path: Path) -> Config:
    """Load config from file, or the default config if it can't be read."""
    result = load_config(path)
    if isinstance(result, Ok):
        return result.value
    return Config(log=LogConfig().with_env(os.environ))
