"""Run configuration: TOML file first, command-line overrides on top."""

import dataclasses
import tomllib
from dataclasses import dataclass
from pathlib import Path

from difflife.errors import DiffLifeError
from difflife.patterns import PATTERNS, pattern_names
from difflife.render import DISPLAY_MODES

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class ConfigError(DiffLifeError, ValueError):
    """Invalid or unreadable configuration."""


@dataclass
class Config:
    width: int | None = None
    height: int | None = None
    generations: int = 10000
    pause: float = 0.067
    seed: int | None = None
    pattern: str | None = None
    display: str = "grid"
    log_level: str = "WARNING"
    log_file: Path | None = None

    def with_overrides(self, **overrides) -> "Config":
        """Copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        unknown = set(changes) - {f.name for f in dataclasses.fields(self)}
        if unknown:
            raise ConfigError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
        return dataclasses.replace(self, **changes)

    def validate(self) -> "Config":
        if self.width is None or self.height is None:
            raise ConfigError("Width and height must be set")
        if self.width < 1 or self.height < 1:
            raise ConfigError(f"Width and height must be positive, got {self.width}×{self.height}")
        if self.generations < 0:
            raise ConfigError(f"Generations cannot be negative, got {self.generations}")
        if self.seed is not None and self.seed < 0:
            raise ConfigError(f"Seed cannot be negative, got {self.seed}")
        if self.pause < 0:
            raise ConfigError(f"Pause cannot be negative, got {self.pause}")
        if self.display not in DISPLAY_MODES:
            raise ConfigError(
                f"Unknown display mode {self.display!r}; choose from {', '.join(DISPLAY_MODES)}"
            )
        if self.pattern is not None and self.pattern not in PATTERNS:
            raise ConfigError(
                f"Unknown pattern {self.pattern!r}; known patterns: {', '.join(pattern_names())}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level {self.log_level!r}")
        return self


def load_config(path: str | Path) -> Config:
    """Read ``[simulation]``, ``[display]`` and ``[logging]`` tables from a TOML file."""
    path = Path(path)
    try:
        with open(path, "rb") as f:
            cfg = tomllib.load(f)
    except FileNotFoundError:
        raise ConfigError(f"{path} not found") from None
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: {e}") from e

    s = cfg.get("simulation", {})
    d = cfg.get("display", {})
    lg = cfg.get("logging", {})

    try:
        pause = _typed(d, "pause", (int, float))
        log_file = _typed(lg, "file", str)
        return Config().with_overrides(
            width=_typed(s, "width", int),
            height=_typed(s, "height", int),
            generations=_typed(s, "generations", int),
            seed=_typed(s, "seed", int),
            pattern=_typed(s, "pattern", str),
            pause=None if pause is None else float(pause),
            display=_typed(d, "mode", str),
            log_level=_typed(lg, "level", str),
            log_file=None if log_file is None else Path(log_file),
        )
    except ConfigError as e:
        raise ConfigError(f"{path}: {e}") from e


def _typed(table: dict, key: str, types):
    """Value of table[key] if it is one of types, None if absent. bool never counts as a number."""
    value = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, types):
        raise ConfigError(f"{key} has the wrong type: {value!r}")
    return value
