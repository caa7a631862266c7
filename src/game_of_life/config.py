"""
Configuration & logging setup

Settings are read from a TOML file (the bundled `game_of_life.toml` unless a
path is given). Missing keys fall back to the defaults below, which match the
classic 800×600 viewport with 20 px cells.
"""

import sys
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

DEFAULT_CONFIG_FILE = Path(__file__).parent.resolve() / "game_of_life.toml"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class DisplayConfig:
    width: int = 800
    height: int = 600
    cell_size: int = 20
    background_color: str = "white"
    cell_color: str = "black"
    grid_color: str = "lightgray"
    fps: int = 60


@dataclass(frozen=True)
class SimulationConfig:
    interval_ms: int = 100
    random_density: float = 0.3


@dataclass(frozen=True)
class LoggingConfig:
    log_level: str = "INFO"
    log_file: str = ""


@dataclass(frozen=True)
class Config:
    display: DisplayConfig = field(default_factory=DisplayConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def rows(self) -> int:
        return self.display.height // self.display.cell_size

    @property
    def cols(self) -> int:
        return self.display.width // self.display.cell_size


def _section(cfg: dict, name: str, cls):
    values = cfg.get(name, {})
    if not isinstance(values, dict):
        raise ConfigError(f"[{name}] must be a table")
    known = set(cls.__dataclass_fields__)
    unknown = set(values) - known
    if unknown:
        raise ConfigError(f"Unknown keys in [{name}]: {', '.join(sorted(unknown))}")
    return cls(**values)


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate(config: Config) -> Config:
    d = config.display
    for name in ("width", "height", "cell_size", "fps"):
        value = getattr(d, name)
        if not _is_positive_int(value):
            raise ConfigError(f"display.{name} must be a positive integer, got {value!r}")
    for name in ("background_color", "cell_color", "grid_color"):
        if not isinstance(getattr(d, name), str):
            raise ConfigError(f"display.{name} must be a string, got {getattr(d, name)!r}")
    if d.cell_size > min(d.width, d.height):
        raise ConfigError(
            f"display.cell_size ({d.cell_size}) is larger than the viewport ({d.width}×{d.height})"
        )

    s = config.simulation
    if not _is_positive_int(s.interval_ms):
        raise ConfigError(f"simulation.interval_ms must be a positive integer, got {s.interval_ms!r}")
    density = s.random_density
    if isinstance(density, bool) or not isinstance(density, (int, float)) or not 0.0 <= density <= 1.0:
        raise ConfigError(f"simulation.random_density must be a number within [0, 1], got {density!r}")

    for name in ("log_level", "log_file"):
        if not isinstance(getattr(config.logging, name), str):
            raise ConfigError(f"logging.{name} must be a string, got {getattr(config.logging, name)!r}")
    return config


def from_dict(cfg: dict) -> Config:
    return validate(
        Config(
            display=_section(cfg, "display", DisplayConfig),
            simulation=_section(cfg, "simulation", SimulationConfig),
            logging=_section(cfg, "logging", LoggingConfig),
        )
    )


def load_config(path: str | Path | None = None) -> Config:
    """Load and validate a TOML config file; defaults to the bundled one."""
    config_file = Path(path) if path is not None else DEFAULT_CONFIG_FILE
    if not config_file.exists():
        raise ConfigError(f"{config_file} not found")

    try:
        with open(config_file, "rb") as f:
            cfg = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_file}: {e}") from e

    return from_dict(cfg)


def setup_logging(level: str = "INFO", log_file: str | Path | None = None) -> None:
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=level)
    if log_file:
        logger.add(log_file, rotation="10 MB", retention="30 days", level="DEBUG")
