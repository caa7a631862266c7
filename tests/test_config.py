from __future__ import annotations

import pytest
from loguru import logger

from game_of_life.config import (
    DEFAULT_CONFIG_FILE,
    Config,
    ConfigError,
    load_config,
    setup_logging,
)


def write(tmp_path, text: str):
    path = tmp_path / "life.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_bundled_config_matches_defaults() -> None:
    config = load_config()

    assert DEFAULT_CONFIG_FILE.exists()
    assert config == Config()
    assert (config.rows, config.cols) == (30, 40)
    assert config.simulation.interval_ms == 100


def test_partial_file_falls_back_to_defaults(tmp_path) -> None:
    path = write(tmp_path, "[display]\ncell_size = 10\n\n[simulation]\ninterval_ms = 250\n")

    config = load_config(path)

    assert (config.rows, config.cols) == (60, 80)
    assert config.simulation.interval_ms == 250
    assert config.display.cell_color == "black"
    assert config.logging.log_level == "INFO"


@pytest.mark.parametrize(
    "text",
    [
        "[display]\ncell_size = 0\n",
        "[display]\ncell_size = 700\n",
        "[display]\nwidth = -800\n",
        "[simulation]\ninterval_ms = 0\n",
        "[simulation]\nrandom_density = 1.5\n",
        "[display]\nzoom = 2\n",
        "display = 3\n",
        "[simulation]\nrandom_density = \"high\"\n",
        "[simulation]\ninterval_ms = true\n",
        "[display]\nfps = true\n",
        "[display]\ncell_color = 3\n",
        "[logging]\nlog_level = 10\n",
    ],
)
def test_invalid_values_raise(tmp_path, text: str) -> None:
    with pytest.raises(ConfigError):
        load_config(write(tmp_path, text))


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "nope.toml")


def test_malformed_toml_raises(tmp_path) -> None:
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(write(tmp_path, "[display\nwidth = 800\n"))


def test_setup_logging_writes_debug_to_file(tmp_path) -> None:
    log_file = tmp_path / "life.log"

    setup_logging("WARNING", log_file)
    logger.debug("generation computed")
    logger.remove()

    assert "generation computed" in log_file.read_text(encoding="utf-8")
