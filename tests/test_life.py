"""Key handling and CLI error paths of the pygame front end (no display needed)."""

from __future__ import annotations

import pytest

pygame = pytest.importorskip("pygame")

from game_of_life.driver import GameDriver  # noqa: E402
from game_of_life.life import INTERVAL_STEP_MS, handle_key, main  # noqa: E402


@pytest.fixture
def driver() -> GameDriver:
    d = GameDriver(5, 5, cell_size=10, interval_ms=100)
    for x in (1, 2, 3):
        d.board.toggle(x, 2)
    return d


@pytest.mark.parametrize("key", [pygame.K_ESCAPE, pygame.K_q])
def test_quit_keys(driver: GameDriver, key: int) -> None:
    assert not handle_key(driver, key, 0, 0.3)


def test_space_toggles_run_state(driver: GameDriver) -> None:
    assert handle_key(driver, pygame.K_SPACE, 0, 0.3)
    assert driver.is_running

    handle_key(driver, pygame.K_SPACE, 50, 0.3)
    assert not driver.is_running


def test_step_key_only_while_stopped(driver: GameDriver) -> None:
    handle_key(driver, pygame.K_n, 0, 0.3)
    assert driver.generation == 1
    assert driver.cells() == [(2, 1), (2, 2), (2, 3)]

    driver.run(0)
    handle_key(driver, pygame.K_n, 10, 0.3)
    assert driver.generation == 1


def test_clear_and_random_keys(driver: GameDriver) -> None:
    handle_key(driver, pygame.K_c, 0, 0.3)
    assert driver.cells() == []

    handle_key(driver, pygame.K_r, 0, 1.0)
    assert len(driver.cells()) == 25


def test_interval_keys_clamp(driver: GameDriver) -> None:
    handle_key(driver, pygame.K_UP, 0, 0.3)
    assert driver.interval_ms == 100 + INTERVAL_STEP_MS

    for _ in range(20):
        handle_key(driver, pygame.K_MINUS, 0, 0.3)
    assert driver.interval_ms == 1

    handle_key(driver, pygame.K_PLUS, 0, 0.3)
    assert driver.interval_ms == 1 + INTERVAL_STEP_MS


def test_unknown_log_level_exits() -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--log-level", "NOT-A-LEVEL"])

    assert exc.value.code == 1


def test_bad_config_exits(tmp_path) -> None:
    path = tmp_path / "life.toml"
    path.write_text('[simulation]\nrandom_density = "high"\n', encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        main(["--config", str(path)])

    assert exc.value.code == 1
