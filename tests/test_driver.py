"""Driver tests: click translation, run/stop control and stepping."""

from __future__ import annotations

import pytest

from game_of_life.board import OutOfRangeError
from game_of_life.config import Config
from game_of_life.driver import GameDriver


@pytest.fixture
def driver() -> GameDriver:
    return GameDriver(30, 40, cell_size=20, interval_ms=100)


def test_from_config_defaults() -> None:
    d = GameDriver.from_config(Config())

    assert (d.rows, d.cols) == (30, 40)
    assert d.cell_size == 20
    assert d.interval_ms == 100
    assert d.cells() == []


def test_click_toggles_cell_under_pointer(driver: GameDriver) -> None:
    assert driver.click(45, 25)
    assert driver.cells() == [(2, 1)]

    assert driver.click(59, 39)
    assert driver.cells() == []


@pytest.mark.parametrize("px, py", [(800, 10), (10, 600), (-1, 5), (5, -20), (805, 605)])
def test_click_outside_grid_is_ignored(driver: GameDriver, px: int, py: int) -> None:
    assert not driver.click(px, py)
    assert driver.cells() == []


def test_click_on_last_cell(driver: GameDriver) -> None:
    assert driver.click(799, 599)
    assert driver.cells() == [(39, 29)]


def test_step_swaps_board_reference(driver: GameDriver) -> None:
    for x in (1, 2, 3):
        driver.board.toggle(x, 2)
    old = driver.board

    driver.step()

    assert driver.board is not old
    assert old.live_cells() == [(1, 2), (2, 2), (3, 2)]
    assert driver.cells() == [(2, 1), (2, 2), (2, 3)]
    assert driver.generation == 1


def test_tick_steps_only_while_running(driver: GameDriver) -> None:
    assert not driver.tick(1000)

    driver.run(0)
    assert driver.is_running
    assert not driver.tick(50)
    assert driver.tick(100)
    assert driver.generation == 1

    driver.stop()
    assert not driver.is_running
    assert not driver.tick(1000)
    assert driver.generation == 1


def test_run_twice_keeps_schedule(driver: GameDriver) -> None:
    driver.run(0)
    driver.run(90)

    assert driver.tick(100)


def test_interval_changes(driver: GameDriver) -> None:
    driver.set_interval(250)
    assert driver.interval_ms == 250

    assert driver.adjust_interval(-1000) == 1
    assert driver.interval_ms == 1
    assert driver.adjust_interval(10) == 11

    with pytest.raises(ValueError):
        driver.set_interval(0)


def test_clear_and_randomize(driver: GameDriver) -> None:
    driver.randomize(density=1.0)
    assert len(driver.cells()) == 30 * 40

    driver.step()
    driver.clear()

    assert driver.cells() == []
    assert driver.generation == 0


def test_engine_errors_still_propagate(driver: GameDriver) -> None:
    with pytest.raises(OutOfRangeError):
        driver.board.toggle(40, 0)


def test_rejects_bad_cell_size() -> None:
    with pytest.raises(ValueError):
        GameDriver(3, 3, cell_size=0)
