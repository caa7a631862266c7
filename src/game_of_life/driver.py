"""
driver.py — owns the board and the step timer

Every call into the engine goes through a single GameDriver, one at a
time, so toggles and generation steps never interleave.
"""

from typing import List

from loguru import logger

from game_of_life.board import Board, Cell
from game_of_life.config import Config
from game_of_life.timer import DEFAULT_INTERVAL_MS, StepTimer

MIN_INTERVAL_MS = 1


class GameDriver:
    def __init__(
        self,
        rows: int,
        cols: int,
        cell_size: int = 20,
        interval_ms: int = DEFAULT_INTERVAL_MS,
    ):
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.board = Board(rows, cols)
        self.cell_size = cell_size
        self.timer = StepTimer(interval_ms)
        self.generation = 0
        logger.debug(f"Driver created: {self.board!r}, cell size {cell_size}px")

    @classmethod
    def from_config(cls, config: Config) -> "GameDriver":
        return cls(
            config.rows,
            config.cols,
            cell_size=config.display.cell_size,
            interval_ms=config.simulation.interval_ms,
        )

    @property
    def rows(self) -> int:
        return self.board.rows

    @property
    def cols(self) -> int:
        return self.board.cols

    def cells(self) -> List[Cell]:
        return self.board.live_cells()

    def click(self, px: int, py: int) -> bool:
        """Toggle the cell under pixel (px, py); clicks off the grid are ignored."""
        x = px // self.cell_size
        y = py // self.cell_size
        if not (0 <= x < self.cols and 0 <= y < self.rows):
            logger.debug(f"Ignoring click outside the grid at ({px}, {py})")
            return False
        self.board.toggle(x, y)
        return True

    def step(self) -> None:
        self.board = self.board.next_generation()
        self.generation += 1

    def tick(self, now_ms: float) -> bool:
        if self.timer.poll(now_ms):
            self.step()
            return True
        return False

    @property
    def is_running(self) -> bool:
        return self.timer.running

    def run(self, now_ms: float) -> None:
        if self.is_running:
            return
        self.timer.start(now_ms)
        logger.info(f"Running every {self.interval_ms} ms from generation {self.generation}")

    def stop(self) -> None:
        if not self.is_running:
            return
        self.timer.stop()
        logger.info(f"Stopped at generation {self.generation}")

    @property
    def interval_ms(self) -> int:
        return self.timer.interval_ms

    def set_interval(self, interval_ms: int) -> None:
        self.timer.set_interval(interval_ms)
        logger.info(f"Update every {interval_ms} ms")

    def adjust_interval(self, delta_ms: int) -> int:
        interval = max(MIN_INTERVAL_MS, self.interval_ms + delta_ms)
        if interval != self.interval_ms:
            self.set_interval(interval)
        return interval

    def clear(self) -> None:
        self.board.clear()
        self.generation = 0

    def randomize(self, density: float = 0.5, seed: int | None = None) -> None:
        self.board = Board.random(self.rows, self.cols, density=density, seed=seed)
        self.generation = 0
        logger.info(f"Randomized board: {self.board.population} live cells")
