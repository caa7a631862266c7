import hashlib
from typing import Iterable, List, Self

import numpy as np

from game_of_life.board import (
    Cell,
    InvalidDimensionsError,
    OutOfRangeError,
    _check_density,
    _check_dimension,
)


class BoardNP:
    """NumPy board engine with the same hard-edge rule as `Board`."""

    def __init__(self, data: np.ndarray):
        if data.ndim != 2 or 0 in data.shape:
            raise InvalidDimensionsError(f"expected a non-empty 2-D array, got shape {data.shape}")
        self.data = (data != 0).astype(np.uint8)
        self.rows, self.cols = self.data.shape

    @classmethod
    def empty(cls, rows: int, cols: int) -> Self:
        _check_dimension("rows", rows)
        _check_dimension("cols", cols)
        return cls(np.zeros((rows, cols), dtype=np.uint8))

    @classmethod
    def from_cells(cls, rows: int, cols: int, cells: Iterable[Cell]) -> Self:
        board = cls.empty(rows, cols)
        for x, y in cells:
            board._check_range(x, y)
            board.data[y, x] = 1
        return board

    @classmethod
    def random(
        cls, rows: int, cols: int, density: float = 0.5, seed: int | None = None
    ) -> Self:
        _check_dimension("rows", rows)
        _check_dimension("cols", cols)
        _check_density(density)
        rng = np.random.default_rng(seed)
        return cls((rng.random((rows, cols)) < density).astype(np.uint8))

    def _check_range(self, x: int, y: int) -> None:
        if not (0 <= x < self.cols and 0 <= y < self.rows):
            raise OutOfRangeError(
                f"cell ({x}, {y}) is outside the {self.cols}×{self.rows} board"
            )

    def is_alive(self, x: int, y: int) -> bool:
        self._check_range(x, y)
        return bool(self.data[y, x])

    def toggle(self, x: int, y: int) -> None:
        self._check_range(x, y)
        self.data[y, x] ^= 1

    def neighbor_counts(self) -> np.ndarray:
        # Zero border instead of np.roll, so nothing wraps around the edges
        padded = np.pad(self.data, 1, mode="constant", constant_values=0)
        return sum(
            padded[1 + dy : 1 + dy + self.rows, 1 + dx : 1 + dx + self.cols]
            for dy in (-1, 0, 1)
            for dx in (-1, 0, 1)
            if not (dx == 0 and dy == 0)
        )

    def count_live_neighbors(self, x: int, y: int) -> int:
        self._check_range(x, y)
        return int(self.neighbor_counts()[y, x])

    def next_generation(self) -> Self:
        neighbors = self.neighbor_counts()
        new_state = (self.data == 1) & (neighbors == 2) | (neighbors == 3)
        return BoardNP(new_state.astype(np.uint8))

    def live_cells(self) -> List[Cell]:
        ys, xs = np.nonzero(self.data)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    @property
    def population(self) -> int:
        return int(self.data.sum())

    def fingerprint(self) -> str:
        flat_str = "".join("1" if cell else "0" for cell in self.data.flat)
        return hashlib.sha256(flat_str.encode("utf-8")).hexdigest()

    def __repr__(self) -> str:
        return f"BoardNP({self.rows}×{self.cols}, alive={self.population})"
