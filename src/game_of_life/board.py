"""
board.py — Game of Life board engine (pure Python)

Fixed-size grid with hard edges: cells outside the board count as dead,
there is no wrap-around. Cells are addressed as (x, y) with x the column
and y the row.
"""

import hashlib
import random
from typing import Iterable, List, Tuple

from loguru import logger

Cell = Tuple[int, int]

NEIGHBOR_OFFSETS: Tuple[Cell, ...] = tuple(
    (dx, dy)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)


class BoardError(Exception):
    """Base class for board engine errors."""


class InvalidDimensionsError(BoardError, ValueError):
    pass


class OutOfRangeError(BoardError, IndexError):
    pass


def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidDimensionsError(f"{name} must be a positive integer, got {value!r}")
    return value


def _check_density(density) -> float:
    if isinstance(density, bool) or not isinstance(density, (int, float)):
        raise ValueError(f"density must be a number, got {density!r}")
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be within [0, 1], got {density!r}")
    return density


class Board:
    def __init__(self, rows: int, cols: int, data: List[List[bool]] | None = None):
        self.rows = _check_dimension("rows", rows)
        self.cols = _check_dimension("cols", cols)
        if data is None:
            data = [[False] * cols for _ in range(rows)]
        elif len(data) != rows or any(len(row) != cols for row in data):
            raise InvalidDimensionsError(
                f"data shape does not match {rows}×{cols}"
            )
        # Own copy, normalised to bools
        self.data = [[bool(cell) for cell in row] for row in data]

    @classmethod
    def empty(cls, rows: int, cols: int) -> "Board":
        return cls(rows, cols)

    @classmethod
    def from_rows(cls, rows_data: List[List[int]]) -> "Board":
        """Build a board from a list of rows of 0/1 (or bool) values."""
        if not rows_data or not rows_data[0]:
            raise InvalidDimensionsError("cannot build a board from empty data")
        return cls(len(rows_data), len(rows_data[0]), rows_data)

    @classmethod
    def from_cells(cls, rows: int, cols: int, cells: Iterable[Cell]) -> "Board":
        board = cls(rows, cols)
        for x, y in cells:
            board._check_range(x, y)
            board.data[y][x] = True
        return board

    @classmethod
    def random(
        cls, rows: int, cols: int, density: float = 0.5, seed: int | None = None
    ) -> "Board":
        _check_dimension("rows", rows)
        _check_dimension("cols", cols)
        _check_density(density)
        rng = random.Random(seed)
        data = [[rng.random() < density for _ in range(cols)] for _ in range(rows)]
        return cls(rows, cols, data)

    def _check_range(self, x: int, y: int) -> None:
        if not (0 <= x < self.cols and 0 <= y < self.rows):
            raise OutOfRangeError(
                f"cell ({x}, {y}) is outside the {self.cols}×{self.rows} board"
            )

    def is_alive(self, x: int, y: int) -> bool:
        self._check_range(x, y)
        return self.data[y][x]

    def toggle(self, x: int, y: int) -> None:
        self._check_range(x, y)
        self.data[y][x] = not self.data[y][x]

    def clear(self) -> None:
        for row in self.data:
            row[:] = [False] * self.cols

    def count_live_neighbors(self, x: int, y: int) -> int:
        return count_live_neighbors(self, x, y)

    def next_generation(self) -> "Board":
        return next_generation(self)

    def live_cells(self) -> List[Cell]:
        return live_cells(self)

    @property
    def population(self) -> int:
        return sum(sum(row) for row in self.data)

    def to_rows(self) -> List[List[int]]:
        return [[1 if cell else 0 for cell in row] for row in self.data]

    def fingerprint(self) -> str:
        """Return SHA-256 hex digest of the board as a flat string of 0s and 1s"""
        flat_str = "".join("1" if cell else "0" for row in self.data for cell in row)
        return hashlib.sha256(flat_str.encode("utf-8")).hexdigest()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self.rows, self.cols, self.data) == (other.rows, other.cols, other.data)

    def __str__(self) -> str:
        return "\n".join(
            "".join("█" if cell else "░" for cell in row) for row in self.data
        )

    def __repr__(self) -> str:
        return f"Board({self.rows}×{self.cols}, alive={self.population})"


def count_live_neighbors(board: Board, x: int, y: int) -> int:
    """Count live cells in the Moore neighbourhood of (x, y).

    Positions beyond the board edges contribute nothing; (x, y) itself
    must be on the board.
    """
    board._check_range(x, y)
    return _count_neighbors(board, x, y)


def _count_neighbors(board: Board, x: int, y: int) -> int:
    count = 0
    for dx, dy in NEIGHBOR_OFFSETS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < board.cols and 0 <= ny < board.rows and board.data[ny][nx]:
            count += 1
    return count


def next_generation(board: Board) -> Board:
    """Compute the next generation into a fresh board; the input is left untouched."""
    next_gen = []
    for y in range(board.rows):
        row = []
        for x in range(board.cols):
            neighbors = _count_neighbors(board, x, y)
            alive = board.data[y][x]
            if alive and (neighbors < 2 or neighbors > 3):
                row.append(False)
            elif not alive and neighbors == 3:
                row.append(True)
            else:
                row.append(alive)
        next_gen.append(row)
    result = Board(board.rows, board.cols, next_gen)
    logger.debug(f"Generation computed: {result!r}")
    return result


def live_cells(board: Board) -> List[Cell]:
    """Live (x, y) pairs in row-major order."""
    return [
        (x, y)
        for y, row in enumerate(board.data)
        for x, cell in enumerate(row)
        if cell
    ]
