"""Conway's Game of Life on a fixed-size, hard-edged board."""

from game_of_life.board import (
    Board,
    BoardError,
    InvalidDimensionsError,
    OutOfRangeError,
    count_live_neighbors,
    live_cells,
    next_generation,
)

__all__ = [
    "Board",
    "BoardError",
    "InvalidDimensionsError",
    "OutOfRangeError",
    "count_live_neighbors",
    "live_cells",
    "next_generation",
]
