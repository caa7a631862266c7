"""Simple micro-benchmark for the pure Python and NumPy board engines.

Run with something like:

    uv run benchmarks/bench_board.py

This is intentionally minimal and not a rigorous benchmark suite.
"""

from __future__ import annotations

import time

import numpy as np

from game_of_life.board import Board
from game_of_life.board_np import BoardNP


def bench(label: str, board, generations: int) -> None:
    start = time.perf_counter()
    for _ in range(generations):
        board = board.next_generation()
    duration = time.perf_counter() - start
    print(f"{label:24s} gens={generations:6d}  {duration:8.4f}s  alive={board.population}")


def main() -> None:
    rows, cols, generations = 128, 128, 50

    start = Board.random(rows, cols, seed=42)
    bench("Python Board", start, generations)
    bench("NumPy BoardNP", BoardNP(np.array(start.to_rows(), dtype=np.uint8)), generations)


if __name__ == "__main__":  # pragma: no cover
    main()
