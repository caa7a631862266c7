#!/usr/bin/env python3
"""
Board Engine Correctness Verification

Checks that the pure Python and NumPy board engines produce identical
boards after the same number of generations from the same random start.

Usage:
    python -m game_of_life.verify_correctness              # Verify both engines
    python -m game_of_life.verify_correctness --verbose    # Show fingerprints and first difference
    python -m game_of_life.verify_correctness --save-grids # Save final grids to CSV files
"""

import argparse
import csv
import sys

import numpy as np
from loguru import logger

from game_of_life.board import Board
from game_of_life.board_np import BoardNP
from game_of_life.config import setup_logging

ROWS = 64
COLS = 64
GENERATIONS = 100
SEED = 42


def save_grid_to_file(rows_data, filename):
    """Save grid to CSV file for manual inspection."""
    with open(filename, "w", newline="") as f:
        csv.writer(f).writerows(rows_data)
    logger.info(f"Saved grid to: {filename}")


def first_difference(a, b):
    """Return (x, y) of the first differing cell in row-major order, or None."""
    for y, (row_a, row_b) in enumerate(zip(a, b)):
        for x, (cell_a, cell_b) in enumerate(zip(row_a, row_b)):
            if cell_a != cell_b:
                return x, y
    return None


class VerificationRunner:
    def __init__(self, rows=ROWS, cols=COLS, generations=GENERATIONS, seed=SEED,
                 verbose=False, save_grids=False):
        self.rows = rows
        self.cols = cols
        self.generations = generations
        self.seed = seed
        self.verbose = verbose
        self.save_grids = save_grids
        self.fingerprints = {}
        self.final_grids = {}

    def evolve(self, name, board):
        for _ in range(self.generations):
            board = board.next_generation()

        rows_data = (
            board.to_rows() if isinstance(board, Board) else board.data.astype(int).tolist()
        )
        self.fingerprints[name] = board.fingerprint()
        self.final_grids[name] = rows_data
        logger.info(f"{name}: {board!r}")
        if self.verbose:
            logger.info(f"{name} fingerprint: {self.fingerprints[name]}")
        if self.save_grids:
            save_grid_to_file(rows_data, f"verify_{name.lower().replace(' ', '_')}.csv")

    def compare_all(self):
        ref_name, *others = list(self.fingerprints)
        ref_fp = self.fingerprints[ref_name]
        all_match = True

        for name in others:
            if self.fingerprints[name] == ref_fp:
                logger.info(f"{name} matches {ref_name}")
                continue
            all_match = False
            logger.error(f"{name} does not match {ref_name}")
            if self.verbose:
                diff = first_difference(self.final_grids[ref_name], self.final_grids[name])
                if diff is not None:
                    x, y = diff
                    logger.error(
                        f"First difference at cell ({x}, {y}): "
                        f"{ref_name}={self.final_grids[ref_name][y][x]}, "
                        f"{name}={self.final_grids[name][y][x]}"
                    )
        return all_match

    def run(self):
        logger.info(
            f"Verifying {self.rows}×{self.cols} grid, {self.generations} generations, seed {self.seed}"
        )
        start = Board.random(self.rows, self.cols, seed=self.seed)
        self.evolve("Pure Python", start)
        self.evolve("NumPy", BoardNP(np.array(start.to_rows(), dtype=np.uint8)))

        success = self.compare_all()
        if success:
            logger.info("All engines produce identical results")
        else:
            logger.error("Correctness verification failed")
        return success


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Verify that the board engines agree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Show fingerprints and the first differing cell")
    parser.add_argument("--save-grids", "-s", action="store_true",
                        help="Save final grids to CSV files for manual inspection")
    parser.add_argument("--rows", type=int, default=ROWS, help=f"Grid rows (default: {ROWS})")
    parser.add_argument("--cols", type=int, default=COLS, help=f"Grid columns (default: {COLS})")
    parser.add_argument("--generations", type=int, default=GENERATIONS,
                        help=f"Number of generations (default: {GENERATIONS})")
    parser.add_argument("--seed", type=int, default=SEED, help=f"Random seed (default: {SEED})")
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else "INFO")

    runner = VerificationRunner(
        rows=args.rows,
        cols=args.cols,
        generations=args.generations,
        seed=args.seed,
        verbose=args.verbose,
        save_grids=args.save_grids,
    )
    sys.exit(0 if runner.run() else 1)


if __name__ == "__main__":
    main()
