"""
Win checker for terminal TicTacToe.
Checks if a line is complete or if the board is full.
"""

from functools import lru_cache
from typing import Optional, Tuple

import numpy as np


Line = Tuple[Tuple[int, int], ...]


@lru_cache(maxsize=None)
def winning_lines(height: int, width: int) -> Tuple[Line, ...]:
    """
    All lines that win the game on a board of the given shape.

    Lines are tuples of (row, col). Rows and columns always count,
    the two diagonals only exist on square boards.
    """
    lines = []

    # Rows
    for row in range(height):
        lines.append(tuple((row, col) for col in range(width)))

    # Columns
    for col in range(width):
        lines.append(tuple((row, col) for row in range(height)))

    # Diagonals
    if height == width:
        lines.append(tuple((i, i) for i in range(height)))
        lines.append(tuple((i, width - 1 - i) for i in range(height)))

    return tuple(lines)


class WinChecker:
    """
    Checks for win conditions on an NxN grid of mark codes.

    Win condition: every cell on a row, column or diagonal holds
    the same non-empty mark. 0 is the empty code.
    """

    EMPTY = 0

    def check_winner(self, grid: np.ndarray) -> Optional[int]:
        """
        Check if there's a winner.

        Args:
            grid: 2D array of mark codes.

        Returns:
            The mark code that owns a complete line, or None if no winner yet.
        """
        line = self.get_winning_line(grid)
        if line is None:
            return None

        row, col = line[0]
        return int(grid[row, col])

    def get_winning_line(self, grid: np.ndarray) -> Optional[Line]:
        """
        Get the first complete line if there is one.

        Args:
            grid: 2D array of mark codes.

        Returns:
            The winning line as a tuple of (row, col), or None.
        """
        height, width = grid.shape
        for line in winning_lines(height, width):
            if self._check_line(grid, line):
                return line
        return None

    def _check_line(self, grid: np.ndarray, line: Line) -> bool:
        rows, cols = zip(*line)
        values = grid[list(rows), list(cols)]

        if values[0] == self.EMPTY:
            return False
        return bool(np.all(values == values[0]))

    def is_full(self, grid: np.ndarray) -> bool:
        """True if no cell is empty."""
        return not bool(np.any(grid == self.EMPTY))


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    grid = np.array([
        [1, 2, 0],
        [1, 2, 0],
        [1, 0, 0],
    ])
    print(f"Left column: winner = {checker.check_winner(grid)}")

    grid = np.array([
        [1, 2, 1],
        [2, 1, 2],
        [2, 1, 2],
    ])
    print(f"Full board: winner = {checker.check_winner(grid)}, full = {checker.is_full(grid)}")

    print("\nWinChecker test done!")
