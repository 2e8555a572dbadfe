# types_sudoku.py
from __future__ import annotations

from enum import Enum

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

BOARD_SIZE = 9
BOX_SIZE = 3
MOVES = (1, 2, 3, 4, 5, 6, 7, 8, 9)
EMPTY = 0  # represents an empty square


class SolveOutcome(str, Enum):
    """Result of a solve attempt. Truthy only when the grid was solved."""

    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"  # clues are consistent but no assignment completes the grid
    INVALID_INPUT = "invalid_input"  # duplicate or out-of-range clue

    def __bool__(self) -> bool:
        return self is SolveOutcome.SOLVED
