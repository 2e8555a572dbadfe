"""Exhaustive chronological backtracking over the empty squares of a grid.

The grid passed in is the grid that gets solved: placements are written into
the caller's lists directly and undone on the failing path, so after a failed
search every square the search touched is back to empty.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from types_sudoku import BOARD_SIZE, EMPTY, MOVES, Grid, SolveOutcome

from .solver_core import count_empty, find_empty_cell, is_legal_move, is_valid_board

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters collected while exploring. Purely observational."""

    placements: int = 0
    backtracks: int = 0

    def as_dict(self) -> dict[str, int]:
        return {"placements": self.placements, "backtracks": self.backtracks}


def explore(grid: Grid, stats: SearchStats | None = None) -> bool:
    """Fill the first empty square with each legal move in turn and recurse.

    Returns True with the grid completed, or False with the square reset to
    empty once every move 1..9 has failed.
    """
    empty = find_empty_cell(grid)
    if empty is None:
        return True

    row, col = empty
    for move in MOVES:
        if not is_legal_move(move, row, col, grid):
            continue
        grid[row][col] = move
        if stats is not None:
            stats.placements += 1
        if explore(grid, stats):
            return True

    # no move worked here; hand the square back empty
    grid[row][col] = EMPTY
    if stats is not None:
        stats.backtracks += 1
    return False


def find_solution(grid: Grid, stats: SearchStats | None = None) -> bool:
    """Solve `grid` in place. False for conflicting clues or when no solution exists."""
    if not is_valid_board(grid):
        return False
    return explore(grid, stats)


def solve(grid: Grid, stats: SearchStats | None = None) -> SolveOutcome:
    """Like find_solution, but tells invalid input apart from an unsolvable puzzle."""
    if not is_valid_board(grid):
        logger.debug("Rejected board with conflicting or out-of-range clues")
        return SolveOutcome.INVALID_INPUT

    empty = count_empty(grid)
    logger.debug("Searching: %d clues, %d empty squares", BOARD_SIZE * BOARD_SIZE - empty, empty)
    if explore(grid, stats):
        outcome = SolveOutcome.SOLVED
    else:
        outcome = SolveOutcome.UNSOLVABLE
    if stats is not None:
        logger.debug("Search %s after %d placements, %d backtracks",
                     outcome.value, stats.placements, stats.backtracks)
    return outcome
