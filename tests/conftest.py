# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


@pytest.fixture
def puzzle():
    return [row[:] for row in PUZZLE]


@pytest.fixture
def solution():
    return [row[:] for row in SOLUTION]


@pytest.fixture
def blank():
    return [[0] * 9 for _ in range(9)]


@pytest.fixture
def dead_end(blank):
    """Consistent clues, but r1c1 and r1c2 both need a 2. Fails two levels deep."""
    blank[0][2:] = [3, 4, 5, 6, 7, 8, 9]
    blank[3][0] = 1
    blank[6][1] = 1
    return blank


def assert_solved(grid):
    digits = set(range(1, 10))
    for i in range(9):
        assert set(grid[i]) == digits, f"row {i}"
        assert {grid[r][i] for r in range(9)} == digits, f"col {i}"
    for b in range(9):
        r0, c0 = 3 * (b // 3), 3 * (b % 3)
        assert {grid[r0 + i][c0 + j] for i in range(3) for j in range(3)} == digits, f"box {b}"
