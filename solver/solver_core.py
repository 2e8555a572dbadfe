"""Constraint checks for 9x9 Sudoku: value range, legal placement, and whole-board consistency."""

# solver_core.py
# Pure predicates over a grid. Nothing here mutates the grid.
# Grid is 9x9 list of lists of ints (0..9). 0 = blank. Indices are 0-based.

from types_sudoku import BOARD_SIZE, BOX_SIZE, EMPTY, MOVES, Grid

Cell = tuple[int, int]  # (row, col) 0-based


def rc_to_key(r: int, c: int) -> str:
    """1-based cell key used in tool payloads, e.g. (0, 0) -> 'r1c1'."""
    return f"r{r + 1}c{c + 1}"


def box_origin(row: int, col: int) -> Cell:
    return (BOX_SIZE * (row // BOX_SIZE), BOX_SIZE * (col // BOX_SIZE))


def is_valid_value(move) -> bool:
    # bool is an int subclass; True must not pass for 1
    if isinstance(move, bool) or not isinstance(move, int):
        return False
    return move in MOVES


def is_legal_move(move: int, row: int, col: int, grid: Grid) -> bool:
    """True if `move` may sit at (row, col) given the rest of the grid.

    The cell under test is excluded from the comparison, so a clue already
    holding `move` at (row, col) does not conflict with itself.
    """
    if not is_valid_value(move):
        return False

    # row
    for j in range(BOARD_SIZE):
        if j != col and grid[row][j] == move:
            return False
    # column
    for i in range(BOARD_SIZE):
        if i != row and grid[i][col] == move:
            return False
    # 3x3 box
    r0, c0 = box_origin(row, col)
    for i in range(r0, r0 + BOX_SIZE):
        for j in range(c0, c0 + BOX_SIZE):
            if (i, j) != (row, col) and grid[i][j] == move:
                return False

    return True


def is_valid_board(grid: Grid) -> bool:
    """Every square must be either empty or hold a legal move."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            move = grid[row][col]
            if move != EMPTY and not is_legal_move(move, row, col, grid):
                return False
    return True


def find_empty_cell(grid: Grid) -> Cell | None:
    """First empty square in row-major order, or None when the grid is full."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if grid[row][col] == EMPTY:
                return (row, col)
    return None


def count_empty(grid: Grid) -> int:
    return sum(1 for row in grid for v in row if v == EMPTY)


def is_complete(grid: Grid) -> bool:
    return find_empty_cell(grid) is None and is_valid_board(grid)
