from __future__ import annotations
from typing import Dict, List
from types_sudoku import BOARD_SIZE, BOX_SIZE, EMPTY, Grid, SolveOutcome
"""Tool-friendly wrappers around the solver: board diagnostics and a dict-returning solve for the CLI and HTTP API."""


# sudoku_tools.py
from .backtracking import SearchStats, solve
from .solver_core import is_complete, is_valid_value, rc_to_key


def _duplicates_in_unit(vals):
    seen = set(); dups = set()
    for v in vals:
        if v == EMPTY or not is_valid_value(v): continue
        if v in seen: dups.add(v)
        seen.add(v)
    return dups


def sanity_check(current: Grid) -> Dict:
    """List every duplicate digit per row, column and box, and every out-of-range value.

    `complete` is True when the board is already a finished, valid solution.
    """
    issues = []
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            v = current[r][c]
            if v != EMPTY and not is_valid_value(v):
                issues.append({"type": "out_of_range", "cell": rc_to_key(r, c), "found": v})
    # rows
    for r in range(BOARD_SIZE):
        dups = _duplicates_in_unit(current[r])
        if dups:
            cells = [rc_to_key(r, c) for c in range(BOARD_SIZE) if current[r][c] in dups]
            issues.append({"type": "duplicate", "unit": f"r{r+1}", "digits": sorted(dups), "cells": cells})
    # cols
    for c in range(BOARD_SIZE):
        col = [current[r][c] for r in range(BOARD_SIZE)]
        dups = _duplicates_in_unit(col)
        if dups:
            cells = [rc_to_key(r, c) for r in range(BOARD_SIZE) if current[r][c] in dups]
            issues.append({"type": "duplicate", "unit": f"c{c+1}", "digits": sorted(dups), "cells": cells})
    # boxes
    for b in range(BOARD_SIZE):
        br = b // BOX_SIZE; bc = b % BOX_SIZE
        cells = []
        vals = []
        for i in range(BOX_SIZE):
            for j in range(BOX_SIZE):
                r = BOX_SIZE*br + i; c = BOX_SIZE*bc + j
                cells.append(rc_to_key(r, c))
                vals.append(current[r][c])
        dups = _duplicates_in_unit(vals)
        if dups:
            bad = [cells[i] for i, v in enumerate(vals) if v in dups]
            issues.append({"type": "duplicate", "unit": f"b{b+1}", "digits": sorted(dups), "cells": bad})
    return {"ok": len(issues) == 0, "complete": is_complete(current), "issues": issues}


def solve_tool(current: Grid) -> Dict:
    """Solve a copy of `current`. Returns outcome, the resulting grid, search counters, and any board issues."""
    grid: List[List[int]] = [row[:] for row in current]
    stats = SearchStats()
    outcome = solve(grid, stats)
    payload = {
        "outcome": outcome.value,
        "solved": bool(outcome),
        "grid": grid,
        "stats": stats.as_dict(),
        "issues": [],
    }
    if outcome is SolveOutcome.INVALID_INPUT:
        payload["issues"] = sanity_check(current)["issues"]
    return payload
