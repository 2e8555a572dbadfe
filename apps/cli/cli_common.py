# apps/cli/cli_common.py
"""Shared argparse options and the solve-and-report step used by both solver CLIs."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from solver.backtracking import SearchStats, find_solution
from solver.config import load_config
from solver.grid_sources import display
from types_sudoku import Grid


def add_common_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--config", type=str, default=None, help="YAML config file")
    ap.add_argument("--log-level", type=str, default=None,
                    help="DEBUG, INFO, WARNING (default from config)")
    ap.add_argument("--stats", action="store_true", help="Print placement/backtrack counters")
    ap.add_argument("--json", type=str, default=None, help="Also write the result payload JSON here")


def setup(args: argparse.Namespace):
    """Load config (file + CLI overrides) and configure logging. Exits 1 on a bad config file."""
    try:
        cfg = load_config(args.config, log_level=args.log_level)
    except (OSError, yaml.YAMLError) as e:
        print(f"Config error: {e}")
        sys.exit(1)
    logging.basicConfig(
        level=str(cfg.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return cfg


def solve_and_report(board: Grid, args: argparse.Namespace) -> None:
    """Solve `board` in place and print it; exit 1 if it cannot be solved."""
    stats = SearchStats()
    solution_found = find_solution(board, stats)

    if args.json:
        payload = {"solved": solution_found, "grid": board, "stats": stats.as_dict()}
        Path(args.json).write_text(json.dumps(payload, indent=2), encoding="utf-8")

    if not solution_found:
        print("Error: Invalid Board State")
        sys.exit(1)

    display(board)
    if args.stats:
        print(f"placements={stats.placements} backtracks={stats.backtracks}")
