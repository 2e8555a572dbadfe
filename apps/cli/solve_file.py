# apps/cli/solve_file.py
"""
Solve a Sudoku stored in a text file and print the solution.

The file holds 9 lines of space-separated digits, 0 for an empty square.

Usage:
  python -m apps.cli.solve_file puzzles/easy.txt --stats
  python -m apps.cli.solve_file            # prompts for the path
"""
from __future__ import annotations

import argparse
import sys

from solver.exceptions import SourceUnavailable
from solver.grid_sources import FileGridSource

from .cli_common import add_common_args, setup, solve_and_report


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Solve a Sudoku puzzle from a text file")
    ap.add_argument("path", nargs="?", default=None, help="Puzzle file (prompted for if omitted)")
    add_common_args(ap)
    args = ap.parse_args(argv)
    setup(args)

    file_path = args.path
    if not file_path:
        print("Enter a file path containing a sudoku puzzle: ")
        file_path = input().strip()

    try:
        board = FileGridSource(file_path).load()
    except SourceUnavailable as e:
        print(f"File error: {e}")
        sys.exit(1)

    solve_and_report(board, args)


if __name__ == "__main__":
    main()
