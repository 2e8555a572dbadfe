# apps/cli/solve_web.py
"""
Solve a puzzle from WebSudoku.com and print the solution.

Pass an address carrying the level and set_id so the same puzzle is fetched
every time, e.g. https://www.websudoku.com/?level=2&set_id=12345

Usage:
  python -m apps.cli.solve_web "https://www.websudoku.com/?level=2&set_id=12345"
"""
from __future__ import annotations

import argparse
import sys

from solver.exceptions import SourceUnavailable
from solver.grid_sources import WebSudokuSource

from .cli_common import add_common_args, setup, solve_and_report


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Solve a WebSudoku.com puzzle")
    ap.add_argument("address", nargs="?", default=None, help="Puzzle URL (prompted for if omitted)")
    ap.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    add_common_args(ap)
    args = ap.parse_args(argv)
    cfg = setup(args)

    address = args.address
    if not address:
        print("Please provide a WebSudoku URL: ")
        address = input().strip()

    source = WebSudokuSource(
        address,
        timeout=args.timeout if args.timeout is not None else cfg.web_timeout,
        host_rewrite=cfg.web_host_rewrite,
    )
    try:
        board = source.load()
    except SourceUnavailable as e:
        print(f"Connection Error: {e}")
        sys.exit(1)

    solve_and_report(board, args)


if __name__ == "__main__":
    main()
