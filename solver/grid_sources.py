"""Grid sources: turn a text file or a WebSudoku page into a 9x9 grid, and print grids back out."""

from __future__ import annotations

import asyncio
import logging
import ssl
import sys
from abc import ABC, abstractmethod
from html.parser import HTMLParser
from pathlib import Path
from typing import Iterable, TextIO

import aiohttp
import certifi

from types_sudoku import BOARD_SIZE, EMPTY, Grid

from .exceptions import SourceUnavailable

logger = logging.getLogger(__name__)

PUZZLE_TABLE_ID = "puzzle_grid"


def empty_grid() -> Grid:
    return [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def populate(puzzle_rows: Iterable[str]) -> Grid:
    """Build a grid from lines of space-separated digits, 0 meaning empty.

    Only the first 9 lines and the first 9 integer tokens of each line are
    read; a line stops at its first non-integer token. Anything missing stays 0.
    """
    grid = empty_grid()
    for row, line in enumerate(puzzle_rows):
        if row >= BOARD_SIZE:
            break
        for col, token in enumerate(line.split()[:BOARD_SIZE]):
            try:
                grid[row][col] = int(token)
            except ValueError:
                break
    return grid


class _PuzzleTableParser(HTMLParser):
    """Collects one value per <td> of the puzzle table, in document order."""

    def __init__(self) -> None:
        super().__init__()
        self.cells: list[int] = []
        self._depth = 0  # open <table> tags from the puzzle table inwards

    def handle_starttag(self, tag, attrs):
        attrs = dict(attrs)
        if tag == "table" and (self._depth or attrs.get("id") == PUZZLE_TABLE_ID):
            self._depth += 1
        elif not self._depth:
            return
        elif tag == "td" and self._depth == 1:
            self.cells.append(EMPTY)
        elif tag == "input" and self.cells and attrs.get("value"):
            first = attrs["value"].strip()[:1]
            # isdigit() also accepts superscripts, which int() rejects
            if first.isdecimal():
                self.cells[-1] = int(first)

    def handle_endtag(self, tag):
        if tag == "table" and self._depth:
            self._depth -= 1


def parse_puzzle_html(html: str) -> Grid:
    """Read the WebSudoku puzzle table: each <td> is a square, a VALUE on its input is a clue."""
    parser = _PuzzleTableParser()
    parser.feed(html)
    parser.close()

    grid = empty_grid()
    if not parser.cells:
        logger.warning("No '%s' table found in page", PUZZLE_TABLE_ID)
    for i, move in enumerate(parser.cells[:BOARD_SIZE * BOARD_SIZE]):
        grid[i // BOARD_SIZE][i % BOARD_SIZE] = move
    return grid


class GridSource(ABC):
    """Anything that can produce a grid. Failures surface as SourceUnavailable."""

    @abstractmethod
    def load(self) -> Grid:
        """Return a freshly populated grid."""


class FileGridSource(GridSource):
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> Grid:
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailable(str(e)) from e
        logger.debug("Read puzzle file %s", self.path)
        return populate(text.splitlines())


class WebSudokuSource(GridSource):
    """Scrapes a puzzle from WebSudoku.

    The puzzle table is only present in the framed page, so the first
    occurrence of `host_rewrite[0]` in the address is replaced with
    `host_rewrite[1]` (www.websudoku.com -> show.websudoku.com).
    """

    def __init__(self, address: str, timeout: float = 20.0,
                 host_rewrite: tuple[str, str] | list[str] | None = ("www", "show")) -> None:
        if host_rewrite:
            old, new = host_rewrite
            address = address.replace(old, new, 1)
        self.address = address
        self._timeout = timeout
        self._ssl_context = ssl.create_default_context(cafile=certifi.where())

    async def fetch_html(self) -> str:
        timeout = aiohttp.ClientTimeout(total=self._timeout)
        connector = aiohttp.TCPConnector(ssl=self._ssl_context)
        async with aiohttp.ClientSession(connector=connector, timeout=timeout) as session:
            async with session.get(self.address) as response:
                if response.status != 200:
                    raise SourceUnavailable(f"HTTP {response.status} from {self.address}")
                return await response.text()

    def load(self) -> Grid:
        logger.debug("Fetching puzzle page %s", self.address)
        try:
            html = asyncio.run(self.fetch_html())
        except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as e:
            raise SourceUnavailable(f"{type(e).__name__}: {e}") from e
        return parse_puzzle_html(html)


def format_grid(grid: Grid) -> str:
    return "\n".join(" ".join(str(v) for v in row) for row in grid)


def display(grid: Grid, out: TextIO | None = None) -> None:
    """Print each row's 9 values space-separated, one row per line."""
    print(format_grid(grid), file=out or sys.stdout)
