"""Gear ratios: numbers in an engine schematic next to symbols."""

from __future__ import annotations

import argparse
import math
import re
from collections import defaultdict
from collections.abc import Iterator
from pathlib import Path

_NUMBER = re.compile(r"[0-9]+")
_DIGITS = "0123456789"


def _is_symbol(char: str) -> bool:
    return char not in _DIGITS and char != "."


def _grid(text: str) -> list[str]:
    grid = text.splitlines()
    if not grid:
        raise ValueError("empty schematic")
    return grid


def _numbers(grid: list[str]) -> Iterator[tuple[int, int, int, int]]:
    """Yield (row, first column, last column, value) for every number."""
    width = len(grid[0])
    for row, line in enumerate(grid):
        for match in _NUMBER.finditer(line[:width]):
            yield row, match.start(), match.end() - 1, int(match.group())


def _adjacent_symbols(
    grid: list[str], row: int, start: int, end: int
) -> Iterator[tuple[int, int]]:
    """Yield the positions of symbols touching the span, diagonals included."""
    height, width = len(grid), len(grid[0])
    for col in range(start - 1, end + 2):
        for r in range(row - 1, row + 2):
            if 0 <= r < height and 0 <= col < width and col < len(grid[r]):
                if _is_symbol(grid[r][col]):
                    yield r, col


def part_number_sum(text: str) -> int:
    """Sum all numbers adjacent to at least one symbol."""
    grid = _grid(text)
    return sum(
        value
        for row, start, end, value in _numbers(grid)
        if any(True for _ in _adjacent_symbols(grid, row, start, end))
    )


def gear_ratio_sum(text: str) -> int:
    """Sum the products of number pairs around ``*`` cells touching exactly two."""
    grid = _grid(text)
    touching: defaultdict[tuple[int, int], list[int]] = defaultdict(list)
    for row, start, end, value in _numbers(grid):
        for cell in _adjacent_symbols(grid, row, start, end):
            touching[cell].append(value)
    return sum(
        math.prod(values)
        for (r, c), values in touching.items()
        if grid[r][c] == "*" and len(values) == 2
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sum engine part numbers.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_number_sum(text))
    print(gear_ratio_sum(text))


if __name__ == "__main__":
    main()