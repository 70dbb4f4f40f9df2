"""Cosmic expansion: galaxy distances after empty rows and columns grow."""

from __future__ import annotations

import argparse
from bisect import bisect_left
from itertools import combinations
from pathlib import Path


def find_galaxies(text: str) -> list[tuple[int, int]]:
    """Positions (row, column) of every ``#`` in reading order."""
    return [
        (row, col)
        for row, line in enumerate(text.splitlines())
        for col, char in enumerate(line)
        if char == "#"
    ]


def galaxy_distance_sum(text: str, expansion: int = 2) -> int:
    """Sum of distances between all galaxy pairs, each empty line growing ``expansion`` times."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty image")
    galaxies = find_galaxies(text)
    rows = {row for row, _ in galaxies}
    cols = {col for _, col in galaxies}
    empty_rows = [r for r in range(len(lines)) if r not in rows]
    empty_cols = [c for c in range(len(lines[0])) if c not in cols]
    extra = expansion - 1
    expanded = [
        (
            row + extra * bisect_left(empty_rows, row),
            col + extra * bisect_left(empty_cols, col),
        )
        for row, col in galaxies
    ]
    return sum(
        abs(r1 - r2) + abs(c1 - c2) for (r1, c1), (r2, c2) in combinations(expanded, 2)
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sum distances between galaxies.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(galaxy_distance_sum(text, 2))
    print(galaxy_distance_sum(text, 1_000_000))


if __name__ == "__main__":
    main()