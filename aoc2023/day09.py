"""Mirage maintenance: extrapolate sequences from their repeated differences."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence
from itertools import pairwise
from pathlib import Path

MAX_VALUES = 21
_INT = re.compile(r"[+-]?[0-9]+")


def _parse_int(token: str) -> int:
    if not _INT.fullmatch(token):
        raise ValueError(f"not an integer: {token!r}")
    return int(token)


def parse_histories(text: str) -> list[list[int]]:
    """Parse one history of space-separated integers per non-blank line."""
    return [
        [_parse_int(token) for token in line.split()]
        for line in text.splitlines()
        if line.strip()
    ]


def _check_length(values: Sequence[int]) -> None:
    if len(values) > MAX_VALUES:
        raise ValueError(f"history longer than {MAX_VALUES} values")


def extrapolate_next(values: Sequence[int]) -> int:
    """The value that follows ``values`` once its differences reach zero."""
    _check_length(values)
    total = 0
    level = list(values)
    while any(level):
        total += level[-1]
        level = [b - a for a, b in pairwise(level)]
    return total


def extrapolate_previous(values: Sequence[int]) -> int:
    """The value that precedes ``values`` once its differences reach zero."""
    return extrapolate_next(list(reversed(values)))


def next_value_sum(text: str) -> int:
    """Sum of the next values of every history."""
    return sum(extrapolate_next(history) for history in parse_histories(text))


def previous_value_sum(text: str) -> int:
    """Sum of the previous values of every history."""
    return sum(extrapolate_previous(history) for history in parse_histories(text))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Extrapolate sensor histories.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(next_value_sum(text))
    print(previous_value_sum(text))


if __name__ == "__main__":
    main()