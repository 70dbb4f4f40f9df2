"""Trebuchet calibration: combine the first and last digit found on each line."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from pathlib import Path

DIGIT_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

_DECIMAL = "0123456789"


def _digits(line: str) -> Iterator[int]:
    """Yield every digit in ``line``, written or spelled out, in order of position."""
    for index, char in enumerate(line):
        rest = line[index:]
        for word, digit in DIGIT_WORDS.items():
            if rest.startswith(word):
                yield digit
                break
        if char in _DECIMAL:
            yield int(char)


def parse_line(line: str) -> int | None:
    """Return the two-digit calibration value of ``line``, or None if it has no digit."""
    digits = list(_digits(line))
    if not digits:
        return None
    return digits[0] * 10 + digits[-1]


def calibration_sum(text: str) -> int:
    """Sum the calibration values of all lines that contain a digit."""
    values = (parse_line(line) for line in text.splitlines())
    return sum(value for value in values if value is not None)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sum trebuchet calibration values.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    print(f"final result {calibration_sum(args.input.read_text())}")


if __name__ == "__main__":
    main()