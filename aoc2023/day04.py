"""Scratchcards: winning numbers, points and won copies."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from pathlib import Path

_INT = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str) -> int:
    if not _INT.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    value = int(text)
    if not -(2**31) <= value < 2**31:
        raise ValueError(f"integer out of range: {text!r}")
    return value


@dataclass(frozen=True)
class Card:
    """A scratchcard with its winning numbers and the numbers it holds."""

    id: int
    winning: tuple[int, ...]
    actual: tuple[int, ...]

    def matches(self) -> int:
        """Number of winning numbers that appear among the card's numbers."""
        return sum(1 for number in self.winning if number in self.actual)

    def score(self) -> int:
        """Points: one for the first match, doubled for each further one."""
        matches = self.matches()
        return 0 if matches == 0 else 1 << (matches - 1)


def parse_card(line: str) -> Card:
    """Parse a line such as ``Card 1: 41 48 | 83 86 48``."""
    parts = line.split(": ")
    if len(parts) != 2:
        raise ValueError(f"malformed card: {line!r}")
    header, body = parts
    id_parts = header.split()
    if len(id_parts) != 2:
        raise ValueError(f"malformed card header: {header!r}")
    card_id = _parse_int(id_parts[1])

    winning: list[int] = []
    actual: list[int] = []
    for index, section in enumerate(body.split(" | ")):
        target = winning if index == 0 else actual
        target.extend(_parse_int(token) for token in section.split())
    return Card(card_id, tuple(winning), tuple(actual))


def parse_cards(text: str) -> list[Card]:
    """Parse every well-formed card in ``text``, skipping lines that are not."""
    cards = []
    for line in text.splitlines():
        try:
            cards.append(parse_card(line))
        except ValueError:
            continue
    return cards


def total_points(cards) -> int:
    """Sum of the points of all cards."""
    return sum(card.score() for card in cards)


def total_cards(cards) -> int:
    """Total number of cards held once every won copy has been processed."""
    cards = list(cards)
    counts = [1] * len(cards)
    for index, card in enumerate(cards):
        last = min(index + card.matches(), len(cards) - 1)
        for following in range(index + 1, last + 1):
            counts[following] += counts[index]
    return sum(counts)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Score scratchcards.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    cards = parse_cards(args.input.read_text())
    print(f"Total Score: {total_points(cards)}")
    print(f"Total Score: {total_cards(cards)}")


if __name__ == "__main__":
    main()