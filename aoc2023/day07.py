"""Camel cards: rank poker-like hands and total the winnings."""

from __future__ import annotations

import argparse
import re
from collections import Counter
from pathlib import Path

_PLAIN_ORDER = str.maketrans("AKQJT", "ZYXWV")
_BID = re.compile(r"\+?[0-9]+")
_LEADING_DIGITS = re.compile(r"[0-9]+")
_JOKER_VALUES = {"A": 12, "K": 11, "Q": 10, "J": 0, "T": 9} | {
    str(n): n - 1 for n in range(2, 10)
}


def _lines(text: str) -> list[str]:
    return text.splitlines()


def _split_plain(line: str) -> tuple[str, int]:
    if len(line) < 6:
        raise ValueError(f"malformed hand: {line!r}")
    bid = line[6:]
    if not _BID.fullmatch(bid):
        raise ValueError(f"malformed bid: {bid!r}")
    return line[:5], int(bid)


def _plain_score(hand: str) -> int:
    best_count, best_card = max((hand.count(card), card) for card in hand)
    second = max(hand.count(card) if card != best_card else 0 for card in hand)
    return best_count * 10 + second


def _winnings(ranked: list[tuple[object, int]]) -> int:
    return sum(rank * bid for rank, (_, bid) in enumerate(sorted(ranked), start=1))


def total_winnings(text: str) -> int:
    """Total winnings with the plain card order."""
    ranked = []
    for line in _lines(text):
        hand, bid = _split_plain(line.translate(_PLAIN_ORDER))
        ranked.append(((_plain_score(hand), hand), bid))
    return _winnings(ranked)


def _joker_type(values: list[int]) -> int:
    jokers = values.count(0)
    ranks = sorted(Counter(v for v in values if v != 0).values(), reverse=True)
    ranks += [0, 0]
    top, second = ranks[0] + jokers, ranks[1]
    if top == 5:
        return 6
    if top == 4:
        return 5
    if top == 3:
        return 4 if second == 2 else 3
    if top == 2:
        return 2 if second == 2 else 1
    return 0


def total_winnings_with_jokers(text: str) -> int:
    """Total winnings when ``J`` is a joker that is the weakest card."""
    ranked = []
    for line in _lines(text):
        if len(line) < 6:
            raise ValueError(f"malformed hand: {line!r}")
        try:
            values = [_JOKER_VALUES[card] for card in line[:5]]
        except KeyError as error:
            raise ValueError(f"unknown card in {line!r}") from error
        digits = _LEADING_DIGITS.match(line[6:])
        if digits is None:
            raise ValueError(f"malformed bid in {line!r}")
        bid = int(digits.group())
        if bid >= 2**32:
            raise ValueError(f"bid out of range in {line!r}")
        ranked.append(((_joker_type(values), tuple(values)), bid))
    return _winnings(ranked)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Total camel card winnings.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(f"Result: {total_winnings(text)}")
    print(total_winnings_with_jokers(text))


if __name__ == "__main__":
    main()