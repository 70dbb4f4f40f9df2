"""Cube conundrum: games of coloured cubes drawn from a bag."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from pathlib import Path

_INT = re.compile(r"[+-]?[0-9]+")
_COLOURS = ("red", "green", "blue")


def _parse_int(text: str) -> int:
    if not _INT.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    value = int(text)
    if not -(2**31) <= value < 2**31:
        raise ValueError(f"integer out of range: {text!r}")
    return value


@dataclass(frozen=True)
class Round:
    """One handful of cubes revealed from the bag."""

    red: int = 0
    green: int = 0
    blue: int = 0


@dataclass(frozen=True)
class Game:
    """A numbered game and the rounds played in it."""

    id: int
    rounds: tuple[Round, ...]

    def is_possible(self, red: int = 12, green: int = 13, blue: int = 14) -> bool:
        """Whether every round fits in a bag holding the given cubes."""
        return all(
            r.red <= red and r.green <= green and r.blue <= blue for r in self.rounds
        )

    def power(self) -> int:
        """Product of the fewest cubes of each colour the game needs."""
        red = max((r.red for r in self.rounds), default=0)
        green = max((r.green for r in self.rounds), default=0)
        blue = max((r.blue for r in self.rounds), default=0)
        return red * green * blue


def _parse_round(data: str) -> Round:
    counts: dict[str, int] = {}
    for colour_data in data.split(", "):
        parts = colour_data.split()
        if len(parts) != 2:
            raise ValueError(f"malformed cube count: {colour_data!r}")
        count_text, colour = parts
        count = _parse_int(count_text)
        if colour not in _COLOURS:
            raise ValueError(f"unknown colour: {colour!r}")
        counts[colour] = count
    return Round(**counts)


def parse_game(line: str) -> Game:
    """Parse a line such as ``Game 1: 3 blue, 4 red; 2 green``."""
    parts = line.split(": ")
    if len(parts) != 2:
        raise ValueError(f"malformed game: {line!r}")
    header, body = parts
    game_id = _parse_int(header.replace("Game ", ""))
    rounds = tuple(_parse_round(round_data) for round_data in body.split("; "))
    return Game(game_id, rounds)


def parse_games(text: str) -> list[Game]:
    """Parse every well-formed game in ``text``, skipping lines that are not."""
    games = []
    for line in text.splitlines():
        try:
            games.append(parse_game(line))
        except ValueError:
            continue
    return games


def possible_id_sum(games, red: int = 12, green: int = 13, blue: int = 14) -> int:
    """Sum the ids of games possible with the given bag contents."""
    return sum(game.id for game in games if game.is_possible(red, green, blue))


def power_sum(games) -> int:
    """Sum the powers of all games."""
    return sum(game.power() for game in games)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Score cube games.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    games = parse_games(args.input.read_text())
    print(f"res {possible_id_sum(games)}")
    print(f"res {power_sum(games)}")


if __name__ == "__main__":
    main()