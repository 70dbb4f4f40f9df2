"""Seed almanac: follow seeds through a chain of range mappings."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

_INT = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_SEEDS_PREFIX = "seeds: "


def _maybe_int(token: str) -> int | None:
    """Return ``token`` as a 64-bit integer, or None if it is not one."""
    if not _INT.fullmatch(token):
        return None
    value = int(token)
    return value if _I64_MIN <= value <= _I64_MAX else None


def _strict_int(token: str) -> int:
    if not _INT.fullmatch(token):
        raise ValueError(f"not an integer: {token!r}")
    return int(token)


@dataclass(frozen=True)
class Mapping:
    """Maps ``length`` numbers starting at ``source`` onto ``destination``."""

    destination: int
    source: int
    length: int

    @property
    def source_end(self) -> int:
        """First source number past the mapped span."""
        return self.source + self.length

    @property
    def offset(self) -> int:
        return self.destination - self.source


@dataclass(frozen=True)
class Almanac:
    """The seeds to plant and the maps that lead from seed to location."""

    seeds: tuple[int, ...]
    maps: tuple[tuple[Mapping, ...], ...]

    def convert(self, number: int) -> int:
        """Follow ``number`` through every map; the first matching mapping wins."""
        for mappings in self.maps:
            for mapping in mappings:
                if mapping.source <= number < mapping.source_end:
                    number = mapping.destination + (number - mapping.source)
                    if not _I64_MIN <= number <= _I64_MAX:
                        raise OverflowError("overflow occurred during calculation")
                    break
        return number


def _parse_mappings(section: str) -> tuple[Mapping, ...]:
    mappings = []
    for line in section.splitlines():
        values = [v for v in map(_maybe_int, line.split()) if v is not None]
        if len(values) == 3:
            mappings.append(Mapping(*values))
    return tuple(mappings)


def parse_almanac(text: str) -> Almanac:
    """Parse the seed list and every map section of an almanac."""
    sections = text.split("\n\n")
    head = sections[0].strip()
    if not head.startswith(_SEEDS_PREFIX):
        raise ValueError("almanac does not start with a seed list")
    seeds = tuple(
        v for v in map(_maybe_int, head[len(_SEEDS_PREFIX):].split()) if v is not None
    )
    maps = tuple(_parse_mappings(section) for section in sections[1:])
    return Almanac(seeds, maps)


def lowest_location(text: str) -> int:
    """Lowest location reached by any of the listed seeds."""
    almanac = parse_almanac(text)
    if not almanac.seeds:
        raise ValueError("no seeds listed")
    return min(almanac.convert(seed) for seed in almanac.seeds)


def _seed_ranges(head: str) -> list[tuple[int, int]]:
    values = [_strict_int(token) for token in head.split(": ")[-1].split()]
    if len(values) % 2:
        raise ValueError("seed ranges must come in start/length pairs")
    return [(start, start + length) for start, length in zip(values[::2], values[1::2])]


def _sorted_section(section: str) -> tuple[Mapping, ...]:
    mappings = []
    for body in section.split(":\n")[1:]:
        for line in body.split("\n"):
            if not line.strip():
                continue
            row = [_strict_int(token) for token in line.split()]
            if len(row) < 3:
                raise ValueError(f"malformed mapping line: {line!r}")
            mappings.append(Mapping(row[0], row[1], row[2]))
    return tuple(sorted(mappings, key=lambda m: m.source))


def _shift_ranges(
    ranges: Iterable[tuple[int, int]], mappings: tuple[Mapping, ...]
) -> Iterator[tuple[int, int]]:
    """Split inclusive ranges along the mappings and shift the mapped parts."""
    for low, high in ranges:
        for mapping in mappings:
            end = mapping.source_end
            offset = mapping.offset
            if not (low <= high and low < end and mapping.source <= high):
                continue
            if low < mapping.source:
                yield low, mapping.source - 1
                low = mapping.source
            if high < end:
                yield low + offset, high + offset
                low = high + 1
            else:
                yield low + offset, end - 1 + offset
                low = end
        if low <= high:
            yield low, high


def lowest_location_for_ranges(text: str) -> int:
    """Lowest location reached when the seed list is read as start/length pairs."""
    sections = text.split("\n\n")
    ranges = _seed_ranges(sections[0])
    for section in sections[1:]:
        ranges = list(_shift_ranges(ranges, _sorted_section(section)))
    if not ranges:
        raise ValueError("no seed ranges listed")
    return min(low for low, _ in ranges)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find the lowest seed location.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(f"Lowest location number: {lowest_location(text)}")
    print(f"Lowest location number: {lowest_location_for_ranges(text)}")


if __name__ == "__main__":
    main()