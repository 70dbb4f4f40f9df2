"""Boat races: count the button hold times that beat the record."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable

RACE_TIMES = (38, 67, 76, 73)
RACE_RECORDS = (234, 1027, 1157, 1236)
LONG_RACE_TIME = 38677673
LONG_RACE_RECORD = 234102711571236


def count_ways(time: int, record: int) -> int:
    """Number of hold times in 1..time-1 whose distance beats ``record``."""
    if time < 2:
        return 0
    discriminant = time * time - 4 * record
    if discriminant <= 0:
        return 0
    low = max(1, (time - math.isqrt(discriminant)) // 2)
    while low <= time // 2 and low * (time - low) <= record:
        low += 1
    while low > 1 and (low - 1) * (time - low + 1) > record:
        low -= 1
    high = time - low
    return high - low + 1 if low <= high else 0


def product_of_ways(times: Iterable[int], records: Iterable[int]) -> int:
    """Product of the winning counts of paired races."""
    return math.prod(count_ways(time, record) for time, record in zip(times, records))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count ways to win the boat races.")
    parser.parse_args(argv)
    print(product_of_ways(RACE_TIMES, RACE_RECORDS))
    print(product_of_ways([LONG_RACE_TIME], [LONG_RACE_RECORD]))


if __name__ == "__main__":
    main()