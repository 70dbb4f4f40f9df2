"""Pipe maze: follow the loop through the start tile and count enclosed tiles."""

from __future__ import annotations

import argparse
from pathlib import Path

NORTH, EAST, SOUTH, WEST = range(4)
_MOVES = {NORTH: (-1, 0), EAST: (0, 1), SOUTH: (1, 0), WEST: (0, -1)}
_TURNS = {
    ("|", NORTH): NORTH,
    ("|", SOUTH): SOUTH,
    ("-", EAST): EAST,
    ("-", WEST): WEST,
    ("L", SOUTH): EAST,
    ("F", NORTH): EAST,
    ("L", WEST): NORTH,
    ("J", EAST): NORTH,
    ("7", NORTH): WEST,
    ("J", SOUTH): WEST,
    ("7", EAST): SOUTH,
    ("F", WEST): SOUTH,
}


def _tile(grid: list[str], row: int, col: int) -> str | None:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return None


def _find_start(grid: list[str]) -> tuple[int, int]:
    for row, line in enumerate(grid):
        col = line.find("S")
        if col >= 0:
            return row, col
    raise ValueError("no start tile")


def trace_loop(text: str) -> list[tuple[int, int]]:
    """Positions of the loop's tiles, from the start tile in walking order."""
    grid = text.splitlines()
    start = _find_start(grid)
    row, col = start
    if _tile(grid, row - 1, col) in ("|", "7", "F"):
        direction = NORTH
    elif _tile(grid, row + 1, col) in ("|", "L", "J"):
        direction = SOUTH
    else:
        direction = WEST
    drow, dcol = _MOVES[direction]
    position = (row + drow, col + dcol)
    loop = [start]
    while True:
        tile = _tile(grid, *position)
        if tile is None:
            raise ValueError(f"loop leaves the map at {position}")
        if tile == "S":
            return loop
        loop.append(position)
        try:
            direction = _TURNS[tile, direction]
        except KeyError:
            raise ValueError(f"pipe broken at {position}") from None
        drow, dcol = _MOVES[direction]
        position = (position[0] + drow, position[1] + dcol)


def farthest_distance(text: str) -> int:
    """Steps along the loop to the tile farthest from the start."""
    return len(trace_loop(text)) // 2


def enclosed_tiles(text: str) -> int:
    """Tiles that are not part of the loop and lie inside it."""
    loop = set(trace_loop(text))
    count = 0
    for row, line in enumerate(text.splitlines()):
        inside = False
        for col, char in enumerate(line):
            on_loop = (row, col) in loop
            if on_loop and char in "|F7":
                inside = not inside
            elif inside and not on_loop:
                count += 1
    return count


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Measure the pipe loop.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(farthest_distance(text))
    print(enclosed_tiles(text))


if __name__ == "__main__":
    main()