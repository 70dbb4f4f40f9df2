# aoc2023

Solutions to days 1 through 11 of Advent of Code 2023. Each day is a module
of small functions that take the puzzle text as a string, and each day also
has a command that prints the answers to both parts of the puzzle.

The package uses only the Python standard library and needs Python 3.10 or
later.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Commands

Every day has its own command:

```
aoc2023-day01
aoc2023-day02
aoc2023-day03
aoc2023-day04
aoc2023-day05
aoc2023-day06
aoc2023-day07
aoc2023-day08
aoc2023-day09
aoc2023-day10
aoc2023-day11
```

All of them except `aoc2023-day06` read the puzzle input from the file named
by their one optional argument, `input.txt` in the current directory if none
is given:

```
aoc2023-day03 path/to/my-input.txt
```

`aoc2023-day06` reads no file; it solves the races whose times and records
are built into `aoc2023.day06` (`RACE_TIMES`, `RACE_RECORDS`,
`LONG_RACE_TIME`, `LONG_RACE_RECORD`). To solve other races, call
`count_ways` or `product_of_ways` from Python.

## Using the library

```python
from aoc2023.day01 import calibration_sum
from aoc2023.day02 import parse_games, possible_id_sum, power_sum
from aoc2023.day06 import count_ways
from aoc2023.day11 import galaxy_distance_sum

print(calibration_sum("two1nine\neightwothree\n"))   # 29 + 83 = 112

games = parse_games(open("input.txt").read())
print(possible_id_sum(games, 12, 13, 14))
print(power_sum(games))

print(count_ways(7, 9))                               # 4

print(galaxy_distance_sum(open("input.txt").read(), 1_000_000))
```

What each module offers:

| Module | Puzzle | Main functions and classes |
| ------ | ------ | -------------------------- |
| `day01` | Trebuchet | `parse_line`, `calibration_sum` |
| `day02` | Cube Conundrum | `Round`, `Game` (`is_possible`, `power`), `parse_game`, `parse_games`, `possible_id_sum`, `power_sum` |
| `day03` | Gear Ratios | `part_number_sum`, `gear_ratio_sum` |
| `day04` | Scratchcards | `Card` (`matches`, `score`), `parse_card`, `parse_cards`, `total_points`, `total_cards` |
| `day05` | Seed almanac | `Mapping`, `Almanac` (`convert`), `parse_almanac`, `lowest_location`, `lowest_location_for_ranges` |
| `day06` | Boat races | `count_ways`, `product_of_ways` |
| `day07` | Camel Cards | `total_winnings`, `total_winnings_with_jokers` |
| `day08` | Haunted Wasteland | `Network` (`steps`), `parse_network`, `steps_to_zzz`, `ghost_steps` |
| `day09` | Mirage Maintenance | `parse_histories`, `extrapolate_next`, `extrapolate_previous`, `next_value_sum`, `previous_value_sum` |
| `day10` | Pipe Maze | `trace_loop`, `farthest_distance`, `enclosed_tiles` |
| `day11` | Cosmic Expansion | `find_galaxies`, `galaxy_distance_sum` |

A few behaviours worth knowing:

- `day01.parse_line` counts spelled-out digits (`one` to `nine`) as well as
  written ones, and returns `None` for a line with no digit at all.
- `day02.possible_id_sum` and `Game.is_possible` default to a bag of 12 red,
  13 green and 14 blue cubes.
- `day02.parse_games` and `day04.parse_cards` skip lines they cannot parse;
  `parse_game` and `parse_card` raise `ValueError` for them.
- `day08.ghost_steps` walks each start node ending in `A` to its first node
  ending in `Z` and returns the least common multiple of those step counts.
  `Network.steps` raises `ValueError` for a walk that can never reach an end
  node or that enters an unknown node.
- `day09` accepts histories of at most 21 values (`MAX_VALUES`) and raises
  `ValueError` for longer ones.
- `day11.galaxy_distance_sum` takes the growth factor of empty rows and
  columns; the default of 2 gives the first part, 1,000,000 the second.

Malformed input that the solvers cannot work with raises `ValueError`.

## What it does not do

The commands only read a local input file and print numbers. Nothing fetches
puzzle input or submits answers, and only days 1 to 11 are covered.