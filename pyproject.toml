[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2023"
version = "0.1.0"
description = "Solutions to the first eleven Advent of Code 2023 puzzles, as a library and as commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "aoc", "puzzles", "2023"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2023-day01 = "aoc2023.day01:main"
aoc2023-day02 = "aoc2023.day02:main"
aoc2023-day03 = "aoc2023.day03:main"
aoc2023-day04 = "aoc2023.day04:main"
aoc2023-day05 = "aoc2023.day05:main"
aoc2023-day06 = "aoc2023.day06:main"
aoc2023-day07 = "aoc2023.day07:main"
aoc2023-day08 = "aoc2023.day08:main"
aoc2023-day09 = "aoc2023.day09:main"
aoc2023-day10 = "aoc2023.day10:main"
aoc2023-day11 = "aoc2023.day11:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2023"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
