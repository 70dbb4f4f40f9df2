"""Advent of Code 2023 puzzle solutions, days 1 to 11, one module per day."""

__version__ = "0.1.0"