"""Advent of Code 2025 puzzle solutions, one module per day, and a runner for them."""

__version__ = "0.1.0"

__all__ = [
    "app",
    "day01",
    "day02",
    "day03",
    "day04",
    "day05",
    "day06",
    "day07",
    "day08",
    "day09",
    "day10",
    "day11",
    "day12",
]