"""Tachyon manifold puzzle: follow beams through splitters."""

from __future__ import annotations

import logging

log = logging.getLogger(__name__)


def _read_lines(content: str) -> tuple[list[str], int]:
    lines = content.split("\n")
    width = len(lines[0])
    if any(len(line) < width for line in lines):
        raise ValueError("every row must be at least as wide as the first")
    return lines, width


def part1(content: str) -> int:
    """Count how many times a beam is split."""
    lines, width = _read_lines(content)
    grid = [list(line[:width]) for line in lines]
    splits = 0
    for above, row in zip(grid, grid[1:]):
        for col in range(width):
            source = above[col]
            if source == "S":
                row[col] = "|"
            elif source == "|":
                if row[col] == "^":
                    splits += 1
                    if col > 0 and row[col - 1] == ".":
                        row[col - 1] = "|"
                    if col + 1 < width and row[col + 1] == ".":
                        row[col + 1] = "|"
                elif row[col] == ".":
                    row[col] = "|"
    for line in grid:
        log.debug("%s", "".join(line))
    log.info("Result: %d", splits)
    return splits


def part2(content: str) -> int:
    """Count the timelines a single particle ends up in."""
    lines, width = _read_lines(content)
    timelines: dict[tuple[int, int], int] = {}

    def add(cell: tuple[int, int], count: int) -> None:
        timelines[cell] = timelines.get(cell, 0) + count

    for row, line in enumerate(lines):
        for col, char in enumerate(line[:width]):
            if char == "S":
                timelines[(row + 1, col)] = 1
                continue
            incoming = timelines.pop((row - 1, col), None)
            if incoming is None:
                continue
            if char == "^":
                if col > 0:
                    add((row, col - 1), incoming)
                if col + 1 < width:
                    add((row, col + 1), incoming)
            else:
                add((row, col), incoming)

    result = sum(timelines.values())
    log.info("Result: %d", result)
    return result