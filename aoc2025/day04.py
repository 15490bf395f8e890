"""Paper roll puzzle: find rolls a forklift can reach."""

from __future__ import annotations

import logging

log = logging.getLogger(__name__)

DIRECTIONS = (
    (1, 0),
    (0, 1),
    (1, 1),
    (-1, 0),
    (0, -1),
    (-1, 1),
    (1, -1),
    (-1, -1),
)

_MAX_NEIGHBOURS = 4


def parse_grid(content: str) -> list[list[int]]:
    """Turn the map into rows of 1 (roll) and 0 (empty), stopping at a blank line."""
    grid = []
    for line in content.split("\n"):
        if not line:
            break
        grid.append([1 if char == "@" else 0 for char in line])
    return grid


def _neighbours(grid: list[list[int]], row: int, col: int) -> int:
    height = len(grid)
    width = len(grid[row])
    return sum(
        1
        for dr, dc in DIRECTIONS
        if 0 <= row + dr < height and 0 <= col + dc < width and grid[row + dr][col + dc] > 0
    )


def _accessible(grid: list[list[int]], row: int, col: int) -> bool:
    return grid[row][col] != 0 and _neighbours(grid, row, col) < _MAX_NEIGHBOURS


def part1(content: str) -> int:
    """Count the rolls with fewer than four neighbouring rolls."""
    grid = parse_grid(content)
    result = 0
    for row, cells in enumerate(grid):
        for col in range(len(cells)):
            if _accessible(grid, row, col):
                result += 1
                cells[col] = 2
    log.info("Result: %d", result)
    return result


def part2(content: str) -> int:
    """Count the rolls removed by repeatedly taking every accessible one."""
    grid = parse_grid(content)
    result = 0
    changed = True
    while changed:
        changed = False
        for row, cells in enumerate(grid):
            for col in range(len(cells)):
                if _accessible(grid, row, col):
                    result += 1
                    cells[col] = 0
                    changed = True
        log.debug("Sweep done, removed so far: %d", result)
    log.info("Result: %d", result)
    return result