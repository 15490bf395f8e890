"""Movie theater puzzle: find the largest rectangle between red tiles."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from itertools import combinations

from aoc2025.day04 import DIRECTIONS

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    """A tile position."""

    x: int
    y: int

    def area(self, other: Point) -> int:
        """Number of tiles in the rectangle with these two opposite corners."""
        return (abs(self.x - other.x) + 1) * (abs(self.y - other.y) + 1)


def parse_points(content: str) -> list[Point]:
    """Read 'x,y' lines; a missing coordinate counts as zero."""
    points = []
    for line in content.split("\n"):
        coords = [int(value) for value in line.split(",")]
        if len(coords) > 2:
            raise ValueError(f"too many coordinates: {line!r}")
        coords += [0] * (2 - len(coords))
        points.append(Point(coords[0], coords[1]))
    return points


def compress_points(points: list[Point]) -> tuple[dict[int, int], dict[int, int]]:
    """Map each distinct x and y value to its rank among the sorted values."""
    xs = sorted({point.x for point in points})
    ys = sorted({point.y for point in points})
    return (
        {value: index for index, value in enumerate(xs)},
        {value: index for index, value in enumerate(ys)},
    )


def part1(content: str) -> int:
    """Largest rectangle with any two red tiles as opposite corners."""
    points = parse_points(content)
    result = max((a.area(b) for a, b in combinations(points, 2)), default=0)
    log.info("Result: %d", result)
    return result


def _interior_point(grid: list[list[int]]) -> tuple[int, int]:
    for x, row in enumerate(grid):
        for y, cell in enumerate(row):
            if cell:
                continue
            column = [grid[i][y] for i in range(x, -1, -1)]
            crossings = sum(1 for prev, cur in zip([0, *column], column) if cur != prev)
            if crossings % 2:
                return x, y
    raise ValueError("polygon has no interior cell to fill")


def _flood_fill(grid: list[list[int]], start: tuple[int, int]) -> None:
    height = len(grid)
    width = len(grid[0])
    pending = deque([start])
    while pending:
        x, y = pending.popleft()
        if grid[x][y]:
            continue
        grid[x][y] = 1
        pending.extend(
            (x + dx, y + dy)
            for dx, dy in DIRECTIONS
            if 0 <= x + dx < height and 0 <= y + dy < width
        )


def _filled(grid: list[list[int]], a: Point, b: Point) -> bool:
    return all(
        grid[x][y]
        for x in range(min(a.x, b.x), max(a.x, b.x) + 1)
        for y in range(min(a.y, b.y), max(a.y, b.y) + 1)
    )


def part2(content: str) -> int:
    """Largest rectangle between red tiles lying wholly inside the polygon."""
    points = parse_points(content)
    x_index, y_index = compress_points(points)
    grid = [[0] * len(y_index) for _ in x_index]
    compressed = [Point(x_index[point.x], y_index[point.y]) for point in points]
    for point in compressed:
        grid[point.x][point.y] = 1

    for p1, p2 in zip(compressed, compressed[1:] + compressed[:1]):
        if p1.x == p2.x:
            for y in range(min(p1.y, p2.y), max(p1.y, p2.y) + 1):
                grid[p1.x][y] = 1
        else:
            for x in range(min(p1.x, p2.x), max(p1.x, p2.x) + 1):
                grid[x][p1.y] = 1

    start = _interior_point(grid)
    log.debug("Flood fill start %s", start)
    _flood_fill(grid, start)

    result = 0
    for (a, za), (b, zb) in combinations(zip(points, compressed), 2):
        if _filled(grid, za, zb):
            result = max(result, a.area(b))
        else:
            log.debug("Rejected: %s %s", a, b)
    log.info("Result: %d", result)
    return result