"""Present packing puzzle: decide which regions can hold their presents."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

log = logging.getLogger(__name__)


@dataclass
class Shape:
    """A present shape: rows of 1 (filled) and 0, and its filled cell count."""

    rows: list[list[int]] = field(default_factory=list)
    size: int = 0


@dataclass
class Query:
    """A region of the given width and height and how many of each shape it must hold."""

    width: int
    height: int
    counts: list[int]

    @property
    def area(self) -> int:
        return self.width * self.height


def _parse_query(line: str) -> Query:
    parts = line.split(": ")
    if len(parts) < 2:
        raise ValueError(f"malformed region: {line!r}")
    dims = [int(value) for value in parts[0].split("x")]
    if len(dims) > 2:
        raise ValueError(f"region must have two dimensions: {line!r}")
    dims += [0] * (2 - len(dims))
    counts = [int(value) for value in parts[1].split(" ")]
    return Query(dims[0], dims[1], counts)


def parse_content(content: str) -> tuple[list[Shape], list[Query]]:
    """Read the shape definitions and region queries."""
    shapes: list[Shape] = []
    queries: list[Query] = []
    in_shape = False
    for line in content.split("\n"):
        if not line:
            in_shape = False
            continue
        if ":" in line and "x" not in line:
            in_shape = True
            shapes.append(Shape())
            continue
        if in_shape:
            row = [1 if char == "#" else 0 for char in line]
            shapes[-1].rows.append(row)
            shapes[-1].size += sum(row)
        if "x" in line:
            queries.append(_parse_query(line))
    return shapes, queries


def part1(content: str) -> int:
    """Count the regions whose area can hold the total cells of their presents."""
    shapes, queries = parse_content(content)
    result = 0
    for query in queries:
        needed = sum(count * shapes[index].size for index, count in enumerate(query.counts))
        log.debug("Needed %d of %d", needed, query.area)
        if needed <= query.area:
            result += 1
    log.info("Result: %d", result)
    return result