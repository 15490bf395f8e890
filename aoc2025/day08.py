"""Junction box puzzle: wire the closest boxes into circuits."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from itertools import combinations

log = logging.getLogger(__name__)

Position = tuple[int, int, int]


@dataclass(frozen=True)
class Connection:
    """A possible wire between two boxes, by index, and its length."""

    start: int
    end: int
    distance: float


def parse_positions(content: str) -> list[Position]:
    """Read 'x,y,z' lines; missing coordinates count as zero."""
    positions: list[Position] = []
    for line in content.split("\n"):
        coords = [int(value) for value in line.split(",")]
        if len(coords) > 3:
            raise ValueError(f"too many coordinates: {line!r}")
        coords += [0] * (3 - len(coords))
        positions.append((coords[0], coords[1], coords[2]))
    return positions


def sorted_connections(positions: list[Position]) -> list[Connection]:
    """All pairs of boxes, stably ordered by their whole-number distance."""
    connections = [
        Connection(
            i,
            j,
            math.sqrt(sum(float(a - b) ** 2 for a, b in zip(first, second))),
        )
        for (i, first), (j, second) in combinations(enumerate(positions), 2)
    ]
    connections.sort(key=lambda connection: int(connection.distance))
    return connections


class _Circuits:
    """Circuits built up one wire at a time."""

    def __init__(self) -> None:
        self.groups: list[list[int]] = []
        self.visited: set[int] = set()

    def _index_of(self, box: int) -> int:
        return next(index for index, group in enumerate(self.groups) if box in group)

    def link(self, connection: Connection) -> None:
        start, end = connection.start, connection.end
        start_seen = start in self.visited
        end_seen = end in self.visited
        if not start_seen and not end_seen:
            self.groups.append([start, end])
            self.visited.update((start, end))
        elif start_seen and end_seen:
            start_index = self._index_of(start)
            end_index = self._index_of(end)
            if start_index != end_index:
                merged = self.groups[start_index] + self.groups[end_index]
                self.groups = [
                    group for group in self.groups if start not in group and end not in group
                ]
                self.groups.append(merged)
        else:
            known, new = (start, end) if start_seen else (end, start)
            self.visited.add(new)
            self.groups[self._index_of(known)].append(new)


def part1(content: str, connections: int = 1000) -> int:
    """Multiply the sizes of the three largest circuits after the shortest wires."""
    positions = parse_positions(content)
    links = sorted_connections(positions)
    if len(links) < connections:
        raise ValueError(f"only {len(links)} connections available, {connections} requested")
    circuits = _Circuits()
    for link in links[:connections]:
        circuits.link(link)
    largest = sorted(circuits.groups, key=len, reverse=True)
    if len(largest) < 3:
        raise ValueError(f"only {len(largest)} circuits formed, three are needed")
    result = math.prod(len(group) for group in largest[:3])
    log.info("Result: %d", result)
    return result


def part2(content: str) -> int:
    """Multiply the x coordinates of the pair whose wire joins everything into one circuit."""
    positions = parse_positions(content)
    circuits = _Circuits()
    result = 1
    for link in sorted_connections(positions):
        circuits.link(link)
        if len(circuits.visited) == len(positions) and len(circuits.groups) == 1:
            result = positions[link.start][0] * positions[link.end][0]
            break
    log.info("Result: %d", result)
    return result