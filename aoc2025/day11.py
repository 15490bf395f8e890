"""Reactor puzzle: count paths through a device graph."""

from __future__ import annotations

import logging
from collections import deque

log = logging.getLogger(__name__)


def parse_graph(content: str) -> dict[str, list[str]]:
    """Read lines of the form 'node: out1 out2' into an adjacency mapping."""
    graph = {}
    for line in content.split("\n"):
        node, separator, targets = line.partition(": ")
        if not separator:
            raise ValueError(f"malformed line: {line!r}")
        graph[node] = targets.split(" ")
    return graph


def count_paths(graph: dict[str, list[str]], start: str, end: str) -> int:
    """Count the distinct paths from start to end in an acyclic graph."""
    memo: dict[str, int] = {}

    def walk(node: str) -> int:
        if node == end:
            return 1
        if node in memo:
            return memo[node]
        total = sum(walk(following) for following in graph.get(node, ()))
        memo[node] = total
        return total

    return walk(start)


def part1(content: str) -> int:
    """Count the ways to reach 'out' from 'you'."""
    graph = parse_graph(content)
    queue = deque(["you"])
    visited: set[str] = set()
    result = 0
    while queue:
        current = queue.popleft()
        if current == "out":
            result += 1
            continue
        visited.add(current)
        queue.extend(node for node in graph.get(current, ()) if node not in visited)
    log.info("Result: %d", result)
    return result


def part2(content: str) -> int:
    """Count the paths from 'svr' to 'out' that pass through both 'dac' and 'fft'."""
    graph = parse_graph(content)
    result = (
        count_paths(graph, "svr", "dac")
        * count_paths(graph, "dac", "fft")
        * count_paths(graph, "fft", "out")
    )
    result += (
        count_paths(graph, "svr", "fft")
        * count_paths(graph, "fft", "dac")
        * count_paths(graph, "dac", "out")
    )
    log.info("Result: %d", result)
    return result