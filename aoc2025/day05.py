"""Ingredient puzzle: check ids against fresh ranges."""

from __future__ import annotations

import logging

log = logging.getLogger(__name__)


def _parse_range(line: str) -> tuple[int, int]:
    bounds = line.split("-")
    if len(bounds) < 2:
        raise ValueError(f"malformed range: {line!r}")
    return int(bounds[0]), int(bounds[1])


def part1(content: str) -> int:
    """Count the ids that fall inside any fresh range."""
    ranges: list[tuple[int, int]] = []
    ids: list[int] = []
    reading_ids = False
    for line in content.split("\n"):
        if not line:
            if reading_ids:
                break
            reading_ids = True
            continue
        if reading_ids:
            ids.append(int(line))
        else:
            ranges.append(_parse_range(line))
    ranges.sort()
    result = sum(1 for item in ids if any(low <= item <= high for low, high in ranges))
    log.info("Result: %d", result)
    return result


def part2(content: str) -> int:
    """Count the distinct ids covered by the fresh ranges."""
    ranges = []
    for line in content.split("\n"):
        if not line:
            break
        ranges.append(_parse_range(line))
    ranges.sort(key=lambda bounds: bounds[0])

    result = 0
    next_free = 0
    for low, high in ranges:
        if high >= next_free:
            result += high - max(low, next_free) + 1
            next_free = high + 1
    log.info("Result: %d", result)
    return result