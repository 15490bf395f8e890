"""Safe dial puzzle: count how often a rotating dial lands on or passes zero."""

from __future__ import annotations

import logging
from collections.abc import Iterator

log = logging.getLogger(__name__)

DIAL_SIZE = 100
START_POSITION = 50


def _rotations(content: str) -> Iterator[tuple[int, int]]:
    """Yield (sign, step) pairs, stopping at the first empty line."""
    for line in content.split("\n"):
        if not line:
            break
        sign = -1 if line[0] == "L" else 1
        yield sign, int(line[1:])


def part1(content: str) -> int:
    """Count the rotations that leave the dial pointing at zero."""
    position = START_POSITION
    hits = 0
    for sign, step in _rotations(content):
        log.debug("Position: %d Step: %+d", position, sign * step)
        if sign < 0:
            position -= step % DIAL_SIZE
            if position < 0:
                position += DIAL_SIZE
        else:
            position = (position + step) % DIAL_SIZE
        if position == 0:
            hits += 1
        log.debug("New position: %d Count: %d", position, hits)
    log.info("Result: %d", hits)
    return hits


def part2(content: str) -> int:
    """Count every time the dial points at zero, including while turning."""
    position = START_POSITION
    hits = 0
    for sign, step in _rotations(content):
        log.debug("Position: %d Step: %+d", position, sign * step)
        hits += step // DIAL_SIZE
        new_position = position + (step % DIAL_SIZE) * sign
        if new_position <= 0:
            if new_position < 0:
                new_position += DIAL_SIZE
            if position != 0:
                hits += 1
        if new_position >= DIAL_SIZE:
            new_position %= DIAL_SIZE
            hits += 1
        log.debug("New position: %d Count: %d", new_position, hits)
        position = new_position
    log.info("Result: %d", hits)
    return hits