"""Battery bank puzzle: pick digits that form the largest joltage."""

from __future__ import annotations

import logging

log = logging.getLogger(__name__)

DIGITS_PART2 = 12


def _best_pair(line: str) -> int:
    first = second = spare = -1
    for digit in map(int, reversed(line)):
        if digit >= first:
            second, first = first, digit
        if digit != first and digit > spare:
            spare = digit
    if second == -1:
        first, second = spare, first
    return first * 10 + second


def _best_number(line: str, length: int = DIGITS_PART2) -> int:
    start = 0
    value = 0
    for remaining in range(length, 0, -1):
        end = max(len(line) - remaining + 1, start)
        best = 0
        offset = 0
        for index, char in enumerate(line[start:end]):
            digit = int(char)
            if digit > best:
                best, offset = digit, index
        value = value * 10 + best
        start += offset + 1
    return value


def part1(content: str) -> int:
    """Sum, over all banks, the largest two-digit joltage."""
    result = 0
    for line in content.split("\n"):
        if not line:
            continue
        joltage = _best_pair(line)
        log.debug("%s -> %d", line, joltage)
        result += joltage
    log.info("Result: %d", result)
    return result


def part2(content: str) -> int:
    """Sum, over all banks, the largest twelve-digit joltage."""
    result = 0
    for line in content.split("\n"):
        if not line:
            continue
        joltage = _best_number(line)
        log.debug("%s -> %d", line, joltage)
        result += joltage
    log.info("Result: %d", result)
    return result