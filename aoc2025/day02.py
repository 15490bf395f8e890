"""Gift shop puzzle: sum product ids made of a repeated digit sequence."""

from __future__ import annotations

import logging
from collections.abc import Iterator

log = logging.getLogger(__name__)


def _ranges(content: str) -> Iterator[tuple[int, int]]:
    for item in content.split(","):
        bounds = item.split("-")
        if len(bounds) < 2:
            raise ValueError(f"malformed range: {item!r}")
        yield int(bounds[0]), int(bounds[1])


def check_frequency(value: str, size: int) -> bool:
    """Return True if value is one chunk of the given size repeated."""
    if size <= 0:
        raise ValueError(f"chunk size must be positive, got {size}")
    if len(value) % size:
        raise ValueError(f"length {len(value)} is not a multiple of {size}")
    chunks = {value[start:start + size] for start in range(0, len(value), size)}
    return len(chunks) == 1


def _is_doubled(text: str) -> bool:
    half, odd = divmod(len(text), 2)
    return not odd and text[:half] == text[half:]


def _is_repeated(text: str) -> bool:
    length = len(text)
    return any(
        length % size == 0 and check_frequency(text, size)
        for size in range(1, length // 2 + 1)
    )


def part1(content: str) -> int:
    """Sum the ids whose digits are one sequence written twice."""
    result = 0
    for low, high in _ranges(content):
        log.debug("Range %d-%d", low, high)
        result += sum(n for n in range(low, high + 1) if _is_doubled(str(n)))
    log.info("Result: %d", result)
    return result


def part2(content: str) -> int:
    """Sum the ids whose digits are one sequence written at least twice."""
    result = 0
    for low, high in _ranges(content):
        log.debug("Range %d-%d", low, high)
        result += sum(n for n in range(low, high + 1) if _is_repeated(str(n)))
    log.info("Result: %d", result)
    return result