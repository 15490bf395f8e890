"""Cephalopod math puzzle: evaluate column-wise worksheet problems."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from math import prod

log = logging.getLogger(__name__)

_SPACES = re.compile(r"\s+")


def _evaluate(operation: str, numbers: Iterable[int]) -> int:
    """Add the numbers for '+', multiply them for anything else."""
    return sum(numbers) if operation == "+" else prod(numbers)


def part1(content: str) -> int:
    """Read each problem from a column of whitespace-separated numbers."""
    lines = content.split("\n")
    operations = _SPACES.sub(",", lines[-1]).split(",")
    rows: list[list[int]] = []
    for line in lines[:-1]:
        if not line:
            break
        rows.append([int(value) for value in _SPACES.sub(",", line.strip()).split(",")])
    if not rows:
        raise ValueError("worksheet holds no numbers")

    result = 0
    for index in range(len(rows[0])):
        operation = operations[index]
        column = [row[index] for row in rows]
        answer = _evaluate(operation, column)
        log.debug("Problem %d: %s -> %d", index, operation, answer)
        result += answer
    log.info("Result: %d", result)
    return result


def _read_groups(lines: list[str], width: int) -> list[list[str]]:
    """Scan the sheet right to left, gathering vertical numbers and their operator."""
    op_row = len(lines) - 1
    groups: list[list[str]] = [[""]]
    slot = 0
    operation = ""
    for col in range(width - 1, -1, -1):
        for row in range(op_row, -1, -1):
            char = lines[row][col]
            if row == op_row:
                if not operation and char in ("+", "*"):
                    operation = char
                elif operation and char == " ":
                    groups[-1][slot] = operation
                    groups.append([])
                    operation = ""
                    slot = -1
                else:
                    operation = ""
            else:
                if char != " ":
                    groups[-1][slot] = char + groups[-1][slot]
                if row == 0:
                    slot += 1
                    groups[-1].append("")
            if row == 0 and col == 0:
                groups[-1][slot] = operation
    return groups


def part2(content: str) -> int:
    """Read numbers top to bottom in each column, problems right to left."""
    lines = content.split("\n")
    width = len(lines[0])
    lines[-1] = lines[-1].ljust(width)

    result = 0
    for group in _read_groups(lines, width):
        if not group:
            raise ValueError("problem without an operator")
        *texts, operation = group
        numbers = [int(text.strip()) for text in texts if text]
        if not numbers:
            raise ValueError("problem without numbers")
        result += _evaluate(operation, numbers)
    log.info("Result: %d", result)
    return result