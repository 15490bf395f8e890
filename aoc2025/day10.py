"""Factory puzzle: configure machines with the fewest button presses."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

log = logging.getLogger(__name__)

UNSOLVABLE = -1


@dataclass
class Machine:
    """Indicator light pattern, buttons (lists of indices) and joltage targets."""

    lights: list[int] = field(default_factory=list)
    buttons: list[list[int]] = field(default_factory=list)
    joltage: list[int] = field(default_factory=list)


def _numbers(token: str) -> list[int]:
    return [int(value) for value in token[1:-1].split(",")]


def parse_machines(content: str) -> list[Machine]:
    """Read one machine per line: '[.#..] (0,1) (2) {3,4,5}'."""
    machines = []
    for line in content.split("\n"):
        machine = Machine()
        for token in line.split(" "):
            if not token:
                raise ValueError(f"empty token in line {line!r}")
            opener = token[0]
            if opener == "[":
                machine.lights.extend(1 if char == "#" else 0 for char in token[1:-1])
            elif opener == "(":
                machine.buttons.append(_numbers(token))
            elif opener == "{":
                machine.joltage.extend(_numbers(token))
        machines.append(machine)
    return machines


def _fewest_toggles(machine: Machine) -> int:
    size = len(machine.lights)
    for button in machine.buttons:
        if any(not 0 <= index < size for index in button):
            raise ValueError(f"button {button} refers to a missing light")
    target = tuple(machine.lights)
    start = (0,) * size
    seen = {start}
    frontier = [start]
    depth = 0
    while frontier:
        if target in frontier:
            return depth
        following = []
        for state in frontier:
            for button in machine.buttons:
                lights = list(state)
                for index in button:
                    lights[index] ^= 1
                candidate = tuple(lights)
                if candidate not in seen:
                    seen.add(candidate)
                    following.append(candidate)
        frontier = following
        depth += 1
    return 0


def min_presses(buttons: Sequence[Sequence[int]], target: Sequence[int]) -> int:
    """Fewest presses of 0/1 button vectors summing to target, or UNSOLVABLE."""
    size = len(target)
    if any(len(button) < size for button in buttons):
        raise ValueError("every button must cover every counter")

    patterns = []
    for mask in range(1 << len(buttons)):
        chosen = [button for bit, button in enumerate(buttons) if mask >> bit & 1]
        effect = tuple(sum(column) for column in zip(*chosen)) if chosen else (0,) * size
        patterns.append((len(chosen), effect))

    memo: dict[tuple[int, ...], int] = {}

    def solve(goal: tuple[int, ...]) -> int:
        if not any(goal):
            return 0
        if goal in memo:
            return memo[goal]
        best = UNSOLVABLE
        for count, effect in patterns:
            remainder = [want - got for want, got in zip(goal, effect)]
            if any(value < 0 or value % 2 for value in remainder):
                continue
            rest = solve(tuple(value // 2 for value in remainder))
            if rest != UNSOLVABLE:
                total = count + 2 * rest
                if best == UNSOLVABLE or total < best:
                    best = total
        memo[goal] = best
        return best

    return solve(tuple(target))


def part1(content: str) -> int:
    """Sum the fewest presses needed to light each machine's pattern."""
    result = sum(_fewest_toggles(machine) for machine in parse_machines(content))
    log.info("Result: %d", result)
    return result


def _as_vector(indices: list[int], size: int) -> list[int]:
    vector = [0] * size
    for index in indices:
        if index < 0:
            raise ValueError(f"negative counter index {index}")
        if index < size:
            vector[index] = 1
    return vector


def part2(content: str) -> int:
    """Sum the fewest presses needed to reach each machine's joltage."""
    result = 0
    for number, machine in enumerate(parse_machines(content)):
        size = len(machine.lights)
        vectors = [_as_vector(button, size) for button in machine.buttons]
        presses = min_presses(vectors, machine.joltage)
        log.debug("Machine %d : %d", number, presses)
        result += presses
    log.info("Result: %d", result)
    return result