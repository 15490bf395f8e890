"""Command-line runner: pick a day's solver and feed it the puzzle inputs."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from aoc2025 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
)

INPUT_NAMES = ("example", "input")

Solver = Callable[[str], int]

_PART1: dict[int, Solver] = {
    1: day01.part1,
    2: day02.part1,
    3: day03.part1,
    4: day04.part1,
    5: day05.part1,
    6: day06.part1,
    7: day07.part1,
    8: day08.part1,
    9: day09.part1,
    10: day10.part1,
    11: day11.part1,
    12: day12.part1,
}

_PART2: dict[int, Solver] = {
    1: day01.part2,
    2: day02.part2,
    3: day03.part2,
    4: day04.part2,
    5: day05.part2,
    6: day06.part2,
    7: day07.part2,
    8: day08.part2,
    9: day09.part2,
    10: day10.part2,
    11: day11.part2,
}

_package_log = logging.getLogger("aoc2025")


def get_solver(day: int, part: str) -> Solver:
    """Return the solver for a day; part '1' selects part one, anything else part two."""
    if day not in _PART1:
        raise ValueError(f"no solver found for day {day}")
    if part == "1":
        return _PART1[day]
    if day not in _PART2:
        raise ValueError(f"day {day} has no second part")
    return _PART2[day]


@dataclass
class App:
    """One run of a day's solver over its input files, logging to a file."""

    day: int
    part: str
    input_name: str | None = None
    work_dir: Path = field(default_factory=Path.cwd)

    @property
    def app_name(self) -> str:
        return f"day_{self.day}"

    @property
    def log_path(self) -> Path:
        return Path(self.work_dir) / "logs" / f"{self.app_name}_{self.part}.log"

    def input_path(self, input_name: str) -> Path:
        """Find the input file, preferring the one shared by both parts."""
        inputs = Path(self.work_dir) / "inputs"
        shared = inputs / f"{self.app_name}_{input_name}"
        if shared.exists():
            return shared
        per_part = inputs / f"{self.app_name}_{input_name}_{self.part}"
        if per_part.exists():
            return per_part
        raise FileNotFoundError(f"can't open '{shared}' or '{per_part}'")

    def run(self) -> list[int]:
        """Solve every selected input and return the answers in order."""
        log_path = self.log_path
        handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(message)s"))
        previous_level = _package_log.level
        _package_log.addHandler(handler)
        _package_log.setLevel(logging.DEBUG)
        try:
            solver = get_solver(self.day, self.part)
            _package_log.info("Running app: %d", self.day)
            results = []
            for name in INPUT_NAMES:
                if self.input_name is not None and name != self.input_name:
                    continue
                path = self.input_path(name)
                _package_log.info("Using input: %s", path)
                content = path.read_text(encoding="utf-8")
                _package_log.info("Running Part %s", "1" if self.part == "1" else "2")
                results.append(solver(content))
        finally:
            _package_log.removeHandler(handler)
            _package_log.setLevel(previous_level)
            handler.close()
        print("Result in", log_path)
        return results


def main(argv: list[str] | None = None) -> int:
    """Run a day's solver: DAY PART [INPUT]."""
    parser = argparse.ArgumentParser(prog="aoc2025", description="Run a puzzle solver.")
    parser.add_argument("day", type=int, help="day number")
    parser.add_argument("part", help="'1' for part one, anything else for part two")
    parser.add_argument("input", nargs="?", default=None, help="only use this input name")
    args = parser.parse_args(argv)
    App(day=args.day, part=args.part, input_name=args.input).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())