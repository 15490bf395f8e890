# aoc2025

Solutions to the Advent of Code 2025 puzzles, days 1 to 12, plus a small
command that runs a chosen day and part against your puzzle inputs and
writes the working and the answer to a log file.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Laying out your inputs

The command works relative to the current directory. Puzzle inputs are
read from an `inputs/` directory and the log is written to a `logs/`
directory; both must already exist.

For day `N`, an input called `<name>` is looked up first as
`inputs/day_N_<name>` and then as `inputs/day_N_<name>_<part>`, so an
input that differs between the two parts can be kept in two files.
The two input names used are `example` and `input`.

```
inputs/
    day_1_example
    day_1_input
    day_6_example_2
logs/
```

## Running a puzzle

```
aoc2025 <day> <part> [input]
```

* `day` is the puzzle day, `1` to `12`.
* `part` is `1` for part one; any other value runs part two.
* `input` is optional: give `example` or `input` to run only that one.
  Without it, the example is run first and then the real input.

For example:

```
aoc2025 3 2
aoc2025 7 1 example
```

The same can be started with `python -m aoc2025.app`.

The command prints `Result in <path>`; the answer and the working behind
it are in `logs/day_<day>_<part>.log`, which is replaced on every run.
A missing input file, a day without a solver, or malformed puzzle text
stops the run with an error.

## Using the solvers from Python

Each day lives in its own module, `aoc2025.day01` to `aoc2025.day12`,
with `part1` and `part2` functions that take the puzzle text and return
the answer as an integer:

```python
from aoc2025 import day01

with open("inputs/day_1_input") as f:
    print(day01.part1(f.read()))
```

`aoc2025.day08.part1` also takes the number of shortest wires to join,
`connections`, which defaults to 1000.

Several modules expose their building blocks too, for example
`day02.check_frequency`, `day04.parse_grid`, `day08.sorted_connections`,
`day09.compress_points`, `day10.min_presses` and `day11.count_paths`.

The solvers log their working through the standard `logging` module
under the `aoc2025` logger; nothing is printed unless you configure a
handler.

The runner is in `aoc2025.app`: `get_solver(day, part)` returns the
solver for a day and part, and `App(day, part, input_name=None,
work_dir=...)` with its `run()` method does what the command does and
returns the answers as a list.

## What it does not do

* Day 12 has only a first part; asking for its second part raises
  `ValueError`.
* Inputs are not downloaded: you place them in `inputs/` yourself.
* The `inputs/` and `logs/` directories are not created for you.