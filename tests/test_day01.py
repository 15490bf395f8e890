import pytest

from aoc2025.day01 import part1, part2

SAMPLE = "\n".join(["L68", "L30", "R48", "L5", "R60", "L55", "L1", "L99", "R14", "L82"])


def test_part1_sample():
    assert part1(SAMPLE) == 3


def test_part2_sample():
    assert part2(SAMPLE) == 6


def test_part2_counts_at_least_part1():
    assert part2(SAMPLE) >= part1(SAMPLE)


def test_input_stops_at_empty_line():
    assert part1(SAMPLE + "\n\nR50") == part1(SAMPLE)
    assert part2(SAMPLE + "\n\nR50") == part2(SAMPLE)


def test_trailing_newline_ignored():
    assert part1(SAMPLE + "\n") == part1(SAMPLE)
    assert part2(SAMPLE + "\n") == part2(SAMPLE)


@pytest.mark.parametrize("direction", ["L", "R"])
@pytest.mark.parametrize("turns", [1, 2, 7])
def test_full_turns(direction, turns):
    text = f"{direction}{100 * turns}"
    assert part2(text) == turns
    assert part1(text) == part1("")


def test_each_rotation_ending_at_zero_counts():
    lines = ["R50", "L100", "R100", "L300"]
    text = "\n".join(lines)
    assert part1(text) == len(lines)
    assert part2(text) >= part1(text)


def test_bad_step_raises():
    with pytest.raises(ValueError):
        part1("Lx")
    with pytest.raises(ValueError):
        part2("R1\nL")