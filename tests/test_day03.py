import pytest

from aoc2025.day03 import part1, part2

LINES = ["987654321111111", "811111111111119", "234234234234278", "818181911112111"]
SAMPLE = "\n".join(LINES)


def test_part1_sample():
    assert part1(SAMPLE) == 357


def test_part2_sample():
    assert part2(SAMPLE) == 3121910778619


@pytest.mark.parametrize("line", ["12", "21", "99", "10", "57"])
def test_part1_two_digit_bank(line):
    assert part1(line) == int(line)


@pytest.mark.parametrize("line", ["123456789012", "999999999999", "100000000001"])
def test_part2_twelve_digit_bank(line):
    assert part2(line) == int(line)


def test_part2_all_nines():
    assert part2("9" * 15) == int("9" * 12)


def test_sum_over_lines():
    assert part1(SAMPLE) == sum(part1(line) for line in LINES)
    assert part2(SAMPLE) == sum(part2(line) for line in LINES)


def test_blank_lines_skipped():
    padded = "\n" + "\n\n".join(LINES) + "\n"
    assert part1(padded) == part1(SAMPLE)
    assert part2(padded) == part2(SAMPLE)


def test_part2_result_has_twelve_digits():
    for line in LINES:
        assert len(str(part2(line))) == 12


def test_non_digit_raises():
    with pytest.raises(ValueError):
        part1("12a")
    with pytest.raises(ValueError):
        part2("1234567890ab")