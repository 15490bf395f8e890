import pytest

from aoc2025.day06 import part1, part2

EXAMPLE = "\n".join(
    (
        "123 328  51 64 ",
        " 45 64  387 23 ",
        "  6 98  215 314",
        "*   +   *   +  ",
    )
)


def test_part1_worked_example():
    assert part1(EXAMPLE) == 4277556


def test_part2_worked_example():
    assert part2(EXAMPLE) == 3263827


def test_part1_addition_sums_every_number():
    numbers = [[1, 2], [3, 4], [10, 20]]
    text = "\n".join(" ".join(map(str, row)) for row in numbers) + "\n+ +"
    assert part1(text) == sum(sum(row) for row in numbers)


def test_part1_multiplication_per_column():
    text = "2 3\n4 5\n* *"
    assert part1(text) == 2 * 4 + 3 * 5


def test_part1_without_numbers_raises():
    with pytest.raises(ValueError):
        part1("+")


def test_part1_bad_number_raises():
    with pytest.raises(ValueError):
        part1("1 x\n+ +")


def test_part2_reads_columns_vertically():
    assert part2("1 2\n3 4\n+ *") == 13 + 24


def test_part2_operator_line_padding_is_irrelevant():
    lines = EXAMPLE.split("\n")
    lines[-1] = lines[-1].rstrip()
    assert part2("\n".join(lines)) == part2(EXAMPLE)