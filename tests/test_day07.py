import pytest

from aoc2025.day07 import part1, part2

EXAMPLE = "\n".join(
    (
        ".......S.......",
        "...............",
        ".......^.......",
        "...............",
        "......^.^......",
        "...............",
        ".....^.^.^.....",
        "...............",
        "....^.^...^....",
        "...............",
        "...^.^...^.^...",
        "...............",
        "..^...^.....^..",
        "...............",
        ".^.^.^.^.^...^.",
        "...............",
    )
)


def _mirror(text):
    return "\n".join(line[::-1] for line in text.split("\n"))


def test_part1_worked_example():
    assert part1(EXAMPLE) == 21


def test_part2_worked_example():
    assert part2(EXAMPLE) == 40


@pytest.mark.parametrize("solve", [part1, part2])
def test_mirroring_keeps_the_answer(solve):
    assert solve(_mirror(EXAMPLE)) == solve(EXAMPLE)


@pytest.mark.parametrize("solve", [part1, part2])
def test_extra_empty_row_keeps_the_answer(solve):
    assert solve(EXAMPLE + "\n" + "." * 15) == solve(EXAMPLE)


def test_part2_without_splitters_is_one_timeline():
    assert part2("..S..\n.....\n.....") == 1


def test_part1_never_exceeds_splitter_count():
    assert part1(EXAMPLE) <= EXAMPLE.count("^")


@pytest.mark.parametrize("solve", [part1, part2])
def test_ragged_rows_raise(solve):
    with pytest.raises(ValueError):
        solve("..S..\n..\n.....")