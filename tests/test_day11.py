import pytest

from aoc2025.day11 import count_paths, parse_graph, part1, part2

SAMPLE = "\n".join(
    [
        "aaa: you hhh",
        "you: bbb ccc",
        "bbb: ddd eee",
        "ccc: ddd eee fff",
        "ddd: ggg",
        "eee: out",
        "fff: out",
        "ggg: out",
        "hhh: ccc fff iii",
        "iii: out",
    ]
)


def test_part1_sample():
    assert part1(SAMPLE) == 5


def test_part1_matches_count_paths():
    assert part1(SAMPLE) == count_paths(parse_graph(SAMPLE), "you", "out")


def test_parse_graph():
    graph = parse_graph("a: b c\nb: c")
    assert graph == {"a": ["b", "c"], "b": ["c"]}


def test_parse_graph_rejects_malformed_line():
    with pytest.raises(ValueError):
        parse_graph("a: b\n")


def test_count_paths_diamond():
    graph = parse_graph("a: b c\nb: d\nc: d")
    assert count_paths(graph, "a", "d") == 2


def test_count_paths_same_node():
    graph = parse_graph(SAMPLE)
    assert count_paths(graph, "ccc", "ccc") == count_paths(graph, "ggg", "out")


def test_count_paths_sums_over_successors():
    graph = parse_graph(SAMPLE)
    assert count_paths(graph, "you", "out") == sum(
        count_paths(graph, node, "out") for node in graph["you"]
    )


@pytest.mark.parametrize(
    "text",
    [
        "svr: dac\ndac: fft\nfft: out",
        "svr: fft\nfft: dac\ndac: out",
        "svr: a b\na: dac\nb: dac\ndac: fft\nfft: out",
    ],
)
def test_part2_all_paths_pass_both(text):
    assert part2(text) == count_paths(parse_graph(text), "svr", "out")


def test_part2_bounded_by_all_paths():
    text = "svr: dac out\ndac: fft out\nfft: out"
    assert 0 < part2(text) < count_paths(parse_graph(text), "svr", "out")