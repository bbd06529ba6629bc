import pytest

from adventday.y2024.day06 import part_a, part_b

EXAMPLE = "\n".join(
    [
        "....#.....",
        ".........#",
        "..........",
        "..#.......",
        ".......#..",
        "..........",
        ".#..^.....",
        "........#.",
        "#.........",
        "......#...",
    ]
)

LOOPING = "\n".join([".#...", ".^..#", "#....", "...#."])


def test_example_part_a():
    assert part_a(EXAMPLE) == "41"


def test_example_part_b():
    assert part_b(EXAMPLE) == "6"


def test_lone_guard_visits_one_tile():
    assert part_a("^") == "1"


def test_crlf_is_accepted():
    assert part_a(EXAMPLE.replace("\n", "\r\n")) == part_a(EXAMPLE)


def test_visited_never_exceeds_open_tiles():
    open_tiles = sum(EXAMPLE.count(c) for c in ".^")
    assert int(part_a(EXAMPLE)) <= open_tiles


def test_guard_in_a_loop_raises():
    with pytest.raises(ValueError, match="Looping"):
        part_a(LOOPING)


def test_invalid_character_raises():
    with pytest.raises(ValueError, match="Invalid character"):
        part_a("..^\n.x.")


def test_duplicate_guard_raises():
    with pytest.raises(ValueError, match="Duplicate guard"):
        part_a("^.\n.v")


def test_missing_guard_raises():
    with pytest.raises(ValueError, match="no guard found"):
        part_b("..\n.#")


def test_line_too_long_raises():
    with pytest.raises(ValueError, match="too long"):
        part_a("^.\n...")