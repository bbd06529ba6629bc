import pytest

from adventday.y2024.day07 import (
    A_OPERATORS,
    B_OPERATORS,
    Operator,
    can_produce,
    parse,
    part_a,
    part_b,
)

EXAMPLE = "\n".join(
    [
        "190: 10 19",
        "3267: 81 40 27",
        "83: 17 5",
        "156: 15 6",
        "7290: 6 8 6 15",
        "161011: 16 10 13",
        "192: 17 8 14",
        "21037: 9 7 18 13",
        "292: 11 6 16 20",
    ]
)


def test_example_part_a():
    assert part_a(EXAMPLE) == "3749"


def test_example_part_b():
    assert part_b(EXAMPLE) == "11387"


def test_concatenation_joins_digits():
    assert Operator.CAT.apply(12, 345) == 12345


def test_concatenation_with_zero_adds():
    assert Operator.CAT.apply(0, 5) == Operator.ADD.apply(0, 5)
    assert Operator.CAT.apply(7, 0) == Operator.ADD.apply(7, 0)


def test_concatenation_saturates():
    assert Operator.CAT.apply(2**64 - 1, 9) == 2**64 - 1


def test_parse_reads_lines_and_ignores_trailing_newline():
    assert parse("190: 10 19\n83: 17 5\n") == [(190, [10, 19]), (83, [17, 5])]


def test_parse_stops_at_malformed_line():
    assert parse("190: 10 19\nbroken") == [(190, [10, 19])]


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse("abc")
    with pytest.raises(ValueError):
        part_a("")


def test_can_produce_cases():
    assert can_produce(190, [10, 19], A_OPERATORS)
    assert not can_produce(83, [17, 5], B_OPERATORS)
    assert can_produce(156, [15, 6], B_OPERATORS)
    assert not can_produce(156, [15, 6], A_OPERATORS)
    assert can_produce(5, [5], A_OPERATORS)
    assert not can_produce(0, [], B_OPERATORS)


def test_part_b_at_least_part_a():
    assert int(part_b(EXAMPLE)) >= int(part_a(EXAMPLE))