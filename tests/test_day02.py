import pytest

from adventday.y2024.day02 import is_safe, part_a, part_b

EXAMPLE = "7 6 4 2 1\n1 2 7 8 9\n9 7 6 2 1\n1 3 2 4 5\n8 6 4 4 1\n1 3 6 7 9"


def test_part_a_example():
    assert part_a(EXAMPLE) == "2"


def test_part_b_example():
    assert part_b(EXAMPLE) == "4"


@pytest.mark.parametrize(
    "report, expected",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([8, 6, 4, 4, 1], False),
        ([1, 3, 6, 7, 9], True),
        ([5], True),
        ([], True),
        ([4, 4], False),
    ],
)
def test_is_safe(report, expected):
    assert is_safe(report) is expected


def test_empty_line_counts_as_safe_report():
    assert int(part_a(EXAMPLE + "\n")) == int(part_a(EXAMPLE)) + 1


def test_dampener_never_reduces_count():
    assert int(part_b(EXAMPLE)) >= int(part_a(EXAMPLE))


def test_reversed_reports_keep_safety():
    reversed_text = "\n".join(" ".join(reversed(line.split())) for line in EXAMPLE.split("\n"))
    assert part_a(reversed_text) == part_a(EXAMPLE)
    assert part_b(reversed_text) == part_b(EXAMPLE)