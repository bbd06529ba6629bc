"""Day 1: comparing two lists of location numbers."""

from __future__ import annotations

import re
from collections import Counter

_U32 = re.compile(r"\+?[0-9]+")


def _parse_u32(token: str) -> int | None:
    if not _U32.fullmatch(token):
        return None
    value = int(token)
    return value if value < 2**32 else None


def _parse(text: str) -> tuple[list[int], list[int]]:
    left: list[int] = []
    right: list[int] = []
    for line in text.split("\n"):
        fields = line.split()
        if len(fields) < 2:
            continue
        first, second = _parse_u32(fields[0]), _parse_u32(fields[1])
        if first is None or second is None:
            continue
        left.append(first)
        right.append(second)
    return left, right


def part_a(text: str) -> str:
    """Sum the distances between the sorted left and right lists."""
    left, right = _parse(text)
    return str(sum(abs(a - b) for a, b in zip(sorted(left), sorted(right))))


def part_b(text: str) -> str:
    """Sum each left number times its number of occurrences on the right."""
    left, right = _parse(text)
    counts = Counter(right)
    return str(sum(value * counts[value] for value in left))