"""Day 2: checking reactor reports for safety."""

from __future__ import annotations

import re
from collections.abc import Sequence

_I32 = re.compile(r"[+-]?[0-9]+")


def _parse_i32(token: str) -> int | None:
    if not _I32.fullmatch(token):
        return None
    value = int(token)
    return value if -(2**31) <= value < 2**31 else None


def _reports(text: str):
    for line in text.split("\n"):
        yield [v for v in map(_parse_i32, line.split()) if v is not None]


def is_safe(report: Sequence[int]) -> bool:
    """Return whether levels strictly rise or fall by 1 to 3 at every step."""
    if len(report) <= 1:
        return True
    if report[0] == report[1]:
        return False
    sign = 1 if report[0] < report[1] else -1
    return all(1 <= (b - a) * sign <= 3 for a, b in zip(report, report[1:]))


def _safe_with_dampener(report: list[int]) -> bool:
    if is_safe(report):
        return True
    return any(is_safe(report[:i] + report[i + 1:]) for i in range(len(report)))


def part_a(text: str) -> str:
    """Count the safe reports; every line, empty ones too, is a report."""
    return str(sum(1 for report in _reports(text) if is_safe(report)))


def part_b(text: str) -> str:
    """Count reports that are safe once at most one level is removed."""
    return str(sum(1 for report in _reports(text) if _safe_with_dampener(report)))