"""Dispatch from an event year and day to that day's two solvers."""

from __future__ import annotations

from collections.abc import Callable
from types import ModuleType

from adventday.dates import DAYS
from adventday.y2024 import day01, day02, day03, day04, day05, day06, day07

Solver = Callable[[str], str]

_SOLVED_2024: dict[int, ModuleType] = {
    1: day01,
    2: day02,
    3: day03,
    4: day04,
    5: day05,
    6: day06,
    7: day07,
}


class InvalidDayError(LookupError):
    """Raised when no solvers exist for a year and day."""


def _unsolved(text: str) -> str:
    """Answer for a day that has no solution yet: always empty."""
    return ""


def _solvers_for(module: ModuleType | None) -> tuple[Solver, Solver]:
    if module is None:
        return _unsolved, _unsolved
    return module.part_a, module.part_b


_SOLVERS: dict[tuple[int, int], tuple[Solver, Solver]] = {
    (2024, day): _solvers_for(_SOLVED_2024.get(day)) for day in DAYS
}


def day_caller(year: int, day: int, text: str) -> tuple[str, str]:
    """Run both parts of the puzzle for ``year``/``day`` on ``text``.

    Raises :class:`InvalidDayError` for an unknown pair; errors from the
    solvers themselves propagate unchanged.
    """
    try:
        part_a, part_b = _SOLVERS[(year, day)]
    except KeyError:
        raise InvalidDayError(f"Invalid year/day pair: {year} {day}") from None
    return part_a(text), part_b(text)