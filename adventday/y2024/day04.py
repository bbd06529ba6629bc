"""Day 4: word search for XMAS and crossed MAS patterns."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import TypeVar

T = TypeVar("T")


class XmasDirection(Enum):
    """The eight grid directions, in clockwise order starting from the right."""

    RIGHT = (1, 0)
    BOTTOM_RIGHT = (1, 1)
    BOTTOM = (0, 1)
    BOTTOM_LEFT = (-1, 1)
    LEFT = (-1, 0)
    TOP_LEFT = (-1, -1)
    TOP = (0, -1)
    TOP_RIGHT = (1, -1)

    @property
    def delta(self) -> tuple[int, int]:
        """The ``(dx, dy)`` step of this direction; y grows downwards."""
        return self.value

    def _shifted(self, eighths: int) -> XmasDirection:
        members = list(XmasDirection)
        return members[(members.index(self) + eighths) % len(members)]

    def rotate_clockwise(self) -> XmasDirection:
        """Return the direction an eighth of a turn clockwise."""
        return self._shifted(1)

    def rotate_counter_clockwise(self) -> XmasDirection:
        """Return the direction an eighth of a turn counter-clockwise."""
        return self._shifted(-1)

    def opposite(self) -> XmasDirection:
        """Return the direction pointing the other way."""
        return self._shifted(4)

    def grid_get(
        self, grid: Sequence[Sequence[T]], start: tuple[int, int], steps: int
    ) -> T | None:
        """Return the cell ``steps`` cells away from ``start`` (x, y), or ``None``."""
        dx, dy = self.delta
        x = start[0] + dx * steps
        y = start[1] + dy * steps
        if x < 0 or y < 0 or y >= len(grid):
            return None
        row = grid[y]
        if x >= len(row):
            return None
        return row[x]


def corners() -> tuple[XmasDirection, ...]:
    """Return the four diagonal directions, clockwise from bottom right."""
    return (
        XmasDirection.BOTTOM_RIGHT,
        XmasDirection.BOTTOM_LEFT,
        XmasDirection.TOP_LEFT,
        XmasDirection.TOP_RIGHT,
    )


def cardinals() -> tuple[XmasDirection, ...]:
    """Return the four straight directions, clockwise from the right."""
    return (
        XmasDirection.RIGHT,
        XmasDirection.BOTTOM,
        XmasDirection.LEFT,
        XmasDirection.TOP,
    )


def _grid(text: str, codes: dict[str, int]) -> list[list[int]]:
    grid = []
    for line in text.split("\n"):
        row = []
        for char in line:
            if char not in codes:
                raise ValueError(f"the input should not have this char: {char}")
            row.append(codes[char])
        grid.append(row)
    return grid


def part_a(text: str) -> str:
    """Count every occurrence of XMAS in any of the eight directions."""
    grid = _grid(text, {"X": 0, "M": 1, "A": 2, "S": 3})
    count = 0
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell != 0:
                continue
            count += sum(
                all(d.grid_get(grid, (x, y), i) == i for i in range(1, 4))
                for d in XmasDirection
            )
    return str(count)


def part_b(text: str) -> str:
    """Count every A at the centre of two diagonal MAS words forming an X."""
    grid = _grid(text, {"X": 3, "M": 1, "A": 0, "S": 2})
    count = 0
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell != 0:
                continue
            for d in corners():
                if d.grid_get(grid, (x, y), 1) != 1:
                    continue
                if d.opposite().grid_get(grid, (x, y), 1) != 2:
                    continue
                other = d.rotate_clockwise().rotate_clockwise()
                t = other.grid_get(grid, (x, y), 1)
                if t is None:
                    t = 0
                if t not in (1, 2):
                    continue
                facing = other.opposite().grid_get(grid, (x, y), 1)
                if (facing == 2 and t == 1) or (facing == 1 and t == 2):
                    count += 1
                    break
    return str(count)