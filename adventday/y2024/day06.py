"""Day 6: following a patrolling guard around a lab."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

_GUARD_CHARS = {"^": (0, -1), ">": (1, 0), "<": (-1, 0), "v": (0, 1)}
_GRID_CHARS = set(_GUARD_CHARS) | {".", "#"}


class Tile(Enum):
    EMPTY = "."
    CRATE = "#"
    WALKED = "X"
    EDGE = " "

    @property
    def walkable(self) -> bool:
        return self is not Tile.CRATE


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def rotate(self) -> Direction:
        """Return the direction after a quarter turn to the right."""
        return _RIGHT_TURN[self]


_RIGHT_TURN = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}


@dataclass
class LabMap:
    width: int
    height: int
    tiles: list[Tile] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.tiles:
            self.tiles = [Tile.EMPTY] * (self.width * self.height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Tile:
        if not self._inside(x, y):
            return Tile.EDGE
        return self.tiles[x + y * self.width]

    def set(self, x: int, y: int, tile: Tile) -> Tile:
        """Store ``tile`` and return what was there; off the map returns EDGE."""
        if not self._inside(x, y):
            return Tile.EDGE
        index = x + y * self.width
        previous = self.tiles[index]
        self.tiles[index] = tile
        return previous


@dataclass(frozen=True)
class Guard:
    x: int
    y: int
    direction: Direction = Direction.UP

    def step(self) -> Guard:
        dx, dy = self.direction.value
        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotate(self) -> Guard:
        return replace(self, direction=self.direction.rotate())

    def tile_in_front(self, lab: LabMap) -> Tile:
        dx, dy = self.direction.value
        return lab.get(self.x + dx, self.y + dy)

    def tile_under(self, lab: LabMap) -> Tile:
        return lab.get(self.x, self.y)

    def paint(self, lab: LabMap, tile: Tile) -> bool:
        """Set the tile under the guard; return whether it changed."""
        return lab.set(self.x, self.y, tile) is not tile


def _parse(text: str) -> tuple[LabMap, Guard]:
    width = height = 0
    x = 0
    for char in text:
        if char in _GRID_CHARS:
            if x == 0:
                height += 1
            x += 1
            if height == 1:
                width += 1
            elif x > width:
                raise ValueError(f"Line {height} too long {x} expected {width}")
        elif char == "\n":
            x = 0
        elif char != "\r":
            raise ValueError(f"Invalid character '{char}'")

    lab = LabMap(width, height)
    guard: Guard | None = None
    x = y = 0
    for char in text:
        if char in _GRID_CHARS:
            if char in _GUARD_CHARS:
                if guard is not None:
                    raise ValueError("Duplicate guard")
                guard = Guard(x, y, Direction(_GUARD_CHARS[char]))
            lab.set(x, y, Tile.CRATE if char == "#" else Tile.EMPTY)
            x += 1
        elif char == "\n":
            y += 1
            x = 0
    if guard is None:
        raise ValueError("no guard found")
    return lab, guard


def _patrol(
    lab: LabMap, guard: Guard, positions: dict[Guard, None]
) -> tuple[dict[Guard, None], int | None]:
    """Walk the guard off the map; the count is ``None`` if she loops."""
    visited = 0
    while guard.tile_under(lab) is not Tile.EDGE:
        if guard.paint(lab, Tile.WALKED):
            visited += 1
        elif guard in positions:
            return positions, None
        positions[guard] = None
        guard = guard.step() if guard.tile_in_front(lab).walkable else guard.rotate()
    return positions, visited


def _clone_until(positions: dict[Guard, None], stop: Guard) -> dict[Guard, None]:
    clone: dict[Guard, None] = {}
    for position in positions:
        if position == stop:
            break
        clone[position] = None
    return clone


def part_a(text: str) -> str:
    """Count the distinct tiles the guard visits before leaving the map.

    Raises ``ValueError`` if the guard walks in a loop.
    """
    lab, guard = _parse(text)
    _, visited = _patrol(lab, guard, {})
    if visited is None:
        raise ValueError("Looping")
    return str(visited)


def part_b(text: str) -> str:
    """Count the tiles where one extra crate would trap the guard in a loop."""
    lab, guard = _parse(text)
    positions, _ = _patrol(lab, guard, {})
    count = 0
    tried: set[tuple[int, int]] = set()
    for position in list(positions):
        target = position.step()
        cell = (target.x, target.y)
        if cell in tried:
            continue
        tile = lab.get(*cell)
        if tile.walkable and tile is not Tile.EDGE:
            lab.set(*cell, Tile.CRATE)
            tried.add(cell)
            _, visited = _patrol(lab, position, _clone_until(positions, position))
            if visited is None:
                count += 1
            lab.set(*cell, Tile.WALKED)
    return str(count)