"""Day 7: finding operators that make calibration equations true."""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import Enum

_NUMBER = re.compile(r"[0-9]+")
_U64_LIMIT = 2**64
_U64_MAX = _U64_LIMIT - 1


class Operator(Enum):
    ADD = "+"
    MUL = "*"
    CAT = "||"

    def apply(self, left: int, right: int) -> int:
        """Combine two values; concatenation saturates at the 64-bit maximum."""
        if self is Operator.ADD:
            return left + right
        if self is Operator.MUL:
            return left * right
        if left > 0 and right > 0:
            value = int(f"{left}{right}")
            return value if value < _U64_LIMIT else _U64_MAX
        return left + right


A_OPERATORS = (Operator.ADD, Operator.MUL)
B_OPERATORS = (Operator.ADD, Operator.MUL, Operator.CAT)


def _number_at(text: str, pos: int) -> tuple[int, int] | None:
    match = _NUMBER.match(text, pos)
    if match is None:
        return None
    value = int(match.group())
    if value >= _U64_LIMIT:
        return None
    return value, match.end()


def _equation_at(text: str, pos: int) -> tuple[tuple[int, list[int]], int] | None:
    parsed = _number_at(text, pos)
    if parsed is None:
        return None
    target, pos = parsed
    if not text.startswith(": ", pos):
        return None
    parsed = _number_at(text, pos + 2)
    if parsed is None:
        return None
    value, pos = parsed
    values = [value]
    while text.startswith(" ", pos):
        parsed = _number_at(text, pos + 1)
        if parsed is None:
            break
        value, pos = parsed
        values.append(value)
    return (target, values), pos


def parse(text: str) -> list[tuple[int, list[int]]]:
    """Parse ``target: v1 v2 ...`` lines; text after the last valid line is ignored.

    Raises ``ValueError`` if not even the first line is well formed.
    """
    parsed = _equation_at(text, 0)
    if parsed is None:
        raise ValueError("expected an equation of the form 'target: values'")
    equations = []
    while parsed is not None:
        equation, pos = parsed
        equations.append(equation)
        parsed = _equation_at(text, pos + 1) if text.startswith("\n", pos) else None
    return equations


def can_produce(target: int, values: Sequence[int], operators: Sequence[Operator]) -> bool:
    """Return whether combining ``values`` left to right can give ``target``."""

    def search(acc: int, pos: int, op: Operator) -> bool:
        if pos >= len(values):
            return False
        acc = op.apply(acc, values[pos])
        if acc == target and pos + 1 == len(values):
            return True
        if acc > target:
            return False
        return any(search(acc, pos + 1, following) for following in operators)

    return search(0, 0, Operator.ADD)


def _total(text: str, operators: Sequence[Operator]) -> str:
    return str(
        sum(target for target, values in parse(text) if can_produce(target, values, operators))
    )


def part_a(text: str) -> str:
    """Sum the targets reachable with addition and multiplication."""
    return _total(text, A_OPERATORS)


def part_b(text: str) -> str:
    """Sum the targets reachable with addition, multiplication and concatenation."""
    return _total(text, B_OPERATORS)