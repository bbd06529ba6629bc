"""Day 5: checking and fixing print queue page orders."""

from __future__ import annotations

import re
from collections.abc import Sequence

_RULE = re.compile(r"([0-9]+)\|([0-9]+)\n")
_NUMBER = re.compile(r"[0-9]+")
_U32_LIMIT = 2**32


def _number_at(text: str, pos: int) -> tuple[int, int] | None:
    match = _NUMBER.match(text, pos)
    if match is None:
        return None
    value = int(match.group())
    if value >= _U32_LIMIT:
        return None
    return value, match.end()


def _list_at(text: str, pos: int) -> tuple[list[int], int] | None:
    first = _number_at(text, pos)
    if first is None:
        return None
    value, pos = first
    values = [value]
    while text.startswith(",", pos):
        following = _number_at(text, pos + 1)
        if following is None:
            break
        value, pos = following
        values.append(value)
    return values, pos


def parse(text: str) -> tuple[set[tuple[int, int]], list[list[int]]]:
    """Parse ``a|b`` ordering rules, a blank line, then comma-separated updates.

    Raises ``ValueError`` when the rules are not followed by a blank line.
    Anything after the last well-formed update is ignored.
    """
    rules: set[tuple[int, int]] = set()
    pos = 0
    while (match := _RULE.match(text, pos)) is not None:
        before, after = int(match.group(1)), int(match.group(2))
        if before >= _U32_LIMIT or after >= _U32_LIMIT:
            break
        rules.add((before, after))
        pos = match.end()
    if not text.startswith("\n", pos):
        raise ValueError(f"expected a blank line after the ordering rules at offset {pos}")
    pos += 1

    pages: list[list[int]] = []
    parsed = _list_at(text, pos)
    while parsed is not None:
        values, pos = parsed
        pages.append(values)
        parsed = _list_at(text, pos + 1) if text.startswith("\n", pos) else None
    return rules, pages


def is_valid_order(sequence: Sequence[int], precedence: set[tuple[int, int]]) -> bool:
    """Return whether every page comes before all later pages per the rules."""
    return all(
        (page, later) in precedence
        for index, page in enumerate(sequence)
        for later in sequence[index + 1:]
    )


def reorder(sequence: Sequence[int], precedence: set[tuple[int, int]]) -> list[int]:
    """Return the pages reordered by swapping out-of-order pairs."""
    pages = list(sequence)
    left = 0
    while left < len(pages):
        for right in range(left + 1, len(pages)):
            if (pages[left], pages[right]) not in precedence:
                pages[left], pages[right] = pages[right], pages[left]
                break
        else:
            left += 1
    return pages


def _middle(sequence: Sequence[int]) -> int:
    return sequence[len(sequence) // 2]


def part_a(text: str) -> str:
    """Sum the middle pages of correctly ordered updates."""
    precedence, pages = parse(text)
    return str(sum(_middle(seq) for seq in pages if is_valid_order(seq, precedence)))


def part_b(text: str) -> str:
    """Sum the middle pages of incorrectly ordered updates after fixing them."""
    precedence, pages = parse(text)
    return str(
        sum(
            _middle(reorder(seq, precedence))
            for seq in pages
            if not is_valid_order(seq, precedence)
        )
    )