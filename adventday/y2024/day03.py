"""Day 3: summing the products of uncorrupted multiply instructions."""

from __future__ import annotations

import re

_MUL = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)")
_MUL_OR_TOGGLE = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)|(do\(\))|(don't\(\))")


def part_a(text: str) -> str:
    """Sum every ``mul(a,b)`` product."""
    return str(sum(int(a) * int(b) for a, b in _MUL.findall(text)))


def part_b(text: str) -> str:
    """Sum ``mul(a,b)`` products, honouring ``do()`` and ``don't()`` toggles."""
    enabled = True
    total = 0
    for match in _MUL_OR_TOGGLE.finditer(text):
        if match.group(3) is not None:
            enabled = True
        elif match.group(4) is not None:
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return str(total)