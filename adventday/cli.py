"""Command line entry point: solve puzzle days and store their answers."""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path

from adventday.dates import DAYS, FIRST_YEAR, get_advent_year_month_day, setup_inputs_and_outputs
from adventday.registry import day_caller

_U32 = re.compile(r"\+?[0-9]+")


def _parse_u32(token: str) -> int | None:
    if not _U32.fullmatch(token):
        return None
    value = int(token)
    return value if value < 2**32 else None


def parse_args(args: list[str]) -> tuple[int, int, int] | None:
    """Turn ``[year [day]]`` into ``(year, 12, day)``.

    A missing or unreadable day gives day 31, meaning every day. With no
    arguments the current event date is used. An unreadable year gives ``None``.
    """
    if not args:
        return get_advent_year_month_day()
    year = _parse_u32(args[0])
    if year is None:
        return None
    if len(args) >= 2:
        day = _parse_u32(args[1])
        if day is not None:
            return year, 12, day
    return year, 12, 31


def _write_answer(path: Path, answer: str) -> None:
    # The file is written from its start without being truncated first.
    fd = os.open(path, os.O_WRONLY | os.O_CREAT, 0o666)
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        handle.write(answer)


def run_day(year: int, day: int, root: str | Path | None = None) -> tuple[str, str] | None:
    """Solve one day from ``inputs/{year}/{day}.txt`` and store both answers.

    Returns the answers, or ``None`` if the input file cannot be read.
    """
    base = Path(root) if root is not None else Path.cwd()
    try:
        text = (base / "inputs" / str(year) / f"{day}.txt").read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    answer_a, answer_b = day_caller(year, day, text)
    print(f"{year}/12/{day} -> a: {answer_a}, b: {answer_b}")
    outputs = base / "outputs" / str(year)
    _write_answer(outputs / f"{day}a.txt", answer_a)
    _write_answer(outputs / f"{day}b.txt", answer_b)
    return answer_a, answer_b


def main(argv: list[str] | None = None) -> int:
    """Run the requested day, or every day of the requested year."""
    if argv is None:
        argv = sys.argv[1:]
    parsed = parse_args(argv)
    if parsed is None:
        return 0
    current = get_advent_year_month_day()
    if current is not None:
        for setup_year in range(FIRST_YEAR, current[0] + 1):
            setup_inputs_and_outputs(setup_year)
    year, month, day = parsed
    if month == 12 and day <= 25:
        run_day(year, day)
    else:
        for each in DAYS:
            run_day(year, each)
    return 0


if __name__ == "__main__":
    sys.exit(main())