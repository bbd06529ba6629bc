"""Calendar helpers for the puzzle event and input/output file layout."""

from __future__ import annotations

import contextlib
from datetime import datetime, timedelta, timezone
from pathlib import Path

FIRST_YEAR = 2024
DAYS = range(1, 26)

_EVENT_TZ = timezone(timedelta(hours=-5))


def get_year_month_day(now: datetime | None = None) -> tuple[int, int, int]:
    """Return today's ``(year, month, day)`` in the event's UTC-5 time zone.

    A naive ``now`` is taken to be in UTC; ``None`` means the current time.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    local = now.astimezone(_EVENT_TZ)
    return local.year, local.month, local.day


def get_advent_year_month_day(now: datetime | None = None) -> tuple[int, int, int] | None:
    """Return the latest event year with today's month and day.

    Before December the previous year's event is the latest one. Returns
    ``None`` if that year precedes :data:`FIRST_YEAR`.
    """
    year, month, day = get_year_month_day(now)
    if month < 12:
        year -= 1
    if year < FIRST_YEAR:
        return None
    return year, month, day


def setup_inputs_and_outputs(year: int, root: str | Path | None = None) -> None:
    """Create the input and output folders for ``year`` and an input file per day.

    Existing input files are left untouched.
    """
    base = Path(root) if root is not None else Path.cwd()
    inputs = base / "inputs" / str(year)
    outputs = base / "outputs" / str(year)
    for folder in (inputs, outputs):
        with contextlib.suppress(OSError):
            folder.mkdir(parents=True, exist_ok=True)
    for day in DAYS:
        with (inputs / f"{day}.txt").open("a", encoding="utf-8"):
            pass