from datetime import datetime, timedelta, timezone

from adventday.dates import (
    FIRST_YEAR,
    get_advent_year_month_day,
    get_year_month_day,
    setup_inputs_and_outputs,
)


def test_get_year_month_day_uses_utc_minus_five():
    now = datetime(2025, 1, 1, 2, 0, tzinfo=timezone.utc)
    assert get_year_month_day(now) == (2024, 12, 31)


def test_naive_datetime_is_treated_as_utc():
    aware = datetime(2025, 3, 10, 4, 30, tzinfo=timezone.utc)
    naive = aware.replace(tzinfo=None)
    assert get_year_month_day(naive) == get_year_month_day(aware)


def test_other_zone_is_converted():
    aware_utc = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
    elsewhere = aware_utc.astimezone(timezone(timedelta(hours=9)))
    assert get_year_month_day(elsewhere) == get_year_month_day(aware_utc)


def test_advent_in_december_keeps_the_year():
    now = datetime(FIRST_YEAR, 12, 15, 12, 0, tzinfo=timezone.utc)
    assert get_advent_year_month_day(now) == get_year_month_day(now)


def test_advent_before_december_uses_previous_year():
    now = datetime(FIRST_YEAR + 2, 1, 20, 12, 0, tzinfo=timezone.utc)
    year, month, day = get_year_month_day(now)
    assert get_advent_year_month_day(now) == (year - 1, month, day)


def test_advent_before_first_year_is_none():
    now = datetime(FIRST_YEAR, 11, 20, 12, 0, tzinfo=timezone.utc)
    assert get_advent_year_month_day(now) is None


def test_setup_creates_folders_and_day_files(tmp_path):
    setup_inputs_and_outputs(2024, tmp_path)
    inputs = tmp_path / "inputs" / "2024"
    outputs = tmp_path / "outputs" / "2024"
    assert outputs.is_dir()
    assert sorted(p.name for p in inputs.iterdir()) == sorted(f"{d}.txt" for d in range(1, 26))
    assert all(p.read_text() == "" for p in inputs.iterdir())


def test_setup_keeps_existing_inputs(tmp_path):
    inputs = tmp_path / "inputs" / "2024"
    inputs.mkdir(parents=True)
    (inputs / "3.txt").write_text("keep me")
    setup_inputs_and_outputs(2024, tmp_path)
    assert (inputs / "3.txt").read_text() == "keep me"