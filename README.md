# adventday

Solutions for the daily puzzles of the December programming calendar,
together with a small runner that feeds each day its input and saves the
answers.

Days 1 to 7 of 2024 are solved. Days 8 to 25 of 2024 are registered but
have no solution yet: both of their answers are the empty string.

## Installation

```
pip install .
```

## Running puzzles

The runner reads puzzle inputs from `inputs/<year>/<day>.txt` and writes the
two answers to `outputs/<year>/<day>a.txt` and `outputs/<year>/<day>b.txt`,
relative to the current directory. Days whose input file cannot be read are
skipped. Answer files are written from their start without being truncated
first.

Run a single day:

```
adventday 2024 5
```

Run every day (1 to 25) of a year:

```
adventday 2024
```

A day above 25, or a day that is not a number, also runs every day of the
year. A year that is not a number does nothing.

With no arguments, the runner works out the current event date, taking the
day in UTC-5. In December it runs that day (or every day after the 25th);
outside of December it runs every day of the previous year. Nothing runs if
that year is before 2024.

Before running, the command creates `inputs/<year>/` and `outputs/<year>/`
for every event year from 2024 up to the current one, along with an empty
input file for each day (existing input files are left alone). Paste each
day's puzzle input into its file.

Each solved day prints a line such as:

```
2024/12/5 -> a: 143, b: 123
```

A solver that cannot make sense of its input raises `ValueError`, which
stops the run. Some days (5, 6 and 7) reject an empty input this way, so
running a whole year needs those inputs filled in.

## Using the solutions from Python

Every module in `adventday.y2024` (`day01` to `day07`) exposes
`part_a(text)` and `part_b(text)`, each returning the answer as a string:

```python
from adventday.y2024 import day01

print(day01.part_a("3   4\n4   3\n2   5\n1   3\n3   9\n3   3"))  # 11
```

Some days also expose their building blocks, for example
`day02.is_safe(report)`, `day05.parse`, `day05.is_valid_order`,
`day05.reorder`, `day07.parse`, `day07.can_produce` with the
`day07.Operator` enum, and the `day04.XmasDirection` enum.

`adventday.registry.day_caller(year, day, text)` dispatches to the right day
and returns both answers; an unknown year/day pair raises
`adventday.registry.InvalidDayError`.

`adventday.cli` offers the command's pieces: `parse_args(args)`,
`run_day(year, day, root=None)` (returns the two answers, or `None` when the
input file cannot be read) and `main(argv=None)`.

`adventday.dates` provides `get_year_month_day`, `get_advent_year_month_day`
and `setup_inputs_and_outputs(year, root=None)`.

The text helpers in `adventday.text` (`is_text_square`, `iter_lines`) deal
with the line endings `\n`, `\r`, `\r\n` and `\n\r` in puzzle inputs.

## What it does not do

The package does not download puzzle inputs or submit answers; inputs have
to be placed in the input files by hand. Only the 2024 event is covered,
and only its first seven days have solutions.

## Tests

```
pip install .[test]
pytest
```