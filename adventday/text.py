"""Helpers for inspecting puzzle input text."""

from __future__ import annotations

import re
from collections.abc import Iterator

_LINE_BREAK = re.compile(r"\r\n|\n\r|\r|\n")


def is_text_square(text: str) -> tuple[int, int] | None:
    """Return ``(width, height)`` if every line of ``text`` has the same length.

    Lines are delimited by LF, CR, CRLF or LFCR; LFLF and CRCR count as two
    delimiters. The last line does not need a terminator. Returns ``None``
    when the lines differ in length.
    """
    width = 0
    line = 0
    height = 0
    lf = False
    cr = False
    for char in text:
        if char == "\n":
            if lf:
                ends_line = True
            elif cr:
                cr = False
                ends_line = True
            else:
                lf = True
                ends_line = False
        elif char == "\r":
            if cr:
                ends_line = True
            elif lf:
                lf = False
                ends_line = True
            else:
                cr = True
                ends_line = False
        else:
            ends_line = cr or lf
            cr = False
            lf = False

        if ends_line:
            if height == 0:
                width = line
            if line != width:
                return None
            height += 1
            line = 0
        if char not in "\r\n":
            line += 1

    if height == 0:
        return line, 1
    if width != line:
        return None
    return width, height + (0 if cr or lf else 1)


def iter_lines(text: str, include_empty: bool = False) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for each line of ``text``.

    Lines end at LF, CR, CRLF or LFCR. A trailing terminator does not start a
    new line. Empty lines are skipped unless ``include_empty`` is true, but
    they still count towards the line numbers. An empty text yields a single
    empty line only when ``include_empty`` is true.
    """
    if not text:
        if include_empty:
            yield 0, ""
        return
    start = 0
    number = 0
    for match in _LINE_BREAK.finditer(text):
        line = text[start:match.start()]
        if include_empty or line:
            yield number, line
        number += 1
        start = match.end()
    if start < len(text):
        yield number, text[start:]