"""Greedy word wrapping of cell text."""

from __future__ import annotations

from .exceptions import ValidationError


def wrap(text: str, width: int) -> list[str]:
    """
    Split ``text`` into lines of at most ``width`` characters.

    Each slice breaks after the last space that fits; a slice without any
    space is cut at exactly ``width`` characters. Lines are stripped of
    surrounding whitespace, so a long run of spaces can show up as an
    empty line between two words:

        >>> wrap("foobar2000 foo", 12)
        ['foobar2000', 'foo']
        >>> wrap("foobar2000     foobar2000", 12)
        ['foobar2000', '', 'foobar2000']

    Empty text, and any text at ``width`` 0, yields no lines at all.

    Raises:
        ValidationError: If ``width`` is negative
    """
    if width < 0:
        raise ValidationError("width", width, "Must not be negative")
    if width == 0:
        return []

    lines: list[str] = []
    length = len(text)
    start = 0
    while start < length:
        end = min(start + width, length)
        step = width
        if end < length:
            space = text.rfind(" ", start, end)
            if space != -1:
                step = space - start + 1
        lines.append(text[start : start + step].strip())
        start += step
    return lines
