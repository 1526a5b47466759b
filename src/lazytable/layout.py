"""
Column width computation.

Two steps turn table contents into column widths:

1. ``natural_widths`` measures the longest cell of every column over all
   rows (the title included). Rows may be ragged; columns introduced only
   by later rows are picked up by ``max_merge``.
2. ``allocate`` distributes the total width budget across columns,
   never giving a column more than its natural width.

Widths are measured in code points (``len(str)``), the same unit used
for slicing in :mod:`lazytable.wrap`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

logger = logging.getLogger(__name__)


def max_merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """
    Merge two width vectors of possibly different length.

    The overlapping prefix takes the elementwise maximum; the remainder of
    the longer vector is appended unchanged.

    Example:
        >>> max_merge([1, 2, 3], [2, 0, 3, 4])
        [2, 2, 3, 4]
    """
    merged = [max(lhs, rhs) for lhs, rhs in zip(left, right)]
    both = len(merged)
    merged.extend(left[both:])
    merged.extend(right[both:])
    return merged


def natural_widths(rows: Iterable[Sequence[str]]) -> list[int]:
    """Return the longest cell length of each column across ``rows``."""
    widths: list[int] = []
    for cells in rows:
        widths = max_merge(widths, [len(cell) for cell in cells])
    return widths


def _fair_share(
    natural_width: int, remaining_cols: int, remaining_width: int, padding: int
) -> int:
    # padding on both sides of every remaining column, plus one glyph per gap
    reserved = remaining_cols * 2 * padding + (remaining_cols - 1)
    available = remaining_width - reserved
    if available < 0:
        logger.debug(
            "Width budget exhausted: %d left, %d reserved for %d column(s)",
            remaining_width,
            reserved,
            remaining_cols,
        )
        return 0
    return min(natural_width, available // remaining_cols)


def allocate(natural: Sequence[int], total_width: int, padding: int) -> list[int]:
    """
    Distribute ``total_width`` across columns.

    Columns are visited from the narrowest to the widest. Each one takes
    at most an equal share of what is left after reserving padding and
    separators for the columns still to come, so narrow columns keep their
    natural width and wide columns split the rest.

    Args:
        natural: Natural (longest cell) width of every column
        total_width: Character budget of one rendered line
        padding: Spaces on each side of every cell

    Returns:
        Allocated width per column, in the original column order. Each width
        is between 0 and the column's natural width. When the budget cannot
        even hold the padding and separators, the affected columns get 0.

    Example:
        >>> allocate([10, 5, 20, 15], 40, 0)
        [10, 5, 11, 11]
    """
    # sorted() is stable, so equal widths keep their column order
    order = sorted(range(len(natural)), key=lambda index: natural[index])
    allocated = [0] * len(natural)

    remaining_width = total_width
    remaining_cols = len(natural)
    for index in order:
        size = _fair_share(natural[index], remaining_cols, remaining_width, padding)
        allocated[index] = size
        remaining_cols -= 1
        if remaining_cols > 0:
            remaining_width -= size + 2 * padding + 1

    logger.debug("Allocated widths %s from natural widths %s", allocated, list(natural))
    return allocated
