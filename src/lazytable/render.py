"""
Text rendering of rows and tables.

Example output (title plus two rows, width 23):

     who | what     | when
    -----+----------+------
     da  | foobar   | bar
         | foobar   |
     da  | foobar!! | bar
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .layout import allocate, natural_widths
from .models import TableConfig
from .wrap import wrap

logger = logging.getLogger(__name__)


def render_row(cells: Sequence[str], widths: Sequence[int], config: TableConfig) -> list[str]:
    """
    Render one row as one or more bordered lines.

    Every cell is wrapped to its column width. Columns with fewer lines than
    the tallest one are filled with blanks so the row stays rectangular.

    Args:
        cells: Cell texts; missing trailing cells render as empty
        widths: Allocated width of every column
        config: Padding and border glyphs

    Returns:
        Lines of text, each terminated by a newline
    """
    # missing and empty cells still take one (blank) line
    columns = [
        (wrap(cells[index], width) if index < len(cells) else []) or [""]
        for index, width in enumerate(widths)
    ]
    height = max((len(lines) for lines in columns), default=0)

    pad = " " * config.padding
    out: list[str] = []
    for line_no in range(height):
        parts = [
            pad + (lines[line_no] if line_no < len(lines) else "").ljust(width) + pad
            for lines, width in zip(columns, widths)
        ]
        out.append(config.border.vertical.join(parts) + "\n")
    return out


def render_separator(widths: Sequence[int], config: TableConfig) -> str:
    """Render the separator line drawn below the title."""
    segments = [config.border.horizontal * (width + 2 * config.padding) for width in widths]
    return config.border.junction.join(segments) + "\n"


def render_table(
    rows: Iterable[Sequence[str]],
    config: TableConfig,
    title: Sequence[str] | None = None,
) -> str:
    """
    Render a whole table.

    Column widths are derived from the title and all rows, then allocated
    once against ``config.width``. The title (if any) is followed by a
    single separator line; no separator follows the last row.
    """
    rows = list(rows)
    measured = ([title] if title is not None else []) + rows
    natural = natural_widths(measured)
    logger.debug("Natural widths %s for %d row(s)", natural, len(measured))
    widths = allocate(natural, config.width, config.padding)

    lines: list[str] = []
    if title is not None:
        lines.extend(render_row(title, widths, config))
        lines.append(render_separator(widths, config))
    for cells in rows:
        lines.extend(render_row(cells, widths, config))
    return "".join(lines)
