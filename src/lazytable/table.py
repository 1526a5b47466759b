"""The Table value object."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from .layout import allocate, natural_widths
from .models import Row, TableConfig, default_config
from .render import render_table


class Table:
    """
    A title, a list of rows and the config used to render them.

    Example:
        table = Table.with_width(23)
        table.set_title(row("who", "what", "when"))
        table.add_row(row("da", "foobar foobar", "bar"))
        table.add_row(row("da", "foobar!!", "bar"))
        print(table, end="")
    """

    def __init__(self, config: TableConfig | None = None) -> None:
        self._title: Row | None = None
        self._rows: list[Row] = []
        self._config = config if config is not None else default_config()

    @classmethod
    def with_width(cls, width: int) -> Table:
        """Create a table with the default config and the given ``width``."""
        return cls(default_config().with_width(width))

    @property
    def title(self) -> Row | None:
        return self._title

    @property
    def rows(self) -> list[Row]:
        return list(self._rows)

    @property
    def config(self) -> TableConfig:
        return self._config

    def set_title(self, title: Iterable[Any]) -> None:
        """Set the title row."""
        self._title = [str(cell) for cell in title]

    def add_row(self, cells: Iterable[Any]) -> None:
        """Add a row."""
        self._rows.append([str(cell) for cell in cells])

    def add_rows(self, rows: Iterable[Iterable[Any]]) -> None:
        """Add multiple rows at once."""
        for cells in rows:
            self.add_row(cells)

    def dimensions(self) -> list[int]:
        """Column widths the current contents would be rendered with."""
        measured = ([self._title] if self._title is not None else []) + self._rows
        return allocate(natural_widths(measured), self._config.width, self._config.padding)

    def render(self) -> str:
        return render_table(self._rows, self._config, title=self._title)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)
