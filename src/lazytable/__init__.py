"""
lazytable: fixed-width text tables with lazy word wrapping.

Given rows of text and a total width, lazytable decides how much room each
column gets, wraps cells that do not fit and renders an aligned, bordered
block of text:

- Narrow columns keep their natural width
- Wide columns share what is left
- Cells wrap at spaces, or mid-word when there is no space

Example:
    from lazytable import Table, row

    table = Table.with_width(20)
    table.add_row(row("da", "foobar foobar", "bar"))
    table.add_row(row("da", "foobar!", "bar"))
    print(table, end="")

Output:

     da | foobar  | bar
        | foobar  |
     da | foobar! | bar
"""

from importlib.metadata import PackageNotFoundError, version

from .config import load_config, resolve_config
from .exceptions import ConfigError, InputError, LazyTableError, ValidationError
from .layout import allocate, max_merge, natural_widths
from .models import Border, Row, TableConfig, default_config, row
from .render import render_row, render_separator, render_table
from .table import Table
from .wrap import wrap

try:
    __version__ = version("lazytable")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "Table",
    "TableConfig",
    "Border",
    "Row",
    "row",
    "default_config",
    # Configuration
    "load_config",
    "resolve_config",
    # Algorithms
    "allocate",
    "max_merge",
    "natural_widths",
    "wrap",
    "render_row",
    "render_separator",
    "render_table",
    # Exceptions
    "LazyTableError",
    "ValidationError",
    "ConfigError",
    "InputError",
]
