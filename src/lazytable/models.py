"""Core models for lazytable."""

from dataclasses import dataclass, field, replace
from typing import Any

from .exceptions import ValidationError

Row = list[str]
"""A table row: an ordered list of cell strings. Rows may be ragged."""

DEFAULT_WIDTH = 80
DEFAULT_PADDING = 1
DEFAULT_BORDER = ("|", "-", "+")


def row(*cells: Any) -> Row:
    """
    Build a row from positional values.

    Every value is converted with ``str()``.

    Example:
        table.add_row(row("da", "foobar", 42))
    """
    return [str(cell) for cell in cells]


@dataclass(frozen=True)
class Border:
    """
    Border glyphs of a table.

    Attributes:
        vertical: Drawn between columns of a row
        horizontal: Fill character of the title separator line
        junction: Drawn where the separator line crosses a column boundary
    """

    vertical: str = DEFAULT_BORDER[0]
    horizontal: str = DEFAULT_BORDER[1]
    junction: str = DEFAULT_BORDER[2]

    def __post_init__(self) -> None:
        for name in ("vertical", "horizontal", "junction"):
            glyph = getattr(self, name)
            if not isinstance(glyph, str) or len(glyph) != 1:
                raise ValidationError(
                    "border",
                    glyph,
                    f"{name} glyph must be exactly one character",
                )

    @classmethod
    def parse(cls, value: "str | list[str] | tuple[str, ...] | Border") -> "Border":
        """
        Build a border from a 3-character string or a 3-item sequence.

        ``Border.parse("|-+")`` and ``Border.parse(["|", "-", "+"])`` are
        equivalent to ``Border()``.
        """
        if isinstance(value, Border):
            return value
        if not isinstance(value, (str, list, tuple)):
            raise ValidationError("border", value, "Must be a string or a list of glyphs")
        glyphs = tuple(value)
        if len(glyphs) != 3:
            raise ValidationError(
                "border",
                value,
                "Expected three glyphs: vertical, horizontal, junction",
            )
        return cls(*glyphs)

    def __str__(self) -> str:
        return f"{self.vertical}{self.horizontal}{self.junction}"


@dataclass(frozen=True)
class TableConfig:
    """
    Width, padding and border of a table.

    Attributes:
        width: Total character budget for one rendered line
        padding: Spaces on each side of every cell
        border: Border glyphs
    """

    width: int = DEFAULT_WIDTH
    padding: int = DEFAULT_PADDING
    border: Border = field(default_factory=Border)

    def __post_init__(self) -> None:
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise ValidationError("width", self.width, "Must be an integer")
        if self.width <= 0:
            raise ValidationError("width", self.width, "Must be positive")
        if isinstance(self.padding, bool) or not isinstance(self.padding, int):
            raise ValidationError("padding", self.padding, "Must be an integer")
        if self.padding < 0:
            raise ValidationError("padding", self.padding, "Must not be negative")
        if not isinstance(self.border, Border):
            # frozen dataclass: bypass __setattr__ to normalize the border
            object.__setattr__(self, "border", Border.parse(self.border))

    def with_width(self, width: int) -> "TableConfig":
        """Return a copy of this config with a different total width."""
        return replace(self, width=width)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary."""
        return {
            "width": self.width,
            "padding": self.padding,
            "border": str(self.border),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TableConfig":
        """Deserialize from a dictionary, using defaults for missing keys."""
        unknown = sorted(set(data) - {"width", "padding", "border"})
        if unknown:
            raise ValidationError(
                "config",
                unknown,
                "Unknown option(s). Recognized options: width, padding, border",
            )
        return cls(
            width=data.get("width", DEFAULT_WIDTH),
            padding=data.get("padding", DEFAULT_PADDING),
            border=Border.parse(data.get("border", DEFAULT_BORDER)),
        )


def default_config() -> TableConfig:
    """
    Create the default configuration.

    * ``width: 80``
    * ``padding: 1``
    * ``border: |-+``
    """
    return TableConfig(
        width=DEFAULT_WIDTH,
        padding=DEFAULT_PADDING,
        border=Border(*DEFAULT_BORDER),
    )
