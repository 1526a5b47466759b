"""Command-line interface for lazytable."""

from __future__ import annotations

import csv
import json
import logging
import sys
from pathlib import Path
from typing import IO, Any

import click
import yaml

from .config import resolve_config
from .exceptions import InputError, LazyTableError
from .models import Row
from .table import Table

logger = logging.getLogger(__name__)

FORMATS = ("csv", "tsv", "json", "yaml")

_SUFFIXES = {
    ".csv": "csv",
    ".tsv": "tsv",
    ".tab": "tsv",
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def detect_format(name: str) -> str:
    """Guess the input format from a file name, defaulting to CSV."""
    return _SUFFIXES.get(Path(name).suffix.lower(), "csv")


def read_rows(stream: IO[str], fmt: str) -> list[Row]:
    """
    Read table rows from a text stream.

    CSV and TSV produce one row per record. JSON and YAML documents must be
    a list of lists; scalar cells are converted with ``str()``.

    Raises:
        InputError: If the document is not a list of rows
    """
    source = getattr(stream, "name", "<stream>")
    if fmt in ("csv", "tsv"):
        delimiter = "\t" if fmt == "tsv" else ","
        try:
            return [list(record) for record in csv.reader(stream, delimiter=delimiter)]
        except csv.Error as e:
            raise InputError(source, str(e)) from e

    try:
        if fmt == "json":
            data: Any = json.load(stream)
        else:
            data = yaml.safe_load(stream)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise InputError(source, f"Invalid {fmt.upper()}: {e}") from e

    if data is None:
        return []
    if not isinstance(data, list):
        raise InputError(source, "Top level must be a list of rows")
    rows: list[Row] = []
    for index, record in enumerate(data):
        if not isinstance(record, list):
            raise InputError(source, f"Row {index} is not a list")
        rows.append(["" if cell is None else str(cell) for cell in record])
    return rows


@click.group()
@click.version_option(package_name="lazytable")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr.")
def cli(verbose: bool) -> None:
    """lazytable: fixed-width text tables with word wrapping."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            stream=sys.stderr,
        )


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(FORMATS),
    help="Input format (default: guessed from file name, CSV for stdin)",
)
@click.option("--width", "-w", type=click.IntRange(min=1), help="Total table width")
@click.option("--padding", "-p", type=click.IntRange(min=0), help="Spaces on each side of a cell")
@click.option(
    "--border",
    "-b",
    help="Border glyphs: vertical, horizontal and junction (e.g. '|-+')",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML config file",
)
@click.option(
    "--header/--no-header",
    default=False,
    help="Render the first row as the title (default: disabled)",
)
def render(
    source: IO[str],
    fmt: str | None,
    width: int | None,
    padding: int | None,
    border: str | None,
    config_path: str | None,
    header: bool,
) -> None:
    """Render rows from SOURCE (a file or '-' for stdin) as a table."""
    try:
        config = resolve_config(width=width, padding=padding, border=border, path=config_path)
        rows = read_rows(source, fmt or detect_format(getattr(source, "name", "-")))
    except LazyTableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    table = Table(config)
    if header and rows:
        table.set_title(rows.pop(0))
    table.add_rows(rows)
    logger.debug("Rendering %d row(s) with %s", len(table), config)
    click.echo(table.render(), nl=False)


@cli.command("config")
@click.option("--width", "-w", type=click.IntRange(min=1), help="Total table width")
@click.option("--padding", "-p", type=click.IntRange(min=0), help="Spaces on each side of a cell")
@click.option("--border", "-b", help="Border glyphs (e.g. '|-+')")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML config file",
)
def show_config(
    width: int | None,
    padding: int | None,
    border: str | None,
    config_path: str | None,
) -> None:
    """Show the resolved configuration as YAML."""
    try:
        config = resolve_config(width=width, padding=padding, border=border, path=config_path)
    except LazyTableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(yaml.safe_dump(config.to_dict(), sort_keys=False), nl=False)


if __name__ == "__main__":
    cli()
