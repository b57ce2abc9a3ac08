"""Command-line interface for widthtable."""

from __future__ import annotations

import csv
import logging
import shutil
import sys
from typing import TextIO

import click

from .exceptions import WidthTableError
from .models import ColumnAlign, Rule
from .table import Table

logger = logging.getLogger(__name__)

DEMO_HEADERS = ("numeric", "alpha-2", "name", "capital")
DEMO_ROWS = [
    ("004", "AF", "Afghanistan", "Kabul"),
    ("248", "AX", "Åland Islands", "Mariehamn"),
    ("008", "AL", "Albania", "Tirana"),
    ("012", "DZ", "Algeria", "Algiers"),
    ("016", "AS", "American Samoa", "Pago Pago"),
    ("020", "AD", "Andorra", "Andorra la Vella"),
    ("024", "AO", "Angola", "Luanda"),
    ("392", "JP", "日本", "東京"),
]


def terminal_width() -> int:
    """Width of the attached terminal, 80 when it can't be determined."""
    return shutil.get_terminal_size(fallback=(80, 24)).columns


def parse_alignments(value: str, columns: int) -> list[ColumnAlign]:
    """
    Parse a comma-separated alignment list such as ``r,l,l``.

    Missing trailing entries default to left alignment.
    """
    try:
        aligns = [ColumnAlign.parse(part) for part in value.split(",") if part.strip()]
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--align") from e
    if len(aligns) > columns:
        raise click.BadParameter(
            f"{len(aligns)} alignment(s) given for {columns} column(s)",
            param_hint="--align",
        )
    return aligns + [ColumnAlign.LEFT] * (columns - len(aligns))


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@click.group()
@click.version_option(package_name="widthtable")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """widthtable: width-aware text tables for terminals and markdown."""
    _configure_logging(verbose)


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--delimiter",
    "-d",
    default=",",
    show_default=True,
    help="Field delimiter of the input (use '\\t' for TSV).",
)
@click.option("--markdown", is_flag=True, help="Format as a GitHub-flavoured markdown table.")
@click.option("--gutter", help="String between columns.")
@click.option("--indent", help="String added to the beginning of every line.")
@click.option("--outdent", help="String added to the end of every line.")
@click.option("--fill", "fill_char", help="Character used to fill cells to column width.")
@click.option("--pad", "pad_char", help="Character printed on both sides of every cell.")
@click.option("--rule", "rule_char", help="Draw a rule under the header with this character.")
@click.option(
    "--rule-gutter",
    help="Gutter used on the rule line (default: --gutter). Needs --rule or --markdown.",
)
@click.option(
    "--align",
    "-a",
    "align_spec",
    default="",
    help="Comma-separated column alignments: l (left) or r (right), e.g. 'r,l,l'.",
)
@click.option(
    "--max-width",
    "-w",
    type=click.IntRange(min=1),
    help="Maximum line width (default: terminal width, never less than 80).",
)
def render(
    source: TextIO,
    delimiter: str,
    markdown: bool,
    gutter: str | None,
    indent: str | None,
    outdent: str | None,
    fill_char: str | None,
    pad_char: str | None,
    rule_char: str | None,
    rule_gutter: str | None,
    align_spec: str,
    max_width: int | None,
) -> None:
    """Render delimited text from SOURCE (default: stdin) as a table.

    The first record holds the headers.
    """
    if rule_gutter is not None and rule_char is None and not markdown:
        raise click.UsageError("--rule-gutter requires --rule (or --markdown)")
    if delimiter == "\\t":
        delimiter = "\t"
    records = [record for record in csv.reader(source, delimiter=delimiter) if record]
    if not records:
        click.echo("✗ No input rows", err=True)
        sys.exit(1)

    headers, rows = records[0], records[1:]
    table = Table.markdown(*headers) if markdown else Table(*headers)
    config = table.config
    table.align = parse_alignments(align_spec, len(headers))

    if gutter is not None:
        config.gutter = gutter
    if indent is not None:
        config.indent = indent
    if outdent is not None:
        config.outdent = outdent
    if fill_char is not None:
        config.fill_char = fill_char
    if pad_char is not None:
        config.pad_char = pad_char
    if rule_char is not None:
        config.rule = Rule(fill=rule_char)
    if rule_gutter is not None and config.rule is not None:
        config.rule.gutter = rule_gutter
    if max_width is not None:
        config.max_width = max_width
    elif not markdown:
        config.max_width = terminal_width()

    try:
        for row in rows:
            table.append(*row)
        table.render(sys.stdout)
    except WidthTableError as e:
        click.echo(f"✗ Failed to render table: {e}", err=True)
        sys.exit(1)

    logger.debug("Rendered %d row(s)", table.row_count())


@cli.command()
@click.option("--markdown", is_flag=True, help="Show the markdown profile instead.")
def demo(markdown: bool) -> None:
    """Print a sample table of ISO 3166 country codes."""
    table = Table.markdown(*DEMO_HEADERS) if markdown else Table(*DEMO_HEADERS)
    table.config.gutter = table.config.gutter or " "
    table.align[0] = ColumnAlign.RIGHT
    for row in DEMO_ROWS:
        table.append(*row)
    click.echo(table.render_to_string(), nl=False)


if __name__ == "__main__":
    cli()
