"""Typer CLI application for inspecting and previewing cells."""

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ansi_table.config import load_config
from ansi_table.core.alignment import CellAlignment
from ansi_table.core.attribute import Attribute
from ansi_table.core.cell import Cell
from ansi_table.core.color import Color
from ansi_table.core.style import ResolvedStyle, resolve_style
from ansi_table.errors import ConfigError

TextArg = Annotated[str, typer.Argument(help="Cell content (use \\n for line breaks)")]
DelimiterOpt = Annotated[Optional[str], typer.Option("--delimiter", "-d", help="Word delimiter character")]
AlignOpt = Annotated[Optional[str], typer.Option("--align", "-a", help="left, center or right")]
FgOpt = Annotated[Optional[str], typer.Option("--fg", help="Foreground color (name, #rrggbb or 0-255)")]
BgOpt = Annotated[Optional[str], typer.Option("--bg", help="Background color (name, #rrggbb or 0-255)")]
AttrOpt = Annotated[Optional[list[str]], typer.Option("--attr", help="Attribute to add, repeatable")]
ConfigOpt = Annotated[Optional[Path], typer.Option("--config", "-c", help="Table defaults TOML file")]
ColumnOpt = Annotated[int, typer.Option("--column", help="Column index used for column defaults")]


def build_cell(
    text: str,
    delimiter: str | None = None,
    align: str | None = None,
    fg: str | None = None,
    bg: str | None = None,
    attrs: list[str] | None = None,
) -> Cell:
    """Build a cell from command line values. Raises ValueError on bad input."""
    cell = Cell(text.replace("\\n", "\n"))
    if delimiter is not None:
        if len(delimiter) != 1:
            raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
        cell.set_delimiter(delimiter)
    if align is not None:
        cell.set_alignment(CellAlignment.parse(align))
    if fg is not None:
        cell.set_fg(Color.parse(fg))
    if bg is not None:
        cell.set_bg(Color.parse(bg))
    if attrs:
        cell.add_attributes(Attribute.parse(name) for name in attrs)
    return cell


def _color_json(color: Color | None) -> dict[str, Any] | None:
    if color is None:
        return None
    value = list(color.value) if isinstance(color.value, tuple) else color.value
    return {"mode": color.mode.value, "value": value}


def _describe(cell: Cell, style: ResolvedStyle) -> dict[str, Any]:
    return {
        "content": cell.content,
        "words": cell.words(style.delimiter),
        "width": cell.width(),
        "alignment": style.alignment.value,
        "delimiter": style.delimiter,
        "fg": _color_json(style.fg),
        "bg": _color_json(style.bg),
        "attributes": [a.name.lower() for a in style.attributes],
    }


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ansi-table",
        help="Inspect how table cells are split, tokenized and styled.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    def resolve(cell: Cell, config: Path | None, column: int) -> ResolvedStyle:
        table_config = load_config(config)
        return resolve_style(cell, table_config.column(column), table_config.defaults)

    @app.callback()
    def root(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    ) -> None:
        """Inspect how table cells are split, tokenized and styled."""
        if verbose:
            logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    @app.command()
    def inspect(
        text: TextArg,
        delimiter: DelimiterOpt = None,
        align: AlignOpt = None,
        fg: FgOpt = None,
        bg: BgOpt = None,
        attr: AttrOpt = None,
        config: ConfigOpt = None,
        column: ColumnOpt = 0,
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show the lines, words, width and resolved style of a cell."""
        try:
            cell = build_cell(text, delimiter, align, fg, bg, attr)
            style = resolve(cell, config, column)
        except (ConfigError, ValueError) as exc:
            console.print(f"[red]{escape(str(exc))}[/]", highlight=False, soft_wrap=True)
            raise typer.Exit(1)

        info = _describe(cell, style)
        if json_output:
            print(json.dumps(info, indent=2))
            return

        table = Table(show_header=False, box=None)
        table.add_column(style="bold")
        table.add_column()
        for index, line in enumerate(cell.content):
            table.add_row(f"line {index}", repr(line))
        for index, words in enumerate(info["words"]):
            table.add_row(f"words {index}", ", ".join(repr(w) for w in words))
        table.add_row("width", str(info["width"]))
        table.add_row("alignment", info["alignment"])
        table.add_row("delimiter", repr(info["delimiter"]))
        table.add_row("fg", str(info["fg"]))
        table.add_row("bg", str(info["bg"]))
        table.add_row("attributes", ", ".join(info["attributes"]) or "(none)")
        console.print(table)

    @app.command()
    def preview(
        text: TextArg,
        delimiter: DelimiterOpt = None,
        align: AlignOpt = None,
        fg: FgOpt = None,
        bg: BgOpt = None,
        attr: AttrOpt = None,
        config: ConfigOpt = None,
        column: ColumnOpt = 0,
        width: Annotated[Optional[int], typer.Option("--width", "-w", help="Column width to render into")] = None,
    ) -> None:
        """Print the cell content with its resolved style applied."""
        try:
            cell = build_cell(text, delimiter, align, fg, bg, attr)
            style = resolve(cell, config, column)
        except (ConfigError, ValueError) as exc:
            console.print(f"[red]{escape(str(exc))}[/]", highlight=False, soft_wrap=True)
            raise typer.Exit(1)

        rendered = Text(cell.get_content(), style=style.to_rich())
        console.print(
            rendered,
            width=width or max(cell.width(), 1),
            justify=style.alignment.value,
        )

    return app
