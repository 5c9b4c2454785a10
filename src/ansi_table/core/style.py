"""Resolution of cell style overrides against column and table defaults.

A cell's alignment, colors and delimiter are optional. When one is unset
the column's default applies, and when the column leaves it unset too the
table's default applies. The first value that is set wins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar

from rich.style import Style

from ansi_table.core.alignment import CellAlignment
from ansi_table.core.attribute import Attribute
from ansi_table.core.color import Color
from ansi_table.core.tokens import DEFAULT_DELIMITER

if TYPE_CHECKING:
    from ansi_table.core.cell import Cell

T = TypeVar("T")


def resolve_override(cell: T | None, column: T | None, table: T | None) -> T | None:
    """Return the first of cell, column, table that is not None."""
    if cell is not None:
        return cell
    if column is not None:
        return column
    return table


@dataclass(frozen=True)
class StyleDefaults:
    """Defaults set on a column or on a whole table. None leaves a field unset."""
    alignment: CellAlignment | None = None
    fg: Color | None = None
    bg: Color | None = None
    delimiter: str | None = None

    def is_empty(self) -> bool:
        """True if no default is set."""
        return (
            self.alignment is None
            and self.fg is None
            and self.bg is None
            and self.delimiter is None
        )


@dataclass(frozen=True)
class ResolvedStyle:
    """The style a renderer should apply to one cell."""
    alignment: CellAlignment = CellAlignment.LEFT
    fg: Color | None = None
    bg: Color | None = None
    delimiter: str = DEFAULT_DELIMITER
    attributes: tuple[Attribute, ...] = field(default_factory=tuple)

    def to_rich(self) -> Style:
        """
        Build an equivalent rich Style.

        Attributes are applied in order, so a later "no" attribute cancels
        an earlier one and RESET drops everything before it.
        """
        flags: dict[str, bool] = {}
        for attribute in self.attributes:
            if attribute is Attribute.RESET:
                flags.clear()
                continue
            flag = attribute.rich_flag
            if flag is not None:
                name, value = flag
                flags[name] = value

        return Style(
            color=self.fg.to_rich() if self.fg else None,
            bgcolor=self.bg.to_rich() if self.bg else None,
            **flags,
        )


def resolve_style(
    cell: Cell,
    column: StyleDefaults | None = None,
    table: StyleDefaults | None = None,
) -> ResolvedStyle:
    """Resolve every overridable field of a cell against column and table defaults."""
    column = column or StyleDefaults()
    table = table or StyleDefaults()

    alignment = resolve_override(cell.alignment, column.alignment, table.alignment)
    delimiter = resolve_override(cell.delimiter, column.delimiter, table.delimiter)

    return ResolvedStyle(
        alignment=alignment or CellAlignment.LEFT,
        fg=resolve_override(cell.fg, column.fg, table.fg),
        bg=resolve_override(cell.bg, column.bg, table.bg),
        delimiter=delimiter or DEFAULT_DELIMITER,
        attributes=tuple(cell.attributes),
    )
