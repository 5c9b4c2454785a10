"""Tests for resolving cell overrides against column and table defaults."""

from rich.color import Color as RichColor

from ansi_table.core.alignment import CellAlignment
from ansi_table.core.attribute import Attribute
from ansi_table.core.cell import Cell
from ansi_table.core.color import Color
from ansi_table.core.style import ResolvedStyle, StyleDefaults, resolve_override, resolve_style
from ansi_table.core.tokens import DEFAULT_DELIMITER


class TestResolveOverride:

    def test_cell_wins(self) -> None:
        assert resolve_override("cell", "column", "table") == "cell"

    def test_column_when_cell_unset(self) -> None:
        assert resolve_override(None, "column", "table") == "column"

    def test_table_when_cell_and_column_unset(self) -> None:
        assert resolve_override(None, None, "table") == "table"

    def test_all_unset(self) -> None:
        assert resolve_override(None, None, None) is None

    def test_falsy_values_still_count_as_set(self) -> None:
        assert resolve_override(0, 5, 9) == 0
        assert resolve_override(None, "", "table") == ""


class TestResolveStyle:

    def test_unstyled_cell_without_defaults(self) -> None:
        style = resolve_style(Cell("x"))
        assert style == ResolvedStyle()
        assert style.alignment is CellAlignment.LEFT
        assert style.delimiter == DEFAULT_DELIMITER
        assert style.fg is None
        assert style.bg is None

    def test_cell_overrides_column_and_table(self, styled_cell: Cell) -> None:
        column = StyleDefaults(alignment=CellAlignment.CENTER, fg=Color.BLUE, delimiter='/')
        table = StyleDefaults(alignment=CellAlignment.LEFT, bg=Color.WHITE)
        style = resolve_style(styled_cell, column, table)
        assert style.alignment is CellAlignment.RIGHT
        assert style.fg == Color.RED
        assert style.bg == Color.from_256(236)
        assert style.delimiter == '-'
        assert style.attributes == (Attribute.BOLD,)

    def test_column_then_table(self) -> None:
        column = StyleDefaults(fg=Color.BLUE)
        table = StyleDefaults(alignment=CellAlignment.CENTER, fg=Color.RED, bg=Color.BLACK)
        style = resolve_style(Cell("x"), column, table)
        assert style.fg == Color.BLUE
        assert style.bg == Color.BLACK
        assert style.alignment is CellAlignment.CENTER

    def test_resolution_does_not_touch_cell(self) -> None:
        cell = Cell("x")
        resolve_style(cell, StyleDefaults(fg=Color.RED), None)
        assert cell.fg is None

    def test_style_defaults_is_empty(self) -> None:
        assert StyleDefaults().is_empty() is True
        assert StyleDefaults(delimiter='-').is_empty() is False


class TestRichStyle:

    def test_colors_and_flags(self) -> None:
        cell = (Cell("x")
            .set_fg(Color.RED)
            .set_bg(Color.from_rgb(0, 0, 255))
            .add_attributes([Attribute.BOLD, Attribute.ITALIC]))
        style = cell.to_rich_style()
        assert style.color == RichColor.from_ansi(1)
        assert style.bgcolor == RichColor.from_rgb(0, 0, 255)
        assert style.bold is True
        assert style.italic is True

    def test_later_attributes_take_precedence(self) -> None:
        style = ResolvedStyle(attributes=(Attribute.BOLD, Attribute.NORMAL_INTENSITY)).to_rich()
        assert style.bold is False

    def test_reset_drops_earlier_attributes(self) -> None:
        style = ResolvedStyle(attributes=(Attribute.BOLD, Attribute.RESET, Attribute.ITALIC)).to_rich()
        assert style.bold is None
        assert style.italic is True

    def test_inherits_table_color(self) -> None:
        style = Cell("x").to_rich_style(table=StyleDefaults(fg=Color.CYAN))
        assert style.color == RichColor.from_ansi(6)

    def test_unset_colors(self) -> None:
        style = Cell("x").to_rich_style()
        assert style.color is None
        assert style.bgcolor is None
