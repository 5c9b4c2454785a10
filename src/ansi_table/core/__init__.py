"""Core data structures for table cell content."""

from ansi_table.core.alignment import CellAlignment
from ansi_table.core.attribute import Attribute
from ansi_table.core.cell import Cell
from ansi_table.core.color import Color, ColorMode
from ansi_table.core.convert import ToCell, ToCells, to_cell, to_cells
from ansi_table.core.style import ResolvedStyle, StyleDefaults, resolve_override, resolve_style
from ansi_table.core.tokens import DEFAULT_DELIMITER, display_width, split_line

__all__ = [
    "Attribute",
    "Cell",
    "CellAlignment",
    "Color",
    "ColorMode",
    "DEFAULT_DELIMITER",
    "ResolvedStyle",
    "StyleDefaults",
    "ToCell",
    "ToCells",
    "display_width",
    "resolve_override",
    "resolve_style",
    "split_line",
    "to_cell",
    "to_cells",
]
