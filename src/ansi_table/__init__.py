"""
ansi-table: cell content model for terminal tables

The unit of input for every stage of terminal table rendering: a cell's
multi-line text, its style overrides, and the word tokenization used to
wrap it.

Quick Start:
    >>> from ansi_table import Attribute, Cell, CellAlignment, Color, to_cells
    >>> row = to_cells(["id", 42, Cell("ok").set_fg(Color.GREEN)])
    >>> header = (Cell("Name")
    ...     .set_alignment(CellAlignment.CENTER)
    ...     .add_attribute(Attribute.BOLD))

Features:
    - Multi-line cell content with lossless round trip
    - Fluent setters for delimiter, alignment, colors and attributes
    - Conversion of any value, or row of values, into cells
    - Style resolution cell > column > table
    - TOML configuration of table and column defaults
"""

import logging

__version__ = "0.1.0"

# Core types
from ansi_table.core.alignment import CellAlignment
from ansi_table.core.attribute import Attribute
from ansi_table.core.cell import Cell
from ansi_table.core.color import Color, ColorMode

# Conversion
from ansi_table.core.convert import ToCell, ToCells, to_cell, to_cells

# Style resolution
from ansi_table.core.style import ResolvedStyle, StyleDefaults, resolve_override, resolve_style

# Configuration
from ansi_table.config import TableConfig, load_config
from ansi_table.errors import AnsiTableError, ConfigError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core types
    "Attribute",
    "Cell",
    "CellAlignment",
    "Color",
    "ColorMode",
    # Conversion
    "ToCell",
    "ToCells",
    "to_cell",
    "to_cells",
    # Style
    "ResolvedStyle",
    "StyleDefaults",
    "resolve_override",
    "resolve_style",
    # Configuration
    "TableConfig",
    "load_config",
    "AnsiTableError",
    "ConfigError",
]
