"""Cell - the smallest styleable unit of table content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from rich.style import Style

from ansi_table.core.alignment import CellAlignment
from ansi_table.core.attribute import Attribute
from ansi_table.core.color import Color
from ansi_table.core.style import StyleDefaults, resolve_style
from ansi_table.core.tokens import display_width, split_line


@dataclass(init=False, slots=True)
class Cell:
    """
    A stylable table cell with content.

    The content is stored as a list of lines, split on newline when the
    cell is created. Alignment, colors and delimiter are optional
    overrides; when unset, the column's and then the table's defaults
    apply (see `resolve_style`).

    Every setter returns the cell itself so calls can be chained:

        >>> cell = (Cell("Some content")
        ...     .set_alignment(CellAlignment.CENTER)
        ...     .set_fg(Color.RED)
        ...     .add_attribute(Attribute.BOLD))
    """
    content: list[str]
    delimiter: str | None
    alignment: CellAlignment | None
    fg: Color | None
    bg: Color | None
    attributes: list[Attribute]

    def __init__(self, content: object = "") -> None:
        self.content = str(content).split('\n')
        self.delimiter = None
        self.alignment = None
        self.fg = None
        self.bg = None
        self.attributes = []

    def get_content(self) -> str:
        """Return the content as one string, lines joined by newline."""
        return '\n'.join(self.content)

    def set_delimiter(self, delimiter: str) -> Cell:
        """
        Set the character used to split this cell's text into words.

        Normal text uses spaces. Content such as paths or identifiers may
        wrap better on another character, e.g. '/' or '-'.
        """
        self.delimiter = delimiter
        return self

    def set_alignment(self, alignment: CellAlignment) -> Cell:
        """Set the alignment, overriding the column's alignment for this cell."""
        self.alignment = alignment
        return self

    def set_fg(self, color: Color) -> Cell:
        """Set the foreground text color."""
        self.fg = color
        return self

    def set_bg(self, color: Color) -> Cell:
        """Set the background color."""
        self.bg = color
        return self

    def add_attribute(self, attribute: Attribute) -> Cell:
        """Add a styling attribute such as bold, italic or blinking."""
        self.attributes.append(attribute)
        return self

    def add_attributes(self, attributes: Iterable[Attribute]) -> Cell:
        """Same as add_attribute, for several attributes in order."""
        self.attributes.extend(attributes)
        return self

    def to_cell(self) -> Cell:
        """A cell converts to itself, keeping its styling."""
        return self

    def copy(self) -> Cell:
        """Create an independent copy of this cell."""
        clone = Cell()
        clone.content = list(self.content)
        clone.delimiter = self.delimiter
        clone.alignment = self.alignment
        clone.fg = self.fg
        clone.bg = self.bg
        clone.attributes = list(self.attributes)
        return clone

    def lines(self) -> Iterator[str]:
        return iter(self.content)

    def width(self) -> int:
        """Width of the widest line in terminal columns."""
        return max(display_width(line) for line in self.content)

    def words(self, default_delimiter: str | None = None) -> list[list[str]]:
        """
        Split every line into words.

        The cell's own delimiter takes precedence over `default_delimiter`,
        which in turn falls back to a single space.
        """
        delimiter = self.delimiter or default_delimiter
        return [split_line(line, delimiter) for line in self.content]

    def to_rich_style(
        self,
        column: StyleDefaults | None = None,
        table: StyleDefaults | None = None,
    ) -> Style:
        """Resolved style of this cell as a rich Style."""
        return resolve_style(self, column, table).to_rich()
