"""Word tokenization and width measurement shared by layout and wrapping."""

from __future__ import annotations

import re

from rich.cells import cell_len

# Delimiter used when neither the cell, its column, nor the table sets one
DEFAULT_DELIMITER = " "

# CSI escape sequences (colors, cursor movement) take no columns
_ANSI_ESCAPE = re.compile(r'\x1b\[[0-?]*[ -/]*[@-~]')


def split_line(line: str, delimiter: str | None = None) -> list[str]:
    """
    Split one line of cell content into wrappable words.

    Empty words are kept, so joining the result with the delimiter
    always gives back the original line.
    """
    return line.split(delimiter or DEFAULT_DELIMITER)


def display_width(text: str) -> int:
    """Number of terminal columns `text` occupies (wide glyphs count as 2)."""
    return cell_len(_ANSI_ESCAPE.sub('', text))
