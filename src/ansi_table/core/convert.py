"""Conversion of arbitrary values, and rows of them, into cells.

Anything that can be turned into text can become a cell, so row-building
code can accept strings, numbers, already styled cells, or a mix:

    >>> to_cells(["name", 42, Cell("ok").set_fg(Color.GREEN)])
"""

from __future__ import annotations

import logging
from typing import Iterable, Protocol, runtime_checkable

from ansi_table.core.cell import Cell

logger = logging.getLogger(__name__)


@runtime_checkable
class ToCell(Protocol):
    """Protocol for values that know how to turn themselves into a Cell."""

    def to_cell(self) -> Cell:
        ...


@runtime_checkable
class ToCells(Protocol):
    """Protocol for values that know how to turn themselves into a row of cells."""

    def to_cells(self) -> list[Cell]:
        ...


def _has_method(value: object, name: str) -> bool:
    # Classes themselves (e.g. `Cell`) only carry the unbound function
    if isinstance(value, type):
        return False
    return callable(getattr(type(value), name, None))


def to_cell(value: object) -> Cell:
    """
    Convert a value to a Cell.

    A Cell is returned as is, so styling set on it survives. Other values
    with a `to_cell()` method convert themselves. Bytes are decoded as
    UTF-8 (undecodable bytes become U+FFFD); everything else is turned
    into text with str().
    """
    if isinstance(value, Cell):
        return value
    if _has_method(value, "to_cell"):
        return value.to_cell()
    if isinstance(value, (bytes, bytearray)):
        return Cell(bytes(value).decode("utf-8", errors="replace"))
    return Cell(value)


def to_cells(values: Iterable[object] | ToCells | str | bytes) -> list[Cell]:
    """
    Convert an ordered collection of values to a list of cells, keeping order.

    A single str or bytes value is one cell, not one cell per character
    or byte.
    """
    if isinstance(values, (str, bytes, bytearray)):
        return [to_cell(values)]
    if _has_method(values, "to_cells"):
        return values.to_cells()

    cells = [to_cell(value) for value in values]
    logger.debug("Converted %d values to cells", len(cells))
    return cells
