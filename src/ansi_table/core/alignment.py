"""Horizontal alignment of cell content."""

from enum import Enum


class CellAlignment(Enum):
    """Where content sits inside the width allotted to its column."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @classmethod
    def parse(cls, name: str) -> "CellAlignment":
        """Look up an alignment by name (case-insensitive)."""
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            valid = ", ".join(a.value for a in cls)
            raise ValueError(f"Unknown alignment {name!r} (expected one of: {valid})") from None
