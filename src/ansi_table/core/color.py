"""Color representation for cell foreground and background."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from rich.color import Color as RichColor


class ColorMode(Enum):
    """How a color is addressed on the terminal."""
    RESET = "reset"         # Whatever the terminal uses by default
    STANDARD_16 = "16"      # One of the 16 named colors
    EXTENDED_256 = "256"    # Index into the xterm 256-color palette
    TRUE_COLOR = "rgb"      # 24-bit (r, g, b)


_HEX_PATTERN = re.compile(r'^#?([0-9a-fA-F]{6})$')

# Names accepted by Color.parse, mapped to the standard 16-color index
COLOR_NAMES: dict[str, int] = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    "bright_black": 8,
    "bright_red": 9,
    "bright_green": 10,
    "bright_yellow": 11,
    "bright_blue": 12,
    "bright_magenta": 13,
    "bright_cyan": 14,
    "bright_white": 15,
}


@dataclass(frozen=True)
class Color:
    """
    A foreground or background color for a cell.

    Supports the terminal default, 16-color, 256-color, and true color modes.
    """
    mode: ColorMode
    value: int | tuple[int, int, int] = 0

    RESET: ClassVar["Color"]
    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    BRIGHT_BLACK: ClassVar["Color"]
    BRIGHT_RED: ClassVar["Color"]
    BRIGHT_GREEN: ClassVar["Color"]
    BRIGHT_YELLOW: ClassVar["Color"]
    BRIGHT_BLUE: ClassVar["Color"]
    BRIGHT_MAGENTA: ClassVar["Color"]
    BRIGHT_CYAN: ClassVar["Color"]
    BRIGHT_WHITE: ClassVar["Color"]

    @classmethod
    def from_256(cls, index: int) -> "Color":
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(ColorMode.EXTENDED_256, index)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorMode.TRUE_COLOR, (r, g, b))

    @classmethod
    def parse(cls, text: str) -> "Color":
        """
        Parse a color from user input.

        Accepts a standard color name ("red", "bright-cyan"), "reset" or
        "default", a hex triplet ("#ff8000"), or a 256-color index ("196").
        """
        key = text.strip().lower().replace("-", "_").replace(" ", "_")
        if key in ("reset", "default"):
            return cls.RESET
        if key in COLOR_NAMES:
            return cls(ColorMode.STANDARD_16, COLOR_NAMES[key])
        if key.isdigit():
            return cls.from_256(int(key))
        match = _HEX_PATTERN.match(key)
        if match:
            digits = match.group(1)
            return cls.from_rgb(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
        raise ValueError(f"Unknown color: {text!r}")

    def to_rich(self) -> RichColor:
        """Convert to a rich Color for console output."""
        if self.mode == ColorMode.RESET:
            return RichColor.default()
        if self.mode == ColorMode.TRUE_COLOR:
            assert isinstance(self.value, tuple)
            return RichColor.from_rgb(*self.value)
        assert isinstance(self.value, int)
        return RichColor.from_ansi(self.value)


# Initialize class-level color constants
Color.RESET = Color(ColorMode.RESET)
Color.BLACK = Color(ColorMode.STANDARD_16, 0)
Color.RED = Color(ColorMode.STANDARD_16, 1)
Color.GREEN = Color(ColorMode.STANDARD_16, 2)
Color.YELLOW = Color(ColorMode.STANDARD_16, 3)
Color.BLUE = Color(ColorMode.STANDARD_16, 4)
Color.MAGENTA = Color(ColorMode.STANDARD_16, 5)
Color.CYAN = Color(ColorMode.STANDARD_16, 6)
Color.WHITE = Color(ColorMode.STANDARD_16, 7)
Color.BRIGHT_BLACK = Color(ColorMode.STANDARD_16, 8)
Color.BRIGHT_RED = Color(ColorMode.STANDARD_16, 9)
Color.BRIGHT_GREEN = Color(ColorMode.STANDARD_16, 10)
Color.BRIGHT_YELLOW = Color(ColorMode.STANDARD_16, 11)
Color.BRIGHT_BLUE = Color(ColorMode.STANDARD_16, 12)
Color.BRIGHT_MAGENTA = Color(ColorMode.STANDARD_16, 13)
Color.BRIGHT_CYAN = Color(ColorMode.STANDARD_16, 14)
Color.BRIGHT_WHITE = Color(ColorMode.STANDARD_16, 15)
