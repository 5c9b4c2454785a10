"""Terminal text attributes that can be stacked on a cell."""

from enum import Enum


class Attribute(Enum):
    """
    A text styling attribute (bold, italic, blinking, ...).

    The value of each member is its SGR parameter. Cells keep attributes
    in the order they were added; emitting them in that order lets later
    ones (e.g. NORMAL_INTENSITY after BOLD) take precedence.
    """
    RESET = "0"
    BOLD = "1"
    DIM = "2"
    ITALIC = "3"
    UNDERLINED = "4"
    DOUBLE_UNDERLINED = "4:2"
    UNDERCURLED = "4:3"
    UNDERDOTTED = "4:4"
    UNDERDASHED = "4:5"
    SLOW_BLINK = "5"
    RAPID_BLINK = "6"
    REVERSE = "7"
    HIDDEN = "8"
    CROSSED_OUT = "9"
    FRAKTUR = "20"
    NO_BOLD = "21"
    NORMAL_INTENSITY = "22"
    NO_ITALIC = "23"
    NO_UNDERLINE = "24"
    NO_BLINK = "25"
    NO_REVERSE = "27"
    NO_HIDDEN = "28"
    NOT_CROSSED_OUT = "29"
    FRAMED = "51"
    ENCIRCLED = "52"
    OVERLINED = "53"
    NOT_FRAMED_OR_ENCIRCLED = "54"
    NOT_OVERLINED = "55"

    @property
    def rich_flag(self) -> tuple[str, bool] | None:
        """The rich Style keyword and value this attribute maps to, if any."""
        return _RICH_FLAGS.get(self)

    @classmethod
    def parse(cls, name: str) -> "Attribute":
        """Look up an attribute by member name, e.g. 'bold' or 'crossed-out'."""
        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown attribute: {name!r}") from None


_RICH_FLAGS: dict[Attribute, tuple[str, bool]] = {
    Attribute.BOLD: ("bold", True),
    Attribute.DIM: ("dim", True),
    Attribute.ITALIC: ("italic", True),
    Attribute.UNDERLINED: ("underline", True),
    Attribute.DOUBLE_UNDERLINED: ("underline2", True),
    Attribute.UNDERCURLED: ("underline", True),
    Attribute.UNDERDOTTED: ("underline", True),
    Attribute.UNDERDASHED: ("underline", True),
    Attribute.SLOW_BLINK: ("blink", True),
    Attribute.RAPID_BLINK: ("blink2", True),
    Attribute.REVERSE: ("reverse", True),
    Attribute.HIDDEN: ("conceal", True),
    Attribute.CROSSED_OUT: ("strike", True),
    Attribute.NO_BOLD: ("bold", False),
    Attribute.NORMAL_INTENSITY: ("bold", False),
    Attribute.NO_ITALIC: ("italic", False),
    Attribute.NO_UNDERLINE: ("underline", False),
    Attribute.NO_BLINK: ("blink", False),
    Attribute.NO_REVERSE: ("reverse", False),
    Attribute.NO_HIDDEN: ("conceal", False),
    Attribute.NOT_CROSSED_OUT: ("strike", False),
    Attribute.FRAMED: ("frame", True),
    Attribute.ENCIRCLED: ("encircle", True),
    Attribute.OVERLINED: ("overline", True),
    Attribute.NOT_FRAMED_OR_ENCIRCLED: ("frame", False),
    Attribute.NOT_OVERLINED: ("overline", False),
}
