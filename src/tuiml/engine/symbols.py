"""Border glyph sets."""

from __future__ import annotations

from dataclasses import dataclass

from tuiml.config import BorderSetName


@dataclass(frozen=True)
class BorderSet:
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str


PLAIN = BorderSet("┌", "┐", "└", "┘", "─", "│")
ROUNDED = BorderSet("╭", "╮", "╰", "╯", "─", "│")
DOUBLE = BorderSet("╔", "╗", "╚", "╝", "═", "║")
THICK = BorderSet("┏", "┓", "┗", "┛", "━", "┃")
ASCII = BorderSet("+", "+", "+", "+", "-", "|")

BORDER_SETS: dict[BorderSetName, BorderSet] = {
    BorderSetName.PLAIN: PLAIN,
    BorderSetName.ROUNDED: ROUNDED,
    BorderSetName.DOUBLE: DOUBLE,
    BorderSetName.THICK: THICK,
    BorderSetName.ASCII: ASCII,
}
