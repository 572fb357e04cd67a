"""Rectangles in cell coordinates."""

from __future__ import annotations

from dataclasses import dataclass

from tuiml.tree import Borders


@dataclass(frozen=True)
class Rect:
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Negative size: {self.width}x{self.height}")

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        """One past the last column."""
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        """One past the last row."""
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom

    def inner(self, borders: Borders) -> "Rect":
        """Shrink by one cell on each bordered edge, never below zero size."""
        x, y, width, height = self.x, self.y, self.width, self.height
        if Borders.LEFT in borders and width > 0:
            x += 1
            width -= 1
        if Borders.RIGHT in borders and width > 0:
            width -= 1
        if Borders.TOP in borders and height > 0:
            y += 1
            height -= 1
        if Borders.BOTTOM in borders and height > 0:
            height -= 1
        return Rect(x, y, width, height)

    def intersection(self, other: "Rect") -> "Rect":
        x = max(self.left, other.left)
        y = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(x, y, max(0, right - x), max(0, bottom - y))
