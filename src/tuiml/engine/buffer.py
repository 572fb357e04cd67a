"""Buffer - an off-screen grid of character cells.

Every draw call is clipped: cells outside the buffer (or outside the
clip rect given by the caller) are silently dropped.
"""

from __future__ import annotations

from tuiml.engine.geometry import Rect


class Buffer:
    """Cells covering `area`, addressed in absolute coordinates."""

    BLANK = " "

    def __init__(self, area: Rect):
        self.area = area
        self._cells = [[self.BLANK] * area.width for _ in range(area.height)]

    @classmethod
    def empty(cls, width: int, height: int) -> "Buffer":
        return cls(Rect(0, 0, width, height))

    def __getitem__(self, pos: tuple[int, int]) -> str:
        x, y = pos
        if not self.area.contains(x, y):
            raise IndexError(f"Cell ({x}, {y}) outside {self.area}")
        return self._cells[y - self.area.y][x - self.area.x]

    def set_char(self, x: int, y: int, ch: str) -> None:
        if self.area.contains(x, y):
            self._cells[y - self.area.y][x - self.area.x] = ch

    def set_string(self, x: int, y: int, text: str, clip: Rect | None = None) -> int:
        """Write `text` starting at (x, y), one cell per character.

        Returns:
            Number of cells written
        """
        bounds = self.area if clip is None else self.area.intersection(clip)
        if not bounds.top <= y < bounds.bottom:
            return 0

        written = 0
        for offset, ch in enumerate(text):
            col = x + offset
            if col >= bounds.right:
                break
            if col < bounds.left:
                continue
            # control characters would corrupt the grid
            self._cells[y - self.area.y][col - self.area.x] = ch if ch.isprintable() else self.BLANK
            written += 1
        return written

    def lines(self) -> list[str]:
        return ["".join(row) for row in self._cells]

    def __str__(self) -> str:
        return "\n".join(self.lines())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Buffer):
            return NotImplemented
        return self.area == other.area and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Buffer({self.area!r})"
