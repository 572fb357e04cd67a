"""Renderer - paints render trees into a Buffer."""

from __future__ import annotations

import logging

from tuiml.config import BorderSetName
from tuiml.engine.buffer import Buffer
from tuiml.engine.geometry import Rect
from tuiml.engine.layout import Layout
from tuiml.engine.symbols import BORDER_SETS
from tuiml.tree import (
    Alignment,
    Block,
    Borders,
    RenderLayer,
    RenderTree,
    Stack,
    Text,
)

log = logging.getLogger(__name__)


class Renderer:
    """Renders RenderTree values into rectangular regions of a Buffer.

    Trees are assumed to come from the builder, nothing is validated here.
    The renderer keeps no state between calls.
    """

    def __init__(self, border_set: BorderSetName = BorderSetName.PLAIN):
        self.border_set = border_set
        self.symbols = BORDER_SETS[border_set]

    def render(self, tree: RenderTree, buffer: Buffer, area: Rect) -> None:
        """Paint `tree` into `area` of `buffer`.

        Args:
            tree: Validated render tree
            buffer: Target cells
            area: Region the tree may draw into
        """
        if isinstance(tree, Text):
            self._render_text(tree, buffer, area)
        elif isinstance(tree, Block):
            self._render_block(tree, buffer, area)
        elif isinstance(tree, Stack):
            self._render_stack(tree, buffer, area)
        else:
            raise TypeError(f"Not a render tree: {tree!r}")

    def render_layer(self, layer: RenderLayer, buffer: Buffer, area: Rect) -> None:
        """Paint every tree of `layer` into the same area, in order."""
        for tree in layer:
            self.render(tree, buffer, area)

    def _render_text(self, text: Text, buffer: Buffer, area: Rect) -> None:
        for row, line in enumerate(text.content.split("\n")):
            if row >= area.height:
                break
            buffer.set_string(area.x, area.y + row, line, clip=area)

    def _render_block(self, block: Block, buffer: Buffer, area: Rect) -> None:
        # content first so the title and borders stay on top
        borders = block.style.borders
        self.render(block.content, buffer, area.inner(borders))
        self._draw_borders(borders, buffer, area)
        self._draw_title(block, buffer, area)

    def _render_stack(self, stack: Stack, buffer: Buffer, area: Rect) -> None:
        layout = Layout(stack.direction, tuple(e.constraint for e in stack.elements))
        parts = layout.split(area)
        log.debug("Split %s %s into %s", stack.direction.value, area, parts)

        for element, part in zip(stack.elements, parts):
            self.render(element.content, buffer, part)

    def _draw_borders(self, borders: Borders, buffer: Buffer, area: Rect) -> None:
        if area.is_empty() or borders == Borders.NONE:
            return

        sym = self.symbols
        last_col = area.right - 1
        last_row = area.bottom - 1

        if Borders.LEFT in borders:
            for y in range(area.top, area.bottom):
                buffer.set_char(area.left, y, sym.vertical)
        if Borders.RIGHT in borders:
            for y in range(area.top, area.bottom):
                buffer.set_char(last_col, y, sym.vertical)
        if Borders.TOP in borders:
            for x in range(area.left, area.right):
                buffer.set_char(x, area.top, sym.horizontal)
        if Borders.BOTTOM in borders:
            for x in range(area.left, area.right):
                buffer.set_char(x, last_row, sym.horizontal)

        # corners only where two edges meet
        if Borders.TOP in borders and Borders.LEFT in borders:
            buffer.set_char(area.left, area.top, sym.top_left)
        if Borders.TOP in borders and Borders.RIGHT in borders:
            buffer.set_char(last_col, area.top, sym.top_right)
        if Borders.BOTTOM in borders and Borders.LEFT in borders:
            buffer.set_char(area.left, last_row, sym.bottom_left)
        if Borders.BOTTOM in borders and Borders.RIGHT in borders:
            buffer.set_char(last_col, last_row, sym.bottom_right)

    def _draw_title(self, block: Block, buffer: Buffer, area: Rect) -> None:
        if not block.title or area.is_empty():
            return

        borders = block.style.borders
        left = area.left + (1 if Borders.LEFT in borders else 0)
        right = area.right - (1 if Borders.RIGHT in borders else 0)
        width = right - left
        if width <= 0:
            return

        title = block.title.split("\n", 1)[0][:width]
        align = block.style.title_align
        if align is Alignment.CENTER:
            x = left + (width - len(title)) // 2
        elif align is Alignment.RIGHT:
            x = right - len(title)
        else:
            x = left

        buffer.set_string(x, area.top, title, clip=Rect(left, area.top, width, 1))


_default_renderer = Renderer()


def render_tree(tree: RenderTree, buffer: Buffer, area: Rect) -> None:
    """Render with the default (plain borders) renderer."""
    _default_renderer.render(tree, buffer, area)


def render_layer(layer: RenderLayer, buffer: Buffer, area: Rect) -> None:
    """Render a layer with the default (plain borders) renderer."""
    _default_renderer.render_layer(layer, buffer, area)
