"""Screen - builds a frame from an expression and paints it off-screen.

The terminal session that shows the result lives outside tuiml; a Screen
only produces the Buffer for one frame. Nothing is kept between frames.
"""

from __future__ import annotations

import logging

from tuiml.builder import Builder
from tuiml.engine.buffer import Buffer
from tuiml.engine.renderer import Renderer
from tuiml.exceptions import BuildError
from tuiml.expr import Expression, List
from tuiml.tree import Block, BlockStyle, Borders, RenderLayer, Text

log = logging.getLogger(__name__)


def error_panel(error: BuildError) -> Block:
    """Bordered panel describing a failed build."""
    return Block(
        title="Error",
        content=Text(str(error)),
        style=BlockStyle(borders=Borders.ALL),
    )


class Screen:
    def __init__(
        self,
        width: int = 80,
        height: int = 24,
        builder: Builder | None = None,
        renderer: Renderer | None = None,
    ):
        self.width = width
        self.height = height
        self.builder = builder or Builder()
        self.renderer = renderer or Renderer()

    def build(self, exp: Expression) -> RenderLayer:
        """Build a (layer ...) expression, or wrap a single ui in a layer."""
        if isinstance(exp, List) and exp.head_symbol() == "layer":
            return self.builder.build_layer(exp)
        return RenderLayer((self.builder.build(exp),))

    def paint(self, layer: RenderLayer) -> Buffer:
        buffer = Buffer.empty(self.width, self.height)
        self.renderer.render_layer(layer, buffer, buffer.area)
        return buffer

    def draw(self, exp: Expression) -> Buffer:
        """Build and paint one frame.

        Raises:
            BuildError: if the expression does not build; nothing is painted
        """
        return self.paint(self.build(exp))

    def draw_or_report(self, exp: Expression) -> Buffer:
        """Like draw(), but a failed build paints an error panel instead."""
        try:
            layer = self.build(exp)
        except BuildError as e:
            log.warning("Build failed: %s", e)
            layer = RenderLayer((error_panel(e),))
        return self.paint(layer)
