"""tuiml.engine - layout and painting of render trees.

Trees go in, cells come out: the engine never validates and never keeps
state between frames.
"""

from tuiml.engine.buffer import Buffer
from tuiml.engine.geometry import Rect
from tuiml.engine.layout import Layout, distribute, solve_sizes
from tuiml.engine.renderer import Renderer, render_layer, render_tree
from tuiml.engine.screen import Screen, error_panel
from tuiml.engine.symbols import BORDER_SETS, BorderSet

__all__ = [
    "Buffer",
    "Rect",
    "Layout",
    "distribute",
    "solve_sizes",
    "Renderer",
    "render_layer",
    "render_tree",
    "Screen",
    "error_panel",
    "BORDER_SETS",
    "BorderSet",
]
