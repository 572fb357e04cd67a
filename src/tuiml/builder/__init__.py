"""tuiml.builder - expression values to render trees."""

from tuiml.builder.block import build_block, build_style
from tuiml.builder.core import Builder, build, build_layer
from tuiml.builder.policy import Resolution, StylePolicy
from tuiml.builder.stack import build_constraint, build_direction, build_stack
from tuiml.builder.text import build_text

__all__ = [
    "Builder",
    "Resolution",
    "StylePolicy",
    "build",
    "build_layer",
    "build_block",
    "build_style",
    "build_stack",
    "build_constraint",
    "build_direction",
    "build_text",
]
