"""tuiml - Terminal UI Markup Language

Describe a terminal UI as a symbolic expression, build it into a typed
render tree and paint it into rectangular screen regions.
"""

from tuiml._version import __version__
from tuiml.builder import Builder, build, build_layer
from tuiml.config import TuimlConfig, load_config
from tuiml.engine import Buffer, Layout, Rect, Renderer, Screen
from tuiml.exceptions import (
    BuildError,
    ConfigError,
    ExpectedIntegerError,
    ExpectedListError,
    ExpectedStringError,
    ExpectedSymbolError,
    InvalidDirectionError,
    InvalidLengthError,
    LoadError,
    TuimlError,
)
from tuiml.loader import load_document, parse_document
from tuiml.tree import (
    Alignment,
    Block,
    BlockStyle,
    Borders,
    Constraint,
    Direction,
    RenderLayer,
    Stack,
    StackElement,
    Text,
)

__all__ = [
    "__version__",
    # builder
    "Builder",
    "build",
    "build_layer",
    # engine
    "Buffer",
    "Layout",
    "Rect",
    "Renderer",
    "Screen",
    # tree
    "Alignment",
    "Block",
    "BlockStyle",
    "Borders",
    "Constraint",
    "Direction",
    "RenderLayer",
    "Stack",
    "StackElement",
    "Text",
    # config / loading
    "TuimlConfig",
    "load_config",
    "load_document",
    "parse_document",
    # errors
    "TuimlError",
    "BuildError",
    "ExpectedListError",
    "ExpectedSymbolError",
    "ExpectedStringError",
    "ExpectedIntegerError",
    "InvalidLengthError",
    "InvalidDirectionError",
    "LoadError",
    "ConfigError",
]
