"""CLI commands"""

from .check import check_command
from .render import render_command
from .tree import tree_command

__all__ = ["check_command", "render_command", "tree_command"]
