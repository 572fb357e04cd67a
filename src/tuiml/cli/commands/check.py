"""Check command - validate a document without rendering it"""

from __future__ import annotations

from pathlib import Path

from tuiml.config import TuimlConfig
from tuiml.exceptions import TuimlError
from tuiml.loader import load_document
from tuiml.tree import Text

from .utils import console, exit_with_error


def check_command(path: Path, config: TuimlConfig) -> None:
    """Build the document at `path` and report the outcome."""
    try:
        exp = load_document(path)
        layer = config.make_screen().build(exp)
    except TuimlError as e:
        exit_with_error(str(e))

    console.print(f"[green]OK[/green] {path}: {len(layer)} tree(s)")

    # A top-level list that became text usually means a malformed block/stack
    for i, tree in enumerate(layer):
        if isinstance(tree, Text) and tree.content.startswith(("(block", "(stack")):
            console.print(
                f"[yellow]Warning:[/yellow] tree {i} was read as text; "
                "use --dispatch to see why"
            )
