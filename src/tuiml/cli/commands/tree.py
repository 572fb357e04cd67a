"""Tree command - show the render tree a document builds into"""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape
from rich.tree import Tree

from tuiml.config import TuimlConfig
from tuiml.exceptions import TuimlError
from tuiml.loader import load_document
from tuiml.tree import Block, Borders, RenderLayer, RenderTree, Stack, Text

from .utils import console, exit_with_error

EDGES = ("top", "bottom", "left", "right")


def border_names(borders: Borders) -> str:
    names = [edge for edge in EDGES if Borders.from_name(edge) in borders]
    return ",".join(names) or "none"


def describe(node: RenderTree) -> str:
    """One-line label for a render tree node."""
    if isinstance(node, Text):
        return f'[green]Text[/green] "{escape(node.content)}"'
    if isinstance(node, Block):
        style = node.style
        return (
            f'[cyan]Block[/cyan] "{escape(node.title)}" '
            f"[dim]align={style.title_align.value} "
            f"borders={border_names(style.borders)}[/dim]"
        )
    return f"[magenta]Stack[/magenta] {node.direction.value}"


def add_node(parent: Tree, node: RenderTree, prefix: str = "") -> None:
    branch = parent.add(prefix + describe(node))
    if isinstance(node, Block):
        add_node(branch, node.content)
    elif isinstance(node, Stack):
        for element in node.elements:
            add_node(branch, element.content, f"[yellow]{element.constraint}[/yellow] ")


def layer_tree(layer: RenderLayer) -> Tree:
    root = Tree(f"[bold]Layer[/bold] ({len(layer)} trees)")
    for node in layer:
        add_node(root, node)
    return root


def tree_command(path: Path, config: TuimlConfig) -> None:
    """Print the render tree built from the document at `path`."""
    try:
        exp = load_document(path)
        layer = config.make_screen().build(exp)
    except TuimlError as e:
        exit_with_error(str(e))

    console.print(layer_tree(layer))
