"""tuiml CLI Main Entry Point

Usage:
    tuiml render ui.yaml                 # Paint the document into an 80x24 frame
    tuiml render ui.yaml -W 120 -H 40    # Custom frame size
    tuiml tree ui.yaml                   # Show the render tree
    tuiml check ui.yaml --dispatch       # Validate, surfacing block/stack errors
    tuiml --version                      # Show version
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from tuiml._version import __version__

from .commands import check_command, render_command, tree_command
from .commands.utils import get_config, setup_logging

typer_app = typer.Typer(no_args_is_help=True, add_completion=False)

FILE_ARG = typer.Argument(..., exists=True, dir_okay=False, help="UI document (YAML or JSON).")
CONFIG_OPT = typer.Option(None, "-c", "--config", help="Path to tuiml.yaml.")
STRICT_OPT = typer.Option(False, "--strict-style", help="Reject unknown style clauses.")
DISPATCH_OPT = typer.Option(
    False, "--dispatch", help="Pick builders by head symbol; malformed blocks/stacks fail."
)
VERBOSE_OPT = typer.Option(False, "-v", "--verbose", help="Show info logs.")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tuiml {__version__}")
        raise typer.Exit()


@typer_app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Terminal UI Markup Language - build and paint UIs described as expressions."""


@typer_app.command()
def render(
    path: Path = FILE_ARG,
    width: Optional[int] = typer.Option(None, "-W", "--width", min=0, help="Frame width."),
    height: Optional[int] = typer.Option(None, "-H", "--height", min=0, help="Frame height."),
    config: Optional[Path] = CONFIG_OPT,
    strict_style: bool = STRICT_OPT,
    dispatch: bool = DISPATCH_OPT,
    verbose: bool = VERBOSE_OPT,
) -> None:
    """Paint a UI document into a frame and print it."""
    setup_logging(verbose)
    settings = get_config(config, width, height, strict_style, dispatch)
    render_command(path, settings)


@typer_app.command()
def tree(
    path: Path = FILE_ARG,
    config: Optional[Path] = CONFIG_OPT,
    strict_style: bool = STRICT_OPT,
    dispatch: bool = DISPATCH_OPT,
    verbose: bool = VERBOSE_OPT,
) -> None:
    """Print the render tree a UI document builds into."""
    setup_logging(verbose)
    settings = get_config(config, strict_style=strict_style, dispatch=dispatch)
    tree_command(path, settings)


@typer_app.command()
def check(
    path: Path = FILE_ARG,
    config: Optional[Path] = CONFIG_OPT,
    strict_style: bool = STRICT_OPT,
    dispatch: bool = DISPATCH_OPT,
    verbose: bool = VERBOSE_OPT,
) -> None:
    """Validate a UI document without rendering it."""
    setup_logging(verbose)
    settings = get_config(config, strict_style=strict_style, dispatch=dispatch)
    check_command(path, settings)


def app() -> None:
    """Entry point for the installed `tuiml` script."""
    typer_app()


if __name__ == "__main__":
    app()
