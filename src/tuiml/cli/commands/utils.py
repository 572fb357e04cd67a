"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from tuiml.builder import Resolution, StylePolicy
from tuiml.config import TuimlConfig, load_config
from tuiml.exceptions import TuimlError

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the tuiml CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level
    - Debug (TUIML_DEBUG=1): DEBUG level - shows builder fallbacks and splits
    """
    if os.environ.get("TUIML_DEBUG"):
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbose,
        show_path=bool(os.environ.get("TUIML_DEBUG")),
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("tuiml")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the command with an error message."""
    typer.secho(f"Error: {message}", err=True, fg=typer.colors.RED)
    raise typer.Exit(code=exit_code)


def get_config(
    config_path: Optional[Path] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    strict_style: bool = False,
    dispatch: bool = False,
) -> TuimlConfig:
    """Load tuiml.yaml and apply command line overrides."""
    try:
        config = load_config(config_path)
    except TuimlError as e:
        exit_with_error(str(e))

    render = config.render
    if width is not None:
        render = render.model_copy(update={"width": width})
    if height is not None:
        render = render.model_copy(update={"height": height})

    builder = config.builder
    if strict_style:
        builder = builder.model_copy(update={"style": StylePolicy.STRICT})
    if dispatch:
        builder = builder.model_copy(update={"resolution": Resolution.DISPATCH})

    return config.model_copy(update={"render": render, "builder": builder})
