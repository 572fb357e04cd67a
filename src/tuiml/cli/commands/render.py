"""Render command - paint a UI document into a frame and print it"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.text import Text as RichText

from tuiml.config import TuimlConfig
from tuiml.exceptions import TuimlError
from tuiml.loader import load_document

from .utils import console, exit_with_error

log = logging.getLogger(__name__)


def render_command(path: Path, config: TuimlConfig) -> None:
    """Render the document at `path` with the given settings.

    A document that fails to build is shown as an error panel, like a
    running UI would show it.
    """
    try:
        exp = load_document(path)
    except TuimlError as e:
        exit_with_error(str(e))

    screen = config.make_screen()
    log.info("Rendering %s at %dx%d", path, screen.width, screen.height)

    buffer = screen.draw_or_report(exp)
    console.print(RichText(str(buffer)), soft_wrap=True)
