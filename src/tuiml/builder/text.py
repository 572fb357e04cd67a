"""Text builder - the terminal fallback, never fails."""

from __future__ import annotations

from tuiml.expr import Expression
from tuiml.tree import Text


def build_text(exp: Expression) -> Text:
    return Text(str(exp))
