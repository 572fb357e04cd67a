"""Loader - reads UI documents written as YAML (or JSON) lists.

    - [block, "My title", "some content", [style, [border, all]]]

Bare identifiers become symbols, other strings become string literals.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from tuiml.exceptions import LoadError
from tuiml.expr import Expression, from_python


def parse_document(text: str) -> Expression:
    """Parse a YAML/JSON document into an expression.

    A document holding a single-item top-level list is unwrapped, so the
    leading `- ` of a YAML sequence is optional.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise LoadError(f"Invalid document: {e}") from e

    if data is None:
        raise LoadError("Empty document")
    if isinstance(data, list) and len(data) == 1 and isinstance(data[0], list):
        data = data[0]

    return from_python(data)


def load_document(path: str | Path) -> Expression:
    """Load a UI document from a file."""
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise LoadError(f"Cannot read {p}: {e}") from e
    return parse_document(text)
