"""Block builder - (block title content [style])

Style clauses are best-effort: under the lenient policy anything that is
not a recognised clause is skipped instead of failing the block.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from tuiml.builder.common import (
    check_symbol,
    expect_list,
    expect_list_with_len,
    expect_list_with_minlen,
)
from tuiml.builder.policy import StylePolicy
from tuiml.exceptions import BuildError, ExpectedSymbolError
from tuiml.expr import Expression, Symbol
from tuiml.tree import Alignment, Block, BlockStyle, Borders

if TYPE_CHECKING:
    from tuiml.builder.core import Builder

log = logging.getLogger(__name__)

TITLE_ALIGN_KEYS = ("title_align", "title-align")
BORDER_KEYS = ("border", "borders")

ALIGNMENTS = {a.value: a for a in Alignment}
BORDER_NAMES = ("none", "left", "right", "top", "bottom", "all")


def build_block(exp: Expression, builder: Builder) -> Block:
    elems = expect_list_with_minlen(exp, 3)
    check_symbol(elems[0], "block")

    title = str(elems[1])
    content = builder.build(elems[2])

    style = BlockStyle()
    if len(elems) > 3:
        style = build_style(elems[3], builder.style)
    if len(elems) > 4:
        log.debug("Ignoring trailing block elements in %s", exp.to_source())

    return Block(title=title, content=content, style=style)


def build_style(exp: Expression, policy: StylePolicy = StylePolicy.LENIENT) -> BlockStyle:
    """Parse (style clause...) into a BlockStyle."""
    style = BlockStyle()

    try:
        elems = expect_list_with_minlen(exp, 1)
        check_symbol(elems[0], "style")
    except BuildError as e:
        if policy is StylePolicy.STRICT:
            raise
        log.debug("Ignoring malformed style: %s", e)
        return style

    for clause in elems.items[1:]:
        try:
            style = apply_clause(style, clause)
        except BuildError as e:
            if policy is StylePolicy.STRICT:
                raise
            log.debug("Ignoring style clause: %s", e)

    return style


def apply_clause(style: BlockStyle, clause: Expression) -> BlockStyle:
    """Return `style` updated by a single title-align or border clause."""
    elems = expect_list(clause)
    head = elems.head_symbol()

    if head in TITLE_ALIGN_KEYS:
        return replace(style, title_align=title_align(clause))
    if head in BORDER_KEYS:
        borders_ = borders(clause)
        if borders_ == Borders.NONE:
            return replace(style, borders=Borders.NONE)
        return replace(style, borders=style.borders | borders_)

    raise ExpectedSymbolError(" | ".join(TITLE_ALIGN_KEYS + BORDER_KEYS), clause)


def title_align(exp: Expression) -> Alignment:
    elems = expect_list_with_len(exp, 2)
    check_symbol(elems[0], *TITLE_ALIGN_KEYS)

    value = elems[1]
    if isinstance(value, Symbol) and value.name in ALIGNMENTS:
        return ALIGNMENTS[value.name]
    raise ExpectedSymbolError("center | left | right", exp)


def borders(exp: Expression) -> Borders:
    elems = expect_list_with_len(exp, 2)
    check_symbol(elems[0], *BORDER_KEYS)

    value = elems[1]
    if isinstance(value, Symbol) and value.name in BORDER_NAMES:
        return Borders.from_name(value.name)
    raise ExpectedSymbolError(" | ".join(BORDER_NAMES), exp)
