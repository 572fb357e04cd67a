"""Builder - turns expression values into render trees."""

from __future__ import annotations

import logging

from tuiml.builder.block import build_block
from tuiml.builder.common import check_symbol, expect_list
from tuiml.builder.stack import build_stack
from tuiml.builder.text import build_text
from tuiml.builder.policy import Resolution, StylePolicy
from tuiml.exceptions import BuildError, InvalidLengthError
from tuiml.expr import Expression, List
from tuiml.tree import RenderLayer, RenderTree

log = logging.getLogger(__name__)


class Builder:
    """Builds RenderTree values from expressions.

    Two policies are configurable:

    - resolution: CASCADE tries block, then stack, then text and keeps the
      first success, so a malformed block or stack quietly becomes text.
      DISPATCH picks the sub-builder from the head symbol and lets its
      errors propagate.
    - style: LENIENT skips unknown style clauses, STRICT rejects them.
    """

    def __init__(
        self,
        resolution: Resolution = Resolution.CASCADE,
        style: StylePolicy = StylePolicy.LENIENT,
    ):
        self.resolution = resolution
        self.style = style

    def build(self, exp: Expression) -> RenderTree:
        """Build a single ui expression.

        Raises:
            BuildError: under DISPATCH, when a block or stack is malformed.
                Under CASCADE the text builder always succeeds.
        """
        if self.resolution is Resolution.DISPATCH:
            return self._dispatch(exp)
        return self._cascade(exp)

    def build_layer(self, exp: Expression) -> RenderLayer:
        """Build (layer ui...) into a RenderLayer."""
        elems = expect_list(exp)
        if len(elems) == 0:
            raise InvalidLengthError(exp)
        check_symbol(elems[0], "layer")
        if len(elems) < 2:
            raise InvalidLengthError(exp)

        return RenderLayer(tuple(self.build(e) for e in elems.items[1:]))

    def _cascade(self, exp: Expression) -> RenderTree:
        try:
            return build_block(exp, self)
        except BuildError as block_err:
            try:
                return build_stack(exp, self)
            except BuildError as stack_err:
                if isinstance(exp, List) and exp.head_symbol() in ("block", "stack"):
                    err = block_err if exp.head_symbol() == "block" else stack_err
                    log.debug("Falling back to text: %s", err)
                return build_text(exp)

    def _dispatch(self, exp: Expression) -> RenderTree:
        head = exp.head_symbol() if isinstance(exp, List) else None
        if head == "block":
            return build_block(exp, self)
        if head == "stack":
            return build_stack(exp, self)
        return build_text(exp)


_default_builder = Builder()


def build(exp: Expression) -> RenderTree:
    """Build with the default (cascade, lenient) builder."""
    return _default_builder.build(exp)


def build_layer(exp: Expression) -> RenderLayer:
    """Build a layer with the default (cascade, lenient) builder."""
    return _default_builder.build_layer(exp)
