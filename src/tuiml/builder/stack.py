"""Stack builder - (stack direction (constraint content)...)"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tuiml.builder.common import (
    check_symbol,
    expect_integer,
    expect_list_with_len,
    expect_list_with_minlen,
)
from tuiml.exceptions import ExpectedSymbolError, InvalidDirectionError
from tuiml.expr import Expression, String, Symbol
from tuiml.tree import Constraint, ConstraintKind, Direction, Stack, StackElement

if TYPE_CHECKING:
    from tuiml.builder.core import Builder

CONSTRAINT_KINDS = {kind.value: kind for kind in ConstraintKind}
DIRECTIONS = {direction.value: direction for direction in Direction}


def build_constraint(exp: Expression) -> Constraint:
    elems = expect_list_with_len(exp, 2)

    kind = elems[0]
    if not isinstance(kind, Symbol) or kind.name not in CONSTRAINT_KINDS:
        raise ExpectedSymbolError(" | ".join(CONSTRAINT_KINDS), exp)

    return Constraint(CONSTRAINT_KINDS[kind.name], expect_integer(elems[1]))


def build_direction(exp: Expression) -> Direction:
    # Directions are names; a quoted name is accepted as well
    if isinstance(exp, Symbol):
        name = exp.name
    elif isinstance(exp, String):
        name = exp.value
    else:
        raise ExpectedSymbolError("horizontal | vertical", exp)

    if name not in DIRECTIONS:
        raise InvalidDirectionError(name, exp)
    return DIRECTIONS[name]


def build_stack_element(exp: Expression, builder: Builder) -> StackElement:
    elems = expect_list_with_len(exp, 2)

    constraint = build_constraint(elems[0])
    content = builder.build(elems[1])

    return StackElement(constraint=constraint, content=content)


def build_stack(exp: Expression, builder: Builder) -> Stack:
    elems = expect_list_with_minlen(exp, 3)
    check_symbol(elems[0], "stack")

    direction = build_direction(elems[1])
    elements = tuple(build_stack_element(e, builder) for e in elems.items[2:])

    return Stack(direction=direction, elements=elements)
