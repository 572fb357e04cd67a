"""Shape checks shared by the sub-builders."""

from __future__ import annotations

from tuiml.exceptions import (
    ExpectedIntegerError,
    ExpectedListError,
    ExpectedSymbolError,
    InvalidLengthError,
)
from tuiml.expr import Expression, Integer, List, Symbol


def expect_list(exp: Expression) -> List:
    if not isinstance(exp, List):
        raise ExpectedListError(exp)
    return exp


def expect_list_with_len(exp: Expression, length: int) -> List:
    """Require a list of exactly `length` elements."""
    elems = expect_list(exp)
    if len(elems) != length:
        raise InvalidLengthError(exp)
    return elems


def expect_list_with_minlen(exp: Expression, length: int) -> List:
    """Require a list of at least `length` elements."""
    elems = expect_list(exp)
    if len(elems) < length:
        raise InvalidLengthError(exp)
    return elems


def check_symbol(exp: Expression, *names: str) -> str:
    """Require a symbol whose name is one of `names`, return the name."""
    if isinstance(exp, Symbol) and exp.name in names:
        return exp.name
    raise ExpectedSymbolError(" | ".join(names), exp)


def expect_integer(exp: Expression) -> int:
    if not isinstance(exp, Integer) or exp.value < 0:
        raise ExpectedIntegerError(exp)
    return exp.value
