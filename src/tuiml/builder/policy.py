"""Builder policies - how expressions are resolved and how strict styles are."""

from enum import Enum


class Resolution(str, Enum):
    """How the builder picks a sub-builder for an expression."""

    CASCADE = "cascade"  # block, then stack, then text; first success wins
    DISPATCH = "dispatch"  # decided by the head symbol, errors surface


class StylePolicy(str, Enum):
    LENIENT = "lenient"  # unknown style clauses are ignored
    STRICT = "strict"  # unknown style clauses are errors
