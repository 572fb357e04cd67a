"""tuiml Exceptions

Builder errors carry the offending sub-expression so callers can point at
the part of the document that failed to validate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tuiml.expr import Expression


class TuimlError(Exception):
    """Base exception for all tuiml errors."""

    pass


class BuildError(TuimlError):
    """Raised when an expression cannot be built into a render tree."""

    def __init__(self, message: str, expression: Expression | None = None):
        self.message = message
        self.expression = expression
        if expression is not None:
            message = f"{message}: {expression.to_source()}"
        super().__init__(message)


class ExpectedListError(BuildError):
    """Raised when a list expression was required."""

    def __init__(self, expression: Expression):
        super().__init__("Expected a list", expression)


class ExpectedSymbolError(BuildError):
    """Raised when a symbol from a fixed set was required."""

    def __init__(self, allowed: str, expression: Expression):
        self.allowed = allowed
        super().__init__(f"Expected symbol {allowed}", expression)


class ExpectedStringError(BuildError):
    """Raised when a string literal was required."""

    def __init__(self, expression: Expression):
        super().__init__("Expected a string", expression)


class ExpectedIntegerError(BuildError):
    """Raised when a non-negative integer was required."""

    def __init__(self, expression: Expression):
        super().__init__("Expected a non-negative integer", expression)


class InvalidLengthError(BuildError):
    """Raised when a list has the wrong number of elements."""

    def __init__(self, expression: Expression):
        super().__init__("Invalid number of elements", expression)


class InvalidDirectionError(BuildError):
    """Raised when a stack direction is neither horizontal nor vertical."""

    def __init__(self, direction: str, expression: Expression | None = None):
        self.direction = direction
        super().__init__(f"Invalid direction '{direction}'", expression)


class LoadError(TuimlError):
    """Raised when a document cannot be converted into an expression."""

    pass


class ConfigError(TuimlError):
    """Raised when a tuiml.yaml file cannot be read or validated."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config {path}: {reason}")
