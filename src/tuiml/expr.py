"""Expression values - the read-only input of the builder.

An expression is an Integer, a String, a Symbol or a List of expressions.
Source text is tokenized elsewhere; `from_python` adapts plain data (as
decoded from YAML or JSON) into expressions.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterator, Union

from tuiml.exceptions import ExpectedStringError, LoadError

SYMBOL_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_\-]*$")


@dataclass(frozen=True)
class Integer:
    value: int

    def to_source(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return self.to_source()


@dataclass(frozen=True)
class String:
    value: str

    def to_source(self) -> str:
        escaped = self.value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'

    def __str__(self) -> str:
        # Stringify yields the raw text, only nested strings are quoted
        return self.value


@dataclass(frozen=True)
class Symbol:
    name: str

    def to_source(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class List:
    items: tuple[Expression, ...] = ()

    @classmethod
    def of(cls, *items: Expression) -> "List":
        return cls(tuple(items))

    def head_symbol(self) -> str | None:
        """Name of the first element when it is a symbol."""
        if self.items and isinstance(self.items[0], Symbol):
            return self.items[0].name
        return None

    def to_source(self) -> str:
        return "(" + " ".join(item.to_source() for item in self.items) + ")"

    def __str__(self) -> str:
        return self.to_source()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Expression]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Expression:
        return self.items[index]


Expression = Union[Integer, String, Symbol, List]


def from_python(data: Any) -> Expression:
    """Convert decoded YAML/JSON data into an expression.

    - int -> Integer (bools are rejected)
    - str -> Symbol when it looks like an identifier, String otherwise
    - list/tuple -> List
    - {"string": ...} / {"symbol": ...} force the type of a scalar

    Raises:
        LoadError: for values with no expression counterpart
        ExpectedStringError: for a forced string that is not text
    """
    if isinstance(data, bool):
        raise LoadError(f"Unsupported value: {data!r}")
    if isinstance(data, int):
        return Integer(data)
    if isinstance(data, str):
        if SYMBOL_RE.match(data):
            return Symbol(data)
        return String(data)
    if isinstance(data, (list, tuple)):
        return List(tuple(from_python(item) for item in data))
    if isinstance(data, dict) and len(data) == 1:
        ((tag, value),) = data.items()
        if tag == "string":
            if not isinstance(value, str):
                raise ExpectedStringError(from_python(value))
            return String(value)
        if tag == "symbol":
            if not isinstance(value, str) or not value:
                raise LoadError(f"Symbol name must be non-empty text: {value!r}")
            return Symbol(value)
    raise LoadError(f"Unsupported value: {data!r}")
