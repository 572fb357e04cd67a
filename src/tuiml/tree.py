"""Render tree - the validated, typed form of a UI description.

Nodes are frozen dataclasses. A tree is built once per frame and never
mutated; children are owned by exactly one parent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, Flag
from typing import Iterator, Union


class Direction(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Borders(Flag):
    NONE = 0
    TOP = 1
    BOTTOM = 2
    LEFT = 4
    RIGHT = 8
    ALL = TOP | BOTTOM | LEFT | RIGHT

    @classmethod
    def from_name(cls, name: str) -> "Borders":
        """Look up a border set by its lowercase name (`top`, `all`, ...)."""
        return cls[name.upper()]


class ConstraintKind(str, Enum):
    LENGTH = "length"
    MIN = "min"
    MAX = "max"
    PERCENTAGE = "percentage"
    FILL = "fill"


@dataclass(frozen=True)
class Constraint:
    """Sizing directive for one stack element along the stack axis."""

    kind: ConstraintKind
    value: int

    @classmethod
    def length(cls, value: int) -> "Constraint":
        return cls(ConstraintKind.LENGTH, value)

    @classmethod
    def min(cls, value: int) -> "Constraint":
        return cls(ConstraintKind.MIN, value)

    @classmethod
    def max(cls, value: int) -> "Constraint":
        return cls(ConstraintKind.MAX, value)

    @classmethod
    def percentage(cls, value: int) -> "Constraint":
        return cls(ConstraintKind.PERCENTAGE, value)

    @classmethod
    def fill(cls, value: int) -> "Constraint":
        return cls(ConstraintKind.FILL, value)

    def __str__(self) -> str:
        return f"{self.kind.value}({self.value})"


@dataclass(frozen=True)
class BlockStyle:
    title_align: Alignment = Alignment.LEFT
    borders: Borders = Borders.NONE


@dataclass(frozen=True)
class Text:
    content: str


@dataclass(frozen=True)
class Block:
    """Optionally bordered, titled container around exactly one child."""

    title: str
    content: RenderTree
    style: BlockStyle = field(default_factory=BlockStyle)


@dataclass(frozen=True)
class StackElement:
    constraint: Constraint
    content: RenderTree


@dataclass(frozen=True)
class Stack:
    """Children laid out along one axis; element order is paint order."""

    direction: Direction
    elements: tuple[StackElement, ...] = ()


RenderTree = Union[Text, Block, Stack]


@dataclass(frozen=True)
class RenderLayer:
    """Trees painted into the same area, later ones over earlier ones."""

    trees: tuple[RenderTree, ...] = ()

    def __iter__(self) -> Iterator[RenderTree]:
        return iter(self.trees)

    def __len__(self) -> int:
        return len(self.trees)
