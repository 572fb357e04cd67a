"""Layout - splits a rectangle among stack elements.

Sizes are resolved in three passes:
1. every element states a demand (Length, Percentage, Min and Max their
   value, Fill nothing)
2. if the demands overflow the extent, whole tiers give space back in the
   order Fill, Max, Min, Percentage, Length. Max comes before Min since it
   is only an upper bound with no floor of its own, while Min states one
3. leftover space goes to Fill elements by weight, else to Min elements,
   else to the last element that is not Max-bounded

The parts always tile the extent exactly; zero-size parts are legal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from tuiml.engine.geometry import Rect
from tuiml.tree import Constraint, ConstraintKind, Direction

SHRINK_ORDER = (
    ConstraintKind.FILL,
    ConstraintKind.MAX,
    ConstraintKind.MIN,
    ConstraintKind.PERCENTAGE,
    ConstraintKind.LENGTH,
)


def distribute(amount: int, weights: Sequence[int]) -> list[int]:
    """Split `amount` proportionally to `weights` (largest remainder).

    Zero total weight splits evenly. Ties go to the earlier index.
    """
    if not weights:
        return []
    total = sum(weights)
    if total == 0:
        weights = [1] * len(weights)
        total = len(weights)

    shares = [amount * w // total for w in weights]
    remainders = [amount * w % total for w in weights]
    left = amount - sum(shares)
    order = sorted(range(len(weights)), key=lambda i: (-remainders[i], i))
    for i in order[:left]:
        shares[i] += 1
    return shares


def _demand(constraint: Constraint, extent: int) -> int:
    if constraint.kind is ConstraintKind.PERCENTAGE:
        return extent * constraint.value // 100
    if constraint.kind is ConstraintKind.FILL:
        return 0
    return constraint.value


def _shrink(sizes: list[int], constraints: Sequence[Constraint], deficit: int) -> None:
    for kind in SHRINK_ORDER:
        if deficit == 0:
            return
        tier = [i for i, c in enumerate(constraints) if c.kind is kind and sizes[i] > 0]
        available = sum(sizes[i] for i in tier)
        if available == 0:
            continue
        taken = min(deficit, available)
        cuts = distribute(taken, [sizes[i] for i in tier])
        for i, cut in zip(tier, cuts):
            sizes[i] -= cut
        deficit -= taken


def _grow(sizes: list[int], constraints: Sequence[Constraint], surplus: int) -> None:
    fills = [i for i, c in enumerate(constraints) if c.kind is ConstraintKind.FILL]
    if fills:
        shares = distribute(surplus, [constraints[i].value for i in fills])
        for i, share in zip(fills, shares):
            sizes[i] += share
        return

    mins = [i for i, c in enumerate(constraints) if c.kind is ConstraintKind.MIN]
    if mins:
        shares = distribute(surplus, [1] * len(mins))
        for i, share in zip(mins, shares):
            sizes[i] += share
        return

    unbounded = [i for i, c in enumerate(constraints) if c.kind is not ConstraintKind.MAX]
    last = unbounded[-1] if unbounded else len(sizes) - 1
    sizes[last] += surplus


def solve_sizes(extent: int, constraints: Sequence[Constraint]) -> list[int]:
    """Resolve one size per constraint; the sizes sum to `extent`."""
    if not constraints:
        return []
    extent = max(extent, 0)

    sizes = [_demand(c, extent) for c in constraints]
    demand = sum(sizes)
    if demand > extent:
        _shrink(sizes, constraints, demand - extent)
    elif demand < extent:
        _grow(sizes, constraints, extent - demand)
    return sizes


@dataclass(frozen=True)
class Layout:
    direction: Direction
    constraints: tuple[Constraint, ...]

    def split(self, area: Rect) -> list[Rect]:
        """One rect per constraint, in order along the layout axis."""
        if self.direction is Direction.HORIZONTAL:
            sizes = solve_sizes(area.width, self.constraints)
            rects = []
            x = area.x
            for size in sizes:
                rects.append(Rect(x, area.y, size, area.height))
                x += size
            return rects

        sizes = solve_sizes(area.height, self.constraints)
        rects = []
        y = area.y
        for size in sizes:
            rects.append(Rect(area.x, y, area.width, size))
            y += size
        return rects
