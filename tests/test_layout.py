"""Tests for constraint resolution and area splitting."""

import pytest

from tuiml.engine import Layout, Rect, distribute, solve_sizes
from tuiml.tree import Constraint, Direction

length = Constraint.length
fill = Constraint.fill
min_ = Constraint.min
max_ = Constraint.max
pct = Constraint.percentage


def test_distribute_largest_remainder():
    assert distribute(10, [1, 1, 1]) == [4, 3, 3]
    assert distribute(9, [1, 2]) == [3, 6]
    assert distribute(5, [0, 0]) == [3, 2]
    assert distribute(0, [1, 2]) == [0, 0]
    assert distribute(3, []) == []


def test_lengths_with_fill():
    assert solve_sizes(10, [length(3), fill(1)]) == [3, 7]


def test_fill_weights():
    assert solve_sizes(9, [fill(1), fill(2)]) == [3, 6]
    assert solve_sizes(10, [length(1), fill(0), fill(1)]) == [1, 0, 9]


def test_zero_weight_fills_share_evenly():
    assert solve_sizes(4, [fill(0), fill(0)]) == [2, 2]


def test_percentage():
    assert solve_sizes(11, [pct(50), fill(1)]) == [5, 6]


def test_min_grows_without_fill():
    assert solve_sizes(10, [min_(4), length(2)]) == [8, 2]


def test_max_takes_its_bound():
    assert solve_sizes(10, [max_(4), fill(1)]) == [4, 6]


def test_leftover_goes_to_last_unbounded_element():
    assert solve_sizes(10, [length(3), length(3)]) == [3, 7]
    assert solve_sizes(10, [length(2), max_(4)]) == [6, 4]


def test_overflow_shrinks_proportionally():
    assert solve_sizes(10, [length(6), length(6)]) == [5, 5]


def test_overflow_shrinks_min_before_length():
    assert solve_sizes(6, [min_(5), length(5)]) == [1, 5]


def test_overflow_shrinks_max_before_min():
    assert solve_sizes(6, [max_(5), min_(5)]) == [1, 5]


def test_min_floor_holds_until_max_is_exhausted():
    """Max has no floor, so it gives up everything before Min loses a cell."""
    assert solve_sizes(4, [min_(3), max_(5)]) == [3, 1]
    assert solve_sizes(2, [max_(3), min_(3)]) == [0, 2]


def test_percentage_over_hundred_is_clamped():
    assert solve_sizes(10, [pct(150)]) == [10]


def test_zero_extent():
    assert solve_sizes(0, [length(3), fill(1)]) == [0, 0]


def test_no_constraints():
    assert solve_sizes(10, []) == []
    assert Layout(Direction.VERTICAL, ()).split(Rect(0, 0, 5, 5)) == []


@pytest.mark.parametrize(
    "extent,constraints",
    [
        (80, [length(10), pct(25), fill(1), min_(5), max_(8)]),
        (7, [length(10), pct(25), fill(1), min_(5), max_(8)]),
        (0, [min_(1), min_(1)]),
        (33, [fill(1), fill(1), fill(1)]),
        (5, [pct(100), pct(100), length(1)]),
        (12, [max_(1), max_(1)]),
    ],
)
def test_sizes_tile_the_extent(extent, constraints):
    sizes = solve_sizes(extent, constraints)
    assert len(sizes) == len(constraints)
    assert sum(sizes) == extent
    assert all(size >= 0 for size in sizes)


def test_split_horizontal():
    parts = Layout(Direction.HORIZONTAL, (length(3), fill(1))).split(Rect(2, 1, 10, 4))
    assert parts == [Rect(2, 1, 3, 4), Rect(5, 1, 7, 4)]


def test_split_vertical():
    parts = Layout(Direction.VERTICAL, (fill(1), fill(1), length(1))).split(
        Rect(0, 0, 6, 7)
    )
    assert parts == [Rect(0, 0, 6, 3), Rect(0, 3, 6, 3), Rect(0, 6, 6, 1)]


def test_split_degenerate_area():
    parts = Layout(Direction.HORIZONTAL, (length(3), min_(2))).split(Rect(4, 4, 0, 0))
    assert parts == [Rect(4, 4, 0, 0), Rect(4, 4, 0, 0)]
