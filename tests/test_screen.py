"""Tests for frame drawing and build-failure reporting."""

import pytest

from tuiml.builder import Builder
from tuiml.builder import Resolution
from tuiml.engine import Screen, error_panel
from tuiml.exceptions import BuildError, InvalidLengthError
from tuiml.loader import parse_document
from tuiml.tree import Borders, RenderLayer, Text


def test_draw_layer_document():
    exp = parse_document(
        """
        - [layer,
            [block, a, xxx, [style, [border, all]]],
            [block, b, y, [style, [border, all]]]]
        """
    )
    buffer = Screen(6, 3).draw(exp)
    assert buffer.lines() == ["┌b───┐", "│yxx │", "└────┘"]


def test_draw_single_ui_is_wrapped_in_a_layer():
    exp = parse_document('[stack, horizontal, [[length, 2], "ab"], [[fill, 1], "cd"]]')
    screen = Screen(5, 1)
    assert screen.build(exp) == RenderLayer((screen.builder.build(exp),))
    assert screen.draw(exp).lines() == ["abcd "]


def test_draw_plain_text():
    assert Screen(5, 1).draw(parse_document('"hi"')).lines() == ["hi   "]


def test_draw_raises_under_dispatch():
    screen = Screen(10, 3, builder=Builder(resolution=Resolution.DISPATCH))
    with pytest.raises(InvalidLengthError):
        screen.draw(parse_document("[block, t]"))


def test_draw_or_report_paints_error_panel():
    screen = Screen(30, 3, builder=Builder(resolution=Resolution.DISPATCH))
    lines = screen.draw_or_report(parse_document("[block, t]")).lines()
    assert lines[0].startswith("┌Error")
    assert lines[1].startswith("│Invalid number of elements")
    assert lines[2].startswith("└")


def test_draw_or_report_catches_layer_errors():
    lines = Screen(20, 3).draw_or_report(parse_document("[layer]")).lines()
    assert lines[0].startswith("┌Error")


def test_error_panel_shape():
    panel = error_panel(BuildError("boom"))
    assert panel.title == "Error"
    assert panel.content == Text("boom")
    assert panel.style.borders == Borders.ALL
