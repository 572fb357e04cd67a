"""Tests for reading UI documents."""

import pytest

from tuiml.exceptions import LoadError
from tuiml.expr import Integer, List, String, Symbol
from tuiml.loader import load_document, parse_document


def test_parse_yaml_document():
    exp = parse_document('- [block, title, "hello world"]')
    assert exp == List.of(Symbol("block"), Symbol("title"), String("hello world"))


def test_parse_json_document():
    exp = parse_document('["stack", "vertical", [["length", 1], "x"]]')
    assert exp == List.of(
        Symbol("stack"),
        Symbol("vertical"),
        List.of(List.of(Symbol("length"), Integer(1)), Symbol("x")),
    )


def test_parse_forced_string():
    exp = parse_document("[block, {string: block}, x]")
    assert exp[1] == String("block")


@pytest.mark.parametrize("text", ["", "[unclosed", "[1.5]", "{a: 1, b: 2}"])
def test_bad_documents(text):
    with pytest.raises(LoadError):
        parse_document(text)


def test_load_document(tmp_path):
    path = tmp_path / "ui.yaml"
    path.write_text("[block, t, c]\n", encoding="utf-8")
    assert load_document(path) == List.of(Symbol("block"), Symbol("t"), Symbol("c"))


def test_load_missing_document(tmp_path):
    with pytest.raises(LoadError):
        load_document(tmp_path / "missing.yaml")
