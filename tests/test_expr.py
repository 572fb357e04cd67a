"""Tests for expression values and data conversion."""

import pytest

from tuiml.exceptions import ExpectedStringError, LoadError
from tuiml.expr import Integer, List, String, Symbol, from_python


def test_string_stringifies_to_raw_text():
    assert str(String("hello world")) == "hello world"


def test_nested_strings_are_quoted():
    exp = List.of(Symbol("block"), String("t"))
    assert str(exp) == '(block "t")'


def test_source_form_escapes_quotes():
    assert String('say "hi"').to_source() == '"say \\"hi\\""'


def test_nested_list_source():
    exp = List.of(Symbol("a"), List.of(Integer(1), Integer(2)), List())
    assert str(exp) == "(a (1 2) ())"


def test_head_symbol():
    assert List.of(Symbol("block"), String("x")).head_symbol() == "block"
    assert List.of(String("block")).head_symbol() is None
    assert List().head_symbol() is None


def test_from_python_identifiers_become_symbols():
    exp = from_python(["block", "title", "hello world", 3])
    assert exp == List.of(
        Symbol("block"), Symbol("title"), String("hello world"), Integer(3)
    )


def test_from_python_symbols_may_contain_dashes():
    assert from_python("title-align") == Symbol("title-align")


def test_from_python_forced_types():
    assert from_python({"string": "block"}) == String("block")
    assert from_python({"symbol": "my symbol"}) == Symbol("my symbol")


def test_from_python_forced_string_must_be_text():
    with pytest.raises(ExpectedStringError) as exc:
        from_python({"string": 5})
    assert exc.value.expression == Integer(5)


@pytest.mark.parametrize("value", [True, 1.5, None, {"a": 1, "b": 2}, {"other": "x"}])
def test_from_python_rejects_unsupported_values(value):
    with pytest.raises(LoadError):
        from_python(value)
