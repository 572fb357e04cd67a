"""Tests for the tuiml command line."""

import pytest
from typer.testing import CliRunner

from tuiml import __version__
from tuiml.cli.main import typer_app

runner = CliRunner()

DOCUMENT = """
- [stack, vertical,
    [[length, 3], [block, Header, hello, [style, [border, all]]]],
    [[fill, 1], "body text"]]
"""


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_version():
    result = runner.invoke(typer_app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_render(workdir):
    doc = write(workdir / "ui.yaml", DOCUMENT)
    result = runner.invoke(typer_app, ["render", str(doc), "-W", "12", "-H", "5"])
    assert result.exit_code == 0
    assert "┌Header────┐" in result.output
    assert "│hello     │" in result.output
    assert "body text" in result.output


def test_render_uses_config_file(workdir):
    write(workdir / "tuiml.yaml", "render:\n  width: 12\n  height: 4\n  border_set: ascii\n")
    doc = write(workdir / "ui.yaml", DOCUMENT)
    result = runner.invoke(typer_app, ["render", str(doc)])
    assert result.exit_code == 0
    assert "+Header----+" in result.output


def test_render_reports_build_errors_in_frame(workdir):
    doc = write(workdir / "ui.yaml", "[block, t]\n")
    result = runner.invoke(typer_app, ["render", str(doc), "--dispatch", "-W", "40", "-H", "3"])
    assert result.exit_code == 0
    assert "┌Error" in result.output


def test_render_bad_document(workdir):
    doc = write(workdir / "ui.yaml", "[1.5]\n")
    result = runner.invoke(typer_app, ["render", str(doc)])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_render_reports_forced_string_error(workdir):
    """A `{string: ...}` wrapper around a non-string is a load failure, not a crash."""
    doc = write(workdir / "ui.yaml", "[block, {string: 5}, x]\n")
    result = runner.invoke(typer_app, ["render", str(doc)])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "Traceback" not in result.output


def test_render_missing_file(workdir):
    result = runner.invoke(typer_app, ["render", str(workdir / "nope.yaml")])
    assert result.exit_code != 0


def test_tree(workdir):
    doc = write(workdir / "ui.yaml", DOCUMENT)
    result = runner.invoke(typer_app, ["tree", str(doc)])
    assert result.exit_code == 0
    assert "Stack vertical" in result.output
    assert "length(3)" in result.output
    assert "Block" in result.output


def test_check_ok(workdir):
    doc = write(workdir / "ui.yaml", DOCUMENT)
    result = runner.invoke(typer_app, ["check", str(doc)])
    assert result.exit_code == 0
    assert "OK" in result.output


def test_check_warns_about_text_fallback(workdir):
    doc = write(workdir / "ui.yaml", "[block, t]\n")
    result = runner.invoke(typer_app, ["check", str(doc)])
    assert result.exit_code == 0
    assert "Warning" in result.output


def test_check_dispatch_fails(workdir):
    doc = write(workdir / "ui.yaml", "[stack, diagonal, [[length, 1], x]]\n")
    result = runner.invoke(typer_app, ["check", str(doc), "--dispatch"])
    assert result.exit_code == 1
    assert "Invalid direction 'diagonal'" in result.output


def test_bad_config_file(workdir):
    write(workdir / "tuiml.yaml", "render:\n  width: wide\n")
    doc = write(workdir / "ui.yaml", DOCUMENT)
    result = runner.invoke(typer_app, ["check", str(doc)])
    assert result.exit_code == 1
    assert "Invalid config" in result.output
