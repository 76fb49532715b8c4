"""Tests for the command-line entry point."""

from pathlib import Path

import pytest

from mathlayout.main import main

from conftest import TEST_FONTSET

EXAMPLES = Path(__file__).parent.parent / "examples"


@pytest.mark.parametrize("name", ["quadratic.yaml", "integral.yaml"])
def test_examples_render_with_default_fontset(name, capsys):
    assert main([str(EXAMPLES / name)]) == 0

    out = capsys.readouterr().out
    assert "placements, advance" in out
    assert "glyph" in out


def test_fontset_from_file(tmp_path, capsys):
    fontset = tmp_path / "test.yaml"
    fontset.write_text(TEST_FONTSET)
    expression = tmp_path / "expr.yaml"
    expression.write_text("expression: [spaced_symbol, [symbol, '+', '\\plus']]\n")

    assert main([str(expression), "--fontset", str(fontset), "--origin", "1,0"]) == 0

    out = capsys.readouterr().out
    assert "(test)" in out
    assert "3 placements, advance 0.9000" in out
    assert "x=  1.2000" in out


def test_fontset_dir(tmp_path, capsys):
    (tmp_path / "test.yaml").write_text(TEST_FONTSET)
    expression = tmp_path / "expr.yaml"
    expression.write_text("expression: [frac, x, y]\n")

    assert main([str(expression), "-f", "test", "--fontset-dir", str(tmp_path)]) == 0
    assert "hline" in capsys.readouterr().out


def test_layout_error_is_reported(tmp_path, capsys):
    expression = tmp_path / "expr.yaml"
    expression.write_text("expression: [matrix, x]\n")

    assert main([str(expression)]) == 1
    assert "Unsupported construct 'matrix'" in capsys.readouterr().err


def test_missing_expression_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.yaml")]) == 1
    assert "error:" in capsys.readouterr().err


def test_bad_origin(capsys):
    assert main([str(EXAMPLES / "quadratic.yaml"), "--origin", "1"]) == 2
    assert "--origin" in capsys.readouterr().err
