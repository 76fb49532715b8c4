"""Shared fixtures: a small font set with round-number metrics."""

import pytest

from mathlayout import FontSetLoader, GlyphRef, LayoutEngine, TableFontProvider

TEST_FONTSET = r"""
name: test
xheight: 0.5
thickness: 0.05
sqrt_thickness: 0.04

faces:
  math:
    ascender: 0.8
    descender: -0.2
    glyphs:
      x: {advance: 0.5, ink: [0.05, 0.0, 0.45, 0.5]}
      y: {advance: 0.5, ink: [0.05, -0.2, 0.45, 0.5]}
      a: {advance: 0.5, ink: [0.0, 0.0, 0.5, 0.5]}
      b: {advance: 0.5, ink: [0.0, 0.0, 0.5, 1.0]}
  function:
    ascender: 0.8
    descender: -0.2
    glyphs:
      s: {advance: 0.4, ink: [0.0, 0.0, 0.4, 0.5]}
      i: {advance: 0.4, ink: [0.0, 0.0, 0.4, 0.5]}
      n: {advance: 0.4, ink: [0.0, 0.0, 0.4, 0.5]}
  number:
    ascender: 0.8
    descender: -0.2
    glyphs:
      "0": {advance: 0.5, ink: [0.05, 0.0, 0.45, 0.7]}
      "1": {advance: 0.5, ink: [0.05, 0.0, 0.45, 0.7]}
      "2": {advance: 0.5, ink: [0.05, 0.0, 0.45, 0.7]}
      "4": {advance: 0.5, ink: [0.05, 0.0, 0.45, 0.7]}

symbols:
  ascender: 0.8
  descender: -0.2
  glyphs:
    '\plus': {char: "+", advance: 0.5, ink: [0.0, -0.1, 0.5, 0.4]}
    '\equals': {char: "=", advance: 0.6, ink: [0.05, 0.1, 0.55, 0.3]}
    '\lparen': {char: "(", advance: 0.3, ink: [0.05, -0.25, 0.25, 0.75]}
    '\rparen': {char: ")", advance: 0.3, ink: [0.05, -0.25, 0.25, 0.75]}
    '\sqrt': {char: "√", advance: 0.7, ink: [0.0, -0.4, 0.6, 0.6]}
    '\sqrtbottom': {char: "⎷", advance: 0.7, ink: [0.0, -1.5, 0.6, 0.5]}
    '\inttop': {char: "⌠", advance: 0.5, ink: [0.2, 0.0, 0.5, 1.0]}
    '\intbottom': {char: "⌡", advance: 0.5, ink: [0.0, -1.0, 0.3, 0.0]}
    '\int': {char: "∫", advance: 0.5, ink: [0.0, -0.9, 0.5, 0.9]}
    '\sum': {char: "∑", advance: 1.0, ink: [0.0, -0.2, 1.0, 0.8]}
    '\hat': {char: "^", advance: 0.5, ink: [0.1, 0.5, 0.4, 0.7]}
"""


@pytest.fixture
def fontset():
    return FontSetLoader().load_string(TEST_FONTSET)


@pytest.fixture
def provider(fontset):
    return TableFontProvider(fontsets=[fontset])


@pytest.fixture
def engine(provider):
    return LayoutEngine(provider, "test")


def make_glyph(left=0.0, bottom=0.0, right=1.0, top=1.0, advance=None, char="g") -> GlyphRef:
    """Glyph with an explicit ink box, for rules that only look at metrics."""
    return GlyphRef(
        char=char,
        font="math",
        advance=right if advance is None else advance,
        left_ink_bound=left,
        right_ink_bound=right,
        bottom_ink_bound=bottom,
        top_ink_bound=top,
        ascender=0.8,
        descender=-0.2,
        xheight=0.5,
    )
