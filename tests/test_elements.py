"""Tests for layout elements and horizontal concatenation."""

import dataclasses

import numpy as np
import pytest

from mathlayout import GlyphRef, Group, HLine, ScaledChar, Space, VLine, horizontal_layout

from conftest import make_glyph


def test_space_metrics():
    space = Space(0.3)
    assert space.advance == 0.3
    assert space.ink_width == pytest.approx(0.3)
    assert space.ink_height == 0.0


def test_space_rejects_negative_width():
    with pytest.raises(ValueError):
        Space(-0.1)


def test_glyph_rejects_negative_advance():
    with pytest.raises(ValueError):
        make_glyph(advance=-1.0)


def test_glyph_is_immutable():
    glyph = make_glyph()
    with pytest.raises(dataclasses.FrozenInstanceError):
        glyph.advance = 2.0


def test_hline_is_bottom_anchored():
    line = HLine(2.0, 0.1)
    assert line.advance == 2.0
    assert (line.bottom_ink_bound, line.top_ink_bound) == (0.0, 0.1)
    assert line.ink_width == 2.0


@pytest.mark.parametrize("height,bottom,top", [(1.5, 0.0, 1.5), (-0.5, -0.5, 0.0)])
def test_vline_extends_in_height_direction(height, bottom, top):
    line = VLine(height, 0.04)
    assert line.bottom_ink_bound == bottom
    assert line.top_ink_bound == top
    assert line.advance == 0.04


def test_scaled_char_scales_every_metric():
    glyph = make_glyph(left=0.1, bottom=-0.2, right=0.5, top=0.7, advance=0.6)
    scaled = ScaledChar(glyph, 2.0)
    assert scaled.advance == pytest.approx(1.2)
    assert scaled.left_ink_bound == pytest.approx(0.2)
    assert scaled.bottom_ink_bound == pytest.approx(-0.4)
    assert scaled.ink_height == pytest.approx(1.8)
    assert scaled.descender == pytest.approx(-0.4)


def test_scaled_char_does_not_nest():
    glyph = make_glyph()
    with pytest.raises(TypeError):
        ScaledChar(ScaledChar(glyph, 2.0), 2.0)


def test_group_requires_parallel_sequences():
    with pytest.raises(ValueError, match="one position and one scale"):
        Group([Space(1.0), Space(1.0)], [(0, 0)], [1, 1])


def test_empty_group_rejects_extra_positions():
    with pytest.raises(ValueError, match="one position and one scale"):
        Group([], [(1.0, 2.0)], [])


@pytest.mark.parametrize("scale", [0.0, -1.0])
def test_group_requires_positive_scales(scale):
    with pytest.raises(ValueError, match="positive"):
        Group([Space(1.0)], [(0, 0)], [scale])


def test_group_rejects_non_elements():
    with pytest.raises(TypeError):
        Group(["x"], [(0, 0)], [1])


def test_group_is_read_only():
    group = Group([Space(1.0)], [(0, 0)], [1])
    with pytest.raises(ValueError):
        group.positions[0, 0] = 5.0
    with pytest.raises(ValueError):
        group.scales[0] = 5.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        group.elements = ()


def test_group_metrics_combine_children():
    group = Group([Space(1.0), HLine(2.0, 0.1)], [(0, 0), (1.0, 0.5)], [1, 0.5])
    assert group.advance == pytest.approx(2.0)
    assert group.left_ink_bound == pytest.approx(0.0)
    assert group.right_ink_bound == pytest.approx(2.0)
    assert group.bottom_ink_bound == pytest.approx(0.0)
    assert group.top_ink_bound == pytest.approx(0.55)


def test_group_xheight_is_scaled():
    glyph = make_glyph()
    group = Group([glyph, glyph], [(0, 0), (1, 0)], [1, 0.6])
    assert group.xheight == pytest.approx(0.5)
    assert Group([glyph], [(0, 0)], [2.0]).xheight == pytest.approx(1.0)


def test_empty_group_has_zero_metrics():
    group = Group([])
    assert len(group) == 0
    assert group.advance == 0.0
    assert group.ink_height == 0.0


def test_horizontal_layout_places_by_cumulative_advance():
    elements = [Space(0.5), Space(0.3), Space(0.7)]
    group = horizontal_layout(elements)

    xs = group.positions[:, 0]
    np.testing.assert_allclose(xs, [0.0, 0.5, 0.8])
    np.testing.assert_allclose(group.positions[:, 1], 0.0)
    np.testing.assert_allclose(group.scales, 1.0)
    assert group.advance == pytest.approx(sum(e.advance for e in elements))


@pytest.mark.parametrize("advances", [[0.1], [0.5, 0.0, 0.25], [1.0, 2.0, 3.0, 4.0]])
def test_horizontal_layout_offsets(advances):
    group = horizontal_layout([make_glyph(advance=a, right=a) for a in advances])
    xs = group.positions[:, 0]

    assert xs[0] == 0.0
    assert np.all(np.diff(xs) >= 0)
    assert group.advance == pytest.approx(sum(advances))


def test_horizontal_layout_uses_scaled_advances():
    group = horizontal_layout([Space(0.5), Space(1.0), Space(0.5)], [2.0, 1.0, 3.0])
    np.testing.assert_allclose(group.positions[:, 0], [0.0, 1.0, 2.0])
    assert group.advance == pytest.approx(3.5)


def test_glyph_refs_compare_by_value():
    assert make_glyph() == make_glyph()
    assert isinstance(make_glyph(), GlyphRef)
