"""Tests for flattening layout trees into absolute placements."""

import numpy as np
import pytest

from mathlayout import Group, HLine, ScaledChar, Space, bounding_box, flatten, iter_placements

from conftest import make_glyph


def test_leaf_flattens_to_itself():
    space = Space(1.0)
    [(leaf, position, scale)] = flatten(space, (2.0, 3.0), 0.5)
    assert leaf is space
    np.testing.assert_allclose(position, [2.0, 3.0])
    assert scale == 0.5


@pytest.mark.parametrize(
    "p,s,p0,s0",
    [
        ((0.0, 0.0), 1.0, (0.0, 0.0), 1.0),
        ((1.0, 2.0), 0.6, (3.0, -1.0), 2.0),
        ((-0.5, 0.25), 3.0, (0.1, 0.1), 0.36),
    ],
)
def test_group_composition_is_exact(p, s, p0, s0):
    glyph = make_glyph()
    [(leaf, position, scale)] = flatten(Group([glyph], [p], [s]), p0, s0)

    assert leaf is glyph
    np.testing.assert_allclose(position, np.array(p0) + s0 * np.array(p))
    assert scale == pytest.approx(s0 * s)


def test_placements_compare_as_plain_tuples():
    glyph = make_glyph()
    placements = flatten(Group([glyph], [(1.0, 2.0)], [0.5]), (3.0, -1.0), 2.0)

    assert placements == [(glyph, (5.0, 3.0), 1.0)]
    assert type(placements[0].position) is tuple


def test_placements_do_not_alias_origin():
    origin = np.array([1.0, 1.0])
    [placement] = flatten(Space(1.0), origin)

    origin[0] = 99.0

    assert placement.position == (1.0, 1.0)


def test_nested_groups_compose_frames():
    glyph = make_glyph()
    inner = Group([glyph], [(1.0, 1.0)], [0.5])
    outer = Group([Space(0.2), inner], [(0, 0), (2.0, 0.0)], [1, 0.6])

    placements = flatten(outer, (1.0, 0.0), 2.0)

    assert [p.leaf for p in placements][1] is glyph
    # origin + 2 * (2, 0) + (2 * 0.6) * (1, 1)
    np.testing.assert_allclose(placements[1].position, [6.2, 1.2])
    assert placements[1].scale == pytest.approx(0.6)


def test_scaled_char_is_unwrapped_once():
    glyph = make_glyph()
    group = Group([ScaledChar(glyph, 3.0)], [(0, 0)], [0.5])

    [placement] = flatten(group, scale=2.0)

    assert placement.leaf is glyph
    assert placement.scale == pytest.approx(3.0)


def test_order_is_depth_first_left_to_right():
    a, b, c, d = (make_glyph(char=ch) for ch in "abcd")
    tree = Group(
        [Group([a, b], [(0, 0), (1, 0)], [1, 1]), c, Group([d], [(0, 0)], [1])],
        [(0, 0), (2, 0), (3, 0)],
        [1, 1, 1],
    )
    assert [p.leaf.char for p in flatten(tree)] == ["a", "b", "c", "d"]


def test_iter_placements_is_lazy():
    tree = Group([Space(1.0), Space(2.0)], [(0, 0), (1, 0)], [1, 1])
    iterator = iter_placements(tree)
    assert next(iterator).leaf == Space(1.0)
    assert next(iterator).leaf == Space(2.0)


def test_flatten_rejects_non_elements():
    with pytest.raises(TypeError):
        flatten("x")


def test_bounding_box():
    placements = flatten(
        Group([HLine(2.0, 0.1), make_glyph(bottom=-0.5)], [(0, 0), (1.0, 0.0)], [1, 2.0])
    )
    assert bounding_box(placements) == pytest.approx((0.0, -1.0, 3.0, 2.0))
    assert bounding_box([]) == (0.0, 0.0, 0.0, 0.0)
