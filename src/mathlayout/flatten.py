"""Flattening of layout trees into absolute placements."""

from __future__ import annotations

from typing import Iterator, NamedTuple, Sequence

import numpy as np
from numpy.typing import ArrayLike

from .core.elements import LEAF_TYPES, Group, LayoutElement, Leaf, ScaledChar


class Placement(NamedTuple):
    """A leaf with its absolute position and scale."""

    leaf: Leaf
    position: tuple[float, float]
    scale: float


def iter_placements(
    tree: LayoutElement,
    origin: ArrayLike = (0.0, 0.0),
    scale: float = 1.0,
) -> Iterator[Placement]:
    """Walk a layout tree depth-first, left to right, yielding placements.

    A child of a group lands at parent position + parent scale * child
    position, with parent scale * child scale. ScaledChar leaves are
    unwrapped: their glyph is emitted with the extra scale folded in.
    Positions are emitted as plain (x, y) float tuples, detached from the
    origin passed in and from the group arrays.

    Args:
        tree: Root layout element
        origin: Absolute position of the root's origin
        scale: Absolute scale of the root

    Yields:
        Placement for every leaf, in drawing order
    """
    position = np.array(origin, dtype=np.float64).reshape(2)

    if isinstance(tree, Group):
        positions = position + scale * tree.positions
        scales = scale * tree.scales
        for element, child_pos, child_scale in zip(tree.elements, positions, scales):
            yield from iter_placements(element, child_pos, float(child_scale))
    elif isinstance(tree, ScaledChar):
        yield Placement(tree.char, _xy(position), scale * tree.scale)
    elif isinstance(tree, LEAF_TYPES):
        yield Placement(tree, _xy(position), scale)
    else:
        raise TypeError(f"Not a layout element: {tree!r}")


def _xy(position: np.ndarray) -> tuple[float, float]:
    return (float(position[0]), float(position[1]))


def flatten(
    tree: LayoutElement,
    origin: ArrayLike = (0.0, 0.0),
    scale: float = 1.0,
) -> list[Placement]:
    """Flatten a layout tree into an ordered list of absolute placements."""
    return list(iter_placements(tree, origin, scale))


def bounding_box(placements: Sequence[Placement]) -> tuple[float, float, float, float]:
    """Absolute ink bounding box (xmin, ymin, xmax, ymax) of placed leaves.

    Returns all zeros for an empty placement list.
    """
    if not placements:
        return (0.0, 0.0, 0.0, 0.0)

    boxes = np.array([
        [
            p.position[0] + p.scale * p.leaf.left_ink_bound,
            p.position[1] + p.scale * p.leaf.bottom_ink_bound,
            p.position[0] + p.scale * p.leaf.right_ink_bound,
            p.position[1] + p.scale * p.leaf.top_ink_bound,
        ]
        for p in placements
    ])
    return (
        float(boxes[:, 0].min()),
        float(boxes[:, 1].min()),
        float(boxes[:, 2].max()),
        float(boxes[:, 3].max()),
    )
