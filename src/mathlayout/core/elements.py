"""Layout elements: positioned leaves and groups with relative transforms."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Sequence, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray


Point = NDArray[np.float64]


def point(x: float, y: float) -> Point:
    """Create a 2D point as a float64 array."""
    return np.array([x, y], dtype=np.float64)


class _Metrics:
    """Derived metrics shared by every layout element.

    Subclasses provide advance, the four ink bounds, ascender, descender
    and xheight; the ink box sizes and midpoints follow from those.
    """

    @property
    def ink_width(self) -> float:
        """Width of the ink bounding box."""
        return self.right_ink_bound - self.left_ink_bound

    @property
    def ink_height(self) -> float:
        """Height of the ink bounding box."""
        return self.top_ink_bound - self.bottom_ink_bound

    @property
    def hmid(self) -> float:
        """Horizontal midpoint of the ink bounding box."""
        return 0.5 * (self.left_ink_bound + self.right_ink_bound)

    @property
    def vmid(self) -> float:
        """Vertical midpoint of the ink bounding box."""
        return 0.5 * (self.bottom_ink_bound + self.top_ink_bound)


@dataclass(frozen=True)
class GlyphRef(_Metrics):
    """A glyph resolved by a font metrics provider.

    All metrics are in font units of one em, relative to the glyph origin
    on the baseline.

    Attributes:
        char: The character drawn
        font: Name of the face the glyph belongs to
        advance: Horizontal cursor displacement after the glyph
        left_ink_bound: Leftmost x of the visible strokes
        right_ink_bound: Rightmost x of the visible strokes
        bottom_ink_bound: Lowest y of the visible strokes
        top_ink_bound: Highest y of the visible strokes
        ascender: Face ascender (above baseline)
        descender: Face descender (below baseline, usually negative)
        xheight: Face x-height
    """

    char: str
    font: str
    advance: float
    left_ink_bound: float
    right_ink_bound: float
    bottom_ink_bound: float
    top_ink_bound: float
    ascender: float
    descender: float
    xheight: float = 0.0

    def __post_init__(self) -> None:
        if self.advance < 0:
            raise ValueError(f"Glyph {self.char!r} has negative advance {self.advance}")


@dataclass(frozen=True)
class Space(_Metrics):
    """Empty horizontal space."""

    width: float

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"Space width must be non-negative, got {self.width}")

    @property
    def advance(self) -> float:
        return self.width

    @property
    def right_ink_bound(self) -> float:
        return self.width

    left_ink_bound = 0.0
    bottom_ink_bound = 0.0
    top_ink_bound = 0.0
    ascender = 0.0
    descender = 0.0
    xheight = 0.0


@dataclass(frozen=True)
class HLine(_Metrics):
    """Horizontal rule, drawn upward from its origin."""

    width: float
    thickness: float

    @property
    def advance(self) -> float:
        return self.width

    @property
    def right_ink_bound(self) -> float:
        return self.width

    @property
    def top_ink_bound(self) -> float:
        return self.thickness

    @property
    def ascender(self) -> float:
        return self.thickness

    left_ink_bound = 0.0
    bottom_ink_bound = 0.0
    descender = 0.0
    xheight = 0.0


@dataclass(frozen=True)
class VLine(_Metrics):
    """Vertical rule, drawn rightward from its origin.

    A negative height extends the rule below its origin.
    """

    height: float
    thickness: float

    @property
    def advance(self) -> float:
        return self.thickness

    @property
    def right_ink_bound(self) -> float:
        return self.thickness

    @property
    def bottom_ink_bound(self) -> float:
        return min(0.0, self.height)

    @property
    def top_ink_bound(self) -> float:
        return max(0.0, self.height)

    @property
    def ascender(self) -> float:
        return self.top_ink_bound

    @property
    def descender(self) -> float:
        return self.bottom_ink_bound

    left_ink_bound = 0.0
    xheight = 0.0


@dataclass(frozen=True)
class ScaledChar(_Metrics):
    """A glyph drawn at an extra scale factor (e.g. a stretched delimiter)."""

    char: GlyphRef
    scale: float

    def __post_init__(self) -> None:
        if not isinstance(self.char, GlyphRef):
            raise TypeError(
                f"ScaledChar wraps a GlyphRef, got {type(self.char).__name__}"
            )
        if self.scale <= 0:
            raise ValueError(f"ScaledChar scale must be positive, got {self.scale}")

    @property
    def advance(self) -> float:
        return self.scale * self.char.advance

    @property
    def left_ink_bound(self) -> float:
        return self.scale * self.char.left_ink_bound

    @property
    def right_ink_bound(self) -> float:
        return self.scale * self.char.right_ink_bound

    @property
    def bottom_ink_bound(self) -> float:
        return self.scale * self.char.bottom_ink_bound

    @property
    def top_ink_bound(self) -> float:
        return self.scale * self.char.top_ink_bound

    @property
    def ascender(self) -> float:
        return self.scale * self.char.ascender

    @property
    def descender(self) -> float:
        return self.scale * self.char.descender

    @property
    def xheight(self) -> float:
        return self.scale * self.char.xheight


Leaf = Union[GlyphRef, Space, HLine, VLine, ScaledChar]
LEAF_TYPES = (GlyphRef, Space, HLine, VLine, ScaledChar)


@dataclass(frozen=True, eq=False)
class Group(_Metrics):
    """Composite element: children placed at relative positions and scales.

    Each child's position is expressed in the group's own coordinate frame
    and its scale is relative to the group's scale. Groups are immutable
    once built; positions and scales are stored as read-only arrays.

    Example:
        # "x" followed by a smaller "2" raised above it
        Group([x, two], [(0, 0), (x.advance, 0.4)], [1, 0.6])
    """

    elements: tuple[LayoutElement, ...]
    positions: NDArray[np.float64] = field(repr=False)
    scales: NDArray[np.float64] = field(repr=False)

    def __init__(
        self,
        elements: Sequence[LayoutElement],
        positions: ArrayLike | None = None,
        scales: ArrayLike | None = None,
    ) -> None:
        elements = tuple(elements)
        n = len(elements)

        if positions is None:
            positions = np.zeros((n, 2), dtype=np.float64)
        positions = np.array(positions, dtype=np.float64).reshape(-1, 2)
        if scales is None:
            scales = np.ones(n, dtype=np.float64)
        scales = np.array(scales, dtype=np.float64).reshape(-1)

        if not (len(positions) == len(scales) == n):
            raise ValueError(
                f"Group needs one position and one scale per element: "
                f"{n} elements, {len(positions)} positions, {len(scales)} scales"
            )
        if n and np.any(scales <= 0):
            raise ValueError(f"Group scales must be positive, got {scales.tolist()}")
        for element in elements:
            if not isinstance(element, (Group, *LEAF_TYPES)):
                raise TypeError(f"Not a layout element: {element!r}")

        positions.flags.writeable = False
        scales.flags.writeable = False

        object.__setattr__(self, "elements", elements)
        object.__setattr__(self, "positions", positions)
        object.__setattr__(self, "scales", scales)

    def __len__(self) -> int:
        return len(self.elements)

    def _child_metric(self, name: str, axis: int) -> NDArray[np.float64]:
        """Child metric moved into this group's frame."""
        values = np.array([getattr(e, name) for e in self.elements], dtype=np.float64)
        return self.positions[:, axis] + self.scales * values

    @cached_property
    def advance(self) -> float:
        if not self.elements:
            return 0.0
        return float(self._child_metric("advance", 0).max())

    @cached_property
    def left_ink_bound(self) -> float:
        if not self.elements:
            return 0.0
        return float(self._child_metric("left_ink_bound", 0).min())

    @cached_property
    def right_ink_bound(self) -> float:
        if not self.elements:
            return 0.0
        return float(self._child_metric("right_ink_bound", 0).max())

    @cached_property
    def bottom_ink_bound(self) -> float:
        if not self.elements:
            return 0.0
        return float(self._child_metric("bottom_ink_bound", 1).min())

    @cached_property
    def top_ink_bound(self) -> float:
        if not self.elements:
            return 0.0
        return float(self._child_metric("top_ink_bound", 1).max())

    @cached_property
    def ascender(self) -> float:
        if not self.elements:
            return 0.0
        return float(self._child_metric("ascender", 1).max())

    @cached_property
    def descender(self) -> float:
        if not self.elements:
            return 0.0
        return float(self._child_metric("descender", 1).min())

    @cached_property
    def xheight(self) -> float:
        if not self.elements:
            return 0.0
        values = np.array([e.xheight for e in self.elements], dtype=np.float64)
        return float((self.scales * values).max())

    def __repr__(self) -> str:
        return f"Group({len(self.elements)} elements, advance={self.advance:.3f})"


LayoutElement = Union[Leaf, Group]


def horizontal_layout(
    elements: Sequence[LayoutElement],
    scales: Sequence[float] | None = None,
) -> Group:
    """Place elements side by side on the baseline.

    Element i is placed at x = sum of advance * scale over the elements
    before it, so with unit scales the offsets are the running sum of
    advances.

    Args:
        elements: Elements in reading order
        scales: Optional scale per element (default all 1)

    Returns:
        Group with the elements laid out left to right
    """
    elements = list(elements)
    if scales is None:
        scales = np.ones(len(elements), dtype=np.float64)
    scales = np.asarray(scales, dtype=np.float64)
    advances = np.array([e.advance for e in elements], dtype=np.float64) * scales
    xs = np.concatenate([[0.0], np.cumsum(advances)[:-1]]) if elements else advances
    positions = np.column_stack([xs, np.zeros(len(elements))])
    return Group(elements, positions, scales)
