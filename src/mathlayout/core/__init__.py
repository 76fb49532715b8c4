"""Core layout element types."""

from .elements import (
    GlyphRef,
    Group,
    HLine,
    LayoutElement,
    Leaf,
    LEAF_TYPES,
    Point,
    ScaledChar,
    Space,
    VLine,
    horizontal_layout,
    point,
)

__all__ = [
    "GlyphRef",
    "Group",
    "HLine",
    "LayoutElement",
    "Leaf",
    "LEAF_TYPES",
    "Point",
    "ScaledChar",
    "Space",
    "VLine",
    "horizontal_layout",
    "point",
]
