"""mathlayout - Layout of math expression trees into positioned glyphs."""

from .core import GlyphRef, Group, HLine, ScaledChar, Space, VLine, horizontal_layout
from .errors import (
    FontSetError,
    GlyphNotFoundError,
    MalformedTreeError,
    MathLayoutError,
    UnsupportedConstructError,
)
from .expr import ExpressionLoader, ExpressionNode, Kind, expr
from .flatten import Placement, bounding_box, flatten, iter_placements
from .fonts import FontMetricsProvider, FontSet, FontSetLoader, TableFontProvider
from .layout import LayoutEngine, layout

__version__ = "0.1.0"

__all__ = [
    "GlyphRef",
    "Group",
    "HLine",
    "ScaledChar",
    "Space",
    "VLine",
    "horizontal_layout",
    "FontSetError",
    "GlyphNotFoundError",
    "MalformedTreeError",
    "MathLayoutError",
    "UnsupportedConstructError",
    "ExpressionLoader",
    "ExpressionNode",
    "Kind",
    "expr",
    "Placement",
    "bounding_box",
    "flatten",
    "iter_placements",
    "FontMetricsProvider",
    "FontSet",
    "FontSetLoader",
    "TableFontProvider",
    "LayoutEngine",
    "layout",
]
