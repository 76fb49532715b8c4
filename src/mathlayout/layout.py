"""Recursive layout of expression trees into positioned elements."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any, Callable

import numpy as np

from .core.elements import (
    LEAF_TYPES,
    GlyphRef,
    Group,
    HLine,
    LayoutElement,
    Space,
    VLine,
    horizontal_layout,
)
from .errors import MalformedTreeError, UnsupportedConstructError
from .expr.node import ARITY, Expression, ExpressionNode, Kind
from .fonts.provider import FontMetricsProvider

logger = logging.getLogger(__name__)

# Scale of sub- and superscripts relative to their base
SHRINK = 0.6
# Vertical offset of subscripts in decorated constructs
SUB_OFFSET = -0.2
# Gap between the integral sign and its limits
INTEGRAL_PAD = 0.2
# Padding around spaced symbols (binary operators, relations)
SYMBOL_PAD = 0.2
# Vertical padding of radical content, relative to the content height
SQRT_RELPAD = 0.15


@dataclass(frozen=True)
class LayoutEngine:
    """Maps expression trees to layout trees for one font set.

    The engine is stateless apart from its provider and font set name, so a
    single instance can lay out many expressions, from several threads.

    Attributes:
        provider: Glyph and metric lookup
        fontset: Name of the font set passed to every lookup

    Example:
        engine = LayoutEngine(TableFontProvider(), "default")
        tree = engine.layout(expr("frac", "x", 2))
    """

    provider: FontMetricsProvider
    fontset: str = "default"

    def layout(self, node: Expression | LayoutElement) -> LayoutElement:
        """Lay out an expression node.

        Args:
            node: ExpressionNode or literal (one-character string, int, None).
                  Layout elements are returned unchanged.

        Returns:
            A leaf or Group with positions relative to the node's origin

        Raises:
            UnsupportedConstructError: For unknown or unsupported construct kinds
            MalformedTreeError: When a construct's children do not fit its kind
            GlyphNotFoundError: When the provider cannot resolve a glyph
        """
        if node is None:
            return Space(0.0)
        if isinstance(node, (Group, *LEAF_TYPES)):
            return node
        if isinstance(node, bool):
            raise UnsupportedConstructError("bool", node)
        if isinstance(node, Integral):
            return self._layout_integer(node)
        if isinstance(node, str):
            if len(node) != 1:
                raise MalformedTreeError("char", "a single character", repr(node), node)
            return self.provider.math_glyph(node, self.fontset)
        if not isinstance(node, ExpressionNode):
            raise UnsupportedConstructError(type(node).__name__, node)

        kind = node.kind
        rule = _RULES.get(kind) if kind is not None else None
        if rule is None:
            raise UnsupportedConstructError(node.head, node)

        expected = ARITY[kind]
        if expected is not None and len(node.args) != expected:
            raise MalformedTreeError(
                node.head,
                f"{expected} argument{'' if expected == 1 else 's'}",
                f"{len(node.args)}",
                node,
            )

        logger.debug("Laying out %s", node.head)
        return rule(self, node)

    def _layout_integer(self, value: int) -> Group:
        if value < 0:
            raise MalformedTreeError("integer", "a non-negative integer", repr(value), value)
        elements = [self.provider.number_glyph(digit, self.fontset) for digit in str(value)]
        return horizontal_layout(elements)

    def _symbol(self, node: Any, parent: ExpressionNode) -> GlyphRef:
        """Resolve a (char, command) symbol node used as a child argument."""
        if not isinstance(node, ExpressionNode) or node.kind is not Kind.SYMBOL:
            raise MalformedTreeError(parent.head, "a symbol node", repr(node), parent)
        return self._layout_symbol(node)

    # Construct rules

    def _layout_group(self, node: ExpressionNode) -> Group:
        return horizontal_layout([self.layout(arg) for arg in node.args])

    def _layout_decorated(self, node: ExpressionNode) -> Group:
        core, sub, sup = (self.layout(arg) for arg in node.args)
        core_width = core.advance

        return Group(
            [core, sub, sup],
            [
                (0, 0),
                (core_width, SUB_OFFSET),
                (core_width, core.xheight - 0.5 * sup.descender),
            ],
            [1, SHRINK, SHRINK],
        )

    def _layout_integral(self, node: ExpressionNode) -> Group:
        # The two-piece glyph stands in for the named integral symbol
        self._symbol(node.args[0], node)
        sub, sup = (self.layout(arg) for arg in node.args[1:])

        topint = self.provider.symbol_glyph("⌠", "\\inttop", self.fontset)
        botint = self.provider.symbol_glyph("⌡", "\\intbottom", self.fontset)

        top = Group(
            [topint, sup],
            [
                (0, 0),
                (topint.ink_width + INTEGRAL_PAD, topint.top_ink_bound - sup.xheight),
            ],
            [1, SHRINK],
        )
        bottom = Group(
            [botint, sub],
            [
                (0, 0),
                (botint.ink_width + INTEGRAL_PAD, botint.bottom_ink_bound),
            ],
            [1, SHRINK],
        )

        # Both pieces start their ink at x = 0 and meet at half the x-height
        axis = self.provider.xheight(self.fontset) / 2
        return Group(
            [top, bottom],
            [
                (-topint.left_ink_bound, axis - topint.bottom_ink_bound),
                (-botint.left_ink_bound, axis - botint.top_ink_bound),
            ],
            [1, 1],
        )

    def _layout_underover(self, node: ExpressionNode) -> Group:
        core, sub, sup = (self.layout(arg) for arg in node.args)

        mid = core.hmid
        dxsub = mid - sub.hmid * SHRINK
        dxsup = mid - sup.hmid * SHRINK

        under_offset = core.bottom_ink_bound - (sub.ascender - sub.xheight / 2) * SHRINK
        over_offset = core.top_ink_bound - sup.descender

        # The leftmost element must have x = 0
        x0 = -min(0, dxsub, dxsup)

        return Group(
            [core, sub, sup],
            [
                (x0, 0),
                (x0 + dxsub, under_offset),
                (x0 + dxsup, over_offset),
            ],
            [1, SHRINK, SHRINK],
        )

    def _layout_function(self, node: ExpressionNode) -> Group:
        name = node.args[0]
        if not isinstance(name, str) or not name:
            raise MalformedTreeError(node.head, "a non-empty name", repr(name), node)
        return horizontal_layout([self.provider.function_glyph(c, self.fontset) for c in name])

    def _layout_space(self, node: ExpressionNode) -> Space:
        width = node.args[0]
        if isinstance(width, bool) or not isinstance(width, Real) or width < 0:
            raise MalformedTreeError(node.head, "a non-negative width", repr(width), node)
        return Space(float(width))

    def _layout_spaced_symbol(self, node: ExpressionNode) -> Group:
        sym = self._symbol(node.args[0], node)
        return horizontal_layout([Space(SYMBOL_PAD), sym, Space(SYMBOL_PAD)])

    def _layout_delimited(self, node: ExpressionNode) -> Group:
        left, content, right = elements = [self.layout(arg) for arg in node.args]

        height = content.ink_height
        scales = [_delimiter_scale(left, height), 1.0, _delimiter_scale(right, height)]
        row = horizontal_layout(elements, scales)

        # Each scaled delimiter's bottom ink bound sits on the content's
        ys = [
            content.bottom_ink_bound - scales[0] * left.bottom_ink_bound,
            0.0,
            content.bottom_ink_bound - scales[2] * right.bottom_ink_bound,
        ]
        return Group(elements, np.column_stack([row.positions[:, 0], ys]), scales)

    def _layout_accent(self, node: ExpressionNode, wide: bool = False) -> Group:
        accent = self._symbol(node.args[0], node)
        core = self.layout(node.args[1])

        scale = 1.0
        if wide and accent.ink_width > 0:
            scale = max(1.0, core.ink_width / accent.ink_width)

        gap = self.provider.xheight(self.fontset) / 4
        dx = core.hmid - scale * accent.hmid
        dy = core.top_ink_bound + gap - scale * accent.bottom_ink_bound

        # The leftmost element must have x = 0
        x0 = -min(0, dx)

        return Group([core, accent], [(x0, 0), (x0 + dx, dy)], [1, scale])

    def _layout_wide_accent(self, node: ExpressionNode) -> Group:
        return self._layout_accent(node, wide=True)

    def _layout_font(self, node: ExpressionNode) -> LayoutElement:
        raise UnsupportedConstructError(
            node.head, node, "switching fonts inside an expression is not supported"
        )

    def _layout_frac(self, node: ExpressionNode) -> Group:
        numerator = self.layout(node.args[0])
        denominator = self.layout(node.args[1])

        # extend fraction line by half an xheight
        xh = self.provider.xheight(self.fontset)
        w = max(numerator.ink_width, denominator.ink_width) + xh / 2

        lw = self.provider.thickness(self.fontset)
        line = HLine(w, lw)
        y0 = xh / 2 - lw / 2

        # horizontal center align for numerator and denominator
        x1 = (w - numerator.ink_width) / 2 - numerator.left_ink_bound
        x2 = (w - denominator.ink_width) / 2 - denominator.left_ink_bound

        ytop = y0 + lw - numerator.bottom_ink_bound
        ybottom = y0 - denominator.top_ink_bound

        return Group(
            [line, numerator, denominator],
            [(0, y0), (x1, ytop), (x2, ybottom)],
            [1, 1, 1],
        )

    def _layout_sqrt(self, node: ExpressionNode) -> Group:
        content = self.layout(node.args[0])
        sqrt = self.provider.symbol_glyph("√", "\\sqrt", self.fontset)

        h = content.ink_height
        ypad = SQRT_RELPAD * h
        h += 2 * ypad

        if h > sqrt.ink_height:
            logger.debug("Content of height %.3f needs the tall radical", h)
            sqrt = self.provider.symbol_glyph("⎷", "\\sqrtbottom", self.fontset)

        h = max(sqrt.ink_height, h)

        # The root symbol must be manually placed
        y0 = content.bottom_ink_bound - sqrt.bottom_ink_bound - ypad / 2
        y = y0 + sqrt.bottom_ink_bound + h
        xpad = sqrt.advance - sqrt.ink_width
        w = content.ink_width + 2 * xpad

        lw = self.provider.sqrt_thickness(self.fontset)
        hline = HLine(w, lw)
        vline = VLine(sqrt.ink_height - h, lw)

        return Group(
            [sqrt, hline, vline, content],
            [
                (0, y0),
                (sqrt.ink_width - lw / 2, y - lw / 2),
                (sqrt.ink_width - lw / 2, y),
                (sqrt.advance, 0),
            ],
            [1, 1, 1, 1],
        )

    def _layout_symbol(self, node: ExpressionNode) -> GlyphRef:
        char, command = node.args
        if not isinstance(char, str) or not isinstance(command, str):
            raise MalformedTreeError(
                node.head, "a character and a command name", f"{char!r}, {command!r}", node
            )
        return self.provider.symbol_glyph(char, command, self.fontset)


def _delimiter_scale(delimiter: LayoutElement, height: float) -> float:
    """Scale that stretches a delimiter to the content height, never shrinking it."""
    if delimiter.ink_height <= 0:
        return 1.0
    return max(1.0, height / delimiter.ink_height)


_RULES: dict[Kind, Callable[[LayoutEngine, ExpressionNode], LayoutElement]] = {
    Kind.GROUP: LayoutEngine._layout_group,
    Kind.DECORATED: LayoutEngine._layout_decorated,
    Kind.INTEGRAL: LayoutEngine._layout_integral,
    Kind.UNDEROVER: LayoutEngine._layout_underover,
    Kind.FUNCTION: LayoutEngine._layout_function,
    Kind.SPACE: LayoutEngine._layout_space,
    Kind.SPACED_SYMBOL: LayoutEngine._layout_spaced_symbol,
    Kind.DELIMITED: LayoutEngine._layout_delimited,
    Kind.ACCENT: LayoutEngine._layout_accent,
    Kind.WIDE_ACCENT: LayoutEngine._layout_wide_accent,
    Kind.FONT: LayoutEngine._layout_font,
    Kind.FRAC: LayoutEngine._layout_frac,
    Kind.SQRT: LayoutEngine._layout_sqrt,
    Kind.SYMBOL: LayoutEngine._layout_symbol,
}


def layout(
    node: Expression | LayoutElement,
    provider: FontMetricsProvider,
    fontset: str = "default",
) -> LayoutElement:
    """Lay out an expression with the given provider and font set."""
    return LayoutEngine(provider, fontset).layout(node)
