"""Expression tree nodes produced by a math markup parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class Kind(Enum):
    """Construct kinds an ExpressionNode can be tagged with."""

    GROUP = "group"
    DECORATED = "decorated"
    INTEGRAL = "integral"
    UNDEROVER = "underover"
    FUNCTION = "function"
    SPACE = "space"
    SPACED_SYMBOL = "spaced_symbol"
    DELIMITED = "delimited"
    ACCENT = "accent"
    WIDE_ACCENT = "wide_accent"
    FONT = "font"
    FRAC = "frac"
    SQRT = "sqrt"
    SYMBOL = "symbol"


# Number of arguments each kind carries; None means any number
ARITY: dict[Kind, int | None] = {
    Kind.GROUP: None,
    Kind.DECORATED: 3,       # core, sub, super
    Kind.INTEGRAL: 3,        # integral symbol, sub, super
    Kind.UNDEROVER: 3,       # core, under, over
    Kind.FUNCTION: 1,        # name
    Kind.SPACE: 1,           # width
    Kind.SPACED_SYMBOL: 1,   # symbol node
    Kind.DELIMITED: 3,       # left, content, right
    Kind.ACCENT: 2,          # accent symbol, core
    Kind.WIDE_ACCENT: 2,     # accent symbol, core
    Kind.FONT: 2,            # font name, content
    Kind.FRAC: 2,            # numerator, denominator
    Kind.SQRT: 1,            # content
    Kind.SYMBOL: 2,          # char, command
}


@dataclass(frozen=True)
class ExpressionNode:
    """An immutable tagged node of a parsed expression.

    Children are other ExpressionNodes or literals: a one-character string
    (literal char), an int (literal integer), None (empty), a number for
    space widths, or a name string for functions and fonts.

    The head is kept as a plain string so that trees coming from any parser
    can be represented; unknown heads are rejected at layout time.

    Example:
        # x^2
        ExpressionNode("decorated", ("x", None, 2))
    """

    head: str
    args: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.head, Kind):
            object.__setattr__(self, "head", self.head.value)
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    @property
    def kind(self) -> Kind | None:
        """The construct kind, or None when the head is not recognised."""
        try:
            return Kind(self.head)
        except ValueError:
            return None

    def __repr__(self) -> str:
        args = ", ".join(repr(arg) for arg in self.args)
        return f"{self.head}({args})"


def expr(head: Kind | str, *args: Any) -> ExpressionNode:
    """Shorthand constructor: expr("frac", "x", 2)."""
    return ExpressionNode(head, args)


Expression = Union[ExpressionNode, str, int, None]
