"""Expression trees: the input of the layout engine."""

from .node import ARITY, Expression, ExpressionNode, Kind, expr
from .loader import ExpressionLoader

__all__ = ["ARITY", "Expression", "ExpressionNode", "Kind", "expr", "ExpressionLoader"]
