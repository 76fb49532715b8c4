"""YAML loader for expression trees."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .node import ExpressionNode, Expression

logger = logging.getLogger(__name__)


class ExpressionLoader:
    """Builds expression trees from YAML documents or nested lists.

    A list is a node: its first item is the construct kind and the rest are
    its arguments. Anything else is a literal and is kept as is.

    YAML format:
    ```yaml
    # x^2 / (1 + y)
    expression:
      - frac
      - [decorated, x, null, 2]
      - [delimited, [symbol, '(', '\\lparen'],
                    [group, 1, [spaced_symbol, [symbol, '+', '\\plus']], y],
                    [symbol, ')', '\\rparen']]
    ```

    A document that is a bare list (without the `expression` key) is
    accepted as well.
    """

    def load(self, path: str | Path) -> Expression:
        """Load an expression tree from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Root of the expression tree

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the document is not a valid expression
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)

        logger.debug("Loaded expression from %s", path)
        return self._parse_document(data)

    def load_string(self, yaml_string: str) -> Expression:
        """Load an expression tree from a YAML string."""
        data = yaml.safe_load(yaml_string)
        return self._parse_document(data)

    def _parse_document(self, data: Any) -> Expression:
        if isinstance(data, dict):
            if "expression" not in data:
                raise ValueError("Expression document needs an 'expression' key")
            data = data["expression"]
        return self.from_data(data)

    def from_data(self, data: Any) -> Expression:
        """Convert nested lists into ExpressionNodes.

        Args:
            data: A list `[kind, *args]` or a literal

        Returns:
            The corresponding expression
        """
        if isinstance(data, (list, tuple)):
            if not data:
                raise ValueError("Empty list is not an expression node")
            head, *args = data
            if not isinstance(head, str):
                raise ValueError(f"Expression node kind must be a string, got {head!r}")
            return ExpressionNode(head, tuple(self.from_data(arg) for arg in args))
        return data
