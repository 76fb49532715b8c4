"""Error types raised while laying out math expressions."""

from __future__ import annotations

from typing import Any


class MathLayoutError(Exception):
    """Base class for all layout failures."""


class UnsupportedConstructError(MathLayoutError):
    """A construct kind has no layout rule.

    Attributes:
        kind: The offending construct kind (or Python type name for literals)
        node: The sub-expression that could not be laid out
    """

    def __init__(self, kind: str, node: Any = None, reason: str | None = None) -> None:
        self.kind = kind
        self.node = node
        message = f"Unsupported construct '{kind}'"
        if reason:
            message += f": {reason}"
        if node is not None:
            message += f" (in {node!r})"
        super().__init__(message)


class MalformedTreeError(MathLayoutError, ValueError):
    """A construct's children do not match what its kind requires.

    Attributes:
        kind: Construct kind being laid out
        expected: Description of the expected arity or child kind
        actual: Description of what was found
        node: The malformed sub-expression
    """

    def __init__(self, kind: str, expected: Any, actual: Any, node: Any = None) -> None:
        self.kind = kind
        self.expected = expected
        self.actual = actual
        self.node = node
        message = f"Malformed '{kind}': expected {expected}, got {actual}"
        if node is not None:
            message += f" (in {node!r})"
        super().__init__(message)


class GlyphNotFoundError(MathLayoutError, LookupError):
    """The font metrics provider cannot resolve a character or command."""

    def __init__(self, char: str | None, command: str | None, fontset: str) -> None:
        self.char = char
        self.command = command
        self.fontset = fontset
        what = " / ".join(repr(part) for part in (char, command) if part is not None)
        super().__init__(f"No glyph for {what} in fontset '{fontset}'")


class FontSetError(MathLayoutError, ValueError):
    """A fontset definition is invalid or unknown."""
