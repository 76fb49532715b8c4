"""Font metrics provider protocol."""

from typing import Protocol, runtime_checkable

from ..core.elements import GlyphRef


@runtime_checkable
class FontMetricsProvider(Protocol):
    """Protocol for glyph and metric lookup under a named font set.

    Any class with these methods can drive the layout engine. Lookups
    raise GlyphNotFoundError when a character or command cannot be
    resolved; implementations that memoize must make their caches safe
    for concurrent readers.
    """

    def metrics(self, glyph_or_command: str, fontset: str) -> GlyphRef:
        """Resolve a character, or a command starting with a backslash."""
        ...

    def symbol_glyph(self, char: str, command: str, fontset: str) -> GlyphRef:
        """Glyph for a symbol given by its character and command name."""
        ...

    def function_glyph(self, char: str, fontset: str) -> GlyphRef:
        """Upright glyph used to spell function names (sin, log, ...)."""
        ...

    def number_glyph(self, char: str, fontset: str) -> GlyphRef:
        """Glyph for a digit."""
        ...

    def math_glyph(self, char: str, fontset: str) -> GlyphRef:
        """Glyph for a variable (math italic)."""
        ...

    def xheight(self, fontset: str) -> float:
        """x-height of the font set's math face."""
        ...

    def thickness(self, fontset: str) -> float:
        """Thickness of fraction rules."""
        ...

    def sqrt_thickness(self, fontset: str) -> float:
        """Thickness of radical rules."""
        ...
