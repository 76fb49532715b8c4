"""Font set definitions: glyph tables and font-wide scalars."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from ..core.elements import GlyphRef


# Faces a font set may define; symbols are kept in their own table
FACES = ("math", "function", "number")


@dataclass(frozen=True)
class FontSet:
    """A named collection of glyph metrics.

    Attributes:
        name: Font set identifier
        xheight: x-height of the math face, the unit of most spacing rules
        thickness: Thickness of fraction rules
        sqrt_thickness: Thickness of the radical's horizontal and vertical rules
        faces: Per-face glyph tables, keyed by face name then character
        symbols: Symbol glyphs keyed by command name (e.g. "\\plus")
    """

    name: str
    xheight: float
    thickness: float
    sqrt_thickness: float
    faces: Mapping[str, Mapping[str, GlyphRef]] = field(default_factory=dict, repr=False)
    symbols: Mapping[str, GlyphRef] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        # Freeze the tables so glyphs handed out stay shared and read-only
        object.__setattr__(
            self,
            "faces",
            MappingProxyType({k: MappingProxyType(dict(v)) for k, v in self.faces.items()}),
        )
        object.__setattr__(self, "symbols", MappingProxyType(dict(self.symbols)))

    def glyph(self, face: str, char: str) -> GlyphRef | None:
        """Look up a character in one face."""
        table = self.faces.get(face)
        if table is None:
            return None
        return table.get(char)

    def symbol(self, char: str | None, command: str | None) -> GlyphRef | None:
        """Look up a symbol by command, falling back to its character."""
        if command is not None and command in self.symbols:
            return self.symbols[command]
        if char is not None:
            for glyph in self.symbols.values():
                if glyph.char == char:
                    return glyph
        return None

    @property
    def glyph_count(self) -> int:
        """Total number of glyphs in all tables."""
        return sum(len(table) for table in self.faces.values()) + len(self.symbols)
