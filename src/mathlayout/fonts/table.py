"""Font metrics provider backed by in-memory font set tables."""

from __future__ import annotations

import logging
import threading

from ..core.elements import GlyphRef
from ..errors import FontSetError, GlyphNotFoundError
from .fontset import FontSet
from .loader import FontSetLoader

logger = logging.getLogger(__name__)


class TableFontProvider:
    """Serves glyph metrics from FontSet tables.

    Font sets can be registered directly or are loaded on first use through
    a FontSetLoader. After loading, every lookup is a read of immutable
    tables, so one provider can be shared between threads.

    Example:
        provider = TableFontProvider()
        plus = provider.symbol_glyph("+", "\\\\plus", "default")
    """

    def __init__(self, loader: FontSetLoader | None = None, fontsets: list[FontSet] | None = None) -> None:
        """Initialize the provider.

        Args:
            loader: Loader used to resolve unknown font set names. Defaults to a
                    loader over the bundled font sets.
            fontsets: Font sets to register up front
        """
        self._loader = loader or FontSetLoader()
        self._fontsets: dict[str, FontSet] = {}
        self._lock = threading.Lock()
        for fontset in fontsets or []:
            self.register(fontset)

    def register(self, fontset: FontSet) -> FontSet:
        """Make a font set available under its name."""
        with self._lock:
            self._fontsets[fontset.name] = fontset
        return fontset

    def fontset(self, name: str) -> FontSet:
        """Get a registered font set, loading it by name if needed.

        Raises:
            FontSetError: If the font set is neither registered nor loadable
        """
        with self._lock:
            fontset = self._fontsets.get(name)
            if fontset is None:
                try:
                    fontset = self._loader.load(name)
                except FileNotFoundError as e:
                    raise FontSetError(f"Unknown font set '{name}'") from e
                self._fontsets[name] = fontset
            return fontset

    @property
    def names(self) -> list[str]:
        """Names of the font sets registered so far."""
        return sorted(self._fontsets)

    def metrics(self, glyph_or_command: str, fontset: str) -> GlyphRef:
        """Resolve a symbol command (leading backslash) or a math character."""
        if glyph_or_command.startswith("\\"):
            return self.symbol_glyph(None, glyph_or_command, fontset)
        return self.math_glyph(glyph_or_command, fontset)

    def symbol_glyph(self, char: str | None, command: str | None, fontset: str) -> GlyphRef:
        glyph = self.fontset(fontset).symbol(char, command)
        if glyph is None:
            raise GlyphNotFoundError(char, command, fontset)
        return glyph

    def function_glyph(self, char: str, fontset: str) -> GlyphRef:
        return self._face_glyph("function", char, fontset)

    def number_glyph(self, char: str, fontset: str) -> GlyphRef:
        return self._face_glyph("number", char, fontset)

    def math_glyph(self, char: str, fontset: str) -> GlyphRef:
        return self._face_glyph("math", char, fontset)

    def _face_glyph(self, face: str, char: str, fontset: str) -> GlyphRef:
        glyph = self.fontset(fontset).glyph(face, char)
        if glyph is None:
            raise GlyphNotFoundError(char, None, fontset)
        return glyph

    def xheight(self, fontset: str) -> float:
        return self.fontset(fontset).xheight

    def thickness(self, fontset: str) -> float:
        return self.fontset(fontset).thickness

    def sqrt_thickness(self, fontset: str) -> float:
        return self.fontset(fontset).sqrt_thickness
