"""Load font sets from YAML configuration files."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any

import yaml

from ..core.elements import GlyphRef
from ..errors import FontSetError
from .fontset import FACES, FontSet

logger = logging.getLogger(__name__)


class FontSetLoader:
    """Loads font set definitions from YAML files.

    Ink boxes are given as [left, bottom, right, top] in em units. Every
    face (and the symbol table) carries the ascender and descender shared by
    its glyphs.

    YAML format:
    ```yaml
    name: default
    xheight: 0.43
    thickness: 0.04
    sqrt_thickness: 0.04
    faces:
      math:
        ascender: 0.78
        descender: -0.22
        glyphs:
          x: {advance: 0.57, ink: [0.03, -0.01, 0.55, 0.44]}
      number:
        ascender: 0.78
        descender: -0.22
        glyphs:
          "2": {advance: 0.5, ink: [0.05, 0.0, 0.45, 0.67]}
    symbols:
      ascender: 0.78
      descender: -0.22
      glyphs:
        '\\plus': {char: "+", advance: 0.78, ink: [0.06, -0.08, 0.72, 0.58]}
    ```
    """

    def __init__(self, search_paths: list[Path] | None = None) -> None:
        """Initialize loader with search paths.

        Args:
            search_paths: Directories to search for font set YAML files.
                         Defaults to the fontsets/ directory shipped with the package.
        """
        if search_paths is None:
            self.search_paths = [Path(__file__).parent.parent / "fontsets"]
        else:
            self.search_paths = [Path(p) for p in search_paths]

        self._cache: dict[str, FontSet] = {}
        self._lock = threading.Lock()

    def load(self, name: str) -> FontSet:
        """Load a font set by name.

        Searches for {name}.yaml in search paths.

        Args:
            name: Font set name (without .yaml extension)

        Returns:
            FontSet instance

        Raises:
            FileNotFoundError: If the font set YAML is not found
            FontSetError: If the YAML content is invalid
        """
        with self._lock:
            if name in self._cache:
                return self._cache[name]

            yaml_path = self._find_yaml(name)
            if yaml_path is None:
                raise FileNotFoundError(
                    f"Font set '{name}' not found in search paths: {self.search_paths}"
                )

            fontset = self.load_file(yaml_path)
            self._cache[name] = fontset
            return fontset

    def load_file(self, path: str | Path) -> FontSet:
        """Load a font set from an explicit YAML file path (not cached)."""
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)

        fontset = self.parse(data)
        logger.info("Loaded font set '%s' from %s (%d glyphs)", fontset.name, path, fontset.glyph_count)
        return fontset

    def load_string(self, yaml_string: str) -> FontSet:
        """Load a font set from a YAML string."""
        return self.parse(yaml.safe_load(yaml_string))

    def _find_yaml(self, name: str) -> Path | None:
        """Find YAML file for font set name."""
        for search_path in self.search_paths:
            yaml_path = search_path / f"{name}.yaml"
            if yaml_path.exists():
                return yaml_path
        return None

    def parse(self, data: dict[str, Any]) -> FontSet:
        """Parse a font set definition from YAML data."""
        if not isinstance(data, dict):
            raise FontSetError(f"Font set definition must be a mapping, got {type(data).__name__}")

        name = data.get("name", "unnamed")
        try:
            xheight = float(data["xheight"])
        except KeyError:
            raise FontSetError(f"Font set '{name}' has no xheight") from None
        thickness = float(data.get("thickness", xheight / 10))
        sqrt_thickness = float(data.get("sqrt_thickness", thickness))

        faces = {}
        for face_name, face_data in data.get("faces", {}).items():
            if face_name not in FACES:
                raise FontSetError(
                    f"Unknown face '{face_name}' in font set '{name}', expected one of {FACES}"
                )
            faces[face_name] = {
                str(char): self._parse_glyph(str(char), face_name, glyph, face_data, xheight)
                for char, glyph in face_data.get("glyphs", {}).items()
            }

        symbols = {}
        symbol_data = data.get("symbols", {})
        for command, glyph in symbol_data.get("glyphs", {}).items():
            if "char" not in glyph:
                raise FontSetError(f"Symbol '{command}' in font set '{name}' has no char")
            symbols[command] = self._parse_glyph(
                str(glyph["char"]), "symbol", glyph, symbol_data, xheight
            )

        return FontSet(
            name=name,
            xheight=xheight,
            thickness=thickness,
            sqrt_thickness=sqrt_thickness,
            faces=faces,
            symbols=symbols,
        )

    def _parse_glyph(
        self,
        char: str,
        face: str,
        glyph: dict[str, Any],
        face_data: dict[str, Any],
        xheight: float,
    ) -> GlyphRef:
        """Build a GlyphRef from a glyph entry and its face defaults."""
        try:
            left, bottom, right, top = (float(v) for v in glyph["ink"])
            advance = float(glyph["advance"])
        except (KeyError, TypeError, ValueError) as e:
            raise FontSetError(f"Invalid metrics for glyph {char!r} in face '{face}': {e}") from e

        if right < left or top < bottom:
            raise FontSetError(f"Inverted ink box for glyph {char!r} in face '{face}'")

        try:
            return GlyphRef(
                char=char,
                font=face,
                advance=advance,
                left_ink_bound=left,
                right_ink_bound=right,
                bottom_ink_bound=bottom,
                top_ink_bound=top,
                ascender=float(face_data.get("ascender", top)),
                descender=float(face_data.get("descender", bottom)),
                xheight=float(face_data.get("xheight", xheight)),
            )
        except ValueError as e:
            raise FontSetError(str(e)) from e

    def clear_cache(self) -> None:
        """Clear the font set cache."""
        with self._lock:
            self._cache.clear()
