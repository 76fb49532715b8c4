"""Main entry point for mathlayout."""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from .core.elements import GlyphRef, HLine, Space, VLine
from .errors import MathLayoutError
from .expr import ExpressionLoader
from .flatten import bounding_box, flatten
from .fonts import FontSetLoader, TableFontProvider
from .layout import LayoutEngine

logger = logging.getLogger(__name__)


def _describe(leaf) -> str:
    """Short description of a placed leaf."""
    if isinstance(leaf, GlyphRef):
        return f"glyph  {leaf.char!r} ({leaf.font})"
    if isinstance(leaf, HLine):
        return f"hline  w={leaf.width:.3f} t={leaf.thickness:.3f}"
    if isinstance(leaf, VLine):
        return f"vline  h={leaf.height:.3f} t={leaf.thickness:.3f}"
    if isinstance(leaf, Space):
        return f"space  w={leaf.width:.3f}"
    return type(leaf).__name__


def _create_provider(fontset: str, fontset_dirs: list[str]) -> tuple[TableFontProvider, str]:
    """Build a provider and resolve the font set name to use.

    A font set given as a path to a YAML file is loaded and registered
    under its own name; anything else is looked up by name.
    """
    search_paths = [Path(d) for d in fontset_dirs]
    loader = FontSetLoader(search_paths + FontSetLoader().search_paths)
    provider = TableFontProvider(loader)

    path = Path(fontset)
    if path.suffix in (".yaml", ".yml") and path.exists():
        return provider, provider.register(loader.load_file(path)).name
    return provider, fontset


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="mathlayout - Lay out a math expression tree into positioned glyphs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "expression",
        metavar="EXPR",
        help="YAML file holding the expression tree",
    )
    parser.add_argument(
        "-f", "--fontset",
        default="default",
        help="Font set name or path to a font set YAML file (default: default)",
    )
    parser.add_argument(
        "--fontset-dir",
        metavar="DIR",
        action="append",
        default=[],
        help="Extra directory to search for font sets (repeatable)",
    )
    parser.add_argument(
        "--origin",
        metavar="X,Y",
        default="0,0",
        help="Absolute position of the expression origin (default: 0,0)",
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=1.0,
        help="Absolute scale of the expression (default: 1)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log construct dispatch and font loading",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Lay out an expression file and print its placements."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        origin = tuple(float(v) for v in args.origin.split(","))
        if len(origin) != 2:
            raise ValueError(args.origin)
    except ValueError:
        print(f"error: --origin expects X,Y, got {args.origin!r}", file=sys.stderr)
        return 2

    try:
        provider, fontset = _create_provider(args.fontset, args.fontset_dir)
        tree = ExpressionLoader().load(args.expression)
        element = LayoutEngine(provider, fontset).layout(tree)
    except (MathLayoutError, ValueError, OSError, yaml.YAMLError) as e:
        logger.debug("Layout failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    placements = flatten(element, origin, args.scale)

    print(f"mathlayout - {args.expression} ({fontset})")
    print("=" * 40)
    for placement in placements:
        x, y = placement.position
        print(f"{_describe(placement.leaf):<32} x={x:8.4f} y={y:8.4f} scale={placement.scale:.3f}")

    xmin, ymin, xmax, ymax = bounding_box(placements)
    print("=" * 40)
    print(f"{len(placements)} placements, advance {args.scale * element.advance:.4f}")
    print(f"ink box [{xmin:.4f}, {ymin:.4f}] - [{xmax:.4f}, {ymax:.4f}]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
