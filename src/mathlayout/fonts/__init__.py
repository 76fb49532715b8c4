"""Font metrics: provider protocol, font set tables and their loader."""

from .provider import FontMetricsProvider
from .fontset import FontSet
from .loader import FontSetLoader
from .table import TableFontProvider

__all__ = ["FontMetricsProvider", "FontSet", "FontSetLoader", "TableFontProvider"]
