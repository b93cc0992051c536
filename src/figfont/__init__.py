from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("figfont")
except PackageNotFoundError:  # pragma: no cover
    # Allow running from source (e.g. `PYTHONPATH=src`) without installed package metadata.
    __version__ = "0.0.0+dev"

from .font import Font, FontParseError, GlyphLookupError, load_font, parse_font
from .header import FontHeader, HeaderParseError, parse_header
from .layout import LayoutMode, SmushingRule
from .render import CompositionError, Direction, render, render_rows
from .rules import Rules, decode_layout

load = load_font
parse = parse_font

__all__ = [
    "CompositionError",
    "Direction",
    "Font",
    "FontHeader",
    "FontParseError",
    "GlyphLookupError",
    "HeaderParseError",
    "LayoutMode",
    "Rules",
    "SmushingRule",
    "decode_layout",
    "load",
    "load_font",
    "parse",
    "parse_font",
    "parse_header",
    "render",
    "render_rows",
]
