from __future__ import annotations

"""
FIGfont loading.

A font file is a header line, `comment_lines` lines of free-form text, then
one block of `height` rows per character in the fixed FIGfont order
(32..125 followed by the seven Deutsch chars). Every glyph row ends
with an end-mark char (usually `@`, doubled on the last row of a glyph) that
is not part of the glyph.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from .debug_log import debug_log
from .header import FontHeader, HeaderParseError, parse_header
from .rules import Rules, decode_layout
from .store import FontStore, default_font_store

Glyph = tuple[str, ...]

DEUTSCH_CODES: tuple[int, ...] = (196, 214, 220, 228, 246, 252, 223)
REQUIRED_CODES: tuple[int, ...] = tuple(range(32, 126)) + DEUTSCH_CODES


class FontParseError(ValueError):
    pass


class GlyphLookupError(LookupError):
    def __init__(self, font_name: str, code: int) -> None:
        self.font_name = font_name
        self.code = int(code)
        self.char = chr(self.code)
        super().__init__(f"font {font_name!r} has no glyph for {self.char!r} (code {self.code})")


@dataclass(frozen=True, slots=True)
class Font:
    name: str
    header: FontHeader
    comments: str
    glyphs: Mapping[int, Glyph]
    rules: Rules

    @property
    def hardblank(self) -> str:
        return self.header.hard_blank

    @property
    def height(self) -> int:
        return self.header.height

    def glyph(self, code: int) -> Glyph:
        glyph = self.glyphs.get(int(code))
        if glyph is None:
            raise GlyphLookupError(self.name, code)
        return glyph

    def has_glyph(self, code: int) -> bool:
        return int(code) in self.glyphs


def strip_end_mark(row: str) -> str:
    if not row:
        return row
    mark = row[-1]
    row = row[:-1]
    if row.endswith(mark):
        row = row[:-1]
    return row


def split_font_lines(text: str) -> list[str]:
    # Only LF (optionally CRLF) ends a line; latin-1 text may carry \x85, \x0c, \x1c..\x1e in rows.
    lines = [line.rstrip("\r") for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def build_glyph_table(lines: Sequence[str], height: int, codes: Iterable[int] = REQUIRED_CODES) -> dict[int, Glyph]:
    """Slice glyph rows into `height`-row blocks, one per code, in order.

    Codes past the last complete block are left out of the table.
    """
    if height <= 0:
        raise FontParseError(f"glyph height must be positive: {height}")
    glyphs: dict[int, Glyph] = {}
    offset = 0
    for code in codes:
        block = lines[offset : offset + height]
        if len(block) < height:
            break
        glyphs[int(code)] = tuple(strip_end_mark(row) for row in block)
        offset += height
    return glyphs


def parse_font(name: str, text: str) -> Font:
    lines = split_font_lines(text)
    if not lines:
        raise FontParseError(f"font {name!r} is empty")
    header = parse_header(lines[0])
    comment_end = 1 + header.comment_lines
    if comment_end > len(lines):
        raise FontParseError(
            f"font {name!r} declares {header.comment_lines} comment lines but has {len(lines) - 1} lines after the header"
        )
    comments = "\n".join(lines[1:comment_end])
    glyphs = build_glyph_table(lines[comment_end:], header.height)
    font = Font(
        name=name,
        header=header,
        comments=comments,
        glyphs=glyphs,
        rules=decode_layout(header.full_layout, header.old_layout),
    )
    debug_log(
        "font_parse",
        name=name,
        comment_lines=header.comment_lines,
        glyphs=len(glyphs),
        horizontal_layout=font.rules.horizontal_layout,
    )
    return font


def load_font(name: str, store: FontStore | None = None) -> Font:
    if store is None:
        store = default_font_store()
    path = store.find(name)
    font = parse_font(path.stem, store.read_path(path))
    debug_log("font_load", name=font.name, path=path, height=font.height, glyphs=len(font.glyphs))
    return font


__all__ = [
    "DEUTSCH_CODES",
    "Font",
    "FontParseError",
    "Glyph",
    "GlyphLookupError",
    "HeaderParseError",
    "REQUIRED_CODES",
    "build_glyph_table",
    "load_font",
    "parse_font",
    "split_font_lines",
    "strip_end_mark",
]
