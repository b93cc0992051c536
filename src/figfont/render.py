from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from .debug_log import debug_log
from .font import Font, Glyph, GlyphLookupError
from .layout import LayoutMode
from .rules import Rules


class Direction(IntEnum):
    """Print direction ids from the font header."""

    LEFT_TO_RIGHT = 0
    RIGHT_TO_LEFT = 1


def direction_from_value(value: object) -> Direction:
    try:
        return Direction(int(value))  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return Direction.LEFT_TO_RIGHT


class CompositionError(ValueError):
    def __init__(self, char_a: str, char_b: str, hardblank: str) -> None:
        self.char_a = char_a
        self.char_b = char_b
        self.hardblank = hardblank
        super().__init__(f"no smushing rule merges {char_a!r} with {char_b!r} (hardblank {hardblank!r})")


def _trailing_spaces(row: str) -> int:
    return len(row) - len(row.rstrip(" "))


def _leading_spaces(row: str) -> int:
    return len(row) - len(row.lstrip(" "))


def _row_overlay(rules: Rules, hardblank: str, row_a: str, row_b: str) -> int:
    empty_a = _trailing_spaces(row_a)
    empty_b = _leading_spaces(row_b)
    amount = empty_a + empty_b
    if empty_a < len(row_a) and empty_b < len(row_b):
        char_a = row_a[len(row_a) - empty_a - 1]
        char_b = row_b[empty_b]
        if rules.smushes_horizontal(char_a, char_b, hardblank):
            amount += 1
    return amount


def overlay_amount(rules: Rules, hardblank: str, rows: Sequence[str], glyph: Glyph) -> int:
    """Columns shared between the accumulated rows and the next glyph."""
    if rules.horizontal_layout is LayoutMode.FULL_WIDTH:
        return 0
    if not rows or not glyph:
        return 0
    amount = min(_row_overlay(rules, hardblank, row_a, row_b) for row_a, row_b in zip(rows, glyph))
    limit = min(min(len(row) for row in rows), min(len(row) for row in glyph))
    return max(0, min(amount, limit))


def merge_glyph(rules: Rules, hardblank: str, rows: Sequence[str], glyph: Glyph, overlay: int) -> list[str]:
    out: list[str] = []
    for row_a, row_b in zip(rows, glyph):
        if overlay <= 0:
            out.append(row_a + row_b)
            continue
        split = len(row_a) - overlay
        merged: list[str] = []
        for char_a, char_b in zip(row_a[split:], row_b[:overlay]):
            char = rules.smush_horizontal(char_a, char_b, hardblank)
            if char is None:
                raise CompositionError(char_a, char_b, hardblank)
            merged.append(char)
        out.append(row_a[:split] + "".join(merged) + row_b[overlay:])
    return out


def render_line(font: Font, text: str) -> list[str]:
    rows = [""] * font.height
    for char in text:
        glyph = font.glyph(ord(char))
        overlay = overlay_amount(font.rules, font.hardblank, rows, glyph)
        rows = merge_glyph(font.rules, font.hardblank, rows, glyph, overlay)
    return rows


def render_rows(font: Font, message: str, direction: Direction | None = None) -> list[str]:
    """Compose `message` into raw banner rows, hardblanks left in place.

    Each `\\n`-separated line becomes its own block of `font.height` rows.
    """
    if direction is None:
        direction = direction_from_value(font.header.print_direction)
    rows: list[str] = []
    for line in message.replace("\r", "").split("\n"):
        if direction is Direction.RIGHT_TO_LEFT:
            line = line[::-1]
        rows.extend(render_line(font, line))
    return rows


def render(font: Font, message: str, direction: Direction | None = None) -> str:
    if direction is None:
        direction = direction_from_value(font.header.print_direction)
    try:
        rows = render_rows(font, message, direction)
    except (GlyphLookupError, CompositionError) as exc:
        debug_log("render_error", font=font.name, kind=type(exc).__name__, detail=exc)
        raise
    banner = "\n".join(row.replace(font.hardblank, " ") for row in rows)
    debug_log(
        "render",
        font=font.name,
        chars=len(message),
        direction=direction.name.lower(),
        width=max((len(row) for row in rows), default=0),
    )
    return banner


__all__ = [
    "CompositionError",
    "Direction",
    "GlyphLookupError",
    "direction_from_value",
    "merge_glyph",
    "overlay_amount",
    "render",
    "render_line",
    "render_rows",
]
