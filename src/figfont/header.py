from __future__ import annotations

from dataclasses import dataclass

_MANDATORY_FIELDS = ("height", "baseline", "max_length", "old_layout", "comment_lines")


class HeaderParseError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class FontHeader:
    hard_blank: str
    height: int
    baseline: int
    max_length: int
    old_layout: int
    comment_lines: int
    print_direction: int = 0
    full_layout: int | None = None
    codetag_count: int | None = None


def _parse_int(field: str, token: str | None) -> int:
    if token is None:
        raise HeaderParseError(f"font header missing field: {field}")
    try:
        return int(token)
    except ValueError as exc:
        raise HeaderParseError(f"font header field {field} is not numeric: {token!r}") from exc


def _parse_optional_int(token: str | None) -> int | None:
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def parse_header(line: str) -> FontHeader:
    """Parse the first line of a FIGfont.

    `<signature><hardblank> height baseline max_length old_layout comment_lines
    [print_direction] [full_layout] [codetag_count]`

    The last char of the first token is the hardblank; the signature itself is
    not checked. Trailing optional fields that fail to parse are dropped.
    """
    tokens = line.split()
    if not tokens:
        raise HeaderParseError("empty font header")
    signature = tokens[0]
    rest = tokens[1:]

    def _token(idx: int) -> str | None:
        return rest[idx] if idx < len(rest) else None

    values = {field: _parse_int(field, _token(idx)) for idx, field in enumerate(_MANDATORY_FIELDS)}
    if values["height"] <= 0:
        raise HeaderParseError(f"font header height must be positive: {values['height']}")
    for field in ("height", "baseline", "max_length", "comment_lines"):
        if values[field] < 0:
            raise HeaderParseError(f"font header field {field} must not be negative: {values[field]}")

    direction_token = _token(5)
    print_direction = 0 if direction_token is None else _parse_int("print_direction", direction_token)
    if print_direction < 0:
        raise HeaderParseError(f"font header field print_direction must not be negative: {print_direction}")
    codetag_count = _parse_optional_int(_token(7))
    if codetag_count is not None and codetag_count < 0:
        codetag_count = None

    return FontHeader(
        hard_blank=signature[-1],
        print_direction=print_direction,
        full_layout=_parse_optional_int(_token(6)),
        codetag_count=codetag_count,
        **values,
    )


__all__ = [
    "FontHeader",
    "HeaderParseError",
    "parse_header",
]
