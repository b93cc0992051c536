from __future__ import annotations

import sys
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

import pytest


def pytest_configure(config: pytest.Config) -> None:
    # Ensure the local `src/` tree wins over any other editable install that may exist.
    src_dir = Path(__file__).resolve().parents[1] / "src"
    src_str = str(src_dir)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


FontTextBuilder = Callable[..., str]


def _build_font_text(
    glyphs: Mapping[str, Sequence[str]],
    *,
    height: int,
    hardblank: str = "$",
    old_layout: int = -1,
    full_layout: int | None = None,
    print_direction: int | None = None,
    comments: Sequence[str] = (),
    end_mark: str = "@",
) -> str:
    """Build FIGfont text defining glyphs from code 32 up to the highest char in `glyphs`.

    Codes in between that are not given get a one-column hardblank glyph.
    """
    from figfont.font import REQUIRED_CODES

    fields = [f"flf2a{hardblank}", str(height), str(height), "16", str(old_layout), str(len(comments))]
    if print_direction is not None or full_layout is not None:
        fields.append(str(print_direction or 0))
    if full_layout is not None:
        fields.append(str(full_layout))
    lines = [" ".join(fields), *comments]

    last_code = max(ord(char) for char in glyphs)
    for code in REQUIRED_CODES:
        rows = glyphs.get(chr(code)) or [hardblank] * height
        assert len(rows) == height, f"glyph {chr(code)!r} must have {height} rows"
        for idx, row in enumerate(rows):
            mark = end_mark * 2 if idx == height - 1 else end_mark
            lines.append(row + mark)
        if code == last_code:
            break
    return "\n".join(lines) + "\n"


@pytest.fixture
def font_text() -> FontTextBuilder:
    return _build_font_text


STANDARD_GLYPHS: dict[str, list[str]] = {
    " ": ["$", "$", "$", "$", "$", "$"],
    "H": [" _   _ ", "| | | |", "| |_| |", "|  _  |", "|_| |_|", "       "],
    "I": [" ___ ", "|_ _|", " | | ", " | | ", "|___|", "     "],
}


@pytest.fixture
def standard_text(font_text: FontTextBuilder) -> str:
    return font_text(
        STANDARD_GLYPHS,
        height=6,
        old_layout=15,
        full_layout=24463,
        comments=["Standard by Glenn Chappell & Ian Chai", "excerpt"],
    )


@pytest.fixture
def font_dir(tmp_path: Path, standard_text: str) -> Path:
    root = tmp_path / "fonts"
    root.mkdir()
    (root / "standard.flf").write_bytes(standard_text.encode("latin-1"))
    return root
