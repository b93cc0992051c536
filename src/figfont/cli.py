from __future__ import annotations

from pathlib import Path

import msgspec
import typer

from .debug_log import close_debug_log, init_debug_log
from .font import Font, FontParseError, GlyphLookupError, load_font
from .header import HeaderParseError
from .render import CompositionError, Direction, render
from .store import FontNotFoundError, FontStore, default_font_store


app = typer.Typer(add_completion=False)

DEFAULT_FONT = "standard"

_DIRECTIONS: dict[str, Direction | None] = {
    "auto": None,
    "ltr": Direction.LEFT_TO_RIGHT,
    "rtl": Direction.RIGHT_TO_LEFT,
}


def _store(font_dirs: list[Path] | None) -> FontStore:
    store = default_font_store()
    if font_dirs:
        store = store.with_dirs(font_dirs)
    return store


def _load(name: str, store: FontStore) -> Font:
    try:
        return load_font(name, store)
    except (FontNotFoundError, FontParseError, HeaderParseError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


def _font_info(font: Font) -> dict[str, object]:
    rules = font.rules
    return {
        "name": font.name,
        "header": font.header,
        "horizontal_layout": rules.horizontal_layout.value,
        "vertical_layout": rules.vertical_layout.value,
        "horizontal_rules": [rule.label for rule in rules.horizontal_rules],
        "vertical_rules": [rule.label for rule in rules.vertical_rules],
        "glyph_count": len(font.glyphs),
        "comments": font.comments,
    }


@app.command("render")
def cmd_render(
    message: str = typer.Argument(..., help="text to render"),
    font_name: str = typer.Option(DEFAULT_FONT, "--font", "-f", help="font name or path to a .flf file"),
    font_dirs: list[Path] | None = typer.Option(None, "--font-dir", help="extra font directory (repeatable)"),
    direction: str = typer.Option("auto", "--direction", help="auto|ltr|rtl"),
    debug_log_path: Path | None = typer.Option(None, "--debug-log", help="append trace events to this file"),
) -> None:
    """Render MESSAGE as a FIGlet banner."""
    if direction not in _DIRECTIONS:
        typer.echo(f"Invalid direction: {direction!r}. Choose from: {', '.join(_DIRECTIONS)}", err=True)
        raise typer.Exit(code=1)
    if debug_log_path is not None:
        init_debug_log(debug_log_path, command="render")
    try:
        font = _load(font_name, _store(font_dirs))
        try:
            banner = render(font, message, _DIRECTIONS[direction])
        except (GlyphLookupError, CompositionError) as exc:
            typer.echo(str(exc), err=True)
            raise typer.Exit(code=1) from exc
        typer.echo(banner)
    finally:
        if debug_log_path is not None:
            close_debug_log()


@app.command("info")
def cmd_info(
    font_name: str = typer.Argument(DEFAULT_FONT, help="font name or path to a .flf file"),
    font_dirs: list[Path] | None = typer.Option(None, "--font-dir", help="extra font directory (repeatable)"),
    as_json: bool = typer.Option(False, "--json", help="emit JSON"),
) -> None:
    """Show header fields and decoded layout rules for a font."""
    font = _load(font_name, _store(font_dirs))
    info = _font_info(font)
    if as_json:
        typer.echo(msgspec.json.format(msgspec.json.encode(info), indent=2).decode("utf-8"))
        return
    header = font.header
    typer.echo(f"Font {font.name} ({info['glyph_count']} glyphs)")
    typer.echo(
        f"hardblank={header.hard_blank!r} height={header.height} baseline={header.baseline} "
        f"max_length={header.max_length} old_layout={header.old_layout} full_layout={header.full_layout} "
        f"print_direction={header.print_direction} codetag_count={header.codetag_count}"
    )
    typer.echo(f"horizontal: {info['horizontal_layout']} [{', '.join(info['horizontal_rules'])}]")  # type: ignore[arg-type]
    typer.echo(f"vertical: {info['vertical_layout']} [{', '.join(info['vertical_rules'])}]")  # type: ignore[arg-type]
    if font.comments:
        typer.echo("")
        typer.echo(font.comments)


@app.command("list")
def cmd_list(
    font_dirs: list[Path] | None = typer.Option(None, "--font-dir", help="extra font directory (repeatable)"),
) -> None:
    """List fonts found in the search directories."""
    store = _store(font_dirs)
    names = store.available()
    if not names:
        searched = ", ".join(str(d) for d in store.dirs)
        typer.echo(f"no fonts found (searched: {searched})", err=True)
        raise typer.Exit(code=1)
    for name in names:
        typer.echo(name)


def main(argv: list[str] | None = None) -> None:
    app(prog_name="figfont", args=argv)


if __name__ == "__main__":
    main()
