from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from figfont.cli import app


def _isolate_store(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv("FIGFONT_PATH", raising=False)
    monkeypatch.setattr("figfont.store.user_font_dir", lambda: tmp_path / "user-fonts")


def test_render_command(monkeypatch, tmp_path: Path, font_dir: Path) -> None:
    _isolate_store(monkeypatch, tmp_path)
    runner = CliRunner()
    result = runner.invoke(app, ["render", "HI", "--font-dir", str(font_dir)])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines()[:2] == [" _   _ ___ ", "| | | |_ _|"]


def test_render_command_uses_env_font_path(monkeypatch, tmp_path: Path, font_dir: Path) -> None:
    _isolate_store(monkeypatch, tmp_path)
    monkeypatch.setenv("FIGFONT_PATH", str(font_dir))
    result = CliRunner().invoke(app, ["render", "I", "--font", "standard"])
    assert result.exit_code == 0, result.output
    assert "|_ _|" in result.output


def test_render_missing_glyph_exits_nonzero(monkeypatch, tmp_path: Path, font_dir: Path) -> None:
    _isolate_store(monkeypatch, tmp_path)
    result = CliRunner().invoke(app, ["render", "HIQ", "--font-dir", str(font_dir)])
    assert result.exit_code == 1
    assert "code 81" in result.output


def test_render_missing_font_exits_nonzero(monkeypatch, tmp_path: Path) -> None:
    _isolate_store(monkeypatch, tmp_path)
    result = CliRunner().invoke(app, ["render", "HI", "--font", "nope", "--font-dir", str(tmp_path)])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_render_rejects_unknown_direction(monkeypatch, tmp_path: Path, font_dir: Path) -> None:
    _isolate_store(monkeypatch, tmp_path)
    result = CliRunner().invoke(app, ["render", "HI", "--font-dir", str(font_dir), "--direction", "up"])
    assert result.exit_code == 1
    assert "Invalid direction" in result.output


def test_render_writes_debug_log(monkeypatch, tmp_path: Path, font_dir: Path) -> None:
    _isolate_store(monkeypatch, tmp_path)
    log_path = tmp_path / "logs" / "trace.log"
    result = CliRunner().invoke(
        app,
        ["render", "HI", "--font-dir", str(font_dir), "--debug-log", str(log_path)],
    )
    assert result.exit_code == 0, result.output
    events = [line.split()[1] for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert events == ["event=init", "event=font_parse", "event=font_load", "event=render"]


def test_info_json(monkeypatch, tmp_path: Path, font_dir: Path) -> None:
    _isolate_store(monkeypatch, tmp_path)
    result = CliRunner().invoke(app, ["info", "standard", "--font-dir", str(font_dir), "--json"])
    assert result.exit_code == 0, result.output
    info = json.loads(result.output)
    assert info["name"] == "standard"
    assert info["header"]["height"] == 6
    assert info["header"]["full_layout"] == 24463
    assert info["horizontal_layout"] == "controlled_smush"
    assert info["horizontal_rules"] == [
        "horizontal_opposite_pair",
        "horizontal_hierarchy",
        "horizontal_underscore",
        "horizontal_equal_char",
    ]
    assert info["glyph_count"] == ord("I") - 32 + 1


def test_info_text(monkeypatch, tmp_path: Path, font_dir: Path) -> None:
    _isolate_store(monkeypatch, tmp_path)
    result = CliRunner().invoke(app, ["info", "standard", "--font-dir", str(font_dir)])
    assert result.exit_code == 0, result.output
    assert "hardblank='$' height=6" in result.output
    assert "vertical: controlled_smush" in result.output
    assert "Standard by Glenn Chappell" in result.output


def test_list_fonts(monkeypatch, tmp_path: Path, font_dir: Path) -> None:
    _isolate_store(monkeypatch, tmp_path)
    result = CliRunner().invoke(app, ["list", "--font-dir", str(font_dir)])
    assert result.exit_code == 0, result.output
    assert result.output.split() == ["standard"]


def test_list_without_fonts(monkeypatch, tmp_path: Path) -> None:
    _isolate_store(monkeypatch, tmp_path)
    result = CliRunner().invoke(app, ["list"])
    assert result.exit_code == 1
    assert "no fonts found" in result.output


def test_bad_font_header_exits_cleanly(monkeypatch, tmp_path: Path) -> None:
    _isolate_store(monkeypatch, tmp_path)
    (tmp_path / "bad.flf").write_text("flf2a$ 1 x 1 -1 0\nA@@\n", encoding="latin-1")
    runner = CliRunner()
    for args in (["render", "A", "--font", "bad"], ["info", "bad"]):
        result = runner.invoke(app, [*args, "--font-dir", str(tmp_path)])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "baseline is not numeric" in result.output
