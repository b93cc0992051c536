from __future__ import annotations

"""
Opt-in trace log for font loading and rendering.

One line per event: `<utc timestamp> event=<name> key=value ...` with keys
sorted. Nothing is written until `init_debug_log` points the log at a file.
"""

import datetime as dt
import os
from enum import Enum
from pathlib import Path
from threading import Lock


_TRACE_LOCK = Lock()
_TRACE_PATH: Path | None = None


def _format_value(value: object) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, Path):
        return value.as_posix()
    if isinstance(value, bool):
        return "true" if value else "false"
    text = str(value).replace("\n", "\\n")
    if not text or " " in text:
        return repr(text)
    return text


def _format_line(event: str, fields: dict[str, object]) -> str:
    timestamp = dt.datetime.now(dt.timezone.utc).isoformat(timespec="milliseconds")
    parts = [timestamp, f"event={str(event).strip()}"]
    parts.extend(f"{key}={_format_value(fields[key])}" for key in sorted(fields))
    return " ".join(parts)


def debug_log_path() -> Path | None:
    with _TRACE_LOCK:
        return _TRACE_PATH


def debug_log_enabled() -> bool:
    return debug_log_path() is not None


def init_debug_log(path: Path, *, command: str = "api") -> Path:
    from . import __version__

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with _TRACE_LOCK:
        global _TRACE_PATH
        _TRACE_PATH = path

    debug_log("init", command=command, pid=int(os.getpid()), version=__version__)
    return path


def debug_log(event: str, **fields: object) -> None:
    with _TRACE_LOCK:
        path = _TRACE_PATH
        if path is None:
            return
        with path.open("a", encoding="utf-8") as handle:
            handle.write(_format_line(event, fields) + "\n")


def close_debug_log() -> None:
    with _TRACE_LOCK:
        global _TRACE_PATH
        _TRACE_PATH = None


__all__ = [
    "close_debug_log",
    "debug_log",
    "debug_log_enabled",
    "debug_log_path",
    "init_debug_log",
]
