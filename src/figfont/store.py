from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import PlatformDirs

APP_NAME = "figfont"
FONT_SUFFIX = ".flf"
FONT_PATH_ENV = "FIGFONT_PATH"
# Glyph rows may carry Latin-1 chars; every byte maps to one code point.
FONT_ENCODING = "latin-1"


class FontNotFoundError(FileNotFoundError):
    pass


def _font_dirs() -> PlatformDirs:
    return PlatformDirs(appname=APP_NAME, appauthor=False)


def user_font_dir() -> Path:
    return Path(_font_dirs().user_data_path) / "fonts"


def env_font_dirs(environ: dict[str, str] | None = None) -> tuple[Path, ...]:
    env = os.environ if environ is None else environ
    raw = env.get(FONT_PATH_ENV, "")
    return tuple(Path(part) for part in raw.split(os.pathsep) if part.strip())


def default_font_dirs() -> tuple[Path, ...]:
    return (*env_font_dirs(), user_font_dir())


@dataclass(frozen=True, slots=True)
class FontStore:
    dirs: tuple[Path, ...]
    suffix: str = FONT_SUFFIX

    def with_dirs(self, extra: list[Path] | tuple[Path, ...]) -> FontStore:
        """Return a store that searches `extra` before the current dirs."""
        return FontStore(dirs=(*(Path(d) for d in extra), *self.dirs), suffix=self.suffix)

    def candidates(self, name: str) -> list[Path]:
        filename = name if name.endswith(self.suffix) else f"{name}{self.suffix}"
        return [Path(directory) / filename for directory in self.dirs]

    def find(self, name: str) -> Path:
        explicit = Path(name)
        if explicit.suffix == self.suffix and explicit.is_file():
            return explicit
        tried = self.candidates(name)
        for path in tried:
            if path.is_file():
                return path
        searched = ", ".join(str(path.parent) for path in tried) or "<no font dirs>"
        raise FontNotFoundError(f"font {name!r} not found (searched: {searched})")

    def read_path(self, path: Path) -> str:
        return Path(path).read_bytes().decode(FONT_ENCODING)

    def read(self, name: str) -> str:
        return self.read_path(self.find(name))

    def available(self) -> list[str]:
        names: set[str] = set()
        for directory in self.dirs:
            directory = Path(directory)
            if not directory.is_dir():
                continue
            for path in directory.glob(f"*{self.suffix}"):
                if path.is_file():
                    names.add(path.stem)
        return sorted(names)


def default_font_store() -> FontStore:
    return FontStore(dirs=default_font_dirs())


__all__ = [
    "APP_NAME",
    "FONT_PATH_ENV",
    "FONT_SUFFIX",
    "FontNotFoundError",
    "FontStore",
    "default_font_dirs",
    "default_font_store",
    "env_font_dirs",
    "user_font_dir",
]
