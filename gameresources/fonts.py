"""Loading of font data and caching of sized font faces."""

from __future__ import annotations

import io
import os
from dataclasses import dataclass
from pathlib import Path

import pygame
import pygame.font

STANDARD_NORMAL = "standard_normal"
STANDARD_ITALIC = "standard_italic"
STANDARD_BOLD = "standard_bold"
STANDARD_BOLD_ITALIC = "standard_bold_italic"

MONO_NORMAL = "mono_normal"
MONO_ITALIC = "mono_italic"
MONO_BOLD = "mono_bold"
MONO_BOLD_ITALIC = "mono_bold_italic"

_STYLES = (
    (False, False),
    (False, True),
    (True, False),
    (True, True),
)
_STANDARD_NAMES = (STANDARD_NORMAL, STANDARD_ITALIC, STANDARD_BOLD, STANDARD_BOLD_ITALIC)
_MONO_NAMES = (MONO_NORMAL, MONO_ITALIC, MONO_BOLD, MONO_BOLD_ITALIC)
_MONO_FAMILIES = [
    "dejavusansmono",
    "liberationmono",
    "couriernew",
    "consolas",
    "menlo",
    "monospace",
]
_PROBE_SIZE = 12


class FontError(ValueError):
    """Raised when font data cannot be parsed."""


@dataclass(frozen=True)
class FontSource:
    """Raw font data together with the style to apply to its faces."""

    data: bytes
    bold: bool = False
    italic: bool = False


def _default_font_data() -> bytes:
    return (Path(pygame.__file__).parent / pygame.font.get_default_font()).read_bytes()


def _open_font(data: bytes, size: float) -> pygame.font.Font:
    pygame.font.init()
    try:
        return pygame.font.Font(io.BytesIO(data), max(1, round(size)))
    except (pygame.error, OSError, RuntimeError, ValueError) as exc:
        raise FontError(f"invalid font data: {exc}") from exc


class FontManager:
    """Keeps font data by name and hands out cached faces per name and size."""

    def __init__(self, root: str | os.PathLike[str] = ".") -> None:
        self.root = Path(root)
        self._fonts: dict[str, FontSource] = {}
        self._faces: dict[tuple[str, float], pygame.font.Font] = {}

    def load_standard_fonts(self) -> None:
        """Load the bundled sans-serif font in regular, italic, bold and bold italic."""
        data = _default_font_data()
        for name, (bold, italic) in zip(_STANDARD_NAMES, _STYLES):
            self._fonts[name] = FontSource(data, bold, italic)

    def load_mono_fonts(self) -> None:
        """Load a monospaced font in regular, italic, bold and bold italic."""
        pygame.font.init()
        for name, (bold, italic) in zip(_MONO_NAMES, _STYLES):
            path = pygame.font.match_font(_MONO_FAMILIES, bold, italic)
            if path:
                self._fonts[name] = FontSource(Path(path).read_bytes())
            else:
                self._fonts[name] = FontSource(_default_font_data(), bold, italic)

    def load_font(self, name: str, path: str) -> None:
        """Load the font file at ``path`` below the root under ``name``."""
        self.load_font_data(name, (self.root / path).read_bytes())

    def load_font_data(self, name: str, data: bytes) -> None:
        """Load font ``data`` under ``name``; raises FontError if it is not a font."""
        data = bytes(data)
        _open_font(data, _PROBE_SIZE)
        self._fonts[name] = FontSource(data)

    def get_face(self, name: str, size: float) -> pygame.font.Font:
        """Return a face of the font ``name`` at ``size``, cached for later calls."""
        key = (name, float(size))
        if key in self._faces:
            return self._faces[key]
        try:
            source = self._fonts[name]
        except KeyError:
            raise KeyError(f"Font not found: {name}") from None
        face = _open_font(source.data, size)
        face.set_bold(source.bold)
        face.set_italic(source.italic)
        self._faces[key] = face
        return face

    def purge_cache(self) -> None:
        """Drop all cached faces."""
        self._faces.clear()

    def remove(self, key: str) -> None:
        """Drop the font data stored under ``key``; cached faces are kept."""
        self._fonts.pop(key, None)

    def clear(self) -> None:
        """Drop all font data and cached faces."""
        self._faces.clear()
        self._fonts.clear()