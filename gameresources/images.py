"""Loading and caching of images as pygame surfaces."""

from __future__ import annotations

import os
from pathlib import Path

import pygame


class ImageManager:
    """Decodes image files once and keeps the surfaces by key."""

    def __init__(self, root: str | os.PathLike[str] = ".") -> None:
        self.root = Path(root)
        self._cache: dict[str, pygame.Surface] = {}

    def get_image(self, path: str) -> pygame.Surface:
        """Return the surface for the image at ``path`` below the root, decoding it once."""
        if path in self._cache:
            return self._cache[path]
        with (self.root / path).open("rb") as file:
            surface = pygame.image.load(file, path)
        self._cache[path] = surface
        return surface

    def put(self, key: str, value: pygame.Surface) -> None:
        """Store a surface under ``key``."""
        self._cache[key] = value

    def get(self, key: str) -> pygame.Surface | None:
        """Return the surface stored under ``key``, or ``None``."""
        return self._cache.get(key)

    def remove(self, key: str) -> None:
        """Drop the surface stored under ``key``."""
        self._cache.pop(key, None)

    def clear(self) -> None:
        """Drop all cached surfaces."""
        self._cache.clear()