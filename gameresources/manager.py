"""A single entry point that groups all resource managers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Hashable

from .audio import AudioManager
from .custom import CustomManager
from .fonts import FontManager
from .images import ImageManager
from .jsoncache import JSONManager


class ResourceManager:
    """Owns the audio, font and image managers and any number of custom and JSON ones."""

    def __init__(self, root: str | os.PathLike[str] = ".") -> None:
        self.root = Path(root)
        self.audio = AudioManager(self.root)
        self.font = FontManager(self.root)
        self.image = ImageManager(self.root)
        self._custom: dict[Hashable, CustomManager[Any]] = {}
        self._json: dict[Hashable, JSONManager] = {}

    def add_custom_manager(self, id: Hashable, custom: CustomManager[Any]) -> None:
        """Register ``custom`` under ``id``."""
        self._custom[id] = custom

    def get_custom_manager(self, id: Hashable) -> CustomManager[Any] | None:
        """Return the custom manager registered under ``id``, or ``None``."""
        return self._custom.get(id)

    def remove_custom_manager(self, id: Hashable) -> None:
        """Unregister the custom manager under ``id``."""
        self._custom.pop(id, None)

    def add_json_manager(self, id: Hashable, manager: JSONManager) -> None:
        """Register a JSON manager under ``id``."""
        self._json[id] = manager

    def get_json_manager(self, id: Hashable) -> JSONManager | None:
        """Return the JSON manager registered under ``id``, or ``None``."""
        return self._json.get(id)

    def remove_json_manager(self, id: Hashable) -> None:
        """Unregister the JSON manager under ``id``."""
        self._json.pop(id, None)