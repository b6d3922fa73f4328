"""Loading and caching of JSON documents."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


class JSONManager:
    """Parses JSON documents once and keeps the results by key."""

    def __init__(self, root: str | os.PathLike[str] = ".") -> None:
        self.root = Path(root)
        self._cache: dict[str, Any] = {}

    def get_json(self, path: str) -> Any:
        """Return the parsed document at ``path`` below the root, loading it once."""
        if path in self._cache:
            return self._cache[path]
        data = (self.root / path).read_bytes()
        return self.get_json_bytes(path, data)

    def get_json_bytes(self, key: str, data: bytes | str) -> Any:
        """Parse ``data`` and cache it under ``key``; a cached key wins over ``data``."""
        if key in self._cache:
            return self._cache[key]
        result = json.loads(data)
        self._cache[key] = result
        return result

    def put(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""
        self._cache[key] = value

    def get(self, key: str) -> Any:
        """Return the value cached under ``key``, or ``None``."""
        return self._cache.get(key)

    def remove(self, key: str) -> None:
        """Drop the value cached under ``key``."""
        self._cache.pop(key, None)

    def clear(self) -> None:
        """Drop all cached documents."""
        self._cache.clear()