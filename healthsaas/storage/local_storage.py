"""
File-backed key/value store for client-side state.

Plays the part of the browser's localStorage: string keys, string values,
synchronous access, everything kept in one JSON document on disk.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

from healthsaas.utils.logging import get_logger

logger = get_logger(__name__)


class LocalStorage:
    """Persistent string key/value store backed by a single JSON file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._load()
        if key not in items:
            return
        del items[key]
        self._write(items)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                items = json.load(handle)
        except (OSError, ValueError) as e:
            logger.warning(f"Local storage at {self.path} is unreadable, treating as empty: {e}")
            return {}
        if not isinstance(items, dict):
            logger.warning(f"Local storage at {self.path} is not a key/value document, treating as empty")
            return {}
        return {str(key): value for key, value in items.items() if isinstance(value, str)}

    def _write(self, items: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(items, handle, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except Exception:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
