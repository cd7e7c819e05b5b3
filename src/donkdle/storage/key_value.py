"""Flat key-value stores for saved games and statistics."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol


class KeyValueStore(Protocol):
    """Persistence contract for JSON-serializable values keyed by string."""

    def get(self, key: str) -> Any | None:
        """Return the stored value or ``None``."""

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""


class InMemoryKeyValueStore:
    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def get(self, key: str) -> Any | None:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileKeyValueStore:
    """Single JSON object file; every write is a read-modify-write, last writer wins."""

    def __init__(self, file_path: str | Path, *, logger: logging.Logger | None = None) -> None:
        self._path = Path(file_path).expanduser()
        self._logger = logger or logging.getLogger("donkdle.storage")

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> Any | None:
        return self._read().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}

        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            self._logger.warning("state_file_unreadable", extra={"path": str(self._path)})
            return {}

        if not isinstance(payload, dict):
            self._logger.warning("state_file_unreadable", extra={"path": str(self._path)})
            return {}
        return payload

    def _write(self, data: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, ensure_ascii=False, indent=2)
