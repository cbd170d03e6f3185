"""Local key-value storage — a JSON file on disk, or a dict for tests.

Reads/writes a flat JSON object so the session token and preferences persist
across restarts without any database.
"""

import json
import logging
from pathlib import Path
from typing import Any

from aura_client.application.interfaces import KeyValueStore, Scalar

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStore):
    """Infrastructure adapter persisting every write to a JSON file."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, Any]:
        """Read the JSON file, returning {} if missing or corrupt."""
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.warning("Could not read %s — starting with empty state", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring %s — top-level value is not an object", self._path)
            return {}
        return data

    def _write(self, data: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def get(self, key: str) -> Scalar | None:
        return self._read().get(key)

    def set(self, key: str, value: Scalar) -> None:
        data = self._read()
        data[key] = value
        self._write(data)
        logger.debug("Stored key '%s' in %s", key, self._path)

    def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)
            logger.debug("Removed key '%s' from %s", key, self._path)


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store, used by tests and ephemeral sessions."""

    def __init__(self, initial: dict[str, Scalar] | None = None):
        self._data: dict[str, Scalar] = dict(initial or {})

    def get(self, key: str) -> Scalar | None:
        return self._data.get(key)

    def set(self, key: str, value: Scalar) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)
