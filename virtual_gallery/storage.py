"""JSON-file key-value store used to keep state on the device."""

from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Any

DEFAULT_STORE_PATH = Path(".gallery") / "favorites_store.json"


class KeyValueStore:
    """
    Small persistent key-value store backed by a single JSON file.

    Values must be JSON-serializable. Writes go to a temporary file that
    replaces the target, so a crash mid-write never leaves a truncated file.
    get() raises ValueError for a corrupt file and OSError on I/O errors;
    callers decide how to recover.
    """

    def __init__(self, path: str | Path = DEFAULT_STORE_PATH) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under key, or default when absent."""
        with self._lock:
            return self._read_all().get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store value under key, rewriting the file."""
        payload = json.dumps(value)  # fail before touching the file
        with self._lock:
            try:
                data = self._read_all()
            except ValueError:
                # Unreadable content is replaced rather than blocking writes
                data = {}
            data[key] = json.loads(payload)

            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
