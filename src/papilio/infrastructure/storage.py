"""Local key-value persistence for JSON blobs.

Two backends share one contract (:class:`KeyValueStore`):

- :class:`JsonFileStore`: one ``<namespace>.<key>.json`` file per key
  under a data directory. The namespace scopes keys the way an origin
  scopes browser-local storage.
- :class:`MemoryStore`: raw JSON text held in a dict, for tests and
  throwaway sessions.

INVARIANT: ``load`` never raises. Missing, unreadable, or undecodable
data yields the caller's default and a warning log. ``save`` overwrites
synchronously and all-or-nothing; the last write wins.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


class KeyValueStore(Protocol):
    """Get/set of JSON-serializable values by key."""

    namespace: str

    def load(self, key: str, default: Any = None) -> Any: ...

    def save(self, key: str, value: Any) -> None: ...


def _check_key(key: str) -> None:
    if not _KEY_PATTERN.match(key):
        msg = f"Invalid storage key: {key!r}"
        raise ValueError(msg)


def _decode(raw: str, *, key: str, source: str, default: Any) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.warning("Discarding corrupt %s data for key %r: %s", source, key, exc)
        return copy.deepcopy(default)


class JsonFileStore:
    """File-backed store rooted at *root*."""

    def __init__(self, root: Path, namespace: str = "papilio") -> None:
        self.root = root
        self.namespace = namespace

    def path_for(self, key: str) -> Path:
        _check_key(key)
        return self.root / f"{self.namespace}.{key}.json"

    def load(self, key: str, default: Any = None) -> Any:
        path = self.path_for(key)
        if not path.is_file():
            return copy.deepcopy(default)
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read %s: %s", path, exc)
            return copy.deepcopy(default)
        return _decode(raw, key=key, source="file", default=default)

    def save(self, key: str, value: Any) -> None:
        """Replace the file for *key* atomically.

        The payload is encoded before the data directory is touched, and
        the new file is renamed over the old one, so a failed save leaves
        the previous contents in place.
        """
        path = self.path_for(key)
        payload = json.dumps(value, ensure_ascii=False, indent=2).encode("utf-8")
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=".tmp_", suffix=".json")
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(payload)
            os.replace(tmp, path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
        logger.debug("Saved %d bytes to %s", len(payload), path)


class MemoryStore:
    """In-process store. Values are kept as JSON text, like the file backend."""

    def __init__(
        self,
        namespace: str = "papilio",
        initial: dict[str, str] | None = None,
    ) -> None:
        self.namespace = namespace
        self._data: dict[str, str] = dict(initial or {})

    def raw(self, key: str) -> str | None:
        """Return the stored JSON text for *key*, or None."""
        return self._data.get(key)

    def load(self, key: str, default: Any = None) -> Any:
        _check_key(key)
        raw = self._data.get(key)
        if raw is None:
            return copy.deepcopy(default)
        return _decode(raw, key=key, source="memory", default=default)

    def save(self, key: str, value: Any) -> None:
        _check_key(key)
        raw = json.dumps(value, ensure_ascii=False)
        raw.encode("utf-8")  # reject what the file backend could not write
        self._data[key] = raw
