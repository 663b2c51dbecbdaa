"""Key-value persistence for the best score."""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

BEST_KEY = "cobrinha_best"

# Leading integer, ignoring whatever trails it ("12abc" -> 12, "3.7" -> 3).
_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")


class KeyValueStore(Protocol):
    """Minimal string key-value store, shaped like browser local storage."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """In-process store; nothing survives the interpreter."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """Store backed by a single JSON object on disk.

    Every :meth:`set` rewrites the whole file through a temporary file so
    a crash mid-write never leaves a truncated document behind. A missing
    or unreadable file reads as an empty store.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        try:
            raw = json.loads(self.path.read_text())
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable store %s: %s", self.path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Ignoring non-object store %s.", self.path)
            return {}
        return {str(k): str(v) for k, v in raw.items()}

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w") as fh:
                json.dump(data, fh, indent=2)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise


class BestScore:
    """Best score persisted as a decimal string under a single key."""

    def __init__(self, store: KeyValueStore, key: str = BEST_KEY) -> None:
        self.store = store
        self.key = key

    def load(self) -> int:
        """Return the stored best; missing or malformed values count as 0."""
        raw = self.store.get(self.key)
        if raw is None:
            return 0
        m = _LEADING_INT_RE.match(raw)
        if m is None:
            logger.warning("Malformed best score %r under %s.", raw, self.key)
            return 0
        return max(int(m.group(1)), 0)

    def save_if_better(self, score: int) -> bool:
        """Persist *score* if it beats the stored best. Returns True if saved."""
        previous = self.load()
        if score <= previous:
            return False
        self.store.set(self.key, str(score))
        logger.info("New best score %d (was %d).", score, previous)
        return True
