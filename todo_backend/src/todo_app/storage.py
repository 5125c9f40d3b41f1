from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from threading import RLock
from typing import Any, Dict, Iterator, List, Optional

from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Slot names of the persisted layout.
USER_SLOT = "user"
TODOS_SLOT = "todos"
REGISTERED_USERS_SLOT = "registeredUsers"


# PUBLIC_INTERFACE
class KeyValueStore(ABC):
    """
    Abstract string-to-string store shaped after browser local storage.

    Values are opaque text; structured entities are serialized to JSON by
    callers (see read_json_list / write_json).
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None if the slot is empty."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete key. Removing a missing key is a no-op."""

    @abstractmethod
    def keys(self) -> List[str]:
        """Return all keys currently holding a value, sorted."""

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get_item(key) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def read_json_list(self, key: str) -> List[Any]:
        """
        Decode the JSON array held in key.

        A missing slot reads as []. A slot that does not hold a JSON array is
        logged and also read as [].
        """
        raw = self.get_item(key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Slot %r holds invalid JSON; treating it as empty", key)
            return []
        if not isinstance(data, list):
            logger.warning("Slot %r does not hold a JSON array; treating it as empty", key)
            return []
        return data

    def write_json(self, key: str, value: Any) -> None:
        self.set_item(key, json.dumps(value, ensure_ascii=False))


class InMemoryKeyValueStore(KeyValueStore):
    """
    Thread-safe in-memory store suitable for testing and default runtime.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._lock = RLock()
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            self._items[key] = value

    def remove_item(self, key: str) -> None:
        with self._lock:
            self._items.pop(key, None)

    def keys(self) -> List[str]:
        with self._lock:
            return sorted(self._items)


# PUBLIC_INTERFACE
def get_storage(settings: Optional[Settings] = None) -> KeyValueStore:
    """
    Factory to return the configured store based on settings.
    - memory: InMemoryKeyValueStore
    - sqlite: SQLiteKeyValueStore backed by settings.sqlite_db_path
    """
    settings = settings or get_settings()
    if settings.persistence_backend == "sqlite":
        from .db import SQLiteKeyValueStore

        return SQLiteKeyValueStore(settings.sqlite_db_path)
    return InMemoryKeyValueStore()
