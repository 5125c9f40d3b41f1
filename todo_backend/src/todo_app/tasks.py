from __future__ import annotations

import logging
import time
from threading import RLock
from typing import Callable, List, Optional

from .models import TodoItem
from .storage import TODOS_SLOT, KeyValueStore

logger = logging.getLogger(__name__)


def _coerce_item(raw: object) -> Optional[TodoItem]:
    if not isinstance(raw, dict):
        return None
    try:
        item_id = int(raw["id"])
    except (KeyError, TypeError, ValueError):
        return None
    return TodoItem(id=item_id, text=str(raw.get("text", "")), completed=bool(raw.get("completed", False)))


# PUBLIC_INTERFACE
class TaskListStore:
    """
    Ordered to-do list of the active session, mirrored to the 'todos' slot.

    The list lives in memory between intents; every mutation writes the new
    list to the slot first and only then replaces the in-memory list, so a
    failed write leaves both unchanged. Ids come from the millisecond clock
    and are bumped past the newest id when the clock has not moved on.

    Each operation holds `lock` from start to finish; pass the application
    lock to serialise with the session manager.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        clock: Callable[[], float] = time.time,
        lock: Optional[RLock] = None,
    ) -> None:
        self._storage = storage
        self._clock = clock
        self._lock = lock if lock is not None else RLock()
        self._items: List[TodoItem] = []

    def load(self) -> None:
        """Replace the in-memory list with the contents of the slot."""
        with self._lock:
            raw = self._storage.read_json_list(TODOS_SLOT)
            items = [i for i in (_coerce_item(r) for r in raw) if i is not None]
            if len(items) != len(raw):
                logger.warning("Dropped %d malformed item(s) from slot %r", len(raw) - len(items), TODOS_SLOT)
            self._items = items

    def clear(self) -> None:
        """Forget every item and remove the slot."""
        with self._lock:
            self._storage.remove_item(TODOS_SLOT)
            self._items = []

    def items(self) -> List[TodoItem]:
        with self._lock:
            return [TodoItem(**i) for i in self._items]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _commit(self, items: List[TodoItem]) -> None:
        self._storage.write_json(TODOS_SLOT, items)
        self._items = items

    def _next_id(self) -> int:
        now_ms = int(self._clock() * 1000)
        newest = max((i["id"] for i in self._items), default=0)
        return max(now_ms, newest + 1)

    def add(self, text: str) -> Optional[TodoItem]:
        """Append a new item; blank text adds nothing and returns None."""
        if text.strip() == "":
            return None
        with self._lock:
            item = TodoItem(id=self._next_id(), text=text, completed=False)
            self._commit(self._items + [item])
            return TodoItem(**item)

    def toggle(self, item_id: int) -> Optional[TodoItem]:
        """Flip `completed` on the matching item; None when there is no match."""
        with self._lock:
            for pos, item in enumerate(self._items):
                if item["id"] == item_id:
                    flipped = TodoItem(**item)
                    flipped["completed"] = not item["completed"]
                    self._commit(self._items[:pos] + [flipped] + self._items[pos + 1 :])
                    return TodoItem(**flipped)
            return None

    def remove(self, item_id: int) -> bool:
        """Delete the matching item; False when there is no match."""
        with self._lock:
            kept = [i for i in self._items if i["id"] != item_id]
            if len(kept) == len(self._items):
                return False
            self._commit(kept)
            return True

    def count_incomplete(self) -> int:
        with self._lock:
            return sum(1 for i in self._items if not i["completed"])

    def summary(self) -> Optional[str]:
        with self._lock:
            if not self._items:
                return None
            return f"{self.count_incomplete()} items left"
