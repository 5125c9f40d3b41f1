from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from threading import RLock
from typing import Callable, Optional

from .credentials import CredentialStore
from .session import SessionManager
from .settings import Settings, get_settings
from .storage import KeyValueStore, get_storage
from .tasks import TaskListStore

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    # Settings are kept on the state so handlers need a single dependency.
    settings: Settings
    storage: KeyValueStore
    credentials: CredentialStore
    tasks: TaskListStore
    session: SessionManager
    # Held for each whole intent; endpoints run in a thread pool.
    lock: RLock


# PUBLIC_INTERFACE
def create_state(
    settings: Optional[Settings] = None,
    storage: Optional[KeyValueStore] = None,
    clock: Callable[[], float] = time.time,
) -> AppState:
    """Wire the components over one store and restore any persisted session."""
    settings = settings or get_settings()
    storage = storage if storage is not None else get_storage(settings)
    lock = RLock()

    credentials = CredentialStore(storage)
    tasks = TaskListStore(storage, clock=clock, lock=lock)
    session = SessionManager(storage, credentials, tasks, lock=lock)
    session.restore()

    logger.info(
        "Application state ready (backend=%s, session=%s)",
        settings.persistence_backend,
        session.current_user or "anonymous",
    )
    return AppState(
        settings=settings,
        storage=storage,
        credentials=credentials,
        tasks=tasks,
        session=session,
        lock=lock,
    )
