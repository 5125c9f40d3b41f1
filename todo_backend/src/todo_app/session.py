from __future__ import annotations

import logging
from threading import RLock
from typing import Optional

from .credentials import CredentialStore, validate_password_length, validate_username
from .errors import NotAuthenticatedError
from .schemas import SignupRequest
from .storage import USER_SLOT, KeyValueStore
from .tasks import TaskListStore

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class SessionManager:
    """
    Tracks the one logged-in user (Anonymous or Authenticated(username)).

    Entering a session persists the username in the 'user' slot and loads the
    task list from storage. Logging out removes the 'user' slot and wipes the
    task list slot. Storage is written before the in-memory identity changes.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        credentials: CredentialStore,
        tasks: TaskListStore,
        lock: Optional[RLock] = None,
    ) -> None:
        self._storage = storage
        self._credentials = credentials
        self._tasks = tasks
        self._lock = lock if lock is not None else RLock()
        self._username: Optional[str] = None

    @property
    def current_user(self) -> Optional[str]:
        return self._username

    @property
    def is_authenticated(self) -> bool:
        return self._username is not None

    def require_user(self) -> str:
        username = self._username
        if username is None:
            raise NotAuthenticatedError("Please log in to manage your todos")
        return username

    def restore(self) -> Optional[str]:
        """Resume the session persisted by a previous process, if any."""
        with self._lock:
            saved = self._storage.get_item(USER_SLOT)
            if not saved:
                self._username = None
                return None
            self._tasks.load()
            self._username = saved
            logger.info("Restored session for %r with %d item(s)", saved, len(self._tasks))
            return saved

    def _enter(self, username: str) -> str:
        self._storage.set_item(USER_SLOT, username)
        self._tasks.load()
        self._username = username
        return username

    def login(self, username: str, password: str) -> str:
        validate_username(username)
        validate_password_length(password)
        with self._lock:
            record = self._credentials.authenticate(username, password)
            logger.info("User %r logged in", record["username"])
            return self._enter(record["username"])

    def signup(self, candidate: SignupRequest) -> str:
        with self._lock:
            username = self._credentials.register(candidate)
            logger.info("User %r signed up", username)
            return self._enter(username)

    def logout(self) -> None:
        with self._lock:
            if self._username is None:
                return
            logger.info("User %r logged out", self._username)
            self._storage.remove_item(USER_SLOT)
            self._tasks.clear()
            self._username = None
