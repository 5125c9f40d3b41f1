import os
import time

import pytest
from fastapi.testclient import TestClient

# Ensure we default to memory backend for tests to avoid filesystem dependencies
os.environ.setdefault("PERSISTENCE_BACKEND", "memory")

from todo_app.credentials import CredentialStore  # noqa: E402
from todo_app.main import create_app  # noqa: E402
from todo_app.schemas import SignupRequest  # noqa: E402
from todo_app.session import SessionManager  # noqa: E402
from todo_app.settings import Settings  # noqa: E402
from todo_app.storage import InMemoryKeyValueStore  # noqa: E402
from todo_app.tasks import TaskListStore  # noqa: E402


class FailingStore(InMemoryKeyValueStore):
    """In-memory store whose writes to selected keys raise OSError."""

    def __init__(self, fail_keys=()):
        super().__init__()
        self.fail_keys = set(fail_keys)

    def set_item(self, key, value):
        if key in self.fail_keys:
            raise OSError(f"disk full writing {key}")
        super().set_item(key, value)


class SlowClock:
    """Frozen clock that sleeps on every read, widening race windows between threads."""

    def __init__(self, now: float = 1_700_000_000.0, delay: float = 0.01):
        self.now = now
        self.delay = delay

    def __call__(self) -> float:
        time.sleep(self.delay)
        return self.now


class FakeClock:
    """Wall clock frozen at `now` seconds until advanced."""

    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def signup_payload(username="alice", email=None, password="secret1", confirm=None):
    return {
        "username": username,
        "email": email if email is not None else f"{username}@example.com",
        "password": password,
        "confirm_password": confirm if confirm is not None else password,
    }


def make_candidate(**kwargs) -> SignupRequest:
    return SignupRequest(**signup_payload(**kwargs))


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def storage() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def credentials(storage) -> CredentialStore:
    return CredentialStore(storage)


@pytest.fixture()
def tasks(storage, clock) -> TaskListStore:
    return TaskListStore(storage, clock=clock)


@pytest.fixture()
def session(storage, credentials, tasks) -> SessionManager:
    return SessionManager(storage, credentials, tasks)


@pytest.fixture()
def client(storage, clock) -> TestClient:
    """A fresh app per test over its own in-memory store."""
    app = create_app(settings=Settings(), storage=storage, clock=clock)
    return TestClient(app)
