from __future__ import annotations

from typing import TypedDict


# PUBLIC_INTERFACE
class UserRecord(TypedDict):
    """
    A registered account as persisted in the 'registeredUsers' slot.

    Fields:
    - username: unique across records
    - email: unique across records, must contain '@'
    - password: stored as plain text (demonstration only)
    """

    username: str
    email: str
    password: str


# PUBLIC_INTERFACE
class TodoItem(TypedDict):
    """
    A single to-do entry as persisted in the 'todos' slot.

    Fields:
    - id: creation timestamp in milliseconds, unique within the list
    - text: the text as submitted (never blank)
    - completed: completion flag
    """

    id: int
    text: str
    completed: bool
