from __future__ import annotations

import logging
from typing import List, Optional

from .errors import DuplicateUserError, InvalidCredentialsError, ValidationError
from .models import UserRecord
from .schemas import SignupRequest
from .storage import REGISTERED_USERS_SLOT, KeyValueStore

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def validate_password_length(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")


def validate_username(username: str) -> None:
    if username.strip() == "":
        raise ValidationError("Username is required")


# PUBLIC_INTERFACE
class CredentialStore:
    """
    Registered accounts kept in the 'registeredUsers' slot.

    Records are {username, email, password}; passwords are plain text to keep
    parity with the browser version. Do not reuse this beyond demos.
    """

    def __init__(self, storage: KeyValueStore) -> None:
        self._storage = storage
        # Logged once per store instance.
        logger.warning(
            "Passwords are stored and compared as plain text; "
            "this credential store is for demonstration use only"
        )

    def users(self) -> List[UserRecord]:
        """Return registered records in registration order."""
        return [
            UserRecord(
                username=str(u.get("username", "")),
                email=str(u.get("email", "")),
                password=str(u.get("password", "")),
            )
            for u in self._storage.read_json_list(REGISTERED_USERS_SLOT)
            if isinstance(u, dict)
        ]

    def exists(self, username: Optional[str] = None, email: Optional[str] = None) -> bool:
        """True if any record matches username OR email."""
        return any(
            (username is not None and u["username"] == username)
            or (email is not None and u["email"] == email)
            for u in self.users()
        )

    def register(self, candidate: SignupRequest) -> str:
        """
        Validate and append a new record, returning its username.

        Raises:
            ValidationError: empty username, email without '@', short password,
                or confirmation mismatch (checked in that order).
            DuplicateUserError: username or email already registered.
        """
        validate_username(candidate.username)
        if candidate.email.strip() == "" or "@" not in candidate.email:
            raise ValidationError("Valid email is required")
        validate_password_length(candidate.password)
        if candidate.password != candidate.confirm_password:
            raise ValidationError("Passwords do not match")

        if self.exists(username=candidate.username, email=candidate.email):
            raise DuplicateUserError("Username or email already exists")

        users = self.users()
        users.append(
            UserRecord(
                username=candidate.username,
                email=candidate.email,
                password=candidate.password,
            )
        )
        self._storage.write_json(REGISTERED_USERS_SLOT, users)
        logger.info("Registered user %r", candidate.username)
        return candidate.username

    def authenticate(self, username: str, password: str) -> UserRecord:
        """
        Return the record with exactly this username and password.

        Raises:
            InvalidCredentialsError: no such record.
        """
        for u in self.users():
            if u["username"] == username and u["password"] == password:
                return u
        raise InvalidCredentialsError("Invalid username or password")
