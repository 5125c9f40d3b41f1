from __future__ import annotations


class TodoAppError(Exception):
    """Base class for rejected user intents. `message` is shown to the user as-is."""

    error_code = "TodoAppError"
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TodoAppError):
    """A form field is empty or malformed."""

    error_code = "ValidationError"
    status_code = 400


class DuplicateUserError(TodoAppError):
    """Username or email is already registered."""

    error_code = "DuplicateUser"
    status_code = 409


class InvalidCredentialsError(TodoAppError):
    """No registered user matches the username/password pair."""

    error_code = "InvalidCredentials"
    status_code = 401


class NotAuthenticatedError(TodoAppError):
    """A task list intent arrived while no session is active."""

    error_code = "NotAuthenticated"
    status_code = 401
