from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Field-level rules (required username, '@' in email, password length,
# matching confirmation) are enforced by CredentialStore/SessionManager so that
# they surface as a single human-readable message, not a 422 error list.


# PUBLIC_INTERFACE
class SignupRequest(BaseModel):
    """
    Schema for the signup form. `confirm_password` is checked but never stored.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "username": "alice",
                "email": "alice@example.com",
                "password": "secret1",
                "confirm_password": "secret1",
            }
        },
    )

    username: str = Field(default="", description="Unique account name")
    email: str = Field(default="", description="Unique email address; must contain '@'")
    password: str = Field(default="", description="At least 6 characters")
    confirm_password: str = Field(
        default="",
        alias="confirmPassword",
        description="Must equal password",
    )


# PUBLIC_INTERFACE
class LoginRequest(BaseModel):
    """
    Schema for the login form.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"username": "alice", "password": "secret1"}}
    )

    username: str = Field(default="", description="Registered account name")
    password: str = Field(default="", description="Account password")


# PUBLIC_INTERFACE
class SessionOut(BaseModel):
    """
    Current session state as shown in the page header.
    """

    authenticated: bool = Field(..., description="Whether a user is logged in")
    username: Optional[str] = Field(default=None, description="Logged in username")
    greeting: Optional[str] = Field(default=None, description="Header text, e.g. 'Welcome, alice'")


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for adding a to-do item. Blank text is accepted and ignored.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"text": "buy milk"}})

    text: str = Field(default="", description="Item text; whitespace-only text adds nothing")


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a to-do item.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"id": 1735689600000, "text": "buy milk", "completed": False}}
    )

    id: int = Field(..., description="Creation timestamp in milliseconds; unique key")
    text: str = Field(..., description="Item text")
    completed: bool = Field(..., description="Completion status flag")


# PUBLIC_INTERFACE
class TodoListOut(BaseModel):
    """
    The whole list as rendered after any intent.
    """

    items: List[TodoOut] = Field(..., description="Items in display (insertion) order")
    total: int = Field(..., description="Number of items")
    remaining: int = Field(..., description="Number of items not completed")
    summary: Optional[str] = Field(
        default=None, description="'<n> items left'; null when the list is empty"
    )


# PUBLIC_INTERFACE
class ErrorOut(BaseModel):
    """
    Body returned for a rejected intent.
    """

    error: str = Field(..., description="Error kind, e.g. 'DuplicateUser'")
    message: str = Field(..., description="Human-readable message for the user")
