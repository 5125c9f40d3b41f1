from __future__ import annotations

from fastapi import Depends, Request

from .state import AppState


# PUBLIC_INTERFACE
def get_app_state(request: Request) -> AppState:
    """
    Return the AppState created by the app factory for this application.

    Usage:
        @router.get("/")
        def handler(state: AppState = Depends(get_app_state)) -> ...: ...
    """
    return request.app.state.todo_state


# PUBLIC_INTERFACE
def require_session(state: AppState = Depends(get_app_state)) -> str:
    """
    Dependency that lets a request through only while a user is logged in.

    Returns:
        The logged in username.

    Raises:
        NotAuthenticatedError (rendered as 401) while the session is anonymous.
    """
    return state.session.require_user()
