from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ..auth import get_app_state
from ..schemas import ErrorOut, LoginRequest, SessionOut, SignupRequest
from ..state import AppState

router = APIRouter(
    prefix="/api/v1/auth",
    tags=["auth"],
)


def _session_out(state: AppState) -> SessionOut:
    username = state.session.current_user
    if username is None:
        return SessionOut(authenticated=False)
    return SessionOut(authenticated=True, username=username, greeting=f"Welcome, {username}")


# PUBLIC_INTERFACE
@router.post(
    "/signup",
    response_model=SessionOut,
    status_code=status.HTTP_201_CREATED,
    summary="Sign Up",
    description="Register a new account and log it in.",
    responses={
        201: {"description": "Account created and logged in"},
        400: {"model": ErrorOut, "description": "A form field is empty or malformed"},
        409: {"model": ErrorOut, "description": "Username or email already exists"},
    },
)
def signup(payload: SignupRequest, state: AppState = Depends(get_app_state)) -> SessionOut:
    """
    Register and log in.
    """
    with state.lock:
        state.session.signup(payload)
        return _session_out(state)


# PUBLIC_INTERFACE
@router.post(
    "/login",
    response_model=SessionOut,
    summary="Log In",
    description="Log in with a registered username and password.",
    responses={
        400: {"model": ErrorOut, "description": "A form field is empty or too short"},
        401: {"model": ErrorOut, "description": "Invalid username or password"},
    },
)
def login(payload: LoginRequest, state: AppState = Depends(get_app_state)) -> SessionOut:
    """
    Log in.
    """
    with state.lock:
        state.session.login(payload.username, payload.password)
        return _session_out(state)


# PUBLIC_INTERFACE
@router.post(
    "/logout",
    response_model=SessionOut,
    summary="Log Out",
    description="End the session. This also wipes the stored todo list.",
)
def logout(state: AppState = Depends(get_app_state)) -> SessionOut:
    """
    Log out.
    """
    with state.lock:
        state.session.logout()
        return _session_out(state)


# PUBLIC_INTERFACE
@router.get(
    "/session",
    response_model=SessionOut,
    summary="Current Session",
    description="Report whether a user is logged in and who.",
)
def current_session(state: AppState = Depends(get_app_state)) -> SessionOut:
    """
    Return the current session.
    """
    return _session_out(state)
