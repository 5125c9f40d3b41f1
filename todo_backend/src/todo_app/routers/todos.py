from __future__ import annotations

from typing import Callable

from fastapi import APIRouter, Depends

from ..auth import get_app_state, require_session
from ..schemas import ErrorOut, TodoCreate, TodoListOut, TodoOut
from ..state import AppState
from ..tasks import TaskListStore
from ..utils import list_envelope

router = APIRouter(
    prefix="/api/v1/todos",
    tags=["todos"],
    dependencies=[Depends(require_session)],
    responses={401: {"model": ErrorOut, "description": "No user is logged in"}},
)


def _render(state: AppState) -> TodoListOut:
    tasks = state.tasks
    envelope = list_envelope(
        items=[TodoOut(**it) for it in tasks.items()],
        remaining=tasks.count_incomplete(),
        summary=tasks.summary(),
    )
    return TodoListOut(**envelope)


def _apply(state: AppState, intent: Callable[[TaskListStore], object]) -> TodoListOut:
    # The session may have ended between the router guard and this call.
    with state.lock:
        state.session.require_user()
        intent(state.tasks)
        return _render(state)


# PUBLIC_INTERFACE
@router.get(
    "/",
    response_model=TodoListOut,
    summary="List Todos",
    description="Return the logged in user's list in display order with the items-left summary.",
)
def list_todos(state: AppState = Depends(get_app_state)) -> TodoListOut:
    """
    List all todos of the current session.
    """
    with state.lock:
        return _render(state)


# PUBLIC_INTERFACE
@router.post(
    "/",
    response_model=TodoListOut,
    summary="Add Todo",
    description=(
        "Append a new item to the end of the list and return the updated list. "
        "Whitespace-only text is ignored and the list is returned unchanged."
    ),
)
def add_todo(payload: TodoCreate, state: AppState = Depends(get_app_state)) -> TodoListOut:
    """
    Add a todo.
    """
    return _apply(state, lambda tasks: tasks.add(payload.text))


# PUBLIC_INTERFACE
@router.post(
    "/{todo_id}/toggle",
    response_model=TodoListOut,
    summary="Toggle Todo",
    description="Flip the completed flag of an item. Unknown ids leave the list unchanged.",
)
def toggle_todo(todo_id: int, state: AppState = Depends(get_app_state)) -> TodoListOut:
    """
    Toggle completion of a todo.
    """
    return _apply(state, lambda tasks: tasks.toggle(todo_id))


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    response_model=TodoListOut,
    summary="Delete Todo",
    description="Remove an item. Unknown ids leave the list unchanged.",
)
def delete_todo(todo_id: int, state: AppState = Depends(get_app_state)) -> TodoListOut:
    """
    Delete a todo.
    """
    return _apply(state, lambda tasks: tasks.remove(todo_id))
