from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .errors import TodoAppError
from .logging_setup import setup_logging
from .routers import auth as auth_router
from .routers import todos as todos_router
from .settings import Settings, get_settings
from .state import create_state
from .storage import KeyValueStore

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {
        "name": "auth",
        "description": "Signup, login and logout against the locally stored accounts.",
    },
    {
        "name": "todos",
        "description": "Add, toggle and delete items of the logged in user's todo list.",
    },
]


async def todo_app_error_handler(request: Request, exc: TodoAppError) -> JSONResponse:
    """
    Render a rejected intent as a single user-facing message.

    Response format:
        {"error": "<kind>", "message": "<human readable message>"}
    """
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error_code, "message": exc.message},
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a consistent JSON structure for request validation errors.

    Response format:
        {
            "error": "ValidationError",
            "detail": [... pydantic/fastapi error details ...],
            "message": "Request validation failed"
        }
    """
    return JSONResponse(
        status_code=422,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": exc.errors(),
        },
    )


# PUBLIC_INTERFACE
def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[KeyValueStore] = None,
    clock: Callable[[], float] = time.time,
) -> FastAPI:
    """
    Build the FastAPI application with its own AppState.

    Args:
        settings: Explicit settings; defaults to get_settings() (environment).
        storage: Explicit key-value store; defaults to the configured backend.
        clock: Wall clock in seconds used for todo ids.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Todo Backend",
        description="Todo list service with mock authentication over a local key-value store.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )
    app.state.todo_state = create_state(settings=settings, storage=storage, clock=clock)

    # Configure CORS based on settings (.env -> CORS_ALLOW_ORIGINS), with '*' fallback
    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TodoAppError, todo_app_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]

    # PUBLIC_INTERFACE
    @app.get("/", summary="Health Check", tags=["health"])
    def health_check():
        """
        Health check endpoint.

        Returns:
            A JSON object indicating service health.
        """
        return {"message": "Healthy", "backend": settings.persistence_backend}

    app.include_router(auth_router.router)
    app.include_router(todos_router.router)
    return app


app = create_app()
