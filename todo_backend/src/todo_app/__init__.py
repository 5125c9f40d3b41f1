"""
Todo Backend package.

A todo list service with mock authentication over a local key-value store.
The FastAPI application lives in `todo_app.main` (`app`, `create_app`); it is
not imported here so that the storage and domain modules can be used without
building an application.
"""

__version__ = "0.1.0"
