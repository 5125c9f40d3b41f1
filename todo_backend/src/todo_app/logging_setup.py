from __future__ import annotations

import logging
import sys

_HANDLER_NAME = "todo_app.console"


# PUBLIC_INTERFACE
def setup_logging(level: str = "INFO") -> None:
    """
    Attach a single stderr handler to the 'todo_app' logger.

    Safe to call more than once (e.g. one app per test): the handler is
    installed only the first time, later calls just adjust the level.
    """
    logger = logging.getLogger("todo_app")
    logger.setLevel(level)

    if any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        return

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(fmt)
    logger.addHandler(handler)
