"""Logging setup for the pill package.

Every module logs through ``logging.getLogger(__name__)``, so all
records fall under the ``pill`` namespace. Nothing is emitted until
``configure_logging`` attaches a handler, which the CLI does once at
start-up.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_PREFIX = "pill"
_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: int = logging.WARNING, log_file: Path | None = None) -> None:
    """Route pill log records to stderr, or to ``log_file`` when given.

    Calling it again replaces the previously installed handler.
    """
    root = logging.getLogger(_LOGGER_PREFIX)
    reset_logging()

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))

    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False


def reset_logging() -> None:
    """Remove every handler installed by ``configure_logging``."""
    root = logging.getLogger(_LOGGER_PREFIX)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
    root.propagate = True
