"""
Logging setup for the posts board.

Application modules log through ``logging.getLogger(__name__)`` and
rely on the root logger configured here.  Uvicorn installs its own
``uvicorn``, ``uvicorn.error`` and ``uvicorn.access`` loggers; their
levels are aligned with the application's so that ``LOG_LEVEL``
controls both the server output and the post create/update messages.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its numeric value, INFO if unknown."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once and align the server loggers.

    Handlers are only attached when the root logger has none, so calling
    this for every ``create_app`` is safe.  The level is always applied.
    """
    numeric_level = resolve_level(level)
    root = logging.getLogger()
    root.setLevel(numeric_level)
    for name in SERVER_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)

    if root.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
