"""
Logging setup for the User Management API.

``create_app`` calls ``setup_logging`` with ``LOG_LEVEL`` and
``LOG_FILE`` from the settings.  Records always go to stderr; when a
log file is configured they are also appended there, and the file's
directory is created if it is missing.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the service.

    Does nothing if the root logger already has handlers, so repeated
    ``create_app`` calls (one per test, for instance) do not stack
    duplicate handlers.  An unknown ``level`` name falls back to
    ``INFO``.  A relative ``logfile`` is resolved against the current
    working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger(__name__).debug(
        "Logging configured at %s%s",
        logging.getLevelName(root.level),
        f", writing to {log_path}" if logfile else "",
    )
