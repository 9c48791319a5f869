"""
Logging setup for the service.

Everything logs through the root logger: application modules use
``logging.getLogger(__name__)`` and ``run.py`` starts uvicorn without
its own logging config, so server and access messages propagate here
too and share one format.
"""

import logging
from pathlib import Path
from typing import List, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console (and optionally file) handlers to the root logger.

    ``level`` is a level name in any case; unknown names mean ``INFO``.
    A root logger that already has handlers is left untouched, so
    building the app twice or running under pytest does not duplicate
    output.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(LEVELS.get(level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)
