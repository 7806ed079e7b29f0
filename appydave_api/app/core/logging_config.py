"""
Logging configuration for the application and its server.

``setup_logging`` installs one console handler (and optionally a file
handler) on the root logger and routes uvicorn's own loggers through
it, so server and application messages share a single format.  Request
lines come from the ``appydave_api.access`` middleware logger only;
``uvicorn.access`` is silenced to avoid logging each request twice.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers uvicorn configures for itself unless told otherwise.
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error")
UVICORN_ACCESS_LOGGER = "uvicorn.access"


def _adopt_uvicorn_loggers(level: int) -> None:
    for name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.setLevel(level)
        server_logger.propagate = True

    access_logger = logging.getLogger(UVICORN_ACCESS_LOGGER)
    access_logger.handlers.clear()
    access_logger.propagate = False
    access_logger.disabled = True


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and take over uvicorn's loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.

    Root handlers are only installed when the root logger has none, so
    calling this again (tests, a second ``create_app``) does not
    duplicate output.  The uvicorn loggers are adjusted on every call.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    _adopt_uvicorn_loggers(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
