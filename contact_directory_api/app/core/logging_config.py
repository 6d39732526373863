"""
Logging configuration for the service.

Handlers are attached to the ``contact_directory_api`` package logger
rather than the root logger, so uvicorn keeps its own access/error
logging and test runners can still capture records through
propagation.  Handlers are named, which makes repeated calls (one per
``create_app``) idempotent; the level is re‑applied on every call.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "contact_directory_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER = "contact-directory-console"
FILE_HANDLER = "contact-directory-file"


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def _attach(logger: logging.Logger, handler: logging.Handler, name: str) -> None:
    handler.set_name(name)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the package logger from ``LOG_LEVEL`` / ``LOG_FILE``.

    Unknown level names fall back to ``INFO``.  The file handler is
    added the first time a ``logfile`` is given.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not _has_handler(logger, CONSOLE_HANDLER):
        _attach(logger, logging.StreamHandler(), CONSOLE_HANDLER)

    if logfile and not _has_handler(logger, FILE_HANDLER):
        _attach(logger, logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"), FILE_HANDLER)

    return logger
