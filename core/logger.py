"""Logging helpers shared across the code base.

Two loggers live here: the application logger (``unificador``), which writes
to the console, and the run log (``unificador.runs``), which appends one line
per CLI command to a file.
"""

from __future__ import annotations

import logging
import os
from typing import Union

__all__ = [
    "get_logger",
    "get_run_logger",
    "log_debug",
    "log_error",
    "log_info",
    "log_step",
    "log_warn",
    "resolve_level",
    "set_level",
]


_LOGGER_NAME = "unificador"
_RUN_LOGGER_NAME = "unificador.runs"
_DEFAULT_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
_RUN_FORMAT = "%(asctime)s\t%(levelname)s\t%(message)s"

PathLike = Union[str, os.PathLike]


def resolve_level(level: int | str | None) -> int:
    """Translate ``"debug"``, ``"INFO"``, ``10``... into a logging level.

    Unknown names fall back to ``INFO`` so a typo in ``UNIFICADOR_LOG_LEVEL``
    does not break the commands.
    """

    if level is None:
        from core.config import LOG_LEVEL

        level = LOG_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _configure_logger(logger: logging.Logger) -> None:
    """Attach a default stream handler to the provided logger if needed."""

    if logger.handlers:
        # Already configured elsewhere (e.g. by tests).
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(resolve_level(None))


def get_logger() -> logging.Logger:
    """Return the shared application logger.

    The first time the logger is requested a console handler is attached and
    the level comes from ``UNIFICADOR_LOG_LEVEL`` (see :mod:`core.config`).
    """

    logger = logging.getLogger(_LOGGER_NAME)
    _configure_logger(logger)
    return logger


def get_run_logger(log_file: PathLike) -> logging.Logger:
    """Return the run logger, writing to ``log_file``.

    The parent directory is created on demand; ``OSError`` propagates so the
    caller decides whether a missing run log matters.
    """

    path = os.path.abspath(os.fspath(log_file))
    os.makedirs(os.path.dirname(path), exist_ok=True)

    logger = logging.getLogger(_RUN_LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == path:
            return logger
        # Only one run log is open at a time.
        logger.removeHandler(handler)
        handler.close()

    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(_RUN_FORMAT))
    logger.addHandler(handler)
    return logger


def set_level(level: int | str | None = None) -> None:
    """Update the level of the shared logger (``None`` restores the configured one)."""

    get_logger().setLevel(resolve_level(level))


def _log(level: int, message: str) -> None:
    get_logger().log(level, message)


def log_debug(message: str) -> None:
    _log(logging.DEBUG, message)


def log_info(message: str) -> None:
    _log(logging.INFO, message)


def log_warn(message: str) -> None:
    _log(logging.WARNING, message)


def log_error(message: str) -> None:
    _log(logging.ERROR, message)


def log_step(title: str) -> None:
    """Highlight command milestones with a clear, multi-line banner."""

    separator = "=" * 50
    for line in ("", separator, title.upper(), separator):
        _log(logging.INFO, line)
