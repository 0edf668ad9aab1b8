"""Logging utilities for awesomelist commands."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "awesomelist"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the awesomelist hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send awesomelist records to stderr and, when ``log_file`` is given, append them there too.

    Console lines are prefixed with ``[awesomelist]``; file lines carry a timestamp
    and the emitting logger so loader and parser activity can be told apart.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Handlers are rebuilt on every call; a replaced file sink must release its file.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("[awesomelist] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    if log_file is not None:
        log_file = Path(log_file).expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
