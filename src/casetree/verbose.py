"""Debug logging setup for the casetree package and its CLI."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup_logger(
    debug_file: Path | None = None,
    verbose: bool = False,
    logger_name: str = "casetree",
) -> logging.Logger:
    """
    Route the package's debug output to a file, to stderr, or both.

    Modules log through children of the ``casetree`` logger, so configuring
    it here captures everything the package emits. Calling this again
    replaces the previous handlers.

    Args:
        debug_file: Debug log to append to; parent directories are created.
        verbose: Also echo debug output to stderr.
        logger_name: Logger to configure.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(logger_name)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    handlers: list[logging.Handler] = []
    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(debug_file, mode="a"))
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
