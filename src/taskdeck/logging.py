"""Logging configuration for taskdeck."""

import logging
import sys
from pathlib import Path

from . import __version__

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level_for(verbose: int) -> int:
    return logging.DEBUG if verbose >= 2 else logging.INFO


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> logging.Logger:
    """Attach handlers to the ``taskdeck`` logger.

    Nothing is logged unless ``verbose`` is set or ``log_file`` is given.
    Stderr output is only enabled by ``verbose`` since the TUI owns the
    terminal. Calling it again replaces the previous handlers.

    Args:
        verbose: 0 = off, 1 = INFO, 2+ = DEBUG
        log_file: Optional file to append log records to
    """
    logger = logging.getLogger("taskdeck")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if verbose == 0 and log_file is None:
        logger.propagate = True
        return logger

    level = _level_for(verbose)
    logger.setLevel(level)
    logger.propagate = False

    handlers: list[logging.Handler] = []
    if verbose > 0:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("taskdeck %s started (level=%s)", __version__, logging.getLevelName(level))
    return logger
