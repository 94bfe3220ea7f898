"""Logging setup for desktopentry: stderr handler, optional log file, excepthook."""

from __future__ import annotations

import logging
import os
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_MAX_BYTES = 512 * 1024  # 512 KB
LOG_BACKUP_COUNT = 2
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure the desktopentry logger and install excepthook for uncaught exceptions."""
    root = logging.getLogger("desktopentry")
    root.setLevel(logging.DEBUG)
    level = logging.DEBUG if verbose else logging.INFO
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    # Avoid duplicate handlers
    streams = [h for h in root.handlers if type(h) is logging.StreamHandler]
    if not streams:
        stream = logging.StreamHandler(sys.stderr)
        stream.setFormatter(formatter)
        root.addHandler(stream)
        streams = [stream]
    for stream in streams:
        stream.setLevel(level)

    if log_file is not None and not _has_file_handler(root, log_file):
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                log_file,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        except OSError as e:
            root.warning("Cannot open log file %s: %s", log_file, e)
        else:
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(formatter)
            root.addHandler(handler)

    sys.excepthook = _excepthook


def _has_file_handler(logger: logging.Logger, log_file: Path) -> bool:
    target = os.path.abspath(log_file)
    return any(
        isinstance(h, RotatingFileHandler) and h.baseFilename == target
        for h in logger.handlers
    )


def _excepthook(exc_type: type, exc_value: BaseException, exc_tb) -> None:
    """Log uncaught exceptions and hand them on to the default hook."""
    lines = traceback.format_exception(exc_type, exc_value, exc_tb)
    msg = "".join(lines)
    logger = logging.getLogger("desktopentry")
    logger.critical("Uncaught exception:\n%s", msg)
    sys.__excepthook__(exc_type, exc_value, exc_tb)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(f"desktopentry.{name}")
