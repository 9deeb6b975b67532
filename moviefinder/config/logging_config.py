"""
Logging setup for MovieFinder.

Console output plus an optional rotating log file. Modules log through
    logger = logging.getLogger(__name__)
and inherit the handlers attached to the ``moviefinder`` logger here.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_dir: Path | None = None,
    level: int = logging.INFO,
    log_file: str = "moviefinder.log",
) -> None:
    """
    Attach handlers to the ``moviefinder`` logger.

    Args:
        log_dir: Directory for the log file. None means console only.
        level: Minimum log level.
        log_file: Name of the log file inside *log_dir*.
    """
    app_logger = logging.getLogger("moviefinder")
    app_logger.setLevel(level)

    # Handlers are attached once per process
    if app_logger.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)
    app_logger.addHandler(console)

    if log_dir is None:
        return

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_dir / log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
    except OSError as e:
        app_logger.warning("File logging disabled: %s", e)
        return

    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    app_logger.addHandler(file_handler)
