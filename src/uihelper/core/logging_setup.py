"""
Logging initialisation for uihelper.

Library modules only create module-level loggers; applications embedding the
helpers (or the demo window) call :func:`init_logging` once at startup.
"""

import logging
import logging.handlers
import os
from pathlib import Path

from .config_manager import ConfigManager

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Package logger, every module logger is a child of it
PACKAGE_LOGGER = "uihelper"


def init_logging(level: str | None = None, log_file: str | Path | None = None) -> logging.Logger:
    """
    Initialize logging configuration.

    Args:
        level: Log level name; defaults to the configured ``log_level``
        log_file: Optional path of a rotating log file; defaults to the
            configured ``log_file`` (empty means console only)

    Returns:
        The package logger
    """
    if level is None or log_file is None:
        config = ConfigManager()
        if level is None:
            level = config.get("log_level")
        if log_file is None:
            log_file = config.get("log_file")

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    if log_file:
        log_path = Path(log_file)
        already_attached = any(
            isinstance(h, logging.handlers.RotatingFileHandler) and h.baseFilename == os.path.abspath(log_path)
            for h in package_logger.handlers
        )
        if not already_attached:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=5_242_880,  # 5MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
            package_logger.addHandler(file_handler)

    return package_logger
