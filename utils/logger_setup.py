"""
Centralized logging configuration.

Usage:
    from utils.logger_setup import setup_logging

    setup_logging(log_file=settings.LOG_FILE)

    # Then in any module:
    import logging
    logger = logging.getLogger(__name__)
    logger.info("Something happened")
"""

import logging
import os
from typing import Optional

from config import settings


def setup_logging(
    log_level: str = settings.LOG_LEVEL,
    log_file: Optional[str] = settings.LOG_FILE,
) -> None:
    """
    Configure logging for the entire application.

    Entries go to the console and, when ``log_file`` can be opened, to that
    file as well. A file that cannot be opened (e.g. when not running as
    root) leaves logging console-only.

    Args:
        log_level: Minimum level to log (DEBUG, INFO, WARNING, ERROR).
        log_file: Path to log file. None means console only.
    """
    formatter = logging.Formatter(fmt=settings.LOG_FORMAT, datefmt=settings.LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Clear existing handlers to avoid duplicates on re-init
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            root_logger.warning("Cannot write log file %s: %s", log_file, e)
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    # APScheduler logs every job execution at INFO
    logging.getLogger("apscheduler").setLevel(logging.WARNING)
