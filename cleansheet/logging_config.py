"""Logging setup for the dashboard and its report CLI."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from .config import get_config

PACKAGE_LOGGER = 'cleansheet'

# Third-party loggers that are noisy at DEBUG (one line per HTTP request)
QUIET_LOGGERS = ('urllib3', 'requests')

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
CONSOLE_FORMAT = '%(levelname)s: %(message)s'


def log_file_path(log_dir: Path) -> Path:
    return log_dir / f'cleansheet_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    log_to_file: bool = True,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configure the ``cleansheet`` logger.

    Module loggers (``cleansheet.ratings``, ``cleansheet.fpl_client`` ...)
    propagate into the handlers installed here. The file handler writes a
    timestamped log under ``log_dir``; the console handler writes to stderr
    so rendered tables on stdout stay clean.

    Args:
        log_dir: Directory for log files (default: log_dir from the config)
        level: Logging level (default: INFO)
        log_to_file: Whether to log to a file (default: True)
        log_to_console: Whether to log to stderr (default: True)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in logger.handlers:
        handler.close()
    logger.handlers = []

    if log_to_file:
        log_dir = Path(log_dir or get_config().log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file_path(log_dir), encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Package logger, or the ``cleansheet.<name>`` child logger."""
    return logging.getLogger(f'{PACKAGE_LOGGER}.{name}' if name else PACKAGE_LOGGER)
