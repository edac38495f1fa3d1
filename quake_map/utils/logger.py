"""
Logging configuration for Quake Map Creator.

This module provides centralized logging configuration for both console and file output.
Console displays INFO-level messages for user feedback, while file captures DEBUG-level
details for troubleshooting.

Functions:
    setup_logging: Initialize logging handlers and return log file path
    get_logger: Get a logger instance for a specific module

Example:
    >>> from quake_map.utils.logger import setup_logging, get_logger
    >>> log_file = setup_logging()
    >>> logger = get_logger(__name__)
    >>> logger.info("Fetching feeds")
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

ROOT_LOGGER_NAME = 'quake_map'


def setup_logging(log_dir: Optional[Path] = None, console_level: int = logging.INFO) -> Path:
    """
    Setup logging to console and file.

    Creates two handlers:
    - Console: INFO level (or console_level) with bare messages
    - File: DEBUG level with timestamps and module names

    Parameters:
    -----------
    log_dir : Optional[Path]
        Directory for log files. Defaults to ./logs
    console_level : int
        Level for the console handler (default: logging.INFO)

    Returns:
    --------
    Path
        Path to the created log file
    """
    if log_dir is None:
        log_dir = Path.cwd() / 'logs'
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f'quake_map_{timestamp}.log'

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Drop handlers from a previous run in the same process
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter('%(message)s'))

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    logger.addHandler(console)
    logger.addHandler(file_handler)

    logger.debug(f"Logging initialized: {log_file}")

    return log_file


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Module names already inside the package (``quake_map.core.encoding``) are
    used as-is; anything else is nested under the ``quake_map`` logger so it
    shares the handlers installed by setup_logging.

    Parameters:
    -----------
    name : str
        Module name (typically __name__)

    Returns:
    --------
    logging.Logger
        Configured logger instance
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f'{ROOT_LOGGER_NAME}.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')
