#!/usr/bin/env python3
"""
Logging utilities for the gist uploader.

Console logging is configured first so startup errors can be reported
without creating anything on disk. The rotating file log is attached once
the run options are known to be valid.
"""

import os
import logging
from logging.handlers import RotatingFileHandler

from tqdm import tqdm

CONSOLE_FORMAT = '%(message)s'
FILE_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class TqdmConsoleHandler(logging.Handler):
    """Console handler that prints above any active tqdm progress bar."""

    def emit(self, record):
        try:
            tqdm.write(self.format(record))
        except Exception:
            self.handleError(record)


def setup_logging(verbose=False):
    """
    Configure console logging on the root logger, replacing existing handlers.

    Args:
        verbose: Whether to show debug output in the console
    """
    level = logging.DEBUG if verbose else logging.INFO
    root = logging.getLogger()
    root.setLevel(level)

    # Clear existing handlers to avoid duplication
    root.handlers = []

    console_handler = TqdmConsoleHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root.addHandler(console_handler)


def add_file_logging(log_folder, log_basename='gist', max_bytes=5*1024*1024, backup_count=10):
    """
    Attach a rotating file handler to the root logger.

    Args:
        log_folder: Existing folder for the log files
        log_basename: Base name for log files (default: 'gist')
        max_bytes: Maximum size of the log file before rotation in bytes (default: 5MB)
        backup_count: Number of backup files to keep (default: 10)
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    file_handler = RotatingFileHandler(
        os.path.join(log_folder, f"{log_basename}_0.log"),
        maxBytes=max_bytes,
        backupCount=backup_count,
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    root.addHandler(file_handler)


def get_logger(name):
    """
    Get a named logger.

    Args:
        name: The name for the logger

    Returns:
        A named logger
    """
    return logging.getLogger(name)
