"""
Logging utilities for the file path library.

This module provides utilities for setting up logging with rotation.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

def setup_logging(
    log_dir: str,
    log_level: int = logging.INFO,
    log_file_name: str = "fpath.log",
    max_bytes: int = 10 * 1024 * 1024,  # 10 MB
    backup_count: int = 10
) -> None:
    """
    Set up logging with rotation.

    Log records go to a rotating file in log_dir and to stderr, so that command
    output on stdout stays clean.

    Args:
        log_dir: The directory to store log files in
        log_level: The logging level (default: logging.INFO)
        log_file_name: The name of the log file (default: "fpath.log")
        max_bytes: The maximum size of each log file in bytes (default: 10 MB)
        backup_count: The number of backup files to keep (default: 10)
    """
    # Create the log directory if it doesn't exist
    if not os.path.exists(log_dir):
        os.makedirs(log_dir, exist_ok=True)

    log_file = os.path.join(log_dir, log_file_name)

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    console_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s"
    )

    file_handler = RotatingFileHandler(
        log_file, maxBytes=max_bytes, backupCount=backup_count, encoding='utf-8'
    )
    file_handler.setFormatter(file_formatter)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    # Keep the console quiet unless something goes wrong
    console_handler.setLevel(max(log_level, logging.WARNING))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # fsspec logs every info/ls call at debug
    logging.getLogger("fsspec").setLevel(max(log_level, logging.INFO))

    logging.debug(f"Logging configured with level {logging.getLevelName(log_level)}")
    logging.debug(f"Log file: {log_file}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name: The name of the logger

    Returns:
        A logger instance
    """
    return logging.getLogger(name)
