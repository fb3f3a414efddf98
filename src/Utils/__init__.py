"""
Utility functions for the file path library.

This module provides utilities for logging setup and lazy streams.
"""

from .logging import setup_logging, get_logger
from .stream import FStream

__all__ = ["setup_logging", "get_logger", "FStream"]
