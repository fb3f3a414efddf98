"""
Initializes the Configuration package.

This module provides centralized access to the property keys, defaults and
constants used by the filesystem clients and path handles.
"""

from .ClientConfig import (
    ClientConfigKeys,
    PathConfig,
    HOME_DIRECTORY_PROTOCOLS,
    HOME_DIRECTORY_ROOT,
)

__all__ = [
    # Client constants
    "ClientConfigKeys",
    "HOME_DIRECTORY_PROTOCOLS",
    "HOME_DIRECTORY_ROOT",

    # Path constants
    "PathConfig",
]
