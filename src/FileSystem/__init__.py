"""
Filesystem client module.

This module provides the filesystem client contract that path handles are
built on, an fsspec-backed implementation of it, and a registry that maps a
serializable configuration back to a live client.
"""

from .models import FileStatus, FileSystemConfig
from .base import FileSystem
from .fsspec_fs import FsspecFileSystem
from .registry import get_filesystem, register_filesystem, clear_filesystem_cache
from .config_loader import load_filesystem_config

__all__ = [
    "FileStatus",
    "FileSystemConfig",
    "FileSystem",
    "FsspecFileSystem",
    "get_filesystem",
    "register_filesystem",
    "clear_filesystem_cache",
    "load_filesystem_config",
]
