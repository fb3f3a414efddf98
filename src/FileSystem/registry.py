"""
Filesystem registry.

This module provides a registry of filesystem client classes and a cache of
client instances keyed by configuration, so that a configuration written out
by a path handle can be turned back into a live client.
"""

import logging
import threading
from typing import Dict, Type

from FileSystem.base import FileSystem
from FileSystem.fsspec_fs import FsspecFileSystem
from FileSystem.models import FileSystemConfig

# Registry of filesystem implementations, by protocol
_FILESYSTEM_REGISTRY: Dict[str, Type[FileSystem]] = {}
# Client instances, by FileSystemConfig.cache_key()
_FILESYSTEM_CACHE: Dict[str, FileSystem] = {}
_CACHE_LOCK = threading.Lock()
logger = logging.getLogger(__name__)


def register_filesystem(protocol: str, fs_class: Type[FileSystem]) -> None:
    """
    Register a filesystem implementation for a protocol.

    Args:
        protocol: The protocol the implementation serves (e.g. 'hdfs')
        fs_class: The filesystem implementation class
    """
    logger.debug(f"Registering filesystem: {protocol} -> {fs_class.__name__}")
    _FILESYSTEM_REGISTRY[protocol] = fs_class


def get_filesystem(config: FileSystemConfig) -> FileSystem:
    """
    Get the filesystem client for a configuration.

    Equal configurations share one client instance. Protocols without a registered
    implementation are served by FsspecFileSystem.

    Args:
        config: The configuration to look up or build a client for

    Returns:
        A filesystem client
    """
    key = config.cache_key()
    with _CACHE_LOCK:
        fs = _FILESYSTEM_CACHE.get(key)
        if fs is None:
            fs_class = _FILESYSTEM_REGISTRY.get(config.protocol, FsspecFileSystem)
            logger.debug(f"Creating filesystem: protocol={config.protocol}, class={fs_class.__name__}")
            fs = fs_class(config)
            _FILESYSTEM_CACHE[key] = fs
        return fs


def clear_filesystem_cache() -> None:
    """Forget all cached client instances."""
    with _CACHE_LOCK:
        logger.debug(f"Clearing {len(_FILESYSTEM_CACHE)} cached filesystems")
        _FILESYSTEM_CACHE.clear()


# Register built-in filesystem implementations
for _protocol in ("hdfs", "file", "memory"):
    register_filesystem(_protocol, FsspecFileSystem)
