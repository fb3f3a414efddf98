"""
fsspec-backed filesystem client.

This module provides a FileSystem implementation on top of any fsspec
protocol: 'hdfs' (through pyarrow), 'file' for the local disk, and 'memory'
for tests.
"""

import getpass
import os
import posixpath
from datetime import datetime
from typing import Any, Dict, List, IO, Optional
import logging
import fsspec

from Configuration import ClientConfigKeys, HOME_DIRECTORY_PROTOCOLS, HOME_DIRECTORY_ROOT
from FileSystem.base import FileSystem
from FileSystem.models import FileStatus, FileSystemConfig


class FsspecFileSystem(FileSystem):
    """
    Implementation of FileSystem for fsspec filesystems.

    fsspec raises on most refused operations where Hadoop returns False; this class
    translates between the two so that callers see Hadoop's conventions whatever
    the backend.
    """

    def __init__(self, config: FileSystemConfig) -> None:
        """Initialize the client from a configuration."""
        super().__init__(config)
        self.logger = logging.getLogger(__name__)
        self.fs = fsspec.filesystem(config.protocol, **config.storage_options)
        self.logger.debug(f"Created fsspec filesystem: protocol={config.protocol}")

    def get_file_status(self, path: str) -> FileStatus:
        self.logger.debug(f"Getting file status: {path}")
        return self._to_status(self.fs.info(self._qualify(path)))

    def exists(self, path: str) -> bool:
        return self.fs.exists(self._qualify(path))

    def list_status(self, path: str) -> List[FileStatus]:
        """
        List the entries of a directory.

        Args:
            path: The directory to list

        Returns:
            FileStatus objects sorted by path
        """
        self.logger.debug(f"Listing status: {path}")
        entries = self.fs.ls(self._qualify(path), detail=True)
        statuses = [self._to_status(entry) for entry in entries]

        self.logger.debug(f"Found {len(statuses)} entries")
        return sorted(statuses, key=lambda s: s.path)

    def open(self, path: str) -> IO:
        self.logger.debug(f"Opening input stream for: {path}")
        return self.fs.open(self._qualify(path), "rb")

    def create(self, path: str, overwrite: bool,
               buffer_size: Optional[int] = None,
               replication: Optional[int] = None,
               block_size: Optional[int] = None) -> IO:
        """
        Create a file and open it for writing.

        fsspec has no per-file placement hints, so replication and block_size are
        only logged; buffer_size becomes fsspec's write block size.

        Args:
            path: The path of the file to create
            overwrite: If False and the file exists, fail instead of truncating it
            buffer_size: Write buffer size in bytes
            replication: Replication factor hint
            block_size: Block size hint

        Returns:
            A binary IO object for writing to the file

        Raises:
            FileExistsError: If the file exists and overwrite is False
        """
        self.logger.debug(f"Opening output stream for: {path} (overwrite={overwrite}, "
                          f"buffer_size={buffer_size}, replication={replication}, "
                          f"block_size={block_size})")

        path = self._qualify(path)
        if not overwrite and self.fs.exists(path):
            raise FileExistsError(f"File already exists: {path}")

        kwargs: Dict[str, Any] = {}
        if buffer_size:
            kwargs["block_size"] = buffer_size
        return self.fs.open(path, "wb", **kwargs)

    def append(self, path: str) -> IO:
        self.logger.debug(f"Opening append stream for: {path}")
        return self.fs.open(self._qualify(path), "ab")

    def delete(self, path: str, recursive: bool) -> bool:
        self.logger.debug(f"Deleting: {path} (recursive={recursive})")
        path = self._qualify(path)
        try:
            self.fs.rm(path, recursive=recursive)
        except FileNotFoundError:
            return False
        except ValueError as e:
            # local fs refuses non-recursive directory deletes with ValueError
            raise IOError(f"Cannot delete {path}: {e}") from e
        return True

    def mkdirs(self, path: str) -> bool:
        """
        Create directories.

        Raises:
            FileExistsError: If a file is in the way
        """
        self.logger.debug(f"Creating directories: {path}")
        path = self._qualify(path)
        self.fs.makedirs(path, exist_ok=True)
        if not self.fs.isdir(path):
            raise FileExistsError(f"Path exists and is not a directory: {path}")
        return True

    def rename(self, src: str, dst: str) -> bool:
        """
        Move a file or directory.

        The move is refused (False) if the source is missing, the destination
        exists, or the destination's parent is not an existing directory.
        """
        self.logger.debug(f"Renaming: {src} -> {dst}")
        src, dst = self._qualify(src), self._qualify(dst)

        if not self.fs.exists(src):
            self.logger.debug(f"Rename refused, source not found: {src}")
            return False
        if self.fs.exists(dst):
            self.logger.debug(f"Rename refused, destination exists: {dst}")
            return False
        dst_parent = posixpath.dirname(dst.rstrip("/"))
        if dst_parent and not self.fs.isdir(dst_parent):
            self.logger.debug(f"Rename refused, destination parent is not a directory: {dst_parent}")
            return False

        self.fs.mv(src, dst, recursive=True)
        return True

    def get_working_directory(self) -> FileStatus:
        return self.get_file_status(self._working_directory())

    def _qualify(self, path: str) -> str:
        """Resolve a relative path against the working directory; fsspec treats it as root-relative."""
        if "://" in path or path.startswith("/"):
            return path
        return posixpath.normpath(posixpath.join(self._working_directory(), path))

    def _working_directory(self) -> str:
        working_dir = self.config.get(ClientConfigKeys.WORKING_DIRECTORY_KEY)
        if working_dir:
            return working_dir
        protocol = self.config.protocol
        if protocol in ("file", "local"):
            return os.getcwd()
        if protocol in HOME_DIRECTORY_PROTOCOLS:
            return f"{HOME_DIRECTORY_ROOT}/{getpass.getuser()}"
        return "/"

    def _to_status(self, info: Dict[str, Any]) -> FileStatus:
        return FileStatus(
            path=self._normalize_name(info["name"]),
            length=info.get("size") or 0,
            is_directory=info.get("type") == "directory",
            modification_time=self._modification_time(info),
        )

    @staticmethod
    def _normalize_name(name: str) -> str:
        # fsspec reports stripped names; memory's root is ''
        if "://" in name:
            return name
        name = name.rstrip("/")
        if not name.startswith("/"):
            name = "/" + name
        return name

    @staticmethod
    def _modification_time(info: Dict[str, Any]) -> Optional[float]:
        value = info.get("mtime", info.get("created"))
        if isinstance(value, datetime):
            return value.timestamp()
        if isinstance(value, (int, float)):
            return float(value)
        return None
