"""
HDFS file path handle.

This module provides the FilePath implementation bound to a FileSystem
client. Besides simple delegation it implements the composite operations the
client does not perform atomically: recursive directory creation, rename with
destination and parent checks, and removal of directories emptied by a move.
"""

import logging
import threading
from pathlib import PurePosixPath
from typing import IO, Optional, Union

from Configuration import ClientConfigKeys, PathConfig
from FilePath import paths
from FilePath.base import FilePath
from FileSystem.base import FileSystem
from FileSystem.models import FileStatus, FileSystemConfig
from FileSystem.registry import get_filesystem
from Utils.stream import FStream

logger = logging.getLogger(__name__)


class HdfsPath(FilePath):
    """
    A path in the namespace of a FileSystem client.

    Create handles with HdfsPath.of(). The client is shared, not owned. The stored
    path changes only once, when get_absolute_path() first resolves it.

    Pickling stores the client's configuration instead of the client; unpickling
    looks the client up again through the filesystem registry.
    """

    def __init__(self, fs: FileSystem, path: str) -> None:
        self._fs = fs
        self._path = path
        self._resolved = False
        self._lock = threading.Lock()

    @classmethod
    def of(cls, fs: FileSystem, path: Union[str, PurePosixPath, "HdfsPath"]) -> "HdfsPath":
        """
        Create a handle for a path on a filesystem.

        Args:
            fs: The filesystem client the path lives on
            path: A path string, a PurePosixPath, or another handle's path

        Returns:
            A new HdfsPath

        Raises:
            ValueError: If the path is empty
        """
        if isinstance(path, HdfsPath):
            path = path.get_path()
        return cls(fs, paths.normalize(str(path)))

    def get_name(self) -> str:
        return paths.get_name(self._path)

    def get_path(self) -> str:
        return self._path

    def get_file_system(self) -> FileSystem:
        return self._fs

    def get_file_status(self) -> FileStatus:
        return self._fs.get_file_status(self._path)

    def get_absolute_path(self) -> str:
        """
        Get the absolute path, resolving it against the working directory on first use.

        The resolved path replaces the stored one, so the working directory is looked
        up at most once per handle.

        Raises:
            IOError: If the working directory cannot be looked up
        """
        with self._lock:
            if not self._resolved:
                if not paths.has_authority(self._path):
                    try:
                        working_dir = self._fs.get_working_directory()
                    except OSError as e:
                        logger.error(f"Failed to look up working directory for {self._path}: {e}")
                        raise
                    self._path = paths.resolve(working_dir.path, self._path)
                self._resolved = True
            return self._path

    def get_parent(self) -> Optional["HdfsPath"]:
        parent = paths.get_parent(self._path)
        return HdfsPath(self._fs, parent) if parent is not None else None

    def get_child(self, child_name: str) -> "HdfsPath":
        return HdfsPath(self._fs, paths.get_child(self._path, child_name))

    def path(self, path: str) -> "HdfsPath":
        return HdfsPath.of(self._fs, path)

    def is_directory(self) -> bool:
        return self._fs.get_file_status(self._path).is_directory

    def is_regular(self) -> bool:
        return not self.get_name().startswith(PathConfig.HIDDEN_NAME_PREFIXES)

    def list_children(self) -> FStream["HdfsPath"]:
        statuses = self._fs.list_status(self._path)
        # listed names lose the scheme and authority; rebuild them from this handle
        return FStream.of(statuses).map(lambda status: self.get_child(paths.get_name(status.path)))

    def get_length(self) -> int:
        return self._fs.get_file_status(self._path).length

    def exists(self) -> bool:
        try:
            return self._fs.exists(self._path)
        except OSError as e:
            logger.debug(f"Existence check failed, treating as absent: path={self._path}, error={e}")
            return False

    def delete(self) -> bool:
        if not self.exists():
            return True

        try:
            return self._fs.delete(self._path, True)
        except OSError as e:
            logger.warning(f"Failed to delete {self._path}: {e}")
            return False

    def rename_to(self, dst: FilePath, replace_existing: bool) -> None:
        """
        Move this path to dst.

        replace_existing has an inverted meaning: True makes an existing dst an error,
        False deletes an existing dst before the move. A missing parent of dst is
        created. After the move, directories left empty above the source are deleted;
        failures in that cleanup are logged and do not fail the rename.

        Args:
            dst: The destination handle; must be an HdfsPath on the same kind of filesystem
            replace_existing: See above

        Raises:
            FileNotFoundError: If this path does not exist
            ValueError: If dst is not a compatible handle
            FileExistsError: If replace_existing is True and dst exists
            NotADirectoryError: If dst's parent exists and is not a directory
            IOError: If the filesystem refuses or fails the move
        """
        if not self.exists():
            raise FileNotFoundError(f"source not found: file={self._path}")

        if not isinstance(dst, HdfsPath):
            raise ValueError(f"incompatible destination file handle: {dst!r}")
        if dst._fs.get_conf().protocol != self._fs.get_conf().protocol:
            raise ValueError(f"incompatible destination filesystem: "
                             f"{dst._fs.get_conf().protocol} != {self._fs.get_conf().protocol}")

        dst_exists = dst.exists()
        if replace_existing and dst_exists:
            raise FileExistsError(f"destination exists: file={dst}")

        dst_parent = dst.get_parent()
        if dst_parent is not None:
            if not dst_parent.exists():
                dst_parent.mkdirs()
            elif not dst_parent.is_directory():
                raise NotADirectoryError(f"destination's parent is not a directory: path={dst_parent}")

        if not replace_existing and dst_exists:
            logger.debug(f"Deleting existing destination before rename: {dst}")
            dst.delete()

        src_parent = self.get_parent()
        logger.debug(f"Renaming {self._path} to {dst}")
        if not self._fs.rename(self._path, dst._path):
            raise IOError(f"fails to rename: src={self._path}, dst={dst}")

        # the move may have left the source's directories empty
        if src_parent is not None:
            try:
                src_parent.delete_if_empty_directory()
            except OSError as e:
                logger.warning(f"Failed to clean up empty directories above {self._path}: {e}")

    def mkdirs(self) -> bool:
        if self.exists():
            return False

        parent = self.get_parent()
        if parent is not None:
            if not parent.exists():
                parent.mkdirs()
            elif not parent.is_directory():
                raise NotADirectoryError(f"the parent file is not a directory: path={parent}")

        return self._fs.mkdirs(self._path)

    def open(self) -> IO:
        return self._fs.open(self._path)

    def create(self, overwrite: bool, block_size: Optional[int] = None) -> IO:
        """
        Create the file, and any missing parent directories, and open it for writing.

        Args:
            overwrite: If False and the file exists, fail instead of truncating it
            block_size: If given, the file is created with this block size, the
                        configured buffer size and the filesystem's default replication

        Returns:
            A binary IO object for writing to the file

        Raises:
            FileExistsError: If the file exists and overwrite is False
        """
        self._make_parent_dirs()
        if block_size is None:
            return self._fs.create(self._path, overwrite)

        buffer_size = self._fs.get_conf().get_int(ClientConfigKeys.IO_FILE_BUFFER_SIZE_KEY,
                                                  ClientConfigKeys.IO_FILE_BUFFER_SIZE_DEFAULT)
        return self._fs.create(self._path, overwrite, buffer_size,
                               self._fs.get_default_replication(self._path), block_size)

    def append(self) -> IO:
        self._make_parent_dirs()
        return self._fs.append(self._path)

    def _make_parent_dirs(self) -> None:
        parent = self.get_parent()
        if parent is not None:
            parent.mkdirs()

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"HdfsPath({self._path!r})"

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, HdfsPath):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        """
        Hash the last segment only.

        The name survives absolute resolution and the full path does not, so a handle
        stays in its bucket when it resolves. Handles sharing a name, such as every
        part-00000 or _SUCCESS, collide; equality tells them apart.
        """
        return hash(self.get_name())

    def __getstate__(self) -> dict:
        return {
            "config": self._fs.get_conf().model_dump(),
            "path": self._path,
        }

    def __setstate__(self, state: dict) -> None:
        self._fs = get_filesystem(FileSystemConfig(**state["config"]))
        self._path = state["path"]
        self._resolved = False
        self._lock = threading.Lock()
