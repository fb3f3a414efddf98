"""
Base filesystem abstraction.

This module defines the abstract base class for filesystem clients. A client
performs the raw metadata and data operations against a (usually remote)
hierarchical namespace; it does not enforce any invariants that span more
than one call. Those are the job of the path handles in the FilePath package.
"""

from abc import ABC, abstractmethod
from typing import List, IO, Optional

from Configuration import ClientConfigKeys
from FileSystem.models import FileStatus, FileSystemConfig


class FileSystem(ABC):
    """
    Abstract base class for filesystem clients.

    This class defines the interface that all filesystem clients must follow.
    Return values follow Hadoop's FileSystem conventions: operations that can
    "not happen" (rename, delete) report it through a boolean, while broken
    preconditions and transport errors raise OSError.
    """

    def __init__(self, config: FileSystemConfig) -> None:
        self.config = config

    def get_conf(self) -> FileSystemConfig:
        """
        Get the configuration this client was built from.

        Returns:
            The FileSystemConfig that can be used to look this client up again
        """
        return self.config

    def get_default_replication(self, path: str) -> int:
        """
        Get the default replication factor for files created under a path.

        Args:
            path: The path a file is about to be created at

        Returns:
            The replication factor from the configuration
        """
        return self.config.get_int(ClientConfigKeys.DFS_REPLICATION_KEY,
                                   ClientConfigKeys.DFS_REPLICATION_DEFAULT)

    @abstractmethod
    def get_file_status(self, path: str) -> FileStatus:
        """
        Get the metadata of a path.

        Args:
            path: The path to stat

        Returns:
            The FileStatus of the path

        Raises:
            FileNotFoundError: If the path does not exist
            IOError: If the metadata cannot be read
        """
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """
        Check if a path exists.

        Args:
            path: The path to check

        Returns:
            True if the path exists, False otherwise

        Raises:
            IOError: If the filesystem cannot be queried
        """
        pass

    @abstractmethod
    def list_status(self, path: str) -> List[FileStatus]:
        """
        List the entries of a directory.

        Listing a file yields the status of the file itself.

        Args:
            path: The directory to list

        Returns:
            A list of FileStatus objects, one per child entry

        Raises:
            FileNotFoundError: If the path does not exist
            IOError: If the listing fails
        """
        pass

    @abstractmethod
    def open(self, path: str) -> IO:
        """
        Open a file for reading.

        Args:
            path: The path of the file to open

        Returns:
            A binary IO object for reading the file

        Raises:
            FileNotFoundError: If the file does not exist
            IOError: If the file cannot be opened
        """
        pass

    @abstractmethod
    def create(self, path: str, overwrite: bool,
               buffer_size: Optional[int] = None,
               replication: Optional[int] = None,
               block_size: Optional[int] = None) -> IO:
        """
        Create a file and open it for writing.

        Args:
            path: The path of the file to create
            overwrite: If False and the file exists, fail instead of truncating it
            buffer_size: Write buffer size in bytes
            replication: Replication factor hint for the new file
            block_size: Block size hint for the new file

        Returns:
            A binary IO object for writing to the file

        Raises:
            FileExistsError: If the file exists and overwrite is False
            IOError: If the file cannot be opened for writing
        """
        pass

    @abstractmethod
    def append(self, path: str) -> IO:
        """
        Open a file for appending, creating it if it does not exist.

        Args:
            path: The path of the file to append to

        Returns:
            A binary IO object positioned at the end of the file

        Raises:
            IOError: If the file cannot be opened for appending
        """
        pass

    @abstractmethod
    def delete(self, path: str, recursive: bool) -> bool:
        """
        Remove a file or directory.

        Args:
            path: The path of the file or directory to remove
            recursive: If True and the path is a directory, remove it recursively

        Returns:
            True if something was removed, False if the path did not exist

        Raises:
            IOError: If the file or directory cannot be removed
        """
        pass

    @abstractmethod
    def mkdirs(self, path: str) -> bool:
        """
        Create directories.

        Creates the specified directory and any parent directories that don't exist.
        Creating a directory that already exists is not an error.

        Args:
            path: The path of the directory to create

        Returns:
            True if the directory exists afterwards

        Raises:
            IOError: If the directories cannot be created
        """
        pass

    @abstractmethod
    def rename(self, src: str, dst: str) -> bool:
        """
        Move a file or directory.

        Args:
            src: The path to move
            dst: The new path; it must not exist and its parent must exist

        Returns:
            True if the entry was moved, False if the move was refused

        Raises:
            IOError: If the move fails part way
        """
        pass

    @abstractmethod
    def get_working_directory(self) -> FileStatus:
        """
        Get the directory relative paths are resolved against.

        Returns:
            The FileStatus of the working directory

        Raises:
            FileNotFoundError: If the working directory does not exist
            IOError: If the lookup fails
        """
        pass
