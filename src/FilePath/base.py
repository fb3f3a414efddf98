"""
Base file path abstraction.

This module defines the capability contract of a file path handle: path
algebra, classification, listing, and the file/directory lifecycle. It is
independent of the filesystem behind the handle.
"""

from abc import ABC, abstractmethod
from typing import IO, Optional
import logging

from Utils.stream import FStream

logger = logging.getLogger(__name__)


class FilePath(ABC):
    """
    Abstract base class for file path handles.

    Handles compare by path. Path algebra (name, parent, child) never touches the
    filesystem; everything else queries it on every call.
    """

    @abstractmethod
    def get_name(self) -> str:
        """Last segment of the path; '' for the root."""
        pass

    @abstractmethod
    def get_path(self) -> str:
        """The path as stored, possibly relative."""
        pass

    @abstractmethod
    def get_absolute_path(self) -> str:
        """
        Get the absolute path, resolving it against the working directory if needed.

        Raises:
            IOError: If the working directory cannot be looked up
        """
        pass

    @abstractmethod
    def get_parent(self) -> Optional["FilePath"]:
        """
        Get a handle for the parent directory.

        Returns:
            The parent handle, or None if the path has no parent
        """
        pass

    @abstractmethod
    def get_child(self, child_name: str) -> "FilePath":
        pass

    @abstractmethod
    def path(self, path: str) -> "FilePath":
        """Get a handle for another path on the same filesystem."""
        pass

    @abstractmethod
    def is_directory(self) -> bool:
        """
        Check if the path is a directory.

        Raises:
            FileNotFoundError: If the path does not exist
            IOError: If the metadata cannot be read
        """
        pass

    @abstractmethod
    def is_regular(self) -> bool:
        """Check if the path names a regular (not hidden, temporary or marker) file."""
        pass

    @abstractmethod
    def exists(self) -> bool:
        """Check if the path exists; filesystem errors count as 'does not exist'."""
        pass

    @abstractmethod
    def get_length(self) -> int:
        """
        Get the size of the file in bytes.

        Raises:
            FileNotFoundError: If the path does not exist
            IOError: If the metadata cannot be read
        """
        pass

    @abstractmethod
    def list_children(self) -> FStream["FilePath"]:
        """
        List the entries of this directory.

        Returns:
            A single-pass stream of child handles

        Raises:
            FileNotFoundError: If the path does not exist
            IOError: If the listing fails
        """
        pass

    @abstractmethod
    def delete(self) -> bool:
        """
        Delete the path, recursively for directories.

        Returns:
            True if the path is gone (or never existed), False if the delete failed
        """
        pass

    @abstractmethod
    def mkdirs(self) -> bool:
        """
        Create this directory and any missing ancestors.

        Returns:
            False if the path already exists, otherwise the filesystem's result

        Raises:
            NotADirectoryError: If an existing ancestor is not a directory
        """
        pass

    @abstractmethod
    def rename_to(self, dst: "FilePath", replace_existing: bool) -> None:
        """
        Move this path to dst.

        Note the polarity of replace_existing: True means dst must not exist and
        the move fails if it does; False means an existing dst is deleted first.

        Raises:
            FileNotFoundError: If this path does not exist
            FileExistsError: If replace_existing is True and dst exists
            NotADirectoryError: If dst's parent exists and is not a directory
            ValueError: If dst is not a compatible handle
            IOError: If the move itself fails
        """
        pass

    @abstractmethod
    def open(self) -> IO:
        pass

    @abstractmethod
    def create(self, overwrite: bool) -> IO:
        pass

    @abstractmethod
    def append(self) -> IO:
        pass

    def delete_if_empty_directory(self) -> None:
        """
        Delete this directory if it is empty, then do the same for its parent, and so on.

        Stops at the first ancestor that is missing, not a directory, or not empty.
        The root is never deleted.

        Raises:
            IOError: If a directory cannot be inspected or deleted
        """
        current: Optional[FilePath] = self
        while current is not None and current.get_parent() is not None:
            if not current.exists() or not current.is_directory():
                return
            if current.list_children().first() is not None:
                return

            logger.debug(f"Deleting empty directory: {current}")
            if not current.delete():
                raise IOError(f"Failed to delete empty directory: {current}")
            current = current.get_parent()
