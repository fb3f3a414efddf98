"""
Filesystem client configuration keys and defaults.

This module contains the Hadoop-style property keys understood by the
filesystem clients, together with their default values.
"""

class ClientConfigKeys:
    """Property keys read from a FileSystemConfig."""

    IO_FILE_BUFFER_SIZE_KEY: str = "io.file.buffer.size"
    """Buffer size (bytes) used when opening output streams with explicit tuning."""
    IO_FILE_BUFFER_SIZE_DEFAULT: int = 4096
    """Default buffer size when the property is not set."""

    DFS_REPLICATION_KEY: str = "dfs.replication"
    """Default replication factor for newly created files."""
    DFS_REPLICATION_DEFAULT: int = 3
    """Replication factor used when the property is not set."""

    DFS_BLOCK_SIZE_KEY: str = "dfs.blocksize"
    """Default block size (bytes) for newly created files."""
    DFS_BLOCK_SIZE_DEFAULT: int = 128 * 1024 * 1024

    WORKING_DIRECTORY_KEY: str = "fs.working.directory"
    """Directory that relative paths are resolved against.
       Affects: FilePath.get_absolute_path()."""


class PathConfig:
    """Constants used by the path handles."""

    HIDDEN_NAME_PREFIXES: tuple = ("_", ".")
    """A path whose name starts with one of these prefixes is not a regular file
       (temporary files, hidden files and markers such as '_SUCCESS')."""

    CURRENT_DIRECTORY: str = "."
    """Parent of a single-segment relative path."""

    SEPARATOR: str = "/"


# Protocols whose default working directory is the user's home directory
HOME_DIRECTORY_PROTOCOLS = ("hdfs", "webhdfs", "arrow_hdfs")
HOME_DIRECTORY_ROOT = "/user"
