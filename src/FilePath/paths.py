"""
Path string algebra.

Paths are POSIX-style strings, optionally prefixed with a scheme and authority
('hdfs://namenode:8020/data/x'). The prefix is carried along unchanged by
every operation here; none of them perform I/O.
"""

from pathlib import PurePosixPath
from typing import Optional, Tuple

from Configuration import PathConfig

SCHEME_SEPARATOR = "://"


def split_path(path: str) -> Tuple[str, str]:
    """
    Split a path into its scheme/authority prefix and its POSIX part.

    Args:
        path: A path such as 'hdfs://nn:8020/a/b' or '/a/b' or 'a/b'

    Returns:
        A tuple (prefix, posix_path); the prefix is '' for plain paths
    """
    if SCHEME_SEPARATOR not in path:
        return "", path
    scheme, rest = path.split(SCHEME_SEPARATOR, 1)
    authority, _, remainder = rest.partition(PathConfig.SEPARATOR)
    return f"{scheme}{SCHEME_SEPARATOR}{authority}", PathConfig.SEPARATOR + remainder


def normalize(path: str) -> str:
    """
    Normalize a path: collapse repeated separators and '.' segments, drop trailing separators.

    Raises:
        ValueError: If the path is empty
    """
    if path is None or str(path) == "":
        raise ValueError("Can not create a path from an empty string")
    prefix, posix = split_path(str(path))
    if posix.startswith("//"):
        posix = PathConfig.SEPARATOR + posix.lstrip(PathConfig.SEPARATOR)
    return prefix + str(PurePosixPath(posix))


def has_authority(path: str) -> bool:
    return split_path(path)[0] != ""


def is_absolute(path: str) -> bool:
    return split_path(path)[1].startswith(PathConfig.SEPARATOR)


def get_name(path: str) -> str:
    # '' for the root
    return split_path(path)[1].rsplit(PathConfig.SEPARATOR, 1)[-1]


def get_parent(path: str) -> Optional[str]:
    """
    Get the parent of a path.

    The parent of a single relative segment ('a') is '.'. The root ('/') and '.'
    have no parent.

    Returns:
        The parent path, or None if there is none
    """
    prefix, posix = split_path(path)
    current = PurePosixPath(posix)
    parent = current.parent
    if parent == current:
        return None
    return prefix + str(parent)


def get_child(path: str, child_name: str) -> str:
    """
    Join a child name onto a path.

    Raises:
        ValueError: If the child name is empty
    """
    if not child_name:
        raise ValueError(f"Can not create a child of {path} from an empty name")
    prefix, posix = split_path(path)
    return normalize(prefix + str(PurePosixPath(posix) / child_name))


def resolve(base: str, path: str) -> str:
    """
    Resolve a path against a base directory.

    A path that carries its own scheme/authority is returned as is. Otherwise the
    result takes the base's prefix; an absolute path keeps its POSIX part and a
    relative one is appended to the base.

    Args:
        base: The directory to resolve against, usually the working directory
        path: The path to resolve

    Returns:
        The resolved, normalized path
    """
    if has_authority(path):
        return path
    base_prefix, base_posix = split_path(normalize(base))
    return normalize(base_prefix + str(PurePosixPath(base_posix) / split_path(path)[1]))
