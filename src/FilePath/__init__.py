"""
File path module.

This module provides filesystem-agnostic path handles for navigating,
creating, renaming and streaming data to and from a hierarchical namespace.
"""

from .base import FilePath
from .hdfs_path import HdfsPath

__all__ = ["FilePath", "HdfsPath"]
