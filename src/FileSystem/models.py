import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class FileStatus(BaseModel):
    """Metadata of a single entry in the remote namespace."""
    path: str = Field(..., description="Full path of the entry as reported by the filesystem.")
    length: int = Field(0, description="Size in bytes; 0 for directories.")
    is_directory: bool = Field(False, description="True if the entry is a directory.")
    modification_time: Optional[float] = Field(
        None,
        description="Last modification time (epoch seconds) if the filesystem reports one."
    )

    @property
    def is_file(self) -> bool:
        return not self.is_directory


class FileSystemConfig(BaseModel):
    """
    Serializable key/value set that is sufficient to locate or rebuild a filesystem client.

    A path handle persists this configuration instead of the live client, and the
    filesystem registry uses it to look the client up again.
    """
    protocol: str = Field("file", description="fsspec protocol name (e.g. 'hdfs', 'file', 'memory').")
    storage_options: Dict[str, Any] = Field(
        default_factory=dict,
        description="Keyword arguments passed to fsspec.filesystem()."
    )
    properties: Dict[str, str] = Field(
        default_factory=dict,
        description="Hadoop-style configuration properties (e.g. 'io.file.buffer.size')."
    )

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.properties.get(key, default)

    def get_int(self, key: str, default: int) -> int:
        value = self.properties.get(key)
        if value is None or str(value).strip() == "":
            return default
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"Property '{key}' is not an integer: {value!r}")

    def cache_key(self) -> str:
        """Stable key identifying clients built from an equal configuration."""
        return json.dumps(self.model_dump(mode="json"), sort_keys=True, default=str)
