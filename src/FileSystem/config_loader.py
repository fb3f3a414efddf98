import yaml
from pathlib import Path
from typing import Union
import logging

from pydantic import ValidationError

from FileSystem.models import FileSystemConfig

logger = logging.getLogger(__name__)


def load_filesystem_config(file_path: Union[str, Path]) -> FileSystemConfig:
    """
    Load a filesystem client configuration from a YAML file.

    The file holds the FileSystemConfig fields at its root:

        protocol: hdfs
        storage_options:
          host: namenode
          port: 8020
        properties:
          io.file.buffer.size: "65536"

    Args:
        file_path: Path of the YAML file

    Returns:
        The loaded configuration, or the default configuration if the file does not exist

    Raises:
        ValueError: If the file is not valid YAML or does not describe a configuration
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            root = yaml.safe_load(f)
    except FileNotFoundError:
        logger.warning(f"Filesystem config file not found: {file_path}. Using defaults.")
        return FileSystemConfig()
    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML file {file_path}: {e}")
        raise ValueError(f"Invalid YAML in {file_path}: {e}") from e

    if root is None:
        root = {}
    if not isinstance(root, dict):
        logger.error(f"Filesystem config {file_path} root is not a dict: {type(root)}")
        raise ValueError(f"Filesystem config root must be a mapping: {file_path}")

    # YAML turns numbers into ints; properties are strings like Hadoop's
    properties = root.get("properties")
    if isinstance(properties, dict):
        root["properties"] = {str(k): str(v) for k, v in properties.items()}

    try:
        config = FileSystemConfig(**root)
    except ValidationError as e:
        logger.error(f"Invalid filesystem config {file_path}: {e}")
        raise ValueError(f"Invalid filesystem config {file_path}: {e}") from e

    logger.info(f"Loaded filesystem config from {file_path}: protocol={config.protocol}")
    return config
