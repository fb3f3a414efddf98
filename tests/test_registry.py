"""
Unit tests for the filesystem registry, configuration model and config loader.
"""

import os
import shutil
import tempfile
import threading
import unittest

import fsspec

from Configuration import ClientConfigKeys
from FileSystem.base import FileSystem
from FileSystem.config_loader import load_filesystem_config
from FileSystem.fsspec_fs import FsspecFileSystem
from FileSystem.models import FileSystemConfig
from FileSystem.registry import clear_filesystem_cache, get_filesystem, register_filesystem


class RecordingFileSystem(FsspecFileSystem):
    """A client class registered under a custom protocol name."""

    def __init__(self, config: FileSystemConfig) -> None:
        super().__init__(config.model_copy(update={"protocol": "memory"}))
        self.requested_protocol = config.protocol


class TestRegistry(unittest.TestCase):
    """Test cases for get_filesystem and register_filesystem."""

    def setUp(self):
        """Set up test fixtures."""
        clear_filesystem_cache()

    def tearDown(self):
        """Tear down test fixtures."""
        clear_filesystem_cache()

    def test_equal_configs_share_a_client(self):
        """Test that equal configurations return the same client instance."""
        first = get_filesystem(FileSystemConfig(protocol="memory", properties={"a": "1"}))
        second = get_filesystem(FileSystemConfig(protocol="memory", properties={"a": "1"}))
        third = get_filesystem(FileSystemConfig(protocol="memory", properties={"a": "2"}))
        self.assertIs(first, second)
        self.assertIsNot(first, third)
        self.assertIsInstance(first, FileSystem)

    def test_clear_cache(self):
        """Test that clearing the cache builds new clients."""
        config = FileSystemConfig(protocol="memory")
        first = get_filesystem(config)
        clear_filesystem_cache()
        self.assertIsNot(get_filesystem(config), first)

    def test_concurrent_lookup(self):
        """Test that concurrent lookups of one configuration get one client."""
        config = FileSystemConfig(protocol="memory", properties={"concurrent": "yes"})
        results = []
        threads = [threading.Thread(target=lambda: results.append(get_filesystem(config)))
                   for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        self.assertEqual(len({id(fs) for fs in results}), 1)

    def test_registered_class_is_used(self):
        """Test that a registered class serves its protocol."""
        register_filesystem("recording", RecordingFileSystem)
        fs = get_filesystem(FileSystemConfig(protocol="recording"))
        self.assertIsInstance(fs, RecordingFileSystem)
        self.assertEqual(fs.requested_protocol, "recording")

    def test_unregistered_protocol_uses_fsspec(self):
        """Test that other protocols fall back to the fsspec client."""
        fs = get_filesystem(FileSystemConfig(protocol="memory", storage_options={}))
        self.assertIsInstance(fs, FsspecFileSystem)

    def test_hdfs_protocol_is_backed_by_pyarrow(self):
        """Test that the hdfs protocol resolves to fsspec's pyarrow filesystem without connecting."""
        fs_class = fsspec.get_filesystem_class("hdfs")
        self.assertTrue(fs_class.__module__.startswith("fsspec.implementations.arrow"))


class TestFileSystemConfig(unittest.TestCase):
    """Test cases for the FileSystemConfig model."""

    def test_defaults(self):
        """Test the default configuration."""
        config = FileSystemConfig()
        self.assertEqual(config.protocol, "file")
        self.assertEqual(config.storage_options, {})
        self.assertEqual(config.properties, {})

    def test_get_int(self):
        """Test integer properties and their defaults."""
        config = FileSystemConfig(properties={ClientConfigKeys.IO_FILE_BUFFER_SIZE_KEY: "65536",
                                              "blank": " ",
                                              "bad": "many"})
        self.assertEqual(config.get_int(ClientConfigKeys.IO_FILE_BUFFER_SIZE_KEY, 1), 65536)
        self.assertEqual(config.get_int("missing", 7), 7)
        self.assertEqual(config.get_int("blank", 7), 7)
        with self.assertRaises(ValueError):
            config.get_int("bad", 7)

    def test_cache_key_ignores_property_order(self):
        """Test that the cache key does not depend on insertion order."""
        first = FileSystemConfig(protocol="hdfs", properties={"a": "1", "b": "2"})
        second = FileSystemConfig(protocol="hdfs", properties={"b": "2", "a": "1"})
        self.assertEqual(first.cache_key(), second.cache_key())
        self.assertNotEqual(first.cache_key(), FileSystemConfig(protocol="file").cache_key())


class TestConfigLoader(unittest.TestCase):
    """Test cases for load_filesystem_config."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        """Tear down test fixtures."""
        shutil.rmtree(self.temp_dir)

    def write_config(self, content):
        path = os.path.join(self.temp_dir, "fs.yaml")
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_load(self):
        """Test that a YAML configuration is loaded."""
        path = self.write_config(
            "protocol: hdfs\n"
            "storage_options:\n"
            "  host: namenode\n"
            "  port: 8020\n"
            "properties:\n"
            "  io.file.buffer.size: 65536\n"
            "  fs.working.directory: /user/etl\n"
        )
        config = load_filesystem_config(path)
        self.assertEqual(config.protocol, "hdfs")
        self.assertEqual(config.storage_options, {"host": "namenode", "port": 8020})
        self.assertEqual(config.properties["io.file.buffer.size"], "65536")
        self.assertEqual(config.get(ClientConfigKeys.WORKING_DIRECTORY_KEY), "/user/etl")

    def test_missing_file(self):
        """Test that a missing file gives the default configuration."""
        config = load_filesystem_config(os.path.join(self.temp_dir, "missing.yaml"))
        self.assertEqual(config, FileSystemConfig())

    def test_empty_file(self):
        """Test that an empty file gives the default configuration."""
        self.assertEqual(load_filesystem_config(self.write_config("")), FileSystemConfig())

    def test_invalid_yaml(self):
        """Test that malformed YAML is an error."""
        with self.assertRaises(ValueError):
            load_filesystem_config(self.write_config("protocol: [unclosed\n"))

    def test_invalid_shape(self):
        """Test that a non-mapping root or wrong field types are errors."""
        with self.assertRaises(ValueError):
            load_filesystem_config(self.write_config("- just\n- a list\n"))
        with self.assertRaises(ValueError):
            load_filesystem_config(self.write_config("storage_options: not-a-dict\n"))


if __name__ == "__main__":
    unittest.main()
