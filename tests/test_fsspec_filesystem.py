"""
Unit tests for the fsspec filesystem client, against the local file system.
"""

import os
import unittest
import tempfile
import shutil

from Configuration import ClientConfigKeys
from FileSystem.fsspec_fs import FsspecFileSystem
from FileSystem.models import FileSystemConfig


class TestFsspecFileSystem(unittest.TestCase):
    """Test cases for the FsspecFileSystem class."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = os.path.realpath(tempfile.mkdtemp())
        self.fs = FsspecFileSystem(FileSystemConfig(
            protocol="file",
            properties={ClientConfigKeys.WORKING_DIRECTORY_KEY: self.temp_dir},
        ))

        # Create some test files and directories
        os.makedirs(os.path.join(self.temp_dir, "dir1"))
        os.makedirs(os.path.join(self.temp_dir, "dir2", "subdir"))

        with open(os.path.join(self.temp_dir, "file1.txt"), "w") as f:
            f.write("File 1 content")

        with open(os.path.join(self.temp_dir, "dir1", "file2.txt"), "w") as f:
            f.write("File 2 content")

    def tearDown(self):
        """Tear down test fixtures."""
        shutil.rmtree(self.temp_dir)

    def path(self, *parts):
        return os.path.join(self.temp_dir, *parts)

    def test_get_file_status(self):
        """Test that file and directory metadata is reported."""
        status = self.fs.get_file_status(self.path("file1.txt"))
        self.assertEqual(status.path, self.path("file1.txt"))
        self.assertEqual(status.length, len("File 1 content"))
        self.assertFalse(status.is_directory)
        self.assertTrue(status.is_file)

        status = self.fs.get_file_status(self.path("dir1"))
        self.assertTrue(status.is_directory)

    def test_get_file_status_missing(self):
        """Test that a missing path raises FileNotFoundError."""
        with self.assertRaises(FileNotFoundError):
            self.fs.get_file_status(self.path("nonexistent.txt"))

    def test_exists(self):
        """Test that existence is correctly determined."""
        self.assertTrue(self.fs.exists(self.path("file1.txt")))
        self.assertTrue(self.fs.exists(self.path("dir1")))
        self.assertFalse(self.fs.exists(self.path("nonexistent.txt")))

    def test_relative_paths_use_working_directory(self):
        """Test that relative paths are resolved against the configured working directory."""
        self.assertTrue(self.fs.exists("file1.txt"))
        self.assertTrue(self.fs.exists("dir1/file2.txt"))
        self.assertEqual(self.fs.get_working_directory().path, self.temp_dir)

    def test_list_status(self):
        """Test that the entries of a directory are listed in order."""
        statuses = self.fs.list_status(self.temp_dir)
        self.assertEqual([s.path for s in statuses],
                         [self.path("dir1"), self.path("dir2"), self.path("file1.txt")])
        self.assertEqual([s.is_directory for s in statuses], [True, True, False])

    def test_list_status_of_file(self):
        """Test that listing a file yields the file itself."""
        statuses = self.fs.list_status(self.path("file1.txt"))
        self.assertEqual([s.path for s in statuses], [self.path("file1.txt")])

    def test_open_streams(self):
        """Test that streams are correctly opened."""
        path = self.path("test_stream.txt")
        content = b"Test content for stream"

        with self.fs.create(path, overwrite=False) as f:
            f.write(content)

        self.assertTrue(os.path.exists(path))

        with self.fs.open(path) as f:
            result = f.read()

        self.assertEqual(result, content)

    def test_create_without_overwrite(self):
        """Test that an existing file is not replaced without overwrite."""
        with self.assertRaises(FileExistsError):
            self.fs.create(self.path("file1.txt"), overwrite=False)

        with open(self.path("file1.txt")) as f:
            self.assertEqual(f.read(), "File 1 content")

    def test_create_with_tuning(self):
        """Test that creating with buffer size and placement hints writes the file."""
        path = self.path("tuned.bin")
        with self.fs.create(path, True, 8192, 3, 1024 * 1024) as f:
            f.write(b"tuned")
        with self.fs.open(path) as f:
            self.assertEqual(f.read(), b"tuned")

    def test_append(self):
        """Test that append writes at the end of the file."""
        with self.fs.append(self.path("file1.txt")) as f:
            f.write(b"!")
        with open(self.path("file1.txt")) as f:
            self.assertEqual(f.read(), "File 1 content!")

    def test_mkdirs_and_delete(self):
        """Test that directories are correctly created and removed."""
        path = self.path("test_dir", "subdir")

        self.assertTrue(self.fs.mkdirs(path))
        self.assertTrue(os.path.isdir(path))
        # existing directories are fine
        self.assertTrue(self.fs.mkdirs(path))

        with self.fs.create(os.path.join(path, "test.txt"), overwrite=True) as f:
            f.write(b"Test content")

        self.assertTrue(self.fs.delete(self.path("test_dir"), recursive=True))
        self.assertFalse(os.path.exists(self.path("test_dir")))

    def test_mkdirs_over_file(self):
        """Test that a file in the way of mkdirs is an error."""
        with self.assertRaises(OSError):
            self.fs.mkdirs(self.path("file1.txt"))

    def test_delete_missing(self):
        """Test that deleting a missing path returns False."""
        self.assertFalse(self.fs.delete(self.path("nonexistent.txt"), recursive=True))

    def test_delete_directory_not_recursive(self):
        """Test that a non-recursive directory delete is an IOError."""
        with self.assertRaises(OSError):
            self.fs.delete(self.path("dir1"), recursive=False)
        self.assertTrue(os.path.isdir(self.path("dir1")))

    def test_rename(self):
        """Test that files and directories are moved."""
        self.assertTrue(self.fs.rename(self.path("file1.txt"), self.path("dir2", "moved.txt")))
        self.assertFalse(os.path.exists(self.path("file1.txt")))
        self.assertTrue(os.path.exists(self.path("dir2", "moved.txt")))

        self.assertTrue(self.fs.rename(self.path("dir1"), self.path("dir3")))
        self.assertTrue(os.path.exists(self.path("dir3", "file2.txt")))

    def test_rename_refused(self):
        """Test that refused renames return False and change nothing."""
        # missing source
        self.assertFalse(self.fs.rename(self.path("nonexistent.txt"), self.path("x.txt")))
        # existing destination
        self.assertFalse(self.fs.rename(self.path("file1.txt"), self.path("dir1", "file2.txt")))
        # missing destination parent
        self.assertFalse(self.fs.rename(self.path("file1.txt"), self.path("nodir", "x.txt")))

        self.assertTrue(os.path.exists(self.path("file1.txt")))
        with open(self.path("dir1", "file2.txt")) as f:
            self.assertEqual(f.read(), "File 2 content")

    def test_default_replication(self):
        """Test that the replication factor comes from the configuration."""
        self.assertEqual(self.fs.get_default_replication(self.path("file1.txt")),
                         ClientConfigKeys.DFS_REPLICATION_DEFAULT)

        fs = FsspecFileSystem(FileSystemConfig(
            protocol="file",
            properties={ClientConfigKeys.DFS_REPLICATION_KEY: "1"},
        ))
        self.assertEqual(fs.get_default_replication("/any"), 1)

    def test_default_working_directory(self):
        """Test the working directory used when none is configured."""
        fs = FsspecFileSystem(FileSystemConfig(protocol="file"))
        self.assertEqual(fs.get_working_directory().path, os.getcwd().replace(os.sep, "/"))

        fs = FsspecFileSystem(FileSystemConfig(protocol="memory"))
        self.assertEqual(fs.get_working_directory().path, "/")


if __name__ == "__main__":
    unittest.main()
