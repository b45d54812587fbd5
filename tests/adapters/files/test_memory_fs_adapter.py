"""
Tests for the InMemoryFileSystemAdapter.
"""

import pytest

from jailfs.adapters.files.memory_fs_adapter import InMemoryFileSystemAdapter
from jailfs.entities.file_info import FileType
from jailfs.exceptions import FileRepositoryError


class TestInMemoryFileSystemAdapter:
    """Test cases for the InMemoryFileSystemAdapter."""

    def test_requires_initialization(self, mock_logger):
        """Test that calls before initialize() are refused."""
        adapter = InMemoryFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="not initialized"):
            adapter.is_directory("/")

    def test_root_exists(self, memory_fs):
        """Test that '/' always exists."""
        assert memory_fs.is_directory("/") is True

    def test_seeded_tree(self, memory_fs):
        """Test files and implicit parent directories."""
        assert memory_fs.exists("/jail/notes.txt") is True
        assert memory_fs.is_directory("/jail/docs") is True
        assert memory_fs.is_directory("/jail/notes.txt") is False

    def test_trailing_and_double_separators(self, memory_fs):
        """Test that path keys are canonical."""
        assert memory_fs.is_directory("/jail/") is True
        assert memory_fs.exists("//jail//notes.txt") is True

    def test_relative_path_rejected(self, memory_fs):
        """Test that backend paths must be absolute."""
        with pytest.raises(FileRepositoryError, match="must be absolute"):
            memory_fs.exists("jail")

    def test_list_directory(self, memory_fs):
        """Test direct children only, sorted."""
        names = [info.name for info in memory_fs.list_directory("/jail")]

        assert names == ["blob.bin", "docs", "empty.txt", "notes.txt"]

    def test_list_root(self, memory_fs):
        """Test listing the backend root."""
        names = [info.name for info in memory_fs.list_directory("/")]

        assert names == ["jail", "secret.txt"]

    def test_list_file_fails(self, memory_fs):
        """Test listing a regular file."""
        with pytest.raises(FileRepositoryError, match="Path is not a directory"):
            memory_fs.list_directory("/jail/notes.txt")

    def test_stat_info(self, memory_fs):
        """Test metadata of files and directories."""
        info = memory_fs.stat_info("/jail/notes.txt")

        assert info.name == "notes.txt"
        assert info.type is FileType.REGULAR_FILE
        assert info.size == len("hello world\n")
        assert info.permissions == "-rw-r--r--"
        assert memory_fs.stat_info("/jail/docs").type is FileType.DIRECTORY

    def test_stat_info_missing(self, memory_fs):
        """Test metadata of a missing path."""
        with pytest.raises(FileRepositoryError, match="Cannot get file info"):
            memory_fs.stat_info("/jail/nope")

    def test_read_at(self, memory_fs):
        """Test byte ranges, including past the end."""
        assert memory_fs.read_at("/jail/notes.txt", 0, 5) == b"hello"
        assert memory_fs.read_at("/jail/notes.txt", 6, 100) == b"world\n"
        assert memory_fs.read_at("/jail/notes.txt", 100, 5) == b""

    def test_read_directory_fails(self, memory_fs):
        """Test reading a directory."""
        with pytest.raises(FileRepositoryError, match="Is a directory"):
            memory_fs.read_at("/jail/docs", 0, 1)

    def test_make_directory(self, memory_fs):
        """Test mkdir semantics."""
        memory_fs.make_directory("/jail/new")

        assert memory_fs.is_directory("/jail/new") is True
        with pytest.raises(FileRepositoryError, match="File exists"):
            memory_fs.make_directory("/jail/new")
        with pytest.raises(FileRepositoryError, match="Parent directory does not exist"):
            memory_fs.make_directory("/nope/child")

    def test_real_absolute_path(self, memory_fs):
        """Test resolution of existing and missing paths."""
        assert memory_fs.real_absolute_path("/jail/") == "/jail"

        with pytest.raises(FileRepositoryError, match="Path does not exist"):
            memory_fs.real_absolute_path("/missing")

    def test_add_file_over_directory_fails(self, memory_fs):
        """Test that a directory cannot be replaced by a file."""
        with pytest.raises(FileRepositoryError, match="Is a directory"):
            memory_fs.add_file("/jail/docs", "x")

    def test_describe_location(self, memory_fs):
        """Test the prompt label."""
        assert memory_fs.describe_location("/jail") == "memory:/jail"
