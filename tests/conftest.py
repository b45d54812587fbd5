"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from jailfs.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from jailfs.adapters.files.memory_fs_adapter import InMemoryFileSystemAdapter
from jailfs.entities.root_jail import RootJail
from jailfs.use_cases.commands.dispatcher import CommandDispatcher
from jailfs.use_cases.commands.file_commands import FileCommandsHandler
from jailfs.use_cases.files.disk_usage import DiskUsageUseCase
from jailfs.use_cases.files.list_directory import ListDirectoryUseCase
from jailfs.use_cases.files.read_file import ReadFileUseCase


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def local_fs(mock_logger):
    """Initialized local file system adapter."""
    adapter = LocalFileSystemAdapter(mock_logger)
    adapter.initialize()
    return adapter


@pytest.fixture
def memory_fs(mock_logger):
    """
    Initialized in-memory backend seeded with a small tree under /jail.

    Layout:
        /jail/notes.txt        text
        /jail/blob.bin         binary
        /jail/empty.txt        empty
        /jail/docs/readme.md   text
        /secret.txt            outside the jail
    """
    adapter = InMemoryFileSystemAdapter(mock_logger)
    adapter.initialize()
    adapter.add_file("/jail/notes.txt", "hello world\n")
    adapter.add_file("/jail/blob.bin", bytes(range(256)))
    adapter.add_file("/jail/empty.txt", b"")
    adapter.add_file("/jail/docs/readme.md", "# Readme\n")
    adapter.add_file("/secret.txt", "top secret\n")
    return adapter


@pytest.fixture
def memory_jail(memory_fs):
    """Root jail over the in-memory backend, rooted at /jail."""
    return RootJail.establish("/jail", memory_fs)


@pytest.fixture
def dispatcher_factory(mock_logger):
    """Build a dispatcher over a jail and backend, with an optional read cap."""

    def _build(jail, file_system, max_read_bytes=1024 * 1024):
        handler = FileCommandsHandler(
            jail,
            file_system,
            ListDirectoryUseCase(file_system, mock_logger),
            ReadFileUseCase(file_system, max_read_bytes, mock_logger),
            DiskUsageUseCase(file_system, mock_logger),
            logger=mock_logger,
        )
        return CommandDispatcher(handler, logger=mock_logger)

    return _build


@pytest.fixture
def memory_dispatcher(dispatcher_factory, memory_jail, memory_fs):
    """Dispatcher wired to the in-memory jail."""
    return dispatcher_factory(memory_jail, memory_fs)
