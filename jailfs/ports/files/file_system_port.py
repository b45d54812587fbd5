"""
File system port interface defining the contract for storage backends.
"""

from abc import ABC, abstractmethod

from jailfs.entities.file_info import FileInfo


class FileSystemPort(ABC):
    """
    Port interface for POSIX-flavored storage backends.

    Every path handed to a backend is a real backend path already mapped through
    the jail; backends never see virtual paths.
    """

    @abstractmethod
    def initialize(self) -> None:
        """
        Run the one-time backend initialization.

        Must be called before any other method; calling it again is a no-op.

        Raises:
            FileRepositoryError: If the backend cannot be initialized
        """
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if something exists at path."""
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Return True if path is an existing directory."""
        pass

    @abstractmethod
    def stat_info(self, path: str) -> FileInfo:
        """
        Get metadata of a single entry.

        Args:
            path: Backend path of the entry

        Returns:
            FileInfo for the entry

        Raises:
            FileRepositoryError: If the entry does not exist or cannot be read
        """
        pass

    @abstractmethod
    def list_directory(self, path: str) -> list[FileInfo]:
        """
        List the entries of a directory, sorted by name.

        Args:
            path: Backend path of the directory

        Returns:
            List of FileInfo, without '.' and '..'

        Raises:
            FileRepositoryError: If the path is not a readable directory
        """
        pass

    @abstractmethod
    def read_at(self, path: str, offset: int, length: int) -> bytes:
        """
        Read up to length bytes starting at offset.

        Args:
            path: Backend path of a regular file
            offset: Start offset in bytes
            length: Maximum number of bytes to read

        Returns:
            The bytes read; empty when offset is at or past the end of file

        Raises:
            FileRepositoryError: If the file cannot be opened or read
        """
        pass

    @abstractmethod
    def real_absolute_path(self, path: str) -> str:
        """
        Resolve path to an absolute backend path.

        Raises:
            FileRepositoryError: If the path does not exist
        """
        pass

    @abstractmethod
    def make_directory(self, path: str, mode: int = 0o755) -> None:
        """
        Create a directory.

        Raises:
            FileRepositoryError: If the directory cannot be created
        """
        pass

    @abstractmethod
    def describe_location(self, real_path: str) -> str:
        """Human-readable label of a backend location, used in the shell prompt."""
        pass
