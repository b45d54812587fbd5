"""
Local file system adapter implementation for the storage backend port.
"""

import logging
import os

from typing_extensions import override

from jailfs.entities.file_info import FileInfo, FileType
from jailfs.exceptions import FileRepositoryError
from jailfs.ports.files.file_system_port import FileSystemPort


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the storage backend port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._initialized = False

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise FileRepositoryError("File system backend is not initialized")

    def _create_file_info(self, path: str, name: str | None = None) -> FileInfo:
        """
        Build a FileInfo from lstat() so symbolic links are reported as links.

        Args:
            path: Path of the entry
            name: Display name, defaults to the basename of path

        Raises:
            FileRepositoryError: If the entry cannot be stat'ed
        """
        try:
            st = os.lstat(path)
        except OSError as e:
            raise FileRepositoryError(f"Cannot get file info: {path}: {e.strerror or e}")
        return FileInfo(
            name=name if name is not None else os.path.basename(path.rstrip("/")) or "/",
            type=FileType.from_mode(st.st_mode),
            size=st.st_size,
            mode=st.st_mode,
            mtime=st.st_mtime,
            atime=st.st_atime,
            ctime=st.st_ctime,
        )

    @override
    def initialize(self) -> None:
        if self._initialized:
            return
        self._logger.debug("Local file system backend initialized")
        self._initialized = True

    @override
    def exists(self, path: str) -> bool:
        self._require_initialized()
        return os.path.lexists(path)

    @override
    def is_directory(self, path: str) -> bool:
        self._require_initialized()
        return os.path.isdir(path)

    @override
    def stat_info(self, path: str) -> FileInfo:
        self._require_initialized()
        return self._create_file_info(path)

    @override
    def list_directory(self, path: str) -> list[FileInfo]:
        """
        List the entries of a directory, sorted by name.

        Entries that vanish or cannot be stat'ed while listing are skipped.

        Raises:
            FileRepositoryError: If listing fails
        """
        self._require_initialized()
        if not os.path.isdir(path):
            raise FileRepositoryError(f"Path is not a directory: {path}")

        try:
            names = os.listdir(path)
        except OSError as e:
            raise FileRepositoryError(f"Failed to list directory {path}: {e.strerror or e}")

        files: list[FileInfo] = []
        for name in names:
            try:
                files.append(self._create_file_info(os.path.join(path, name), name))
            except FileRepositoryError as e:
                # Log the error but continue with other entries
                self._logger.warning(f"Could not process entry {name}: {e}")
                continue
        return sorted(files, key=lambda info: info.name)

    @override
    def read_at(self, path: str, offset: int, length: int) -> bytes:
        self._require_initialized()
        if offset < 0 or length < 0:
            raise FileRepositoryError("Offset and length must not be negative")
        try:
            with open(path, "rb") as f:
                size = os.fstat(f.fileno()).st_size
                if offset >= size or length == 0:
                    return b""
                f.seek(offset)
                return f.read(length)
        except IsADirectoryError:
            raise FileRepositoryError(f"Is a directory: {path}")
        except OSError as e:
            raise FileRepositoryError(f"Cannot read file {path}: {e.strerror or e}")

    @override
    def real_absolute_path(self, path: str) -> str:
        self._require_initialized()
        if not os.path.exists(path):
            raise FileRepositoryError(f"Path does not exist: {path}")
        return os.path.realpath(path)

    @override
    def make_directory(self, path: str, mode: int = 0o755) -> None:
        self._require_initialized()
        try:
            os.mkdir(path, mode)
        except OSError as e:
            raise FileRepositoryError(f"Cannot create directory {path}: {e.strerror or e}")
        self._logger.info(f"Created directory: {path}")

    @override
    def describe_location(self, real_path: str) -> str:
        return real_path
