"""
Use case for reading a bounded byte range of a file.
"""

import logging
from typing import Optional

from jailfs.exceptions import FileRepositoryError
from jailfs.ports.files.file_system_port import FileSystemPort

DEFAULT_MAX_READ_BYTES = 1024 * 1024


class ReadFileUseCase:
    """Use case for reading file content, capped at max_read_bytes per call."""

    def __init__(
        self,
        file_system: FileSystemPort,
        max_read_bytes: int = DEFAULT_MAX_READ_BYTES,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Storage backend
            max_read_bytes: Upper bound of bytes returned by one execute() call
            logger: Logger instance to use for logging
        """
        if max_read_bytes < 1:
            raise ValueError("max_read_bytes must be positive")
        self._file_system = file_system
        self._max_read_bytes = max_read_bytes
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str, offset: int = 0, length: int = 0) -> bytes:
        """
        Read file content.

        Args:
            path: Backend path of the file
            offset: Start offset in bytes
            length: Bytes to read; 0 or anything above the cap reads up to the cap

        Returns:
            The bytes read, empty if offset is past the end of file

        Raises:
            FileRepositoryError: If reading fails
        """
        if length <= 0 or length > self._max_read_bytes:
            length = self._max_read_bytes
        try:
            self._logger.info(f"Reading {path} (offset={offset}, length={length})")
            data = self._file_system.read_at(path, offset, length)
            self._logger.info(f"Read {len(data)} bytes")
            return data
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error reading file: {e}")
            raise FileRepositoryError(f"Failed to read {path}: {str(e)}")
