"""
Use case for listing the entries of a directory.
"""

import logging
from typing import Optional

from jailfs.entities.file_info import FileInfo
from jailfs.exceptions import FileRepositoryError
from jailfs.ports.files.file_system_port import FileSystemPort


class ListDirectoryUseCase:
    """Use case for listing the entries of a directory."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Storage backend
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> list[FileInfo]:
        """
        List all entries of a directory.

        Args:
            path: Backend path of the directory

        Returns:
            List of FileInfo sorted by name

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            self._logger.info(f"Listing directory: {path}")
            entries = self._file_system.list_directory(path)
            self._logger.info(f"Found {len(entries)} entries")
            return entries
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing directory: {e}")
            raise FileRepositoryError(f"Failed to list directory {path}: {str(e)}")
