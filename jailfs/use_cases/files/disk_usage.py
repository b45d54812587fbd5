"""
Use case for computing the disk usage of a file or directory tree.
"""

import logging
from typing import Optional

from jailfs.exceptions import FileRepositoryError
from jailfs.ports.files.file_system_port import FileSystemPort


class DiskUsageUseCase:
    """Use case for summing entry sizes below a path."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def _directory_size(self, path: str) -> int:
        total = 0
        for entry in self._file_system.list_directory(path):
            child = path.rstrip("/") + "/" + entry.name
            if entry.is_dir:
                total += self._directory_size(child)
            else:
                # symbolic links count with their own size and are not followed
                total += entry.size
        return total

    def execute(self, path: str) -> int:
        """
        Compute the size of path in bytes.

        Args:
            path: Backend path of a file or directory

        Returns:
            File size, or the recursive total of all files below a directory

        Raises:
            FileRepositoryError: If the path cannot be inspected
        """
        try:
            self._logger.info(f"Computing disk usage of {path}")
            info = self._file_system.stat_info(path)
            if info.is_dir:
                size = self._directory_size(path)
            else:
                # a symbolic link named directly is not followed either
                size = info.size
            self._logger.info(f"Disk usage of {path}: {size} bytes")
            return size
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error computing disk usage: {e}")
            raise FileRepositoryError(f"Failed to compute disk usage of {path}: {str(e)}")
