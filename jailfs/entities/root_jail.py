"""
Root jail entity: the fixed backend root plus the session's virtual directory.
"""

import logging
import posixpath
from typing import Callable, Optional

from jailfs.exceptions import FileRepositoryError
from jailfs.ports.files.file_system_port import FileSystemPort
from jailfs.utils import path_resolver


class RootJail:
    """
    Jail mapping virtual paths onto a fixed real root.

    The real root is resolved once and never changes. The current virtual
    directory is replaced only by a successful change_directory() call.
    """

    def __init__(self, real_root: str, current: str = path_resolver.ROOT):
        """
        Initialize the jail.

        Args:
            real_root: Absolute backend path of the jail root
            current: Initial virtual directory
        """
        if not real_root:
            raise FileRepositoryError("Root directory cannot be empty")
        self._real_root = real_root if real_root.endswith("/") else real_root + "/"
        self._current = path_resolver.normalize(current)

    @classmethod
    def establish(
        cls,
        root_directory: str,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ) -> "RootJail":
        """
        Resolve root_directory through the backend, creating it and any missing
        parents if absent.

        Args:
            root_directory: Requested root directory
            file_system: Initialized storage backend
            logger: Logger instance to use for logging

        Returns:
            A RootJail positioned at '/'

        Raises:
            FileRepositoryError: If the root cannot be created or resolved
        """
        logger = logger or logging.getLogger(__name__)
        if not root_directory:
            raise FileRepositoryError("Root directory cannot be empty")

        try:
            real_root = file_system.real_absolute_path(root_directory)
        except FileRepositoryError:
            logger.info(f"Root directory {root_directory} is missing, creating it")
            cls._make_directories(root_directory, file_system)
            real_root = file_system.real_absolute_path(root_directory)

        if not file_system.is_directory(real_root):
            raise FileRepositoryError(f"Root path is not a directory: {root_directory}")

        logger.info(f"Jail root established at {real_root}")
        return cls(real_root)

    @staticmethod
    def _make_directories(path: str, file_system: FileSystemPort) -> None:
        """Create path and its missing parents, outermost first."""
        missing = []
        current = path.rstrip("/") or "/"
        while current and not file_system.exists(current):
            missing.append(current)
            parent = posixpath.dirname(current)
            if parent == current:
                break
            current = parent
        for directory in reversed(missing):
            file_system.make_directory(directory, 0o755)

    @property
    def real_root(self) -> str:
        return self._real_root

    @property
    def current(self) -> str:
        return self._current

    def resolve(self, path: str) -> str:
        """Virtual path of `path` relative to the current directory."""
        return path_resolver.resolve(path, self._current)

    def real_path(self, path: str = "") -> str:
        """Backend path of `path`; never outside the real root."""
        virtual = self.resolve(path)
        if not path_resolver.is_safe(virtual):
            raise FileRepositoryError(f"Unsafe path: {path}")
        return path_resolver.to_real_path(virtual, self._real_root)

    def escapes_root(self, path: str) -> bool:
        return path_resolver.escapes_root(path, self._current)

    def change_directory(self, path: str, is_directory: Callable[[str], bool]) -> bool:
        """
        Move to `path` if the backend reports it as a directory.

        Args:
            path: Requested path, absolute (from the jail root) or relative
            is_directory: Backend predicate over real paths

        Returns:
            True if the current directory changed
        """
        target = path_resolver.change_directory(
            path,
            self._current,
            lambda virtual: is_directory(
                path_resolver.to_real_path(virtual, self._real_root)
            ),
        )
        if target is None:
            return False
        self._current = target
        return True

    def real_current_path(self) -> str:
        """Real location of the current directory, without a trailing separator."""
        real = path_resolver.to_real_path(self._current, self._real_root)
        if len(real) > 1 and real.endswith("/"):
            real = real[:-1]
        return real

    def __repr__(self) -> str:
        return f"RootJail(real_root='{self._real_root}', current='{self._current}')"
