"""
In-memory storage backend, useful for demos and tests.
"""

import logging
import posixpath
import stat
import time
from dataclasses import dataclass, field

from typing_extensions import override

from jailfs.entities.file_info import FileInfo, FileType
from jailfs.exceptions import FileRepositoryError
from jailfs.ports.files.file_system_port import FileSystemPort


@dataclass
class _Node:
    mode: int
    data: bytes = b""
    mtime: float = field(default_factory=time.time)
    atime: float = field(default_factory=time.time)
    ctime: float = field(default_factory=time.time)


def _key(path: str) -> str:
    """Canonical absolute key for a backend path."""
    if not path.startswith("/"):
        raise FileRepositoryError(f"Path must be absolute: {path}")
    return posixpath.normpath(path).replace("//", "/")


class InMemoryFileSystemAdapter(FileSystemPort):
    """
    Volatile storage backend keeping files and directories in a dict.

    Only the root directory '/' exists initially; use add_directory() and
    add_file() to seed content.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._nodes: dict[str, _Node] = {"/": _Node(mode=stat.S_IFDIR | 0o755)}
        self._initialized = False

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise FileRepositoryError("File system backend is not initialized")

    def _lookup(self, path: str) -> _Node:
        node = self._nodes.get(_key(path))
        if node is None:
            raise FileRepositoryError(f"Cannot get file info: {path}")
        return node

    def _require_parent(self, key: str) -> None:
        parent = self._nodes.get(posixpath.dirname(key))
        if parent is None or not stat.S_ISDIR(parent.mode):
            raise FileRepositoryError(f"Parent directory does not exist: {key}")

    def _to_file_info(self, key: str, node: _Node) -> FileInfo:
        return FileInfo(
            name=posixpath.basename(key) or "/",
            type=FileType.from_mode(node.mode),
            size=len(node.data) if not stat.S_ISDIR(node.mode) else 4096,
            mode=node.mode,
            mtime=node.mtime,
            atime=node.atime,
            ctime=node.ctime,
        )

    def add_directory(self, path: str, mode: int = 0o755) -> None:
        """Create a directory and any missing parents."""
        key = _key(path)
        if key == "/":
            return
        self.add_directory(posixpath.dirname(key))
        existing = self._nodes.get(key)
        if existing is not None and not stat.S_ISDIR(existing.mode):
            raise FileRepositoryError(f"Not a directory: {path}")
        if existing is None:
            self._nodes[key] = _Node(mode=stat.S_IFDIR | mode)

    def add_file(self, path: str, data: bytes | str, mode: int = 0o644) -> None:
        """Create or replace a regular file, creating parent directories."""
        key = _key(path)
        self.add_directory(posixpath.dirname(key))
        if isinstance(data, str):
            data = data.encode("utf-8")
        existing = self._nodes.get(key)
        if existing is not None and stat.S_ISDIR(existing.mode):
            raise FileRepositoryError(f"Is a directory: {path}")
        self._nodes[key] = _Node(mode=stat.S_IFREG | mode, data=data)

    @override
    def initialize(self) -> None:
        if self._initialized:
            return
        self._logger.debug("In-memory file system backend initialized")
        self._initialized = True

    @override
    def exists(self, path: str) -> bool:
        self._require_initialized()
        return _key(path) in self._nodes

    @override
    def is_directory(self, path: str) -> bool:
        self._require_initialized()
        node = self._nodes.get(_key(path))
        return node is not None and stat.S_ISDIR(node.mode)

    @override
    def stat_info(self, path: str) -> FileInfo:
        self._require_initialized()
        return self._to_file_info(_key(path), self._lookup(path))

    @override
    def list_directory(self, path: str) -> list[FileInfo]:
        self._require_initialized()
        key = _key(path)
        if not self.is_directory(key):
            raise FileRepositoryError(f"Path is not a directory: {path}")
        prefix = key if key == "/" else key + "/"
        entries = [
            self._to_file_info(child, node)
            for child, node in self._nodes.items()
            if child != key and child.startswith(prefix) and "/" not in child[len(prefix) :]
        ]
        return sorted(entries, key=lambda info: info.name)

    @override
    def read_at(self, path: str, offset: int, length: int) -> bytes:
        self._require_initialized()
        if offset < 0 or length < 0:
            raise FileRepositoryError("Offset and length must not be negative")
        node = self._lookup(path)
        if stat.S_ISDIR(node.mode):
            raise FileRepositoryError(f"Is a directory: {path}")
        node.atime = time.time()
        return node.data[offset : offset + length]

    @override
    def real_absolute_path(self, path: str) -> str:
        self._require_initialized()
        key = _key(path)
        if key not in self._nodes:
            raise FileRepositoryError(f"Path does not exist: {path}")
        return key

    @override
    def make_directory(self, path: str, mode: int = 0o755) -> None:
        self._require_initialized()
        key = _key(path)
        if key in self._nodes:
            raise FileRepositoryError(f"Cannot create directory {path}: File exists")
        self._require_parent(key)
        self._nodes[key] = _Node(mode=stat.S_IFDIR | mode)
        self._logger.info(f"Created directory: {path}")

    @override
    def describe_location(self, real_path: str) -> str:
        return f"memory:{real_path}"
