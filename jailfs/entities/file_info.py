"""
File information domain entity and formatting helpers.
"""

import stat
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


class FileType(Enum):
    """Kinds of filesystem entries, mirroring the Unix file types."""

    REGULAR_FILE = "regular file"
    DIRECTORY = "directory"
    SYMBOLIC_LINK = "symbolic link"
    BLOCK_DEVICE = "block device"
    CHARACTER_DEVICE = "character device"
    FIFO = "FIFO"
    SOCKET = "socket"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_mode(cls, mode: int) -> "FileType":
        """Map an ``st_mode`` value to a file type."""
        if stat.S_ISREG(mode):
            return cls.REGULAR_FILE
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISLNK(mode):
            return cls.SYMBOLIC_LINK
        if stat.S_ISBLK(mode):
            return cls.BLOCK_DEVICE
        if stat.S_ISCHR(mode):
            return cls.CHARACTER_DEVICE
        if stat.S_ISFIFO(mode):
            return cls.FIFO
        if stat.S_ISSOCK(mode):
            return cls.SOCKET
        return cls.UNKNOWN


@dataclass(frozen=True)
class FileInfo:
    """
    Metadata of a single filesystem entry as reported by a backend.

    Timestamps are POSIX seconds; ``mode`` carries both type and permission bits.
    """

    name: str
    type: FileType
    size: int
    mode: int
    mtime: float
    atime: float
    ctime: float

    @property
    def is_dir(self) -> bool:
        return self.type is FileType.DIRECTORY

    @property
    def permissions(self) -> str:
        """Permission string such as ``drwxr-xr-x``."""
        return format_permissions(self.mode)

    def get_details(self) -> dict[str, Any]:
        """
        Get comprehensive file details.

        Returns:
            Dictionary with file information
        """
        return {
            "name": self.name,
            "type": self.type.label,
            "size": self.size,
            "permissions": self.permissions,
            "mode": f"0{self.mode & 0o777:o}",
            "modified": format_time(self.mtime),
            "accessed": format_time(self.atime),
            "created": format_time(self.ctime),
        }


def format_permissions(mode: int) -> str:
    """Render ``mode`` the way ``ls -l`` does, e.g. ``-rw-r--r--``."""
    kind = FileType.from_mode(mode)
    prefix = {
        FileType.DIRECTORY: "d",
        FileType.SYMBOLIC_LINK: "l",
        FileType.BLOCK_DEVICE: "b",
        FileType.CHARACTER_DEVICE: "c",
        FileType.FIFO: "p",
        FileType.SOCKET: "s",
    }.get(kind, "-")
    bits = [
        (stat.S_IRUSR, "r"),
        (stat.S_IWUSR, "w"),
        (stat.S_IXUSR, "x"),
        (stat.S_IRGRP, "r"),
        (stat.S_IWGRP, "w"),
        (stat.S_IXGRP, "x"),
        (stat.S_IROTH, "r"),
        (stat.S_IWOTH, "w"),
        (stat.S_IXOTH, "x"),
    ]
    return prefix + "".join(char if mode & bit else "-" for bit, char in bits)


def format_time(timestamp: float) -> str:
    """Format a POSIX timestamp in local time."""
    return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(timestamp))


def format_file_size(size: int, human_readable: bool = False) -> str:
    """
    Format a byte count.

    Args:
        size: Size in bytes
        human_readable: Scale to B/KB/MB/GB/TB (divisor 1024, one decimal above B)

    Returns:
        Formatted size string
    """
    if not human_readable:
        return str(size)

    value = float(size)
    unit_idx = 0
    while value >= 1024.0 and unit_idx < len(SIZE_UNITS) - 1:
        value /= 1024.0
        unit_idx += 1

    if unit_idx == 0:
        return f"{int(value)}{SIZE_UNITS[unit_idx]}"
    return f"{value:.1f}{SIZE_UNITS[unit_idx]}"
