"""
File browsing commands (ls, file, stat, du, cat, cd, pwd, hexdump) mapped to the file use cases.
"""

import logging
from typing import Callable, Optional

from typing_extensions import override

from jailfs.entities.command_result import CommandResult
from jailfs.entities.file_info import FileInfo, FileType, format_file_size, format_time
from jailfs.entities.root_jail import RootJail
from jailfs.exceptions import CommandError, FileRepositoryError
from jailfs.ports.commands.command_handler_port import CommandHandlerPort, CommandSpec
from jailfs.ports.files.file_system_port import FileSystemPort
from jailfs.use_cases.files.disk_usage import DiskUsageUseCase
from jailfs.use_cases.files.list_directory import ListDirectoryUseCase
from jailfs.use_cases.files.read_file import ReadFileUseCase
from jailfs.utils.content import guess_mime_type, is_text
from jailfs.utils.dump import format_dump

FILE_PROBE_BYTES = 1024
HEXDUMP_USAGE = "Usage: hexdump [-offset N] [-len N] <path>"

_Handler = Callable[[list[str]], CommandResult]


def _split_args(args: list[str], known_flags: tuple[str, ...] = ()) -> tuple[set[str], Optional[str]]:
    """Return the recognized flags present and the first non-flag token."""
    flags = {arg for arg in args if arg in known_flags}
    path = next((arg for arg in args if not arg.startswith("-")), None)
    return flags, path


def _parse_count(value: str, what: str) -> int:
    # plain decimal digits only; int() alone would take "+3" and "1_0"
    if not (value.isascii() and value.isdigit()):
        raise CommandError(f"Invalid {what} value: {value}")
    return int(value)


class FileCommandsHandler(CommandHandlerPort):
    """Handler for the file browsing commands of the shell."""

    def __init__(
        self,
        jail: RootJail,
        file_system: FileSystemPort,
        list_directory_uc: ListDirectoryUseCase,
        read_file_uc: ReadFileUseCase,
        disk_usage_uc: DiskUsageUseCase,
        bytes_per_line: int = 8,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the file commands handler.

        Args:
            jail: Root jail holding the session's current directory
            file_system: Storage backend used for existence and type checks
            list_directory_uc: Use case for listing directories
            read_file_uc: Use case for reading file content
            disk_usage_uc: Use case for computing sizes
            bytes_per_line: Byte slots per hexdump line
            logger: Logger instance to use for logging
        """
        self._jail = jail
        self._file_system = file_system
        self._list_directory_uc = list_directory_uc
        self._read_file_uc = read_file_uc
        self._disk_usage_uc = disk_usage_uc
        self._bytes_per_line = bytes_per_line
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[str, _Handler] = {
            "ls": self.cmd_ls,
            "ll": self.cmd_ll,
            "file": self.cmd_file,
            "stat": self.cmd_stat,
            "du": self.cmd_du,
            "cat": self.cmd_cat,
            "cd": self.cmd_cd,
            "pwd": self.cmd_pwd,
            "hexdump": self.cmd_hexdump,
        }

    # ------------------------- internal helpers -------------------------
    def _real_path(self, path: str) -> str:
        if self._jail.escapes_root(path):
            self._logger.warning(f"Path {path!r} reaches above the root directory, clamping")
        return self._jail.real_path(path)

    def _read(self, real_path: str, offset: int = 0, length: int = 0) -> bytes:
        return self._read_file_uc.execute(real_path, offset, length)

    @staticmethod
    def _long_line(info: FileInfo) -> str:
        return f"{info.permissions} {info.size:>10} {format_time(info.mtime)} {info.name}"

    # ------------------------- commands -------------------------
    def cmd_ls(self, args: list[str]) -> CommandResult:
        flags, path = _split_args(args, ("-l",))
        long_format = "-l" in flags
        target = path or "."

        real = self._real_path(target)
        if not self._file_system.exists(real):
            return CommandResult.fail(f"Path does not exist: {target}")

        if not self._file_system.is_directory(real):
            info = self._file_system.stat_info(real)
            return CommandResult.ok(self._long_line(info) if long_format else info.name)

        entries = self._list_directory_uc.execute(real)
        if not entries:
            return CommandResult.ok("Directory is empty")
        if long_format:
            return CommandResult.ok("\n".join(self._long_line(info) for info in entries))
        return CommandResult.ok("  ".join(info.name for info in entries))

    def cmd_ll(self, args: list[str]) -> CommandResult:
        return self.cmd_ls(["-l", *args])

    def cmd_file(self, args: list[str]) -> CommandResult:
        _, path = _split_args(args)
        if path is None:
            return CommandResult.fail("Usage: file <path>")

        real = self._real_path(path)
        if not self._file_system.exists(real):
            return CommandResult.fail(f"File does not exist: {path}")

        info = self._file_system.stat_info(real)
        result = f"{path}: {info.type.label}"
        if info.type is FileType.REGULAR_FILE:
            try:
                content = self._read(real, 0, FILE_PROBE_BYTES)
            except FileRepositoryError as e:
                self._logger.warning(f"Cannot read content of {path}: {e}")
                return CommandResult.ok(result + ", cannot read content")
            result += ", text file" if is_text(content) else ", binary file"
            mime_type = guess_mime_type(path)
            if mime_type:
                result += f" ({mime_type})"
        return CommandResult.ok(result)

    def cmd_stat(self, args: list[str]) -> CommandResult:
        _, path = _split_args(args)
        if path is None:
            return CommandResult.fail("Usage: stat <path>")

        real = self._real_path(path)
        if not self._file_system.exists(real):
            return CommandResult.fail(f"File does not exist: {path}")

        details = self._file_system.stat_info(real).get_details()
        lines = [
            f"File: {path}",
            f"Type: {details['type']}",
            f"Size: {details['size']} bytes",
            f"Permissions: {details['permissions']} ({details['mode']})",
            f"Modified: {details['modified']}",
            f"Accessed: {details['accessed']}",
            f"Created: {details['created']}",
        ]
        return CommandResult.ok("\n".join(lines))

    def cmd_du(self, args: list[str]) -> CommandResult:
        flags, path = _split_args(args, ("-h",))
        target = path or "."

        real = self._real_path(target)
        if not self._file_system.exists(real):
            return CommandResult.fail(f"Path does not exist: {target}")

        size = self._disk_usage_uc.execute(real)
        return CommandResult.ok(f"{format_file_size(size, '-h' in flags)}\t{target}")

    def cmd_cat(self, args: list[str]) -> CommandResult:
        _, path = _split_args(args)
        if path is None:
            return CommandResult.fail("Usage: cat <path>")

        real = self._real_path(path)
        if not self._file_system.exists(real):
            return CommandResult.fail(f"File does not exist: {path}")
        if self._file_system.is_directory(real):
            return CommandResult.fail(f"{path} is a directory, cannot display content")

        content = self._read(real)
        if not content:
            return CommandResult.ok("File is empty")
        if not is_text(content):
            return CommandResult.fail(f"{path} is a binary file, cannot display")
        return CommandResult.ok(content.decode("utf-8", errors="replace"))

    def cmd_cd(self, args: list[str]) -> CommandResult:
        _, path = _split_args(args)
        target = path or "/"

        clamped = self._jail.escapes_root(target)
        if not self._jail.change_directory(target, self._file_system.is_directory):
            return CommandResult.fail(f"Cannot change to directory: {target}")
        if clamped:
            self._logger.warning(f"cd {target!r} reaches above the root directory, clamped")
            return CommandResult.ok(
                f"Warning: {target} reaches above the root directory, clamped to {self._jail.current}"
            )
        return CommandResult.ok("")

    def cmd_pwd(self, args: list[str]) -> CommandResult:
        return CommandResult.ok(self._jail.current)

    def cmd_hexdump(self, args: list[str]) -> CommandResult:
        offset = 0
        length = 0
        path: Optional[str] = None

        i = 0
        while i < len(args):
            arg = args[i]
            if arg == "-offset" and i + 1 < len(args):
                offset = _parse_count(args[i + 1], "offset")
                i += 1
            elif arg == "-len" and i + 1 < len(args):
                length = _parse_count(args[i + 1], "length")
                i += 1
            elif not arg.startswith("-") and path is None:
                path = arg
            i += 1

        if path is None:
            return CommandResult.fail(HEXDUMP_USAGE)

        real = self._real_path(path)
        if not self._file_system.exists(real):
            return CommandResult.fail(f"File does not exist: {path}")
        if self._file_system.is_directory(real):
            return CommandResult.fail(f"{path} is a directory, cannot hexdump")

        content = self._read(real, offset, length)
        return CommandResult.ok(format_dump(content, offset, self._bytes_per_line))

    # ------------------------- port -------------------------
    @override
    def available_commands(self) -> list[CommandSpec]:
        """
        Get a list of available commands.

        Returns:
            List of command specifications
        """
        directory = "Directory Operations"
        info = "File Information"
        content = "File Content"
        return [
            {"name": "ls", "usage": "ls [path]", "description": "List directory contents", "group": directory},
            {
                "name": "ls",
                "usage": "ls -l [path]",
                "description": "List detailed directory contents (permissions, size, time)",
                "group": directory,
            },
            {"name": "ll", "usage": "ll [path]", "description": "Same as ls -l", "group": directory},
            {"name": "cd", "usage": "cd [path]", "description": "Change directory", "group": directory},
            {"name": "pwd", "usage": "pwd", "description": "Show current directory", "group": directory},
            {"name": "file", "usage": "file <path>", "description": "Show file type", "group": info},
            {"name": "stat", "usage": "stat <path>", "description": "Show detailed file information", "group": info},
            {"name": "du", "usage": "du [path]", "description": "Show file/directory size (bytes)", "group": info},
            {
                "name": "du",
                "usage": "du -h [path]",
                "description": "Show human-readable size (KB/MB/GB)",
                "group": info,
            },
            {"name": "cat", "usage": "cat <path>", "description": "Display file content", "group": content},
            {
                "name": "hexdump",
                "usage": "hexdump [-offset N] [-len N] <path>",
                "description": "Display binary dump of file",
                "group": content,
            },
        ]

    @override
    def handle(self, name: str, args: list[str]) -> CommandResult:
        """
        Run a command, converting backend failures into failed results.

        Raises:
            ValueError: If the command name is unknown
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise ValueError(f"Unknown command: {name}")

        self._logger.info(f"Executing {name} with args {args}")
        try:
            return handler(args)
        except CommandError as e:
            return CommandResult.fail(str(e))
        except FileRepositoryError as e:
            return CommandResult.fail(f"Error: {e}")
        except Exception as e:
            self._logger.exception(f"Unexpected error in {name}")
            return CommandResult.fail(f"Error: {e}")
