"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from jailfs.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from jailfs.adapters.files.memory_fs_adapter import InMemoryFileSystemAdapter
from jailfs.config.settings import Settings
from jailfs.entities.root_jail import RootJail
from jailfs.exceptions import ConfigurationError
from jailfs.ports.files.file_system_port import FileSystemPort
from jailfs.use_cases.commands.dispatcher import CommandDispatcher
from jailfs.use_cases.commands.file_commands import FileCommandsHandler
from jailfs.use_cases.files.disk_usage import DiskUsageUseCase
from jailfs.use_cases.files.list_directory import ListDirectoryUseCase
from jailfs.use_cases.files.read_file import ReadFileUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or Settings()
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_file_system(self) -> FileSystemPort:
        """
        Get the storage backend, initialized exactly once.

        Returns:
            FileSystemPort implementation

        Raises:
            ConfigurationError: If the configured backend is unknown
            FileRepositoryError: If the backend cannot be initialized
        """
        if "file_system" not in self._instances:
            backend = self._settings.backend
            if backend == "local":
                file_system: FileSystemPort = LocalFileSystemAdapter(self._logger)
            elif backend == "memory":
                file_system = InMemoryFileSystemAdapter(self._logger)
            else:
                raise ConfigurationError(f"Unsupported backend: {backend}")
            file_system.initialize()
            self._instances["file_system"] = file_system
        return self._instances["file_system"]

    def get_root_jail(self) -> RootJail:
        """
        Get the session's root jail.

        Returns:
            RootJail rooted at the configured directory
        """
        if "root_jail" not in self._instances:
            self._instances["root_jail"] = RootJail.establish(
                self._settings.root_directory, self.get_file_system(), self._logger
            )
        return self._instances["root_jail"]

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        if "list_directory_use_case" not in self._instances:
            self._instances["list_directory_use_case"] = ListDirectoryUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["list_directory_use_case"]

    def get_read_file_use_case(self) -> ReadFileUseCase:
        if "read_file_use_case" not in self._instances:
            self._instances["read_file_use_case"] = ReadFileUseCase(
                self.get_file_system(), self._settings.max_read_bytes, self._logger
            )
        return self._instances["read_file_use_case"]

    def get_disk_usage_use_case(self) -> DiskUsageUseCase:
        if "disk_usage_use_case" not in self._instances:
            self._instances["disk_usage_use_case"] = DiskUsageUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["disk_usage_use_case"]

    def get_file_commands_handler(self) -> FileCommandsHandler:
        """
        Handler for the file browsing commands, backed by the file use cases.
        """
        if "file_commands_handler" not in self._instances:
            self._instances["file_commands_handler"] = FileCommandsHandler(
                self.get_root_jail(),
                self.get_file_system(),
                self.get_list_directory_use_case(),
                self.get_read_file_use_case(),
                self.get_disk_usage_use_case(),
                bytes_per_line=self._settings.bytes_per_line,
                logger=self._logger,
            )
        return self._instances["file_commands_handler"]

    def get_command_dispatcher(self) -> CommandDispatcher:
        if "command_dispatcher" not in self._instances:
            self._instances["command_dispatcher"] = CommandDispatcher(
                self.get_file_commands_handler(), logger=self._logger
            )
        return self._instances["command_dispatcher"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
