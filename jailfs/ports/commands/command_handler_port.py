"""
Port and types for shell command handlers.
"""

from abc import ABC, abstractmethod
from typing import TypedDict

from jailfs.entities.command_result import CommandResult


class CommandSpec(TypedDict):
    """Specification of a command exposed to the shell."""

    name: str
    usage: str
    description: str
    group: str


class CommandHandlerPort(ABC):
    """
    Port interface for handling shell commands.

    This port exposes available commands and dispatches invocations to the
    matching handler method.
    """

    @abstractmethod
    def available_commands(self) -> list[CommandSpec]:
        """
        Get a list of available commands.

        A command may appear several times with different usages; the dispatcher
        routes on name only.

        Returns:
            List of command specifications
        """
        pass

    @abstractmethod
    def handle(self, name: str, args: list[str]) -> CommandResult:
        """
        Run a command.

        Args:
            name: Name of the command
            args: Tokens following the command name

        Returns:
            Result of the command

        Raises:
            ValueError: If the command name is unknown to this handler
        """
        pass
