"""
Command dispatcher: turns an input line into a CommandResult.
"""

import logging
from typing import Optional

from jailfs.entities.command_result import CommandResult
from jailfs.ports.commands.command_handler_port import CommandHandlerPort, CommandSpec

EXIT_COMMANDS = ("exit", "quit")
HELP_COMMANDS = ("help", "?")
HELP_TITLE = "File Client Tool - Available Commands:"
HELP_FOOTER = "Note: Access is restricted to the specified root directory"

_BUILTIN_SPECS: list[CommandSpec] = [
    {"name": "help", "usage": "help", "description": "Show this help message", "group": "Other"},
    {"name": "exit", "usage": "exit/quit", "description": "Exit the program", "group": "Other"},
]


class CommandDispatcher:
    """
    Route tokenized command lines to the registered handlers.

    The dispatcher keeps no state between calls; session state lives in the
    handlers (the root jail).
    """

    def __init__(self, *handlers: CommandHandlerPort, logger: Optional[logging.Logger] = None) -> None:
        self._handlers = list(handlers)
        self._logger = logger or logging.getLogger(__name__)
        self._table: dict[str, CommandHandlerPort] = {}
        for handler in self._handlers:
            for spec in handler.available_commands():
                self._table.setdefault(spec["name"], handler)

    @staticmethod
    def tokenize(line: str) -> list[str]:
        """Split on runs of whitespace; no quoting, escaping or comments."""
        return line.split()

    def available_commands(self) -> list[CommandSpec]:
        specs: list[CommandSpec] = []
        for handler in self._handlers:
            specs.extend(handler.available_commands())
        specs.extend(_BUILTIN_SPECS)
        return specs

    def help_text(self) -> str:
        groups: dict[str, list[CommandSpec]] = {}
        for spec in self.available_commands():
            groups.setdefault(spec["group"], []).append(spec)

        width = max(len(spec["usage"]) for specs in groups.values() for spec in specs) + 2
        sections = []
        for group, specs in groups.items():
            lines = [f"{group}:"]
            lines.extend(f"  {spec['usage']:<{width}} {spec['description']}" for spec in specs)
            sections.append("\n".join(lines))
        return "\n\n".join([HELP_TITLE, *sections, HELP_FOOTER])

    def dispatch(self, tokens: list[str]) -> CommandResult:
        """
        Run the command named by the first token.

        Args:
            tokens: Command name followed by its arguments

        Returns:
            CommandResult; TERMINATE for exit/quit
        """
        if not tokens:
            return CommandResult.ok("")

        name, args = tokens[0], tokens[1:]
        if name in EXIT_COMMANDS:
            return CommandResult.terminate()
        if name in HELP_COMMANDS:
            return CommandResult.ok(self.help_text())

        handler = self._table.get(name)
        if handler is None:
            return CommandResult.fail(f"Unknown command: {name}, use 'help' for available commands")

        try:
            return handler.handle(name, args)
        except Exception as e:
            # Handlers convert their own failures; this only catches bugs.
            self._logger.exception(f"Command {name} failed")
            return CommandResult.fail(f"Error: {e}")

    def execute(self, line: str) -> CommandResult:
        return self.dispatch(self.tokenize(line))
