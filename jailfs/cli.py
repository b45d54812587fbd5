from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console

from jailfs.config.settings import LOG_LEVELS, SUPPORTED_BACKENDS, Settings
from jailfs.container import DependencyContainer
from jailfs.entities.command_result import CommandResult
from jailfs.entities.root_jail import RootJail
from jailfs.exceptions import BaseAppError
from jailfs.ports.files.file_system_port import FileSystemPort
from jailfs.use_cases.commands.dispatcher import CommandDispatcher

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jailfs",
        description="Browse a storage backend with ls/cat/stat/hexdump, jailed inside a root directory.",
    )
    parser.add_argument(
        "root_directory",
        nargs="?",
        default=None,
        help="Root directory of the jail (default: $JAILFS_ROOT or /mysql/data)",
    )
    parser.add_argument(
        "--backend",
        choices=SUPPORTED_BACKENDS,
        default=None,
        help="Storage backend (default: $JAILFS_BACKEND or local)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=None,
        help="Log level for stderr diagnostics (default: $JAILFS_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        default=None,
        help="Run a command non-interactively (repeatable) and exit",
    )
    return parser


def _print_result(console: Console, result: CommandResult) -> None:
    if not result.message:
        return
    # File content may contain brackets; never interpret it as markup.
    style = None if result.success else "red"
    console.print(result.message, markup=False, highlight=False, style=style)


def prompt_for(jail: RootJail, file_system: FileSystemPort) -> str:
    return f"[{file_system.describe_location(jail.real_current_path())}] {jail.current} $ "


def run_interactive(
    dispatcher: CommandDispatcher,
    jail: RootJail,
    file_system: FileSystemPort,
    console: Console,
) -> None:
    """Read-eval-print loop; returns on exit/quit, EOF or Ctrl-C."""
    location = file_system.describe_location(jail.real_current_path())
    console.print(f"File Client Tool started (Root directory: {location})", markup=False)
    console.print("Type 'help' for available commands, 'exit' to quit\n", markup=False)

    while True:
        try:
            console.print(prompt_for(jail, file_system), end="", markup=False, highlight=False)
            line = input()
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        result = dispatcher.execute(line)
        if result.should_exit:
            break
        if result.message:
            _print_result(console, result)
            console.print()

    console.print("Goodbye!")


def run_commands(dispatcher: CommandDispatcher, commands: list[str], console: Console) -> int:
    """Run commands in order; exit code 1 if the last one failed."""
    result = CommandResult.ok()
    for line in commands:
        result = dispatcher.execute(line)
        if result.should_exit:
            break
        _print_result(console, result)
    return 0 if result.success else 1


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    console = Console(soft_wrap=True, highlight=False)
    err_console = Console(stderr=True, soft_wrap=True, highlight=False)

    try:
        settings = Settings()
        if args.root_directory is not None:
            settings.root_directory = args.root_directory
        if args.backend:
            settings.backend = args.backend
        if args.log_level:
            settings.log_level = args.log_level

        logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, stream=sys.stderr)

        if not settings.root_directory:
            err_console.print("Error: Root directory cannot be empty", style="red", markup=False)
            return 1

        logger.info(f"Starting file client, root directory: {settings.root_directory}")
        container = DependencyContainer(settings)
        dispatcher = container.get_command_dispatcher()
        jail = container.get_root_jail()
        file_system = container.get_file_system()
    except BaseAppError as e:
        err_console.print(f"Fatal Error: {e}", style="red", markup=False)
        err_console.print("Usage: jailfs [root_directory]", markup=False)
        err_console.print("Example: jailfs /mysql/data", markup=False)
        return 1

    if args.command:
        return run_commands(dispatcher, args.command, console)

    run_interactive(dispatcher, jail, file_system, console)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
