"""
Outcome of a single shell command.
"""

from dataclasses import dataclass
from enum import Enum


class ResultKind(Enum):
    CONTINUE = "continue"
    FAIL = "fail"
    TERMINATE = "terminate"


@dataclass(frozen=True)
class CommandResult:
    """
    Tagged result returned by every command.

    ``TERMINATE`` ends the session and is never an error, so callers can tell
    control flow apart from failure reporting without looking at the message.
    """

    kind: ResultKind
    message: str = ""

    @classmethod
    def ok(cls, message: str = "") -> "CommandResult":
        return cls(ResultKind.CONTINUE, message)

    @classmethod
    def fail(cls, message: str) -> "CommandResult":
        return cls(ResultKind.FAIL, message)

    @classmethod
    def terminate(cls) -> "CommandResult":
        return cls(ResultKind.TERMINATE)

    @property
    def success(self) -> bool:
        return self.kind is not ResultKind.FAIL

    @property
    def should_exit(self) -> bool:
        return self.kind is ResultKind.TERMINATE
