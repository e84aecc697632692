"""
Command domain entities.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CommandKeyword(str, Enum):
    """Closed set of keywords understood by the shell."""

    CD = "cd"
    EXIT = "exit"
    LS = "ls"
    CAT = "cat"
    STAT = "stat"
    MKDIR = "mkdir"
    RMDIR = "rmdir"
    RM = "rm"
    PWD = "pwd"

    @classmethod
    def lookup(cls, token: str) -> Optional["CommandKeyword"]:
        """Return the keyword equal to token, or None if there is none."""
        for keyword in cls:
            if keyword.value == token:
                return keyword
        return None

    @property
    def requires_argument(self) -> bool:
        return self in _ARGUMENT_REQUIRED


_ARGUMENT_REQUIRED = frozenset(
    {
        CommandKeyword.CAT,
        CommandKeyword.STAT,
        CommandKeyword.MKDIR,
        CommandKeyword.RMDIR,
        CommandKeyword.RM,
    }
)


@dataclass(frozen=True)
class ParsedCommand:
    """A keyword plus at most one argument; argument is empty when none was given."""

    keyword: CommandKeyword
    argument: str = ""

    @property
    def has_argument(self) -> bool:
        return bool(self.argument)


def strip_trailing_whitespace(line: str) -> str:
    """Remove trailing whitespace, including the line terminator."""
    return line.rstrip()
