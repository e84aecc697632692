"""
Port and types for the shell's command handlers.
"""

from abc import ABC, abstractmethod
from typing import TypedDict

from myshell.entities.command import CommandKeyword, ParsedCommand


class CommandSpec(TypedDict):
    """Specification for a command a handler can run."""

    keyword: CommandKeyword
    usage: str
    description: str


class CommandHandlerPort(ABC):
    """
    Port interface for handling shell commands.

    This port exposes available commands and runs a parsed command to completion.
    """

    @abstractmethod
    def available_commands(self) -> list[CommandSpec]:
        """
        Get a list of available commands.

        Returns:
            List of command specifications
        """
        pass

    @abstractmethod
    def dispatch(self, command: ParsedCommand) -> int:
        """
        Run a command.

        Args:
            command: Parsed command with its argument already defaulted

        Returns:
            0 on success, a negative value on failure

        Raises:
            ValueError: If the keyword is not handled here
        """
        pass
