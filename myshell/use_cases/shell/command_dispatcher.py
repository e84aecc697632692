"""
Use case routing a parsed command to the handler that runs it.
"""

import logging
from typing import Optional

from myshell.entities.command import CommandKeyword, ParsedCommand
from myshell.exceptions import ExitRequested
from myshell.ports.commands.command_handler_port import CommandHandlerPort


class CommandDispatcher:
    """Pure routing: default the argument where allowed, then call exactly one handler."""

    DEFAULT_ARGUMENTS: dict[CommandKeyword, str] = {CommandKeyword.LS: "."}

    def __init__(
        self,
        handler: CommandHandlerPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            handler: Command handler that runs the filesystem commands
            logger: Logger instance to use for logging
        """
        self._handler = handler
        self._logger = logger or logging.getLogger(__name__)

    def with_defaults(self, command: ParsedCommand) -> ParsedCommand:
        """Fill in the default argument for commands that have one."""
        if command.has_argument:
            return command
        default = self.DEFAULT_ARGUMENTS.get(command.keyword)
        if default is None:
            return command
        return ParsedCommand(keyword=command.keyword, argument=default)

    def dispatch(self, command: ParsedCommand) -> int:
        """
        Run a parsed command.

        Args:
            command: Command produced by the parser

        Returns:
            The handler's status code (0 success, negative failure)

        Raises:
            ExitRequested: For the exit command
        """
        if command.keyword is CommandKeyword.EXIT:
            self._logger.info("Exit requested")
            raise ExitRequested(0)

        command = self.with_defaults(command)
        result = self._handler.dispatch(command)
        self._logger.debug(
            f"Dispatched {command.keyword.value} {command.argument!r} -> {result}"
        )
        return result
