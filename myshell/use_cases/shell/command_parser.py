"""
Use case for turning a cleaned command line into a ParsedCommand.
"""

import logging
from typing import Optional

from myshell.entities.command import CommandKeyword, ParsedCommand
from myshell.exceptions import LineTooLongError, UnknownCommandError


class CommandParser:
    """Split a line into a keyword and at most one argument.

    The keyword is the first whitespace-delimited token and must equal one of
    the known keywords exactly, so 'lsx' or 'rmdirx' are never taken for
    'ls' or 'rmdir'.
    """

    def __init__(
        self,
        max_line_length: int = 255,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the parser.

        Args:
            max_line_length: Longest accepted line, after trailing whitespace is stripped
            logger: Logger instance to use for logging
        """
        self._max_line_length = max_line_length
        self._logger = logger or logging.getLogger(__name__)

    def parse(self, line: str) -> Optional[ParsedCommand]:
        """
        Parse a cleaned command line.

        Args:
            line: Command line with trailing whitespace already removed

        Returns:
            ParsedCommand, or None for an empty line

        Raises:
            LineTooLongError: If the line exceeds the configured maximum
                (exit is accepted at any length)
            UnknownCommandError: If the first token is not a keyword, or a
                command that needs an argument was given none
        """
        tokens = line.split()
        if not tokens:
            return None

        keyword = CommandKeyword.lookup(tokens[0])
        if keyword is CommandKeyword.EXIT:
            return ParsedCommand(keyword=keyword)

        if len(line) > self._max_line_length:
            raise LineTooLongError(len(line), self._max_line_length)
        if keyword is None:
            raise UnknownCommandError(line)

        argument = tokens[1] if len(tokens) > 1 else ""
        if keyword.requires_argument and not argument:
            raise UnknownCommandError(line)
        if len(tokens) > 2:
            self._logger.debug(f"Ignoring extra arguments: {tokens[2:]}")

        return ParsedCommand(keyword=keyword, argument=argument)
