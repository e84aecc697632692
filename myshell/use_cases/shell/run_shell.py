"""
Use case running the interactive read-parse-dispatch loop.
"""

import logging
from typing import Optional

from myshell.entities.command import strip_trailing_whitespace
from myshell.exceptions import CommandParseError, ExitRequested, FileSystemError
from myshell.ports.console.console_port import ConsolePort
from myshell.ports.files.file_system_port import FileSystemPort
from myshell.use_cases.shell.command_dispatcher import CommandDispatcher
from myshell.use_cases.shell.command_parser import CommandParser

PROMPT_DELIMITER = ">"


class RunShellUseCase:
    """Prompt, read one line, parse it, dispatch it, and loop.

    The loop ends only on the exit command or at end of input; a failing
    command never stops it.
    """

    def __init__(
        self,
        console: ConsolePort,
        file_system: FileSystemPort,
        parser: CommandParser,
        dispatcher: CommandDispatcher,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            console: Port for prompt, input and output
            file_system: Port used to query the working directory for the prompt
            parser: Command line parser
            dispatcher: Routes parsed commands to their handler
            logger: Logger instance to use for logging
        """
        self._console = console
        self._fs = file_system
        self._parser = parser
        self._dispatcher = dispatcher
        self._logger = logger or logging.getLogger(__name__)

    def render_prompt(self) -> None:
        """Show '<cwd>>'; show nothing if the working directory is unavailable."""
        try:
            cwd = self._fs.current_directory()
        except FileSystemError as e:
            self._logger.debug(f"No prompt, working directory unavailable: {e}")
            return
        self._console.show_prompt(f"{cwd}{PROMPT_DELIMITER}")

    def handle_line(self, raw_line: str) -> Optional[int]:
        """
        Run one raw input line.

        Args:
            raw_line: Line as read, possibly with trailing whitespace

        Returns:
            The handler's status code, -1 for a parse error, None for an empty line

        Raises:
            ExitRequested: If the line is the exit command
        """
        line = strip_trailing_whitespace(raw_line)
        try:
            command = self._parser.parse(line)
        except CommandParseError as e:
            self._console.error(f"myshell: {e}")
            return -1
        if command is None:
            return None
        return self._dispatcher.dispatch(command)

    def execute(self) -> int:
        """
        Run the loop until exit or end of input.

        Returns:
            Process exit status
        """
        self._logger.info("Shell started")
        while True:
            self.render_prompt()
            try:
                raw_line = self._console.read_line()
            except KeyboardInterrupt:
                self._console.write("\n")
                continue
            except UnicodeDecodeError as e:
                self._console.error(f"myshell: input is not valid text: {e.reason}")
                continue

            if raw_line is None:
                self._console.write("\n")
                self._logger.info("End of input, leaving shell")
                return 0

            try:
                self.handle_line(raw_line)
            except ExitRequested as e:
                return e.status
