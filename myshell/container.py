"""
Dependency injection container for managing application dependencies.
"""

import logging
import sys
from typing import Optional, TextIO

from myshell.adapters.console.rich_renderer import RichRenderer
from myshell.adapters.console.stream_console import StreamConsole
from myshell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from myshell.config.settings import Settings, settings
from myshell.ports.commands.command_handler_port import CommandHandlerPort
from myshell.ports.console.console_port import ConsolePort
from myshell.ports.files.file_system_port import FileSystemPort
from myshell.use_cases.commands.filesystem_commands import FileSystemCommandsHandler
from myshell.use_cases.shell.command_dispatcher import CommandDispatcher
from myshell.use_cases.shell.command_parser import CommandParser
from myshell.use_cases.shell.run_shell import RunShellUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(
        self,
        app_settings: Optional[Settings] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        pretty: bool = False,
    ):
        self._instances = {}
        self._settings = app_settings or settings
        self._streams = (stdin, stdout, stderr)
        self._pretty = pretty
        self._logger = logging.getLogger(__name__)

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_system"]

    def get_console(self) -> ConsolePort:
        """
        Get console adapter instance.

        Returns:
            ConsolePort implementation
        """
        if "console" not in self._instances:
            stdin, stdout, stderr = self._streams
            self._instances["console"] = StreamConsole(
                stdin, stdout, stderr, logger=self._logger
            )
        return self._instances["console"]

    def get_renderer(self) -> Optional[RichRenderer]:
        """Rich renderer for ls/stat, only in pretty mode."""
        if not self._pretty:
            return None
        if "renderer" not in self._instances:
            stdout = self._streams[1] or sys.stdout
            self._instances["renderer"] = RichRenderer(stdout)
        return self._instances["renderer"]

    def get_commands_handler(self) -> CommandHandlerPort:
        """
        Get the filesystem commands handler with injected dependencies.

        Returns:
            Configured FileSystemCommandsHandler
        """
        if "commands_handler" not in self._instances:
            self._instances["commands_handler"] = FileSystemCommandsHandler(
                self.get_file_system(),
                self.get_console(),
                mkdir_mode=self._settings.mkdir_mode,
                chunk_size=self._settings.cat_chunk_size,
                column_width=self._settings.list_column_width,
                renderer=self.get_renderer(),
                logger=self._logger,
            )
        return self._instances["commands_handler"]

    def get_command_parser(self) -> CommandParser:
        if "command_parser" not in self._instances:
            self._instances["command_parser"] = CommandParser(
                max_line_length=self._settings.max_line_length, logger=self._logger
            )
        return self._instances["command_parser"]

    def get_command_dispatcher(self) -> CommandDispatcher:
        if "command_dispatcher" not in self._instances:
            self._instances["command_dispatcher"] = CommandDispatcher(
                self.get_commands_handler(), logger=self._logger
            )
        return self._instances["command_dispatcher"]

    def get_run_shell_use_case(self) -> RunShellUseCase:
        """
        Get the interactive loop use case with injected dependencies.

        Returns:
            Configured RunShellUseCase
        """
        if "run_shell_use_case" not in self._instances:
            self._instances["run_shell_use_case"] = RunShellUseCase(
                self.get_console(),
                self.get_file_system(),
                self.get_command_parser(),
                self.get_command_dispatcher(),
                logger=self._logger,
            )
        return self._instances["run_shell_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
