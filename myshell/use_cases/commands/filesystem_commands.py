"""
Filesystem commands (cd, ls, cat, mkdir, rmdir, rm, pwd, stat) mapped to the filesystem port.
"""

import logging
from functools import partial
from typing import Callable, Optional

from myshell.adapters.console.rich_renderer import RichRenderer
from myshell.entities.command import CommandKeyword, ParsedCommand
from myshell.exceptions import FileSystemError
from myshell.ports.commands.command_handler_port import CommandHandlerPort, CommandSpec
from myshell.ports.console.console_port import ConsolePort
from myshell.ports.files.file_system_port import FileSystemPort

SUCCESS = 0
FAILURE = -1


class FileSystemCommandsHandler(CommandHandlerPort):
    """Handler for the shell's built-in filesystem commands.

    Every command writes its results to stdout and its diagnostics, with the
    OS-reported reason, to stderr. Nothing here raises for an OS failure.
    """

    def __init__(
        self,
        file_system: FileSystemPort,
        console: ConsolePort,
        mkdir_mode: int = 0o755,
        chunk_size: int = 2048,
        column_width: int = 30,
        renderer: Optional[RichRenderer] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the filesystem commands handler.

        Args:
            file_system: Port for filesystem operations
            console: Port for output and diagnostics
            mkdir_mode: Permission bits for directories created by mkdir
            chunk_size: Bytes read per attempt by cat
            column_width: Width the ls name column is padded to
            renderer: Optional rich renderer for ls and stat output
            logger: Logger instance to use for logging
        """
        self._fs = file_system
        self._console = console
        self._mkdir_mode = mkdir_mode
        self._chunk_size = chunk_size
        self._column_width = column_width
        self._renderer = renderer
        self._logger = logger or logging.getLogger(__name__)
        self._commands: dict[CommandKeyword, Callable[[str], int]] = {
            CommandKeyword.CD: self._do_cd,
            CommandKeyword.LS: self._do_ls,
            CommandKeyword.CAT: self._do_cat,
            CommandKeyword.MKDIR: self._do_mkdir,
            CommandKeyword.RMDIR: self._do_rmdir,
            CommandKeyword.RM: self._do_rm,
            CommandKeyword.PWD: self._do_pwd,
            CommandKeyword.STAT: self._do_stat,
        }

    def available_commands(self) -> list[CommandSpec]:
        return [
            {
                "keyword": CommandKeyword.CD,
                "usage": "cd [path]",
                "description": "Change the working directory (home directory if no path).",
            },
            {
                "keyword": CommandKeyword.LS,
                "usage": "ls [path]",
                "description": "List every entry of a directory (default: '.').",
            },
            {
                "keyword": CommandKeyword.CAT,
                "usage": "cat <path>",
                "description": "Write the contents of a file to standard output.",
            },
            {
                "keyword": CommandKeyword.MKDIR,
                "usage": "mkdir <path>",
                "description": "Create a directory.",
            },
            {
                "keyword": CommandKeyword.RMDIR,
                "usage": "rmdir <path>",
                "description": "Remove an empty directory.",
            },
            {
                "keyword": CommandKeyword.RM,
                "usage": "rm <path>",
                "description": "Remove (unlink) a file.",
            },
            {
                "keyword": CommandKeyword.PWD,
                "usage": "pwd",
                "description": "Print the working directory.",
            },
            {
                "keyword": CommandKeyword.STAT,
                "usage": "stat <path>",
                "description": "Show size, modification time, mode, links and inode.",
            },
        ]

    def dispatch(self, command: ParsedCommand) -> int:
        handler = self._commands.get(command.keyword)
        if handler is None:
            raise ValueError(f"Unknown command: {command.keyword.value}")
        return handler(command.argument)

    # ------------------------- command implementations -------------------------
    def _do_cd(self, path: str) -> int:
        try:
            target = path or self._fs.home_directory()
            self._fs.change_directory(target)
        except FileSystemError as e:
            self._console.error(f"cd: {e.reason}")
            return FAILURE
        return SUCCESS

    def _do_ls(self, path: str) -> int:
        try:
            entries = self._fs.list_directory(path)
        except FileSystemError as e:
            self._console.error(f"Could not open directory {path}: {e.reason}")
            return FAILURE

        for entry in entries:
            if entry.error:
                self._console.error(f"stat: {entry.name}: {entry.error}")

        if self._renderer is not None:
            self._renderer.render_listing(path, entries)
            return SUCCESS

        for entry in entries:
            self._console.write(entry.format(self._column_width) + "\n")
        return SUCCESS

    def _do_cat(self, path: str) -> int:
        try:
            handle = self._fs.open_file(path)
        except FileSystemError as e:
            self._console.error(f"Unable to open {path}: {e.reason}")
            return FAILURE

        with handle:
            try:
                for chunk in iter(partial(handle.read, self._chunk_size), b""):
                    self._console.write_bytes(chunk)
            except OSError as e:
                # Read/write failures end the copy but are not shown to the user
                self._logger.info(f"cat stopped on {path}: {e}")
                return FAILURE
        return SUCCESS

    def _do_mkdir(self, path: str) -> int:
        try:
            self._fs.make_directory(path, self._mkdir_mode)
        except FileSystemError as e:
            self._console.error(f"Error making directory {path}: {e.reason}")
            return FAILURE
        return SUCCESS

    def _do_rmdir(self, path: str) -> int:
        try:
            self._fs.remove_directory(path)
        except FileSystemError as e:
            self._console.error(f"Error removing directory {path}: {e.reason}")
            return FAILURE
        return SUCCESS

    def _do_rm(self, path: str) -> int:
        try:
            self._fs.remove_file(path)
        except FileSystemError as e:
            self._console.error(f"Error unlinking file {path}: {e.reason}")
            return FAILURE
        return SUCCESS

    def _do_pwd(self, _: str) -> int:
        try:
            cwd = self._fs.current_directory()
        except FileSystemError as e:
            self._logger.debug(f"pwd failed: {e}")
            return FAILURE
        self._console.write(cwd + "\n")
        return SUCCESS

    def _do_stat(self, path: str) -> int:
        try:
            status = self._fs.stat(path)
        except FileSystemError as e:
            self._console.error(f"Error getting stats for {path}: {e.reason}")
            return FAILURE

        if self._renderer is not None:
            self._renderer.render_status(status)
            return SUCCESS

        for line in status.lines():
            self._console.write(line + "\n")
        return SUCCESS
