"""
Local file system adapter implementation for the shell's filesystem operations.
"""

import logging
import os
import pwd
import stat as stat_module
from typing import BinaryIO

from typing_extensions import override

from myshell.entities.file_status import DirectoryEntry, FileStatus
from myshell.exceptions import FileSystemError
from myshell.ports.files.file_system_port import FileSystemPort

# readdir() reports these too; os.scandir() leaves them out.
_SELF_AND_PARENT = (os.curdir, os.pardir)


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the filesystem port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _describe_entry(self, directory: str, name: str) -> DirectoryEntry:
        """
        Query metadata for one directory entry, relative to the listed directory.

        Args:
            directory: Directory being listed
            name: Entry name inside that directory

        Returns:
            DirectoryEntry; on failure the entry carries the OS reason instead of raising
        """
        try:
            info = os.stat(os.path.join(directory, name))
        except OSError as e:
            self._logger.debug(f"Could not stat {name} in {directory}: {e}")
            return DirectoryEntry(name=name, error=e.strerror or str(e))
        return DirectoryEntry(name=name, is_dir=stat_module.S_ISDIR(info.st_mode))

    @override
    def current_directory(self) -> str:
        try:
            return os.getcwd()
        except OSError as e:
            raise FileSystemError.from_os_error(".", e)

    @override
    def home_directory(self) -> str:
        uid = os.getuid()
        try:
            return pwd.getpwuid(uid).pw_dir
        except KeyError:
            raise FileSystemError("~", f"No user database entry for uid {uid}")

    @override
    def change_directory(self, path: str) -> None:
        try:
            os.chdir(path)
        except OSError as e:
            raise FileSystemError.from_os_error(path, e)
        self._logger.debug(f"Changed working directory to {path}")

    @override
    def list_directory(self, path: str) -> list[DirectoryEntry]:
        """
        List every entry of a directory, hidden ones included.

        Args:
            path: Directory to list

        Returns:
            List of DirectoryEntry entities, '.' and '..' first

        Raises:
            FileSystemError: If the directory cannot be opened
        """
        try:
            with os.scandir(path) as it:
                names = [entry.name for entry in it]
        except OSError as e:
            raise FileSystemError.from_os_error(path, e)

        entries = [
            self._describe_entry(path, name) for name in (*_SELF_AND_PARENT, *names)
        ]
        self._logger.debug(f"Listed {len(entries)} entries in {path}")
        return entries

    @override
    def open_file(self, path: str) -> BinaryIO:
        try:
            return open(path, "rb")
        except OSError as e:
            raise FileSystemError.from_os_error(path, e)

    @override
    def make_directory(self, path: str, mode: int) -> None:
        try:
            os.mkdir(path, mode)
        except OSError as e:
            raise FileSystemError.from_os_error(path, e)
        self._logger.info(f"Created directory {path} with mode {oct(mode)}")

    @override
    def remove_directory(self, path: str) -> None:
        try:
            os.rmdir(path)
        except OSError as e:
            raise FileSystemError.from_os_error(path, e)
        self._logger.info(f"Removed directory {path}")

    @override
    def remove_file(self, path: str) -> None:
        try:
            os.unlink(path)
        except OSError as e:
            raise FileSystemError.from_os_error(path, e)
        self._logger.info(f"Removed file {path}")

    @override
    def stat(self, path: str) -> FileStatus:
        try:
            info = os.stat(path)
        except OSError as e:
            raise FileSystemError.from_os_error(path, e)
        return FileStatus.from_stat_result(path, info)
