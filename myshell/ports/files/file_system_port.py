"""
File system port interface defining the contract for the shell's filesystem operations.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO

from myshell.entities.file_status import DirectoryEntry, FileStatus


class FileSystemPort(ABC):
    """Port interface for filesystem operations.

    Every method raises FileSystemError carrying the OS-supplied reason on failure.
    """

    @abstractmethod
    def current_directory(self) -> str:
        """
        Get the process working directory.

        Returns:
            Absolute path of the working directory

        Raises:
            FileSystemError: If the directory cannot be determined
        """
        pass

    @abstractmethod
    def home_directory(self) -> str:
        """
        Get the home directory of the invoking user from the user database.

        Returns:
            Home directory path

        Raises:
            FileSystemError: If the current user has no entry
        """
        pass

    @abstractmethod
    def change_directory(self, path: str) -> None:
        """
        Change the process working directory.

        Args:
            path: Directory to change to
        """
        pass

    @abstractmethod
    def list_directory(self, path: str) -> list[DirectoryEntry]:
        """
        List every entry of a directory, hidden ones included.

        Does not change the working directory. A metadata failure on one
        entry is recorded on that entry and does not stop the listing.

        Args:
            path: Directory to list

        Returns:
            List of DirectoryEntry entities

        Raises:
            FileSystemError: If the directory cannot be opened
        """
        pass

    @abstractmethod
    def open_file(self, path: str) -> BinaryIO:
        """
        Open a file read-only in binary mode.

        Args:
            path: File to open

        Returns:
            A binary file object the caller must close

        Raises:
            FileSystemError: If the file cannot be opened
        """
        pass

    @abstractmethod
    def make_directory(self, path: str, mode: int) -> None:
        """
        Create a directory.

        Args:
            path: Directory path to create
            mode: Permission bits for the new directory
        """
        pass

    @abstractmethod
    def remove_directory(self, path: str) -> None:
        """Remove a directory; fails unless it is empty."""
        pass

    @abstractmethod
    def remove_file(self, path: str) -> None:
        """Unlink a file."""
        pass

    @abstractmethod
    def stat(self, path: str) -> FileStatus:
        """
        Query metadata for a path.

        Args:
            path: Path to query

        Returns:
            FileStatus snapshot
        """
        pass
