"""
Filesystem metadata entities.
"""

import os
import time
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FileStatus:
    """
    Read-only snapshot of a filesystem entry's metadata.

    Taken fresh for every query; nothing here is cached.
    """

    name: str
    size: int
    modified: float
    mode: int
    nlink: int
    inode: int

    @classmethod
    def from_stat_result(cls, name: str, info: os.stat_result) -> "FileStatus":
        """
        Build a snapshot from an os.stat_result.

        Args:
            name: Name to report, as given by the user
            info: Result of os.stat()

        Returns:
            FileStatus entity
        """
        return cls(
            name=name,
            size=int(info.st_size),
            modified=float(info.st_mtime),
            mode=int(info.st_mode),
            nlink=int(info.st_nlink),
            inode=int(info.st_ino),
        )

    @property
    def modified_text(self) -> str:
        """Last modification time in ctime() form, e.g. 'Mon Oct 19 10:02:11 2026'."""
        return time.ctime(self.modified)

    def get_details(self) -> list[tuple[str, str]]:
        """
        Get the labelled fields in display order.

        Returns:
            List of (label, value) pairs
        """
        return [
            ("File Name", self.name),
            ("Total Size", str(self.size)),
            ("Last Modified", self.modified_text),
            ("Protection", str(self.mode)),
            ("Number of hardlinks", str(self.nlink)),
            ("Inode", str(self.inode)),
        ]

    def lines(self) -> list[str]:
        """The six 'Label: value' lines printed by the stat command."""
        return [f"{label}: {value}" for label, value in self.get_details()]


@dataclass(frozen=True)
class DirectoryEntry:
    """One entry of a directory listing."""

    name: str
    is_dir: bool = False
    error: Optional[str] = None

    def format(self, width: int) -> str:
        """Pad the name to width, marking directories with <dir>."""
        if self.is_dir:
            return f"{self.name:<{width}}\t<dir>"
        return f"{self.name:<{width}}"
