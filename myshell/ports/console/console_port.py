"""
Console port interface for the interactive text protocol.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ConsolePort(ABC):
    """Port interface for prompt display, line input and output streams."""

    @abstractmethod
    def show_prompt(self, text: str) -> None:
        """Write the prompt text with no trailing newline and flush it."""
        pass

    @abstractmethod
    def read_line(self) -> Optional[str]:
        """
        Read one line of input.

        Returns:
            The raw line including any terminator, or None at end of input
        """
        pass

    @abstractmethod
    def write(self, text: str) -> None:
        """Write text to standard output."""
        pass

    @abstractmethod
    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes to standard output."""
        pass

    @abstractmethod
    def error(self, text: str) -> None:
        """Write a diagnostic line to standard error."""
        pass
