"""
Custom exceptions for the application.
"""

from typing import Optional


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileSystemError(BaseAppError):
    """Exception raised when an OS filesystem call fails."""

    def __init__(self, path: str, reason: str, errno: Optional[int] = None):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
        self.errno = errno

    @classmethod
    def from_os_error(cls, path: str, error: OSError) -> "FileSystemError":
        """Wrap an OSError, keeping the OS-supplied reason text."""
        reason = error.strerror or str(error)
        return cls(path, reason, error.errno)


class CommandParseError(BaseAppError):
    """Exception raised when a command line cannot be parsed."""

    pass


class UnknownCommandError(CommandParseError):
    """Exception raised for a non-empty line that matches no command."""

    def __init__(self, line: str):
        super().__init__(f"{line}: No such file or directory")
        self.line = line


class LineTooLongError(CommandParseError):
    """Exception raised when a command line exceeds the configured limit."""

    def __init__(self, length: int, limit: int):
        super().__init__(f"line too long ({length} characters, max {limit})")
        self.length = length
        self.limit = limit


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class ExitRequested(BaseAppError):
    """Raised by the exit command to stop the interactive loop."""

    def __init__(self, status: int = 0):
        super().__init__(f"exit requested with status {status}")
        self.status = status
