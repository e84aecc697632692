"""
Console adapter over text streams (the process's stdin/stdout/stderr by default).
"""

import logging
import sys
from typing import BinaryIO, Optional, TextIO

from typing_extensions import override

from myshell.ports.console.console_port import ConsolePort


class StreamConsole(ConsolePort):
    """Console implementation reading and writing plain text streams."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the console.

        Args:
            stdin: Input stream (default: sys.stdin)
            stdout: Output stream (default: sys.stdout)
            stderr: Diagnostic stream (default: sys.stderr)
            logger: Logger instance to use for logging
        """
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self._logger = logger or logging.getLogger(__name__)
        for stream in (self.stdin, self.stdout, self.stderr):
            self._pass_undecodable_bytes(stream)

    def _pass_undecodable_bytes(self, stream: TextIO) -> None:
        """Let bytes that are not valid text round-trip as surrogate escapes.

        Input lines and filenames from os.scandir/os.getcwd use the same
        escapes, so any of them can be read, passed to the OS and printed back.
        """
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is None:
            return
        try:
            reconfigure(errors="surrogateescape")
        except (ValueError, OSError) as e:
            self._logger.debug(f"Could not reconfigure {stream!r}: {e}")

    def _binary_stdout(self) -> Optional[BinaryIO]:
        return getattr(self.stdout, "buffer", None)

    @override
    def show_prompt(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    @override
    def read_line(self) -> Optional[str]:
        line = self.stdin.readline()
        if line == "":
            self._logger.debug("End of input reached")
            return None
        return line

    @override
    def write(self, text: str) -> None:
        self.stdout.write(text)

    @override
    def write_bytes(self, data: bytes) -> None:
        binary = self._binary_stdout()
        if binary is None:
            # In-memory text streams have no byte layer.
            self.stdout.write(data.decode("utf-8", errors="replace"))
            return
        self.stdout.flush()
        binary.write(data)
        binary.flush()

    @override
    def error(self, text: str) -> None:
        self.stdout.flush()
        self.stderr.write(f"{text}\n")
        self.stderr.flush()
