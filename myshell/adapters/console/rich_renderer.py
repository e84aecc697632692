"""
Pretty rendering of listing and status output with rich.
"""

from typing import TextIO

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from myshell.entities.file_status import DirectoryEntry, FileStatus


class RichRenderer:
    """Render ls and stat results as rich tables on the console's stdout."""

    def __init__(self, stdout: TextIO, console: Console | None = None):
        self._console = console or Console(file=stdout, soft_wrap=True)

    def render_listing(self, path: str, entries: list[DirectoryEntry]) -> None:
        table = Table(title=Text(path), box=box.ROUNDED, border_style="cyan")
        table.add_column("Name", style="bold")
        table.add_column("Type")
        for entry in entries:
            if entry.error:
                kind = "[red]?[/red]"
            elif entry.is_dir:
                kind = "<dir>"
            else:
                kind = ""
            table.add_row(Text(entry.name), kind)
        self._console.print(table)

    def render_status(self, status: FileStatus) -> None:
        table = Table(show_header=False, box=box.ROUNDED, border_style="magenta")
        table.add_column("Field", style="bold")
        table.add_column("Value")
        for label, value in status.get_details():
            table.add_row(label, Text(value))
        self._console.print(table)
