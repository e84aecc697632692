"""
Pytest configuration and shared fixtures.
"""

import io
import os
from unittest.mock import MagicMock

import pytest

from myshell.adapters.console.stream_console import StreamConsole
from myshell.config.settings import Settings
from myshell.container import DependencyContainer


@pytest.fixture
def temp_directory(tmp_path, monkeypatch):
    """
    Create a populated temporary directory and make it the working directory.

    Returns:
        Path to the temporary directory
    """
    temp_dir = str(tmp_path)

    with open(os.path.join(temp_dir, "test1.txt"), "w") as f:
        f.write("This is a test file.")

    with open(os.path.join(temp_dir, ".hidden"), "w") as f:
        f.write("secret")

    subdir = os.path.join(temp_dir, "subdir")
    os.makedirs(subdir)
    with open(os.path.join(subdir, "test3.md"), "w") as f:
        f.write("# Test Markdown\n\nThis is a test.")

    # monkeypatch restores the original working directory afterwards
    monkeypatch.chdir(temp_dir)
    yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def console():
    """
    Create a console over in-memory streams.

    Returns:
        StreamConsole whose stdout/stderr can be read back with getvalue()
    """
    return StreamConsole(io.StringIO(""), io.StringIO(), io.StringIO())


@pytest.fixture
def app_settings(monkeypatch):
    """Settings built from a clean environment."""
    for key in list(os.environ):
        if key.startswith("MYSHELL_"):
            monkeypatch.delenv(key)
    return Settings()


@pytest.fixture
def make_container(app_settings, mock_logger):
    """
    Build a dependency container reading the given input text.

    Returns:
        Factory taking the stdin text and returning (container, stdout, stderr)
    """

    def _make(input_text: str = "", pretty: bool = False):
        stdout, stderr = io.StringIO(), io.StringIO()
        container = DependencyContainer(
            app_settings=app_settings,
            stdin=io.StringIO(input_text),
            stdout=stdout,
            stderr=stderr,
            pretty=pretty,
        )
        # Replace the logger with our mock
        container._logger = mock_logger
        return container, stdout, stderr

    return _make
