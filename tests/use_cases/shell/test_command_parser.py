"""
Tests for the CommandParser.
"""

import pytest

from myshell.entities.command import CommandKeyword, ParsedCommand
from myshell.exceptions import LineTooLongError, UnknownCommandError
from myshell.use_cases.shell.command_parser import CommandParser


class TestCommandParser:
    """Test cases for the CommandParser."""

    def test_empty_line_is_ignored(self, mock_logger):
        parser = CommandParser(logger=mock_logger)
        assert parser.parse("") is None

    def test_whitespace_only_line_is_ignored(self, mock_logger):
        parser = CommandParser(logger=mock_logger)
        assert parser.parse("   ") is None

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("cd", ParsedCommand(CommandKeyword.CD)),
            ("cd /tmp", ParsedCommand(CommandKeyword.CD, "/tmp")),
            ("ls", ParsedCommand(CommandKeyword.LS)),
            ("ls subdir", ParsedCommand(CommandKeyword.LS, "subdir")),
            ("cat a.txt", ParsedCommand(CommandKeyword.CAT, "a.txt")),
            ("stat a.txt", ParsedCommand(CommandKeyword.STAT, "a.txt")),
            ("mkdir new", ParsedCommand(CommandKeyword.MKDIR, "new")),
            ("rmdir old", ParsedCommand(CommandKeyword.RMDIR, "old")),
            ("rm a.txt", ParsedCommand(CommandKeyword.RM, "a.txt")),
            ("pwd", ParsedCommand(CommandKeyword.PWD)),
            ("exit", ParsedCommand(CommandKeyword.EXIT)),
        ],
    )
    def test_parse_known_commands(self, line, expected, mock_logger):
        parser = CommandParser(logger=mock_logger)
        assert parser.parse(line) == expected

    def test_argument_is_whitespace_delimited(self, mock_logger):
        """Test that runs of spaces and tabs separate keyword and argument."""
        parser = CommandParser(logger=mock_logger)
        assert parser.parse("  cat \t notes.txt") == ParsedCommand(
            CommandKeyword.CAT, "notes.txt"
        )

    def test_extra_tokens_are_ignored(self, mock_logger):
        parser = CommandParser(logger=mock_logger)

        result = parser.parse("rm a.txt b.txt")

        assert result == ParsedCommand(CommandKeyword.RM, "a.txt")
        mock_logger.debug.assert_called_once()

    def test_exit_with_trailing_arguments(self, mock_logger):
        parser = CommandParser(logger=mock_logger)
        assert parser.parse("exit now please").keyword is CommandKeyword.EXIT

    @pytest.mark.parametrize("line", ["foo bar", "lsx", "rmdirx d", "LS", "cdd /tmp"])
    def test_unknown_command(self, line, mock_logger):
        """Test that only an exact first-token match selects a command."""
        parser = CommandParser(logger=mock_logger)

        with pytest.raises(UnknownCommandError) as exc_info:
            parser.parse(line)

        assert exc_info.value.line == line
        assert str(exc_info.value) == f"{line}: No such file or directory"

    @pytest.mark.parametrize("line", ["cat", "stat", "mkdir", "rmdir", "rm"])
    def test_missing_required_argument(self, line, mock_logger):
        parser = CommandParser(logger=mock_logger)

        with pytest.raises(UnknownCommandError, match=f"^{line}: No such file"):
            parser.parse(line)

    def test_line_too_long(self, mock_logger):
        parser = CommandParser(max_line_length=10, logger=mock_logger)

        with pytest.raises(LineTooLongError) as exc_info:
            parser.parse("cat " + "x" * 10)

        assert exc_info.value.length == 14
        assert exc_info.value.limit == 10

    def test_line_at_limit_is_accepted(self, mock_logger):
        parser = CommandParser(max_line_length=10, logger=mock_logger)
        assert parser.parse("cat abcdef") == ParsedCommand(CommandKeyword.CAT, "abcdef")

    def test_exit_is_accepted_past_length_limit(self, mock_logger):
        """Test that exit with long trailing text still exits."""
        parser = CommandParser(max_line_length=10, logger=mock_logger)

        result = parser.parse("exit " + "z" * 50)

        assert result == ParsedCommand(CommandKeyword.EXIT)

    def test_unknown_long_line_reports_length(self, mock_logger):
        parser = CommandParser(max_line_length=10, logger=mock_logger)

        with pytest.raises(LineTooLongError):
            parser.parse("bogus " + "z" * 50)
