"""
Tests for the StreamConsole adapter.
"""

import io

from myshell.adapters.console.stream_console import StreamConsole


class TestStreamConsole:
    """Test cases for the StreamConsole adapter."""

    def test_show_prompt_has_no_newline(self, console):
        console.show_prompt("/tmp>")
        assert console.stdout.getvalue() == "/tmp>"

    def test_read_line(self):
        console = StreamConsole(io.StringIO("ls\npwd\n"), io.StringIO(), io.StringIO())

        assert console.read_line() == "ls\n"
        assert console.read_line() == "pwd\n"
        assert console.read_line() is None

    def test_read_line_last_line_without_newline(self):
        console = StreamConsole(io.StringIO("pwd"), io.StringIO(), io.StringIO())

        assert console.read_line() == "pwd"
        assert console.read_line() is None

    def test_error_goes_to_stderr(self, console):
        console.error("cd: No such file or directory")

        assert console.stderr.getvalue() == "cd: No such file or directory\n"
        assert console.stdout.getvalue() == ""

    def test_write_bytes_to_binary_layer(self):
        """Test that bytes go to the underlying buffer when the stream has one."""
        raw = io.BytesIO()
        stdout = io.TextIOWrapper(raw, encoding="utf-8")
        console = StreamConsole(io.StringIO(), stdout, io.StringIO())

        console.write("before ")
        console.write_bytes(b"\x00\xffdata")

        assert raw.getvalue() == b"before \x00\xffdata"

    def test_write_bytes_to_text_stream(self, console):
        console.write_bytes("héllo".encode("utf-8"))
        assert console.stdout.getvalue() == "héllo"

    def test_undecodable_input_is_read_as_surrogates(self):
        """Test that bytes that are not UTF-8 do not stop reading."""
        stdin = io.TextIOWrapper(io.BytesIO(b"\xff\xfe\npwd\n"), encoding="utf-8")
        console = StreamConsole(stdin, io.StringIO(), io.StringIO())

        assert console.read_line() == "\udcff\udcfe\n"
        assert console.read_line() == "pwd\n"

    def test_undecodable_names_are_written_back_as_bytes(self):
        """Test that a surrogate-escaped filename reaches stdout/stderr as its raw bytes."""
        out_raw, err_raw = io.BytesIO(), io.BytesIO()
        stdout = io.TextIOWrapper(out_raw, encoding="utf-8")
        stderr = io.TextIOWrapper(err_raw, encoding="utf-8")
        console = StreamConsole(io.StringIO(), stdout, stderr)

        console.show_prompt("/tmp/bad\udcff>")
        console.write("bad\udcff\n")
        console.error("stat: bad\udcff: No such file or directory")
        stdout.flush()

        assert out_raw.getvalue() == b"/tmp/bad\xff>bad\xff\n"
        assert err_raw.getvalue() == b"stat: bad\xff: No such file or directory\n"
