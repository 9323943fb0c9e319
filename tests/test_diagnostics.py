"""Tests for diagnostic sinks."""

from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console

from buildfs.diagnostics import CollectingSink, ConsoleSink, LoggingSink
from buildfs.protocols import DiagnosticSink


class TestSinks:
    """Tests for the DiagnosticSink implementations."""

    def test_all_satisfy_protocol(self) -> None:
        """Test every sink matches the protocol structurally."""
        for sink in (LoggingSink(), CollectingSink(), ConsoleSink()):
            assert isinstance(sink, DiagnosticSink)

    def test_collecting_sink_keeps_order(self) -> None:
        """Test messages are kept in report order."""
        sink = CollectingSink()

        sink.error("first")
        sink.error("second")

        assert sink.messages == ["first", "second"]

    def test_logging_sink(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test the logging sink logs at ERROR level."""
        sink = LoggingSink()

        with caplog.at_level(logging.ERROR, logger="buildfs.diagnostics"):
            sink.error("mkdir(out): Permission denied")

        assert caplog.records[-1].levelno == logging.ERROR
        assert caplog.records[-1].getMessage() == "mkdir(out): Permission denied"

    def test_logging_sink_custom_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test a caller-supplied logger receives the message."""
        sink = LoggingSink(logging.getLogger("build"))

        with caplog.at_level(logging.ERROR, logger="build"):
            sink.error("stat(x): Input/output error")

        assert [r.name for r in caplog.records] == ["build"]

    def test_console_sink_prints_message(self) -> None:
        """Test the console sink prefixes messages and leaves brackets alone."""
        buffer = io.StringIO()
        sink = ConsoleSink(Console(file=buffer, width=200, color_system=None))

        sink.error("remove(out/[gen].o): Permission denied")

        assert buffer.getvalue() == "error: remove(out/[gen].o): Permission denied\n"
