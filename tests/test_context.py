"""Tests for context module."""

from __future__ import annotations

import pytest

from buildfs.config import DiskConfig, DiskConfigError
from buildfs.context import DiskContext, create_context
from buildfs.diagnostics import CollectingSink, ConsoleSink, LoggingSink
from buildfs.disk import InMemoryDiskInterface, PosixDiskInterface, WindowsDiskInterface


class TestDiskContext:
    """Tests for DiskContext dataclass."""

    def test_create_with_test_double(self) -> None:
        """Test a context can hold an in-memory disk."""
        sink = CollectingSink()
        disk = InMemoryDiskInterface(sink=sink)

        ctx = DiskContext(disk=disk)

        assert ctx.disk is disk
        assert ctx.sink is sink
        assert ctx.config == DiskConfig()


class TestCreateContext:
    """Tests for create_context factory function."""

    def test_defaults_to_console_diagnostics(self) -> None:
        """Test the CLI context prints diagnostics by default."""
        ctx = create_context(environ={})

        assert ctx.config.console_diagnostics is True
        assert isinstance(ctx.sink, ConsoleSink)

    def test_environment_can_disable_console(self) -> None:
        """Test BUILDFS_CONSOLE_DIAGNOSTICS=0 keeps diagnostics in the log."""
        ctx = create_context(environ={"BUILDFS_CONSOLE_DIAGNOSTICS": "0"})

        assert isinstance(ctx.sink, LoggingSink)

    def test_platform_override(self) -> None:
        """Test the platform argument beats the environment."""
        ctx = create_context(platform="windows", environ={"BUILDFS_PLATFORM": "posix"})

        assert isinstance(ctx.disk, WindowsDiskInterface)

    def test_platform_from_environment(self) -> None:
        """Test BUILDFS_PLATFORM selects the implementation."""
        ctx = create_context(environ={"BUILDFS_PLATFORM": "posix"})

        assert isinstance(ctx.disk, PosixDiskInterface)

    def test_explicit_sink(self) -> None:
        """Test a supplied sink is used."""
        sink = CollectingSink()

        assert create_context(environ={}, sink=sink).sink is sink

    def test_invalid_platform(self) -> None:
        """Test a bad platform raises DiskConfigError."""
        with pytest.raises(DiskConfigError):
            create_context(platform="beos", environ={})
