"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from buildfs.diagnostics import CollectingSink
from buildfs.disk import InMemoryDiskInterface, RealDiskInterface, create_disk_interface


@pytest.fixture
def sink() -> CollectingSink:
    """Create a sink that records diagnostics."""
    return CollectingSink()


@pytest.fixture
def disk(sink: CollectingSink) -> RealDiskInterface:
    """Create the host disk interface for the running platform."""
    return create_disk_interface(sink=sink)


@pytest.fixture
def memory_disk(sink: CollectingSink) -> InMemoryDiskInterface:
    """Create an empty in-memory disk."""
    return InMemoryDiskInterface(sink=sink)


@pytest.fixture
def in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with the temporary directory as working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Create a small file on disk."""
    path = tmp_path / "sample.txt"
    path.write_bytes(b"hello\n")
    return path
