"""Filesystem abstraction for build tools."""

__version__ = "0.1.0"

# Export the public interfaces for type hints and dependency injection
from buildfs.disk import (
    DiskInterface,
    InMemoryDiskInterface,
    RealDiskInterface,
    create_disk_interface,
)
from buildfs.protocols import DiagnosticSink, FileSystemDisk
from buildfs.types import ReadResult, RemoveOutcome, StatKind, StatResult

__all__ = [
    "__version__",
    "DiagnosticSink",
    "DiskInterface",
    "FileSystemDisk",
    "InMemoryDiskInterface",
    "RealDiskInterface",
    "ReadResult",
    "RemoveOutcome",
    "StatKind",
    "StatResult",
    "create_disk_interface",
]
