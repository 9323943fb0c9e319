"""Disk interface implementations."""

from __future__ import annotations

from buildfs.config import DiskConfig
from buildfs.diagnostics import ConsoleSink, LoggingSink
from buildfs.protocols import DiagnosticSink

from .base import DiskInterface, dir_name
from .memory import InMemoryDiskInterface
from .real import PosixDiskInterface, RealDiskInterface, WindowsDiskInterface

__all__ = [
    "DiskInterface",
    "InMemoryDiskInterface",
    "PosixDiskInterface",
    "RealDiskInterface",
    "WindowsDiskInterface",
    "create_disk_interface",
    "dir_name",
    "get_disk_class",
]


PLATFORMS: dict[str, type[RealDiskInterface]] = {
    "posix": PosixDiskInterface,
    "windows": WindowsDiskInterface,
}


def get_disk_class(name: str) -> type[RealDiskInterface]:
    """Get the host disk implementation for a platform family.

    Args:
        name: Platform family (posix, windows).

    Returns:
        RealDiskInterface subclass.

    Raises:
        ValueError: If the platform is not supported.
    """
    if name not in PLATFORMS:
        raise ValueError(f"Unknown platform: {name}. Supported: {list(PLATFORMS.keys())}")
    return PLATFORMS[name]


def create_disk_interface(
    config: DiskConfig | None = None,
    sink: DiagnosticSink | None = None,
) -> RealDiskInterface:
    """Factory for the host disk interface.

    Args:
        config: Settings. Defaults to DiskConfig() (auto-detected platform).
        sink: Diagnostic receiver. Defaults to a console or logging sink
            depending on `config.console_diagnostics`.

    Returns:
        Configured RealDiskInterface for the selected platform.
    """
    config = config or DiskConfig()
    if sink is None:
        sink = ConsoleSink() if config.console_diagnostics else LoggingSink()

    disk_class = get_disk_class(config.resolved_platform())
    if issubclass(disk_class, WindowsDiskInterface):
        return disk_class(sink, max_path=config.max_path)
    return disk_class(sink)
