"""Application context for dependency injection.

Separates building the disk interface from using it, so CLI commands can
be exercised with an in-memory disk or a collecting sink.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from buildfs.config import DiskConfig
from buildfs.disk import DiskInterface, create_disk_interface
from buildfs.protocols import DiagnosticSink


@dataclass
class DiskContext:
    """Container for the CLI's dependencies."""

    disk: DiskInterface
    config: DiskConfig = field(default_factory=DiskConfig)

    @property
    def sink(self) -> DiagnosticSink:
        return self.disk.sink


def create_context(
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
    sink: DiagnosticSink | None = None,
) -> DiskContext:
    """Factory for CLI dependencies.

    Reads BUILDFS_* settings from the environment, then applies overrides.
    For tests, construct DiskContext directly with test doubles.

    Args:
        platform: Override the platform family (auto, posix, windows).
        environ: Environment to read settings from. Defaults to os.environ.
        sink: Override the diagnostic sink. Defaults to a console sink
            unless BUILDFS_CONSOLE_DIAGNOSTICS turns it off.

    Returns:
        Configured DiskContext.

    Raises:
        DiskConfigError: If the environment or overrides are invalid.
    """
    config = DiskConfig.from_env(environ)
    overrides: dict[str, object] = {}
    if "console_diagnostics" not in config.model_fields_set:
        overrides["console_diagnostics"] = True
    if platform is not None:
        overrides["platform"] = platform
    config = DiskConfig.from_data({**config.model_dump(), **overrides})

    return DiskContext(disk=create_disk_interface(config, sink), config=config)
