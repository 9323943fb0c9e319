"""Protocol definitions for the disk layer's collaborators.

Callers depend on these interfaces rather than on concrete classes, so a
test double or an alternative backend can be substituted without
inheritance. All concrete implementations satisfy them structurally.
"""

from __future__ import annotations

from os import PathLike
from typing import Protocol, Union, runtime_checkable

from buildfs.types import ReadResult, RemoveOutcome, StatResult

PathArg = Union[str, "PathLike[str]"]


@runtime_checkable
class DiagnosticSink(Protocol):
    """Receives one human-readable message per failed disk operation."""

    def error(self, message: str) -> None:
        """Report a failure.

        Args:
            message: Diagnostic text, already containing the path and OS error.
        """
        ...


@runtime_checkable
class FileSystemDisk(Protocol):
    """Protocol for the operations a build tool needs from disk.

    `buildfs.disk.DiskInterface` is the reference implementation; anything
    that offers these methods can be handed to a caller in its place.
    """

    def stat(self, path: PathArg) -> StatResult:
        """Get a path's modification time.

        Args:
            path: Path to query.

        Returns:
            Present with mtime, absent, or error. Never raises for a
            missing path.
        """
        ...

    def write_file(self, path: PathArg, contents: bytes | str) -> bool:
        """Replace a file's entire contents.

        Args:
            path: File to create or truncate.
            contents: New contents.

        Returns:
            True on success.
        """
        ...

    def make_dir(self, path: PathArg) -> bool:
        """Create a single directory level.

        Args:
            path: Directory to create. Its parent must exist.

        Returns:
            True on success.
        """
        ...

    def make_dirs(self, path: PathArg) -> bool:
        """Create every missing ancestor directory of a path.

        Args:
            path: Path whose parent directories should exist afterwards.

        Returns:
            True if all ancestors exist on return.
        """
        ...

    def read_file(self, path: PathArg, binary: bool = False) -> ReadResult:
        """Read a whole file.

        Args:
            path: File to read.
            binary: Return bytes instead of text.

        Returns:
            Contents and error text. A missing file is empty with no error.
        """
        ...

    def remove_file(self, path: PathArg) -> RemoveOutcome:
        """Remove a file.

        Args:
            path: File to remove.

        Returns:
            REMOVED, MISSING (not an error), or ERROR.
        """
        ...
