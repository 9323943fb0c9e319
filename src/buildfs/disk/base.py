"""Abstract disk interface with the shared directory-creation algorithm.

Pattern: Template Method - the base class implements `make_dirs` once in
terms of `stat` and `make_dir`; subclasses supply the primitives for a
particular backend (the host OS, an in-memory model, ...).
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod

from buildfs.diagnostics import LoggingSink
from buildfs.protocols import DiagnosticSink, PathArg
from buildfs.types import ReadResult, RemoveOutcome, StatResult

logger = logging.getLogger(__name__)


def dir_name(path: str, separators: str = "/") -> str:
    """Get the parent directory of a path.

    Trims the last component and any run of separators in front of it.

    Args:
        path: Path to split.
        separators: Characters treated as path separators.

    Returns:
        The parent directory, or "" if the path has no separator or the
        parent is the root itself.

    Example:
        >>> dir_name("a/b//c")
        'a/b'
        >>> dir_name("file.txt")
        ''
    """
    slash_pos = max(path.rfind(sep) for sep in separators)
    if slash_pos < 0:
        return ""
    while slash_pos > 0 and path[slash_pos - 1] in separators:
        slash_pos -= 1
    return path[:slash_pos]


class DiskInterface(ABC):
    """Operations a build tool needs from disk.

    Every failing operation reports exactly one message to `self.sink` and
    returns a sentinel the caller can inspect without parsing that message.
    """

    # Characters that separate path components on this backend
    separators: str = "/"

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        """Initialize the interface.

        Args:
            sink: Receiver for failure diagnostics. Defaults to a LoggingSink.
        """
        self.sink: DiagnosticSink = sink if sink is not None else LoggingSink()

    def report(self, message: str) -> None:
        """Hand a failure message to the sink."""
        self.sink.error(message)

    @abstractmethod
    def stat(self, path: PathArg) -> StatResult:
        """Get a path's modification time; absence is not an error."""
        ...

    @abstractmethod
    def write_file(self, path: PathArg, contents: bytes | str) -> bool:
        """Create or truncate a file and write all of `contents`."""
        ...

    @abstractmethod
    def make_dir(self, path: PathArg) -> bool:
        """Create one directory level; the parent must already exist."""
        ...

    @abstractmethod
    def read_file(self, path: PathArg, binary: bool = False) -> ReadResult:
        """Read a whole file; a missing file reads as empty with no error."""
        ...

    @abstractmethod
    def remove_file(self, path: PathArg) -> RemoveOutcome:
        """Remove a file; a missing file is MISSING, not ERROR."""
        ...

    def make_dirs(self, path: PathArg) -> bool:
        """Create all missing ancestor directories of `path`.

        Walks up until an existing ancestor (or the root) is found, then
        creates the missing levels from the top down. Directories created
        before a failure are left in place.

        Args:
            path: File or directory path whose parents should exist.

        Returns:
            True if every ancestor exists on return, False if a stat or
            mkdir failed.
        """
        parent = dir_name(os.fspath(path), self.separators)
        if not parent:
            return True  # Reached the root; assume it exists.

        mtime = self.stat(parent)
        if mtime.is_error:
            return False
        if mtime.exists:
            return True

        if not self.make_dirs(parent):
            return False
        logger.debug("Creating directory %s", parent)
        return self.make_dir(parent)
