"""In-memory disk for testing code that talks to a DiskInterface.

Nothing here touches the host filesystem. Files carry a logical mtime
taken from a clock that only moves when `tick()` is called, and every
mutating call is recorded so tests can assert on what a caller did.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from buildfs.disk.base import DiskInterface, dir_name
from buildfs.protocols import DiagnosticSink, PathArg
from buildfs.types import ReadResult, RemoveOutcome, StatResult


@dataclass
class Entry:
    """A file held by InMemoryDiskInterface."""

    mtime: int
    contents: bytes


@dataclass
class InMemoryDiskInterface(DiskInterface):
    """DiskInterface over a dict of files and a set of directories.

    Attributes:
        now: Logical time given to files and directories when created.
        files: File contents and mtimes keyed by path.
        directories: Directory mtimes keyed by path.
        stats: Every path passed to `stat`, in call order.
        directories_made: Directories created by `make_dir`, in order.
        files_read: Files passed to `read_file`, in order.
        files_removed: Files removed by `remove_file`, in order.
        fail_stat: Paths whose `stat` fails.
        fail_make_dir: Paths whose `make_dir` fails.
    """

    sink: DiagnosticSink | None = None
    now: int = 1
    files: dict[str, Entry] = field(default_factory=dict)
    directories: dict[str, int] = field(default_factory=dict)
    stats: list[str] = field(default_factory=list)
    directories_made: list[str] = field(default_factory=list)
    files_read: list[str] = field(default_factory=list)
    files_removed: list[str] = field(default_factory=list)
    fail_stat: set[str] = field(default_factory=set)
    fail_make_dir: set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        DiskInterface.__init__(self, self.sink)

    def tick(self) -> int:
        """Advance the clock by one unit and return the new time."""
        self.now += 1
        return self.now

    def create(self, path: PathArg, contents: bytes | str = b"") -> None:
        """Seed a file at the current time, bypassing call recording."""
        data = contents.encode("utf-8") if isinstance(contents, str) else contents
        self.files[os.fspath(path)] = Entry(self.now, data)

    def stat(self, path: PathArg) -> StatResult:
        path = os.fspath(path)
        self.stats.append(path)
        if path in self.fail_stat:
            message = f"stat({path}): Permission denied"
            self.report(message)
            return StatResult.failed(message)
        if path in self.directories:
            return StatResult.present(self.directories[path])
        if path in self.files:
            return StatResult.present(self.files[path].mtime)
        return StatResult.absent()

    def write_file(self, path: PathArg, contents: bytes | str) -> bool:
        path = os.fspath(path)
        if path in self.directories:
            self.report(f"WriteFile({path}): Unable to create file. Is a directory")
            return False
        parent = dir_name(path, self.separators)
        if parent and parent not in self.directories:
            self.report(f"WriteFile({path}): Unable to create file. No such file or directory")
            return False
        self.create(path, contents)
        return True

    def make_dir(self, path: PathArg) -> bool:
        path = os.fspath(path)
        if path in self.fail_make_dir:
            self.report(f"mkdir({path}): Permission denied")
            return False
        if path in self.directories or path in self.files:
            self.report(f"mkdir({path}): File exists")
            return False
        parent = dir_name(path, self.separators)
        if parent and parent not in self.directories:
            self.report(f"mkdir({path}): No such file or directory")
            return False
        self.directories[path] = self.now
        self.directories_made.append(path)
        return True

    def read_file(self, path: PathArg, binary: bool = False) -> ReadResult:
        path = os.fspath(path)
        self.files_read.append(path)
        entry = self.files.get(path)
        if entry is None:
            return ReadResult(b"" if binary else "", "")
        if binary:
            return ReadResult(entry.contents)
        try:
            return ReadResult(entry.contents.decode("utf-8"))
        except UnicodeDecodeError as e:
            self.report(f"ReadFile({path}): {e}")
            return ReadResult("", str(e))

    def remove_file(self, path: PathArg) -> RemoveOutcome:
        path = os.fspath(path)
        if path in self.directories:
            self.report(f"remove({path}): Is a directory")
            return RemoveOutcome.ERROR
        if self.files.pop(path, None) is None:
            return RemoveOutcome.MISSING
        self.files_removed.append(path)
        return RemoveOutcome.REMOVED
