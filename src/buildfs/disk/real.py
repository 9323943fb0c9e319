"""Disk interface backed by the host operating system.

Each platform family is its own subclass so its table of "does not exist"
error codes and its preconditions stay isolated.
"""

from __future__ import annotations

import errno
import logging
import os
from contextlib import suppress

from buildfs.config import WINDOWS_MAX_PATH
from buildfs.disk.base import DiskInterface
from buildfs.protocols import DiagnosticSink, PathArg
from buildfs.types import ReadResult, RemoveOutcome, StatResult

logger = logging.getLogger(__name__)

# Windows system error codes meaning the file or a parent directory is missing
ERROR_FILE_NOT_FOUND = 2
ERROR_PATH_NOT_FOUND = 3

_WRITE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0)
_READ_FLAGS = os.O_RDONLY | getattr(os, "O_BINARY", 0)


def _describe(exc: OSError) -> str:
    """Get the OS's own text for an error."""
    return exc.strerror or str(exc)


def read_whole_file(path: str, binary: bool = False) -> tuple[int, bytes | str, str]:
    """Read a file in one go.

    Args:
        path: File to read.
        binary: Return bytes instead of UTF-8 text.

    Returns:
        Tuple of (status, contents, error). Status is 0 on success or the
        negated errno on failure, in which case contents is empty.
    """
    empty: bytes | str = b"" if binary else ""
    try:
        fd = os.open(path, _READ_FLAGS)
    except OSError as e:
        return -(e.errno or errno.EIO), empty, _describe(e)

    chunks = []
    try:
        while chunk := os.read(fd, 1 << 16):
            chunks.append(chunk)
    except OSError as e:
        return -(e.errno or errno.EIO), empty, _describe(e)
    finally:
        with suppress(OSError):
            os.close(fd)

    data = b"".join(chunks)
    if binary:
        return 0, data, ""
    try:
        return 0, data.decode("utf-8"), ""
    except UnicodeDecodeError as e:
        return -errno.EILSEQ, empty, str(e)


class RealDiskInterface(DiskInterface):
    """Implementation of DiskInterface that actually hits the disk.

    Subclasses decide which errors mean "does not exist" and may add
    preconditions to `stat`.
    """

    # Name of the native metadata call, used in stat diagnostics
    stat_call = "stat"

    def is_absent_error(self, exc: OSError) -> bool:
        """Check whether an OS error means the path does not exist."""
        return exc.errno == errno.ENOENT

    def check_stat_path(self, path: str) -> str | None:
        """Validate a path before stat-ing it.

        Returns:
            A diagnostic message if the path must be rejected, else None.
        """
        return None

    def stat(self, path: PathArg) -> StatResult:
        path = os.fspath(path)
        problem = self.check_stat_path(path)
        if problem is not None:
            self.report(problem)
            return StatResult.failed(problem)

        logger.debug("real stat: %s", path)
        try:
            st = os.stat(path)
        except OSError as e:
            if self.is_absent_error(e):
                return StatResult.absent()
            message = f"{self.stat_call}({path}): {_describe(e)}"
            self.report(message)
            return StatResult.failed(message)
        return StatResult.present(int(st.st_mtime))

    def write_file(self, path: PathArg, contents: bytes | str) -> bool:
        path = os.fspath(path)
        data = contents.encode("utf-8") if isinstance(contents, str) else bytes(contents)

        try:
            fd = os.open(path, _WRITE_FLAGS, 0o666)
        except OSError as e:
            self.report(f"WriteFile({path}): Unable to create file. {_describe(e)}")
            return False

        try:
            written = os.write(fd, data) if data else 0
        except OSError as e:
            with suppress(OSError):
                os.close(fd)
            self.report(f"WriteFile({path}): Unable to write to the file. {_describe(e)}")
            return False
        if written < len(data):
            with suppress(OSError):
                os.close(fd)
            self.report(
                f"WriteFile({path}): Unable to write to the file. "
                f"Short write ({written} of {len(data)} bytes)"
            )
            return False

        try:
            os.close(fd)
        except OSError as e:
            self.report(f"WriteFile({path}): Unable to close the file. {_describe(e)}")
            return False

        return True

    def make_dir(self, path: PathArg) -> bool:
        path = os.fspath(path)
        try:
            os.mkdir(path)
        except OSError as e:
            self.report(f"mkdir({path}): {_describe(e)}")
            return False
        return True

    def read_file(self, path: PathArg, binary: bool = False) -> ReadResult:
        path = os.fspath(path)
        status, contents, err = read_whole_file(path, binary)
        if status == -errno.ENOENT:
            # Missing files read as empty; callers stat first if they care.
            return ReadResult(contents, "")
        if status < 0:
            self.report(f"ReadFile({path}): {err}")
        return ReadResult(contents, err)

    def remove_file(self, path: PathArg) -> RemoveOutcome:
        path = os.fspath(path)
        try:
            os.remove(path)
        except OSError as e:
            if e.errno == errno.ENOENT:
                return RemoveOutcome.MISSING
            self.report(f"remove({path}): {_describe(e)}")
            return RemoveOutcome.ERROR
        return RemoveOutcome.REMOVED


class PosixDiskInterface(RealDiskInterface):
    """Host disk on POSIX systems."""

    separators = "/"


class WindowsDiskInterface(RealDiskInterface):
    """Host disk on Windows.

    Rejects over-long paths before calling the OS, unless they start with
    a backslash (the \\\\?\\ extended-length form).
    """

    separators = "\\/"
    stat_call = "GetFileAttributesEx"

    def __init__(
        self, sink: DiagnosticSink | None = None, max_path: int = WINDOWS_MAX_PATH
    ) -> None:
        """Initialize the interface.

        Args:
            sink: Receiver for failure diagnostics.
            max_path: Longest path accepted by `stat`.
        """
        super().__init__(sink)
        self.max_path = max_path

    def is_absent_error(self, exc: OSError) -> bool:
        winerror = getattr(exc, "winerror", None)
        if winerror is not None:
            return winerror in (ERROR_FILE_NOT_FOUND, ERROR_PATH_NOT_FOUND)
        return super().is_absent_error(exc)

    def check_stat_path(self, path: str) -> str | None:
        if path and path[0] != "\\" and len(path) > self.max_path:
            return f"Stat({path}): Filename longer than {self.max_path} characters"
        return None
