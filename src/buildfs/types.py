"""Shared result types for disk operations."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, IntEnum

__all__ = ["ReadResult", "RemoveOutcome", "StatKind", "StatResult"]


class StatKind(Enum):
    """Outcome of a stat call."""

    ABSENT = "absent"
    PRESENT = "present"
    ERROR = "error"


@dataclass(frozen=True)
class StatResult:
    """Result of querying a path's modification time.

    Attributes:
        kind: Whether the path is absent, present, or the query failed.
        mtime: Modification time in seconds (only meaningful when present).
        error: Diagnostic text (only set when the query failed).
    """

    kind: StatKind
    mtime: int = 0
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.kind is StatKind.ERROR and not self.error:
            raise ValueError("kind=ERROR requires error message")
        if self.kind is not StatKind.ERROR and self.error is not None:
            raise ValueError(f"kind={self.kind.name} but error is set")
        if self.kind is not StatKind.PRESENT and self.mtime != 0:
            raise ValueError(f"kind={self.kind.name} but mtime is set")

    @classmethod
    def absent(cls) -> StatResult:
        return cls(StatKind.ABSENT)

    @classmethod
    def present(cls, mtime: int) -> StatResult:
        return cls(StatKind.PRESENT, mtime=mtime)

    @classmethod
    def failed(cls, message: str) -> StatResult:
        return cls(StatKind.ERROR, error=message)

    @property
    def exists(self) -> bool:
        return self.kind is StatKind.PRESENT

    @property
    def is_error(self) -> bool:
        return self.kind is StatKind.ERROR

    def as_timestamp(self) -> int:
        """Collapse to the signed-integer convention used by build graphs.

        Returns:
            0 when absent, -1 on error, otherwise the mtime. A present file
            whose mtime is 0 or earlier is reported as 1 so it still
            compares as existing.
        """
        if self.kind is StatKind.ABSENT:
            return 0
        if self.kind is StatKind.ERROR:
            return -1
        return max(self.mtime, 1)


@dataclass(frozen=True)
class ReadResult:
    """Contents of a whole-file read.

    A missing file reads as empty contents with an empty error, so callers
    that need to tell "missing" from "empty" must stat first.

    Attributes:
        contents: File bytes in binary mode, text otherwise.
        error: Error text, or "" when the read succeeded or the file was missing.
    """

    contents: bytes | str
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error

    def __iter__(self) -> Iterator[bytes | str]:
        yield self.contents
        yield self.error


class RemoveOutcome(IntEnum):
    """Result of removing a file."""

    REMOVED = 0
    MISSING = 1
    ERROR = -1
