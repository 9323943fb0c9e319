"""Diagnostic sinks for disk failures.

Every failing disk operation hands exactly one message to a sink, which
decides where the message ends up.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)


class LoggingSink:
    """Forward diagnostics to a logger at ERROR level.

    Satisfies the DiagnosticSink protocol structurally.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log if log is not None else logger

    def error(self, message: str) -> None:
        self.log.error("%s", message)


class CollectingSink:
    """Keep diagnostics in memory, in the order they were reported."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def error(self, message: str) -> None:
        self.messages.append(message)


class ConsoleSink:
    """Print diagnostics to stderr through a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the sink.

        Args:
            console: Console to print to. Defaults to a stderr console.
        """
        self.console = console if console is not None else Console(stderr=True)

    def error(self, message: str) -> None:
        self.console.print(f"[red]error:[/red] {escape(message)}", highlight=False)
