"""CLI commands using Typer.

A thin debugging surface over one DiskInterface: each command performs a
single operation and maps its result to output and an exit code.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from buildfs.context import DiskContext

import typer
from rich.console import Console
from rich.markup import escape

from buildfs import __version__
from buildfs.config import DiskConfigError
from buildfs.context import create_context
from buildfs.types import RemoveOutcome

app = typer.Typer(
    name="buildfs",
    help="Inspect and modify files the way a build tool sees them",
    no_args_is_help=True,
)

console = Console(highlight=False)

PlatformOption = Annotated[
    str | None,
    typer.Option("--platform", "-p", help="Platform family (auto, posix, windows)"),
]


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"buildfs v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Inspect and modify files the way a build tool sees them."""
    pass


def _get_context(context: DiskContext | None, platform: str | None) -> DiskContext:
    """Use the injected context or build one from the environment."""
    if context is not None:
        return context
    try:
        return create_context(platform=platform)
    except DiskConfigError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(1) from e


def _fail() -> None:
    """Exit with an error; the diagnostic has already been reported."""
    raise typer.Exit(1)


@app.command("stat")
def stat_command(
    path: Annotated[str, typer.Argument(help="Path to query")],
    platform: PlatformOption = None,
    _context=None,
) -> None:
    """Show a path's modification time."""
    ctx = _get_context(_context, platform)
    result = ctx.disk.stat(path)

    if result.is_error:
        _fail()
    if not result.exists:
        console.print(f"{path}: absent", markup=False)
        return
    console.print(f"{path}: mtime {result.mtime}", markup=False)


@app.command("mkdir")
def mkdir_command(
    path: Annotated[str, typer.Argument(help="Directory to create")],
    platform: PlatformOption = None,
    _context=None,
) -> None:
    """Create a single directory."""
    ctx = _get_context(_context, platform)
    if not ctx.disk.make_dir(path):
        _fail()


@app.command("mkdirs")
def mkdirs_command(
    path: Annotated[str, typer.Argument(help="Path whose parent directories to create")],
    platform: PlatformOption = None,
    _context=None,
) -> None:
    """Create the missing parent directories of a path."""
    ctx = _get_context(_context, platform)
    if not ctx.disk.make_dirs(path):
        _fail()


@app.command("write")
def write_command(
    path: Annotated[str, typer.Argument(help="File to write")],
    content: Annotated[str, typer.Argument(help="New file contents")],
    parents: Annotated[
        bool, typer.Option("--parents", help="Create parent directories first")
    ] = False,
    platform: PlatformOption = None,
    _context=None,
) -> None:
    """Replace a file's contents."""
    ctx = _get_context(_context, platform)
    if parents and not ctx.disk.make_dirs(path):
        _fail()
    if not ctx.disk.write_file(path, content):
        _fail()


@app.command("read")
def read_command(
    path: Annotated[str, typer.Argument(help="File to read")],
    binary: Annotated[bool, typer.Option("--binary", "-b", help="Copy raw bytes")] = False,
    platform: PlatformOption = None,
    _context=None,
) -> None:
    """Print a file's contents. A missing file prints nothing."""
    ctx = _get_context(_context, platform)
    contents, err = ctx.disk.read_file(path, binary=binary)

    if err:
        _fail()
    if isinstance(contents, bytes):
        sys.stdout.buffer.write(contents)
        sys.stdout.flush()
    else:
        sys.stdout.write(contents)


@app.command("rm")
def rm_command(
    path: Annotated[str, typer.Argument(help="File to remove")],
    platform: PlatformOption = None,
    _context=None,
) -> None:
    """Remove a file. Removing a missing file is not an error."""
    ctx = _get_context(_context, platform)
    outcome = ctx.disk.remove_file(path)

    if outcome is RemoveOutcome.ERROR:
        _fail()
    if outcome is RemoveOutcome.MISSING:
        console.print(f"{path}: missing", markup=False)
        return
    console.print(f"{path}: removed", markup=False)
