"""Shared utility functions for react-scaffolding.

Provides async command execution, UTF-8 file helpers, project-name
validation and the Rich-based console output used by every pipeline step.
"""

from __future__ import annotations

import asyncio
import os
import re
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from rich.console import Console
from rich.rule import Rule
from rich.status import Status
from rich.table import Table

from react_scaffolding.errors import FilesystemError

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int | None = None,
    capture: bool = True,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Run *cmd* as a child process, without a shell.

    ``timeout`` of ``None`` waits for as long as the process runs.  With
    ``capture=False`` the child writes straight to the terminal, which is how
    npm progress reaches the user, and both returned strings are empty.
    *env* is merged over ``os.environ``.

    Returns ``(returncode, stdout, stderr)``; a timed-out process is killed
    and reported as ``-1`` with the reason in stderr.
    """
    pipe = asyncio.subprocess.PIPE if capture else None
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=pipe,
        stderr=pipe,
        cwd=str(cwd) if cwd else None,
        env={**os.environ, **env} if env else None,
    )

    try:
        out, err = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return -1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}"

    return process.returncode or 0, _decode(out), _decode(err)


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace").strip()


# ---------------------------------------------------------------------------
# Project name helpers
# ---------------------------------------------------------------------------

PROJECT_NAME_PATTERN = re.compile(r"^[a-z0-9-_]+$")

PROJECT_NAME_HINT = (
    "Project name can only contain lowercase letters, numbers, hyphens, and underscores"
)


def validate_project_name(name: str) -> bool | str:
    """Validate a project name the way the interactive prompt expects.

    Returns ``True`` when the name is acceptable, otherwise the message that
    should be shown to the user.

    Examples::

        validate_project_name("my-react-app") -> True
        validate_project_name("My App")       -> "Project name can only ..."
    """
    if PROJECT_NAME_PATTERN.match(name):
        return True
    return PROJECT_NAME_HINT


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Returns:
        The resolved ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path.resolve()


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


async def read_text(path: str | Path) -> str:
    """Read a UTF-8 file without blocking the event loop.

    Raises:
        FilesystemError: If the file is missing or unreadable.
    """
    file_path = Path(path)
    try:
        return await asyncio.to_thread(file_path.read_text, encoding="utf-8")
    except OSError as exc:
        raise FilesystemError(file_path, exc.strerror or str(exc)) from exc


async def write_text(path: str | Path, content: str) -> Path:
    """Write a UTF-8 file, creating parent directories as needed.

    Raises:
        FilesystemError: If the file cannot be written.
    """
    file_path = Path(path)
    try:
        await asyncio.to_thread(_write_text, file_path, content)
    except OSError as exc:
        raise FilesystemError(file_path, exc.strerror or str(exc)) from exc
    return file_path


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
        format_duration(3661.0) -> "1h 1m 1s"
    """
    if seconds < 0:
        return "0.0s"

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = seconds % 60

    parts: list[str] = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")

    if hours > 0 or minutes > 0:
        parts.append(f"{int(secs)}s")
    else:
        parts.append(f"{secs:.1f}s")

    return " ".join(parts)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step_header(title: str, color: str = "bright_blue") -> None:
    """Print a full-width rule announcing a feature step."""
    console.print()
    console.print(Rule(f"[bold {color}] {title} [/bold {color}]", style=color))


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_info(message: str) -> None:
    """Print a dim informational line."""
    console.print(f"[dim]{message}[/dim]")


@contextmanager
def step_status(message: str, success: str, failure: str) -> Iterator[Status]:
    """Show a spinner while a block runs, then a success or failure marker.

    The spinner text can be updated through the yielded ``Status``.  Any
    exception raised inside the block is re-raised after the failure marker
    is printed.
    """
    status = console.status(message, spinner="dots")
    status.start()
    try:
        yield status
    except BaseException:
        status.stop()
        print_error(f"x {failure}")
        raise
    status.stop()
    print_success(f"+ {success}")
