"""Shared utility functions for dh-create.

Provides async command execution (captured and pass-through), JSON output,
and Rich-based console reporting.
"""

from __future__ import annotations

import asyncio
import codecs
import json
import sys
from pathlib import Path
from typing import Any, TextIO

from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)

_CHUNK_SIZE = 4096

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int = 120,
) -> tuple[int, str, str]:
    """Run a command asynchronously and capture its output.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.

    Raises:
        FileNotFoundError: If the program does not exist.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd else None,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


async def _forward(stream: asyncio.StreamReader, sink: TextIO) -> None:
    """Copy *stream* into *sink* chunk by chunk until EOF."""
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    while True:
        chunk = await stream.read(_CHUNK_SIZE)
        if not chunk:
            tail = decoder.decode(b"", final=True)
            if tail:
                sink.write(tail)
                sink.flush()
            return
        sink.write(decoder.decode(chunk))
        sink.flush()


async def run_command_passthrough(
    cmd: list[str],
    cwd: str | Path | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run a command while streaming its output live.

    The child's stdout and stderr are each forwarded by their own task,
    and both tasks are joined with the process exit.  There is no timeout.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.
        stdout: Sink for the child's stdout (defaults to ``sys.stdout``).
        stderr: Sink for the child's stderr (defaults to ``sys.stderr``).

    Returns:
        The child's exit code.

    Raises:
        FileNotFoundError: If the program does not exist.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd else None,
    )
    assert process.stdout is not None and process.stderr is not None

    await asyncio.gather(
        _forward(process.stdout, stdout or sys.stdout),
        _forward(process.stderr, stderr or sys.stderr),
        process.wait(),
    )
    return process.returncode or 0


# ---------------------------------------------------------------------------
# JSON output
# ---------------------------------------------------------------------------


async def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as JSON with 2-space indentation.

    The parent directory must already exist.  The write is performed in a
    worker thread to avoid blocking the event loop on large schemas.
    """
    file_path = Path(path)
    content = json.dumps(data, indent=2, ensure_ascii=False, default=str)
    await asyncio.to_thread(file_path.write_text, content, "utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]", highlight=False)