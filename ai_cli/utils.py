"""Shared helpers for ai-cli.

Process execution, ``package.json``-style JSON I/O, npm name handling and the
Rich console every command reports through.
"""

from __future__ import annotations

import asyncio
import json
import os
import re
import shlex
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Processes
# ---------------------------------------------------------------------------


async def run_command(
    cmd: str | list[str],
    cwd: str | Path | None = None,
    *,
    timeout: float | None = None,
    capture: bool = False,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Start *cmd* and wait for it to exit.

    A string command is split with :func:`shlex.split`; no shell is involved.
    The child shares the terminal unless *capture* is set, in which case its
    output is collected and returned stripped.  *env* is layered over the
    current environment.

    Returns ``(returncode, stdout, stderr)``.  When *timeout* expires the
    child is killed and the return code is ``-1``.

    Raises:
        FileNotFoundError: If the executable or *cwd* does not exist.
    """
    argv = shlex.split(cmd) if isinstance(cmd, str) else list(cmd)
    pipe = asyncio.subprocess.PIPE if capture else None

    process = await asyncio.create_subprocess_exec(
        *argv,
        cwd=None if cwd is None else str(cwd),
        env={**os.environ, **env} if env else None,
        stdout=pipe,
        stderr=pipe,
    )
    try:
        out, err = await asyncio.wait_for(process.communicate(), timeout)
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return -1, "", f"Command timed out after {timeout}s: {format_command(argv)}"

    return process.returncode or 0, _decode(out), _decode(err)


def format_command(cmd: str | list[str]) -> str:
    """Return a printable form of *cmd*."""
    return cmd if isinstance(cmd, str) else " ".join(cmd)


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace").strip()


# ---------------------------------------------------------------------------
# npm names
# ---------------------------------------------------------------------------


def sanitize_name(name: str) -> str:
    """Turn a directory name into something npm accepts as a package name.

    Examples::

        sanitize_name("My AI App") -> "my-ai-app"
        sanitize_name("  Chat (beta)  ") -> "chat-beta"

    May return an empty string when nothing usable is left.
    """
    slug = re.sub(r"[^a-z0-9._-]+", "-", name.strip().lower())
    slug = re.sub(r"-{2,}", "-", slug)
    # npm rejects names starting with "." or "_".
    return slug.strip("-._")


# ---------------------------------------------------------------------------
# JSON files
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> Any:
    """Parse the JSON document at *path*.

    ``FileNotFoundError`` and ``json.JSONDecodeError`` propagate.
    """
    return json.loads(Path(path).read_text(encoding="utf-8"))


async def save_json(data: Any, path: str | Path) -> None:
    """Write *data* the way npm formats ``package.json``.

    Two-space indentation, non-ASCII kept as is, trailing newline.  Missing
    parent directories are created.
    """
    text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    await asyncio.to_thread(write_text, Path(path), text)


def write_text(path: Path, content: str) -> None:
    """Write *content* to *path* as UTF-8, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print *data* as a two-column table followed by a blank line."""
    table = Table(title=title, header_style="bold cyan")
    table.add_column("Option", style="dim", no_wrap=True)
    table.add_column("Value")
    for label, value in data.items():
        table.add_row(label, escape(str(value)))

    console.print(table)
    console.print()


def print_info(message: str) -> None:
    console.print(f"[bold blue]{escape(message)}[/bold blue]")


def print_success(message: str) -> None:
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_step(message: str) -> None:
    """Progress line inside a command, dimmer than :func:`print_info`."""
    console.print(f"[yellow]{escape(message)}[/yellow]")
