"""Shared console and naming helpers for go-initializer.

All user-facing output goes through the module-level Rich ``console`` so the
CLI and the scaffolder print in one consistent style.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Iterable

from rich.console import Console
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def sanitize_name(name: str, fallback: str = "") -> str:
    """Turn a project name into a safe archive file stem.

    Runs of anything other than lowercase letters, digits and underscores
    become a single hyphen; *fallback* is returned when nothing is left.

    Examples::

        sanitize_name("My API") -> "my-api"
        sanitize_name("../etc/passwd") -> "etc-passwd"
        sanitize_name("!!!", "project") -> "project"
    """
    stem = re.sub(r"[^a-z0-9_]+", "-", name.lower()).strip("-")
    return stem or fallback


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Read a JSON file whose top level must be an object.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top-level value is not an object.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_size(num_bytes: int) -> str:
    """Format a byte count for display.

    Examples::

        format_size(512)     -> "512 B"
        format_size(2048)    -> "2.0 KB"
        format_size(3 << 20) -> "3.0 MB"
    """
    if num_bytes < 1024:
        return f"{max(num_bytes, 0)} B"
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:.1f} KB"
    return f"{num_bytes / (1024 * 1024):.1f} MB"


# ---------------------------------------------------------------------------
# Rich output
# ---------------------------------------------------------------------------


def print_file_table(paths: Iterable[str], title: str = "Files") -> None:
    """Print a numbered table of output paths."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Path", style="white")
    for index, path in enumerate(paths, start=1):
        table.add_row(str(index), path)
    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
