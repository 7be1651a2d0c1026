"""Shared utility functions for promptsite.

Provides name/slug helpers, human-readable formatting, and the Rich-based
console output used by the CLI. Library code (parser, scaffolder) never
prints; only the CLI and the exporter's callers use the console helpers.
"""

from __future__ import annotations

import re

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def slugify(name: str, default: str = "my-website") -> str:
    """Convert an arbitrary site name to a safe file/package name.

    * Lowercases the input.
    * Replaces runs of non-alphanumeric characters with a single hyphen.
    * Strips leading/trailing hyphens.
    * Returns *default* if nothing usable is left.

    Examples::

        slugify("ProbFixora Labs") -> "probfixora-labs"
        slugify("  Café & Co. ") -> "caf-co"
    """
    slug = re.sub(r"[^a-z0-9]+", "-", name.strip().lower())
    slug = slug.strip("-")
    return slug or default


def compact_name(name: str, default: str = "example") -> str:
    """Lowercase *name* and keep only ASCII letters and digits (used for e-mail domains)."""
    return re.sub(r"[^a-z0-9]+", "", name.lower()) or default


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_bytes(size: int) -> str:
    """Format a byte count the way the download panel shows it.

    Examples::

        format_bytes(0)     -> "0 Bytes"
        format_bytes(1536)  -> "1.5 KB"
        format_bytes(1024)  -> "1 KB"
    """
    if size <= 0:
        return "0 Bytes"

    units = ["Bytes", "KB", "MB", "GB"]
    index = 0
    while size >= 1024 ** (index + 1) and index < len(units) - 1:
        index += 1
    value = round(size / (1024 ** index), 2)
    # Drop a trailing ".0" so 1024 reads "1 KB", not "1.0 KB".
    text = f"{value:g}" if value == int(value) else f"{value}"
    return f"{text} {units[index]}"


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds < 0:
        return "0.0s"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str, color: str = "bright_cyan") -> None:
    """Print a full-width rule with *title* in the middle."""
    console.print()
    console.print(Rule(f"[bold {color}] {title} [/bold {color}]", style=color))
    console.print()


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


def create_progress() -> Progress:
    """Create a Rich progress bar for the staged generator.

    Returns:
        A ``Progress`` instance suitable for use as a context manager.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("{task.percentage:>3.0f}%"),
        TimeElapsedColumn(),
        console=console,
    )
