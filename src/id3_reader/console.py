"""Shared Rich console utilities for id3-reader.

Provides a global Rich console instance and helpers for consistent
output formatting across all CLI commands.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape

# Global console instance (initialized in CLI)
_console: Console | None = None


def get_console() -> Console:
    """Get the global Rich console instance.

    Raises:
        RuntimeError: If console not initialized (should only happen in tests)
    """
    if _console is None:
        raise RuntimeError("Console not initialized. Call set_console() first.")
    return _console


def set_console(console: Console) -> None:
    """Set the global Rich console instance."""
    global _console
    _console = console


def print(*args: Any, **kwargs: Any) -> None:
    """Print to the global console.

    Wrapper around console.print() that uses the global console instance.
    """
    get_console().print(*args, **kwargs)


def print_plain(text: str) -> None:
    """Print text verbatim: no markup, highlighting or wrapping.

    Tag values are arbitrary file content and must not be read as markup.
    """
    get_console().print(text, markup=False, highlight=False, soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message in red."""
    get_console().print(f"[red]Error: {escape(message)}[/red]", highlight=False)


def print_warning(message: str) -> None:
    """Print a warning message in yellow."""
    get_console().print(f"[yellow]Warning: {escape(message)}[/yellow]", highlight=False)
