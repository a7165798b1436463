"""Logging and terminal output for rice-cli."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import AbstractContextManager
from typing import Any, Literal

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

# Console instances for stdout/stderr
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

# Status glyphs for check/cross result lines
CHECK = "✔"
CROSS = "✖"

ProgressFactory = Callable[[str], AbstractContextManager[Any]]


def setup_logging(
    verbosity: Literal["quiet", "normal", "verbose"] = "normal",
) -> logging.Logger:
    """Configure logging based on verbosity level."""
    logger = logging.getLogger("rice_cli")

    # Clear existing handlers
    logger.handlers.clear()

    level_map = {
        "quiet": logging.ERROR,
        "normal": logging.INFO,
        "verbose": logging.DEBUG,
    }
    logger.setLevel(level_map[verbosity])

    handler = RichHandler(
        console=err_console,
        show_time=verbosity == "verbose",
        show_path=verbosity == "verbose",
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    return logger


def create_spinner(message: str) -> AbstractContextManager[Any]:
    """Create a transient spinner shown while a request is in flight.

    The spinner is removed from the terminal when the context exits, so the
    next printed line replaces it.
    """
    return console.status(message, spinner="dots", spinner_style="green")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[red]Error:[/red] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message to stdout."""
    console.print(f"[green]{message}[/green]")


def print_info(message: str) -> None:
    """Print an info message to stdout."""
    console.print(message)


def print_check(message: str) -> None:
    """Print a line prefixed with a green check mark."""
    console.print(f"[green]{CHECK}[/green]  {escape(message)}", highlight=False)


def print_cross(message: str) -> None:
    """Print a line prefixed with a red cross."""
    console.print(f"[red]{CROSS}[/red]  {escape(message)}", highlight=False)


def print_heading(message: str, style: str = "bold") -> None:
    """Print a styled section heading."""
    console.print(f"[{style}]{message}[/{style}]")
