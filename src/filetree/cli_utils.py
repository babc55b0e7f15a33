"""Shared helpers for the filetree CLI: exit codes, console output, logging."""

import logging

from rich.console import Console
from rich.logging import RichHandler

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2

# Rendered trees go to stdout; diagnostics go to stderr
console = Console(stderr=True)


def _error(message: str) -> None:
    console.print(f"[red]Error:[/red] {message}")


def _warning(message: str) -> None:
    console.print(f"[yellow]Warning:[/yellow] {message}")


def _info(message: str) -> None:
    console.print(f"[dim]{message}[/dim]")


def _setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure root logging for CLI runs.

    Args:
        verbose: Log at DEBUG level
        quiet: Only log errors

    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose, rich_tracebacks=True)],
        force=True,
    )
