"""Shared utilities for hddcheck CLI output."""
from __future__ import annotations

from typing import Iterable, Optional

import typer
from rich.console import Console


def setup_logging(log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Set up logging for CLI commands.

    Args:
        log_file: Path to log file (optional)
        verbose: Enable verbose logging
    """
    from hddcheck.core.logger import set_verbose, setup_file_logging

    set_verbose(verbose)
    if log_file:
        setup_file_logging(log_file=log_file, verbose=verbose)


def print_lines(console: Console, lines: Iterable[str]) -> None:
    """Print report lines verbatim.

    Markup, highlighting and wrapping are disabled so fixed-width rows
    reach the terminal exactly as rendered.
    """
    for line in lines:
        console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        e: Exception to handle
        console: Rich console for output
        verbose: Show exception traceback if True
        exit_code: Exit code to use
    """
    console.print(f"[red]{e}[/red]")
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def print_warning(console: Console, message: str, prefix: str = "⚠") -> None:
    """Print warning message with consistent formatting."""
    console.print(f"[yellow]{prefix}[/yellow] {message}")


def print_info(console: Console, message: str) -> None:
    console.print(f"[cyan]{message}[/cyan]")
