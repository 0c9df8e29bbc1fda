"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output.
Uses Rich library for spinners, colored output, and formatted text.
Supports verbosity levels and --no-color flag.
"""

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner

from src.cli.models import PublishSummary


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Upload complete")
        >>> with handler.spinner("Generating docs..."):
        ...     pass
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            force_terminal=not no_color,
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green."""
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.console.print(f"[red]✗[/red] {message}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow."""
        self.console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(message)

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{message}[/dim]")

    def print(self, message: str) -> None:
        """Display message without formatting."""
        self.console.print(message)

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner for single long-running operations.

        Example:
            >>> with handler.spinner("Uploading pages..."):
            ...     uploader.sync()
        """
        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10):
            yield

    def print_publish_summary(self, summary: PublishSummary) -> None:
        """Display publish summary with color coding.

        Args:
            summary: Counts collected during the run
        """
        self.console.print("\n[bold]Publish Summary:[/bold]")
        self.console.print(f"  [green]↑[/green] Uploaded: {summary.uploaded_count} page(s)")

        if not summary.archive_enabled:
            self.console.print("  [dim]─[/dim] Archiving skipped (no archive prefix given)")
        else:
            if summary.archived_count > 0:
                self.console.print(f"  [blue]↔[/blue] Archived: {summary.archived_count} page(s)")
            if summary.skipped_count > 0:
                self.console.print(
                    f"  [dim]─[/dim] Moved with parent: {summary.skipped_count} page(s)"
                )
            if summary.created_parent_count > 0:
                self.console.print(
                    f"  [dim]+[/dim] Archive parents created: {summary.created_parent_count} page(s)"
                )
            if summary.archived_count == 0 and summary.skipped_count == 0:
                self.console.print("  [dim]─[/dim] No orphaned pages to archive")

        if summary.uploaded_count == 0:
            self.console.print("\n[yellow]No pages to publish[/yellow]")
        else:
            self.console.print("\n[green]Publish completed successfully[/green]")
