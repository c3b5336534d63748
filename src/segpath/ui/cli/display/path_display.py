"""src/segpath/ui/cli/display/path_display.py
What: Render path reports, listings and locations for the CLI.
Why: Keep console output formatting consistent across subcommands.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from segpath.ui.cli.models import PathReport


def _flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[red]no[/red]"


@final
class PathDisplay:
    """Handles path output in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize path display.

        Args:
            console: Console to print to; stdout is used when omitted.
        """
        self.console = console if console is not None else Console()

    def show_rendered(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False)

    def show_report(self, report: PathReport) -> None:
        """Display a table describing ``report``.

        Args:
            report: Facts gathered for one path.
        """
        table = Table(title=escape(report.text), show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value")

        table.add_row("Rendered", escape(report.rendered))
        table.add_row("Dialect", report.dialect.value)
        table.add_row("Absolute", _flag(report.is_absolute))
        table.add_row("Segments", escape(", ".join(report.segments)) or "[dim](none)[/dim]")
        table.add_row("Filename", escape(report.filename))
        table.add_row("Extension", escape(report.extension))
        table.add_row("Exists", _flag(report.exists))
        table.add_row("File", _flag(report.is_file))
        table.add_row("Directory", _flag(report.is_directory))
        table.add_row("Size", str(report.size) if report.size >= 0 else "[dim]-[/dim]")

        self.console.print(table)

    def show_children(self, children: Sequence[str]) -> None:
        for child in children:
            self.console.print(child, markup=False, highlight=False)

    def show_locations(self, current_directory: str, executable: str) -> None:
        self.console.print(f"[bold]Current directory:[/bold] {escape(current_directory)}")
        self.console.print(f"[bold]Executable:[/bold] {escape(executable)}")
