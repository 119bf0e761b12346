#!/usr/bin/env python
"""
Output formatting with Rich console.
"""

from __future__ import annotations

import json
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from trusttxt.validation.models import Status, ValidationReport


custom_theme = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "red",
    "success": "green",
})

STATUS_STYLES = {
    Status.FOUND: "success",
    Status.NOT_FOUND: "error",
    Status.ERROR: "error",
    Status.UNKNOWN: "dim",
    Status.WARNING: "warning",
}


class ConsoleOutput:
    """Console output with Rich formatting."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(theme=custom_theme)

    def print_error(self, text: str):
        self.console.print(f"[red]Error:[/red] {escape(text)}")

    def print_json(self, report: ValidationReport):
        """Print the report as JSON (no markup processing)."""
        self.console.print_json(json.dumps(report.to_dict()))

    def print_report(self, report: ValidationReport):
        """Print a validation report as a table."""
        mode = "full" if report.full else "summary"
        self.console.print(
            f"[bold]trust.txt for {report.domain}[/bold] [dim]({mode}, {report.fetch.url})[/dim]"
        )

        table = Table(show_header=True, header_style="bold")
        if report.full:
            table.add_column("Line", justify="right")
        table.add_column("Attribute")
        table.add_column("Status")
        table.add_column("Domain")
        table.add_column("Message", overflow="fold")

        for result in report.results:
            style = STATUS_STYLES.get(result.status, "")
            row = [
                result.attribute.value if result.attribute else "-",
                f"[{style}]{result.status.value}[/{style}]",
                escape(result.domain),
                escape(result.message),
            ]
            if report.full:
                row.insert(0, str(result.line_number or "-"))
            table.add_row(*row)

        self.console.print(table)
        self.console.print(
            f"[success]{report.count(Status.FOUND)} found[/success], "
            f"[error]{report.count(Status.NOT_FOUND)} not found[/error], "
            f"[error]{report.count(Status.ERROR)} errors[/error], "
            f"[warning]{report.count(Status.WARNING)} warnings[/warning], "
            f"[dim]{report.count(Status.UNKNOWN)} unknown[/dim]"
        )
