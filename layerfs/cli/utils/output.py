"""Output formatting utilities for CLI."""

import json
from enum import Enum
from typing import Any, Dict, List, Optional

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table


class OutputFormat(Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


class OutputFormatter:
    """Handle output formatting for different formats."""

    def __init__(self, format_type: str = "table", console: Optional[Console] = None):
        """
        Initialize output formatter.

        Args:
            format_type: Output format (table, json, yaml)
            console: Console to print to
        """
        self.console = console or Console()
        try:
            self.format = OutputFormat(format_type.lower())
        except ValueError:
            self.format = OutputFormat.TABLE

    def print_list(
        self,
        items: List[Dict[str, Any]],
        columns: Optional[List[str]] = None,
        title: Optional[str] = None,
        no_headers: bool = False,
    ):
        """
        Print a list of items.

        Args:
            items: List of items to print
            columns: Column names to display (for table format)
            title: Table title (for table format)
            no_headers: Whether to hide headers (for table format)
        """
        if self.format == OutputFormat.JSON:
            self._print_raw(json.dumps(items, indent=2, default=str))
            return

        if self.format == OutputFormat.YAML:
            self._print_raw(yaml.safe_dump(items, default_flow_style=False))
            return

        if not items:
            self.console.print("[dim]No entries found[/dim]")
            return

        if not columns:
            columns = list(items[0].keys())

        table = Table(title=title, show_header=not no_headers)

        for col in columns:
            table.add_column(col.replace("_", " ").title())

        for item in items:
            row = []
            for col in columns:
                value = item.get(col, "")
                if value is None:
                    value = "[dim]-[/dim]"
                else:
                    value = escape(str(value))
                row.append(value)
            table.add_row(*row)

        self.console.print(table)

    def print_success(self, message: str):
        """Print success message."""
        self._print_status("success", message, "[green]✓[/green]")

    def print_error(self, message: str):
        """Print error message."""
        self._print_status("error", message, "[red]✗[/red]")

    def print_warning(self, message: str):
        """Print warning message."""
        self._print_status("warning", message, "[yellow]⚠[/yellow]")

    def _print_status(self, status: str, message: str, marker: str):
        if self.format == OutputFormat.JSON:
            self._print_raw(json.dumps({"status": status, "message": message}))
        elif self.format == OutputFormat.YAML:
            self._print_raw(yaml.safe_dump({"status": status, "message": message}))
        else:
            self.console.print(f"{marker} {escape(message)}")

    def _print_raw(self, text: str):
        # machine readable output must not be reflowed or highlighted
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)
