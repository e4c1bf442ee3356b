"""
Human-readable text output formatter.
"""

from io import StringIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stock_tracker.models.item import StockLevel
from stock_tracker.models.view import ViewModel
from stock_tracker.output.formatters import BaseFormatter, register_formatter


@register_formatter("text")
class TextFormatter(BaseFormatter):
    """
    Format output as a table using Rich.
    """

    def __init__(self, colorize: bool = True) -> None:
        """
        Initialize the text formatter.

        Args:
            colorize: Whether to use colors in output.
        """
        self.colorize = colorize

    def _level_style(self, level: StockLevel) -> str:
        """Get the row style for a stock level."""
        if not self.colorize:
            return ""

        styles = {
            StockLevel.OUT_OF_STOCK: "dim strike",
            StockLevel.LOW_STOCK: "yellow",
            StockLevel.OK: "",
        }
        return styles.get(level, "")

    def _filter_bar(self, view: ViewModel) -> str:
        """Render the filter choices, marking the active one."""
        labels = [
            ("all", "All items"),
            ("in_stock", f"In stock ({view.in_stock_count})"),
            ("low_stock", "Low stock"),
        ]
        parts = []
        for value, label in labels:
            if value == view.filter.value:
                parts.append(f"[bold reverse] {label} [/bold reverse]")
            else:
                parts.append(f" {label} ")
        return " ".join(parts)

    def format(self, view: ViewModel) -> str:
        """Format a view model as a table."""
        output = StringIO()
        console = Console(file=output, force_terminal=self.colorize, no_color=not self.colorize, width=100)

        console.print(self._filter_bar(view))
        console.print(f"[dim]Sort: {view.sort_order.value}[/dim]")

        if view.is_empty:
            console.print("[dim]No items in this list or filter.[/dim]")
        else:
            table = Table(title="Inventory", show_header=True, header_style="bold")
            table.add_column("ID", style="dim", justify="right")
            table.add_column("Name", style="cyan")
            table.add_column("Stock", justify="right")

            for item in view.items:
                table.add_row(
                    str(item.id),
                    escape(item.name),
                    str(item.stock_quantity),
                    style=self._level_style(item.stock_level),
                )

            console.print(table)

        console.print(f"Total unique items: {view.total_count}")
        if view.can_clear_zero_stock:
            console.print("[dim]Zero-stock items can be cleared with 'clear-zero'.[/dim]")

        return output.getvalue()
