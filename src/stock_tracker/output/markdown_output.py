"""
Markdown output formatter.
"""

from stock_tracker.models.item import StockLevel
from stock_tracker.models.view import ViewModel
from stock_tracker.output.formatters import BaseFormatter, register_formatter

_FILTER_TITLES = {
    "all": "All items",
    "in_stock": "In stock",
    "low_stock": "Low stock",
}


@register_formatter("markdown")
class MarkdownFormatter(BaseFormatter):
    """
    Format output as Markdown.
    """

    def _level_emoji(self, level: StockLevel) -> str:
        """Get an emoji for a stock level."""
        emojis = {
            StockLevel.OUT_OF_STOCK: "🔴",
            StockLevel.LOW_STOCK: "🟡",
            StockLevel.OK: "🟢",
        }
        return emojis.get(level, "⚪")

    def format(self, view: ViewModel) -> str:
        """Format a view model as a Markdown table."""
        lines = []

        lines.append("# Inventory")
        lines.append("")
        lines.append(f"- **Filter:** {_FILTER_TITLES[view.filter.value]}")
        lines.append(f"- **Sort:** `{view.sort_order.value}`")
        lines.append(f"- **In Stock:** {view.in_stock_count}")
        lines.append(f"- **Total Unique Items:** {view.total_count}")
        lines.append("")

        if view.is_empty:
            lines.append("_No items in this list or filter._")
            lines.append("")
            return "\n".join(lines)

        lines.append("| | ID | Name | Stock |")
        lines.append("|---|----|------|-------|")

        for item in view.items:
            emoji = self._level_emoji(item.stock_level)
            name = item.name.replace("|", "\\|")
            lines.append(f"| {emoji} | {item.id} | {name} | {item.stock_quantity} |")

        lines.append("")
        return "\n".join(lines)
