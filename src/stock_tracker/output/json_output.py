"""
JSON output formatter.
"""

import json

from stock_tracker.models.view import ViewModel
from stock_tracker.output.formatters import BaseFormatter, register_formatter


@register_formatter("json")
class JsonFormatter(BaseFormatter):
    """
    Format output as JSON.
    """
    
    def __init__(self, indent: int = 2) -> None:
        """
        Initialize the JSON formatter.
        
        Args:
            indent: JSON indentation level.
        """
        self.indent = indent
    
    def format(self, view: ViewModel) -> str:
        """Format a view model as JSON."""
        return json.dumps(self._view_to_dict(view), indent=self.indent, ensure_ascii=False)
