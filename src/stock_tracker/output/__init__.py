"""
Output package for Stock Tracker.

This package contains formatters for displaying the inventory view
in various formats (text, JSON, YAML, Markdown).
"""

from stock_tracker.output.formatters import (
    BaseFormatter,
    available_formatters,
    get_formatter,
)
from stock_tracker.output.json_output import JsonFormatter
from stock_tracker.output.markdown_output import MarkdownFormatter
from stock_tracker.output.text_output import TextFormatter
from stock_tracker.output.yaml_output import YamlFormatter

__all__ = [
    "BaseFormatter",
    "JsonFormatter",
    "MarkdownFormatter",
    "TextFormatter",
    "YamlFormatter",
    "available_formatters",
    "get_formatter",
]
