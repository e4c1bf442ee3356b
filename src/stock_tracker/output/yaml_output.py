"""
YAML output formatter.
"""

import yaml

from stock_tracker.models.view import ViewModel
from stock_tracker.output.formatters import BaseFormatter, register_formatter


@register_formatter("yaml")
class YamlFormatter(BaseFormatter):
    """
    Format output as YAML.
    """

    def format(self, view: ViewModel) -> str:
        """Format a view model as YAML."""
        return yaml.dump(
            self._view_to_dict(view),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
