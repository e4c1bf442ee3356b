"""
Base formatter and formatter registry.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from stock_tracker.models.item import Item
    from stock_tracker.models.view import ViewModel


class BaseFormatter(ABC):
    """
    Abstract base class for output formatters.

    Subclasses must implement format().
    """

    @abstractmethod
    def format(self, view: "ViewModel") -> str:
        """
        Format a view model.

        Args:
            view: The view model to format.

        Returns:
            Formatted string representation.
        """
        pass

    def _item_to_dict(self, item: "Item") -> dict[str, Any]:
        """Convert an item to a dictionary for structured formats."""
        return {
            "id": item.id,
            "name": item.name,
            "stockQuantity": item.stock_quantity,
            "price": item.price,
            "stockLevel": item.stock_level.value,
        }

    def _view_to_dict(self, view: "ViewModel") -> dict[str, Any]:
        """Convert a view model to a dictionary for structured formats."""
        return {
            "filter": view.filter.value,
            "sort_order": view.sort_order.value,
            "summary": {
                "total_items": view.total_count,
                "in_stock": view.in_stock_count,
                "shown": view.shown_count,
                "can_clear_zero_stock": view.can_clear_zero_stock,
            },
            "items": [self._item_to_dict(item) for item in view.items],
        }


# Formatter registry
_FORMATTERS: dict[str, type[BaseFormatter]] = {}


def register_formatter(name: str) -> Callable[[type[BaseFormatter]], type[BaseFormatter]]:
    """
    Decorator to register a formatter.

    Args:
        name: The name to register the formatter under.

    Returns:
        Decorator function.
    """
    def decorator(cls: type[BaseFormatter]) -> type[BaseFormatter]:
        _FORMATTERS[name] = cls
        return cls
    return decorator


def available_formatters() -> list[str]:
    """Names of all registered formatters."""
    _load_formatters()
    return list(_FORMATTERS.keys())


def _load_formatters() -> None:
    # Import formatters to ensure they're registered
    from stock_tracker.output import (  # noqa: F401
        json_output,
        markdown_output,
        text_output,
        yaml_output,
    )


def get_formatter(name: str, **options: Any) -> BaseFormatter:
    """
    Get a formatter instance by name.

    Args:
        name: The formatter name (e.g., "text", "json", "yaml").
        **options: Keyword arguments passed to the formatter constructor.

    Returns:
        An instance of the requested formatter.

    Raises:
        ValueError: If the formatter name is not recognized.
    """
    _load_formatters()

    if name not in _FORMATTERS:
        available = ", ".join(_FORMATTERS.keys())
        raise ValueError(f"Unknown formatter: {name}. Available: {available}")

    return _FORMATTERS[name](**options)
