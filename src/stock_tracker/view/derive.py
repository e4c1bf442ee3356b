"""
View model derivation.

Pure functions turning the item collection plus the selected filter and
sort order into the list shown to the user. Nothing here mutates its
inputs.
"""

import unicodedata
from typing import Iterable, Union

from stock_tracker.models.item import Item
from stock_tracker.models.view import SortOrder, StockFilter, ViewModel


def collation_key(text: str) -> tuple[str, str]:
    """
    Build a locale-aware sort key for a name.

    Compatibility-normalizes the text, drops combining accents and
    case-folds it, so "apple", "Äpfel" and "Banana" sort alphabetically
    rather than by code point. Names equal after folding are ordered
    lowercase first and unaccented first ("apple" < "Apple",
    "eclair" < "Éclair").
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), text.swapcase()


def filter_items(
    items: Iterable[Item],
    stock_filter: Union[StockFilter, str] = StockFilter.ALL,
) -> list[Item]:
    """
    Select the items matching a filter.

    Args:
        items: The full collection.
        stock_filter: all, in_stock (quantity > 0) or low_stock (below 5).

    Returns:
        Matching items in their original order.
    """
    stock_filter = StockFilter(stock_filter)
    if stock_filter is StockFilter.IN_STOCK:
        return [item for item in items if item.in_stock]
    if stock_filter is StockFilter.LOW_STOCK:
        return [item for item in items if item.is_low_stock]
    return list(items)


def sort_items(
    items: Iterable[Item],
    sort_order: Union[SortOrder, str] = SortOrder.DEFAULT,
) -> list[Item]:
    """
    Order items for display.

    Both sorts are stable, so equal keys keep their prior relative order.
    The default order leaves the items as given.
    """
    sort_order = SortOrder(sort_order)
    if sort_order is SortOrder.NAME_ASC:
        return sorted(items, key=lambda item: collation_key(item.name))
    if sort_order is SortOrder.QUANTITY_DESC:
        return sorted(items, key=lambda item: -item.stock_quantity)
    return list(items)


def derive_view_model(
    items: Iterable[Item],
    stock_filter: Union[StockFilter, str] = StockFilter.ALL,
    sort_order: Union[SortOrder, str] = SortOrder.DEFAULT,
) -> ViewModel:
    """
    Compute the display list and summary counts.

    Args:
        items: The full collection in insertion order.
        stock_filter: Filter to apply to the full collection.
        sort_order: Sort to apply after filtering.

    Returns:
        The view model. Its items are copies, detached from the collection.
    """
    items = list(items)
    stock_filter = StockFilter(stock_filter)
    sort_order = SortOrder(sort_order)
    shown = sort_items(filter_items(items, stock_filter), sort_order)
    in_stock_count = sum(1 for item in items if item.in_stock)

    return ViewModel(
        items=[item.model_copy() for item in shown],
        filter=stock_filter,
        sort_order=sort_order,
        total_count=len(items),
        in_stock_count=in_stock_count,
        all_in_stock=in_stock_count == len(items),
    )
