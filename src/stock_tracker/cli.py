"""
Command-line interface for Stock Tracker.

This module provides the CLI using Click framework for argument parsing
and wires the store, session and formatters together.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from stock_tracker import __version__
from stock_tracker.config import Config, find_config_file, load_config
from stock_tracker.models.item import StockChange
from stock_tracker.models.view import SortOrder, StockFilter, ViewModel
from stock_tracker.store.inventory_store import InventoryStore
from stock_tracker.store.storage import JsonFileStorage
from stock_tracker.view.session import InventorySession

console = Console()
err_console = Console(stderr=True)

FILTER_CHOICES = [f.value for f in StockFilter]
SORT_CHOICES = [s.value for s in SortOrder]
FORMAT_CHOICES = ["text", "json", "yaml", "markdown"]

INTERACTIVE_HELP = """\
Commands:
  add <quantity> <name>   add an item
  inc <id> / dec <id>     change stock by one
  edit <id>               rename an item
  del <id>                delete an item
  filter <all|in_stock|low_stock>
  sort <default|name_asc|quantity_desc>
  clear                   remove all zero-stock items
  show                    show the list again
  help                    show this help
  quit                    leave the session"""


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False, show_time=False)],
        force=True,
    )


def _open_store(ctx: click.Context) -> InventoryStore:
    config: Config = ctx.obj["config"]
    storage = JsonFileStorage(config.storage.path)
    return InventoryStore(storage, key=config.storage.key)


def _render(ctx: click.Context, view: ViewModel) -> None:
    from stock_tracker.output.formatters import get_formatter
    
    config: Config = ctx.obj["config"]
    formatter = get_formatter("text", colorize=config.output.colorize)
    sys.stdout.write(formatter.format(view))
    sys.stdout.flush()


def prompt_for_text(message: str, default: str) -> Optional[str]:
    """Blocking prompt; returns None when the user cancels."""
    try:
        return click.prompt(message, default=default, show_default=False)
    except click.Abort:
        return None


@click.group()
@click.version_option(version=__version__, prog_name="stock-tracker")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file.",
)
@click.option(
    "--store",
    "-s",
    "store_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the storage file (overrides the configuration).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    store_path: Optional[Path],
    verbose: bool,
) -> None:
    """Stock Tracker - Keep track of stock items and their quantities."""
    ctx.ensure_object(dict)
    
    try:
        if config is None:
            config = find_config_file(Path.cwd())
        loaded = load_config(config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise click.Abort()
    
    if store_path is not None:
        loaded.storage.path = store_path
    
    _configure_logging("DEBUG" if verbose else loaded.logging.level)
    ctx.obj["config"] = loaded


# Negative quantities such as "-1" must reach the store as QUANTITY, not as options.
@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("name")
@click.argument("quantity")
@click.pass_context
def add(ctx: click.Context, name: str, quantity: str) -> None:
    """Add an item NAME with QUANTITY units in stock."""
    store = _open_store(ctx)
    store.add(name, quantity)
    _render(ctx, InventorySession(store).view())


@cli.command("list")
@click.option(
    "--filter",
    "stock_filter",
    type=click.Choice(FILTER_CHOICES),
    default=StockFilter.ALL.value,
    help="Which items to show (default: all).",
)
@click.option(
    "--sort",
    "sort_order",
    type=click.Choice(SORT_CHOICES),
    default=SortOrder.DEFAULT.value,
    help="How to order items (default: insertion order).",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(FORMAT_CHOICES),
    default=None,
    help="Output format (default: from configuration, else text).",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output file path. If not specified, prints to stdout.",
)
@click.pass_context
def list_items(
    ctx: click.Context,
    stock_filter: str,
    sort_order: str,
    output_format: Optional[str],
    output: Optional[Path],
) -> None:
    """List items, optionally filtered and sorted."""
    from stock_tracker.output.formatters import get_formatter
    
    config: Config = ctx.obj["config"]
    output_format = output_format or config.output.default_format
    
    session = InventorySession(_open_store(ctx))
    session.set_filter(stock_filter)
    view = session.set_sort_order(sort_order)
    
    if output_format == "text":
        formatter = get_formatter("text", colorize=config.output.colorize and output is None)
    else:
        formatter = get_formatter(output_format)
    formatted_output = formatter.format(view)
    
    if output:
        output.write_text(formatted_output, encoding="utf-8")
        console.print(f"[green]Results written to:[/green] {output}")
    else:
        sys.stdout.write(formatted_output)
        sys.stdout.flush()


@cli.command()
@click.argument("item_id", type=int)
@click.pass_context
def increase(ctx: click.Context, item_id: int) -> None:
    """Add one unit to item ITEM_ID."""
    store = _open_store(ctx)
    store.adjust_quantity(item_id, StockChange.INCREASE)
    _render(ctx, InventorySession(store).view())


@cli.command()
@click.argument("item_id", type=int)
@click.pass_context
def decrease(ctx: click.Context, item_id: int) -> None:
    """Remove one unit from item ITEM_ID (never below zero)."""
    store = _open_store(ctx)
    store.adjust_quantity(item_id, StockChange.DECREASE)
    _render(ctx, InventorySession(store).view())


@cli.command()
@click.argument("item_id", type=int)
@click.argument("new_name", required=False)
@click.pass_context
def rename(ctx: click.Context, item_id: int, new_name: Optional[str]) -> None:
    """Rename item ITEM_ID, prompting for NEW_NAME when it is omitted."""
    session = InventorySession(_open_store(ctx), prompt=prompt_for_text)
    if new_name is None:
        view = session.edit(item_id)
    else:
        session.begin_edit(item_id)
        view = session.commit_edit(new_name)
    _render(ctx, view)


@cli.command()
@click.argument("item_id", type=int)
@click.pass_context
def delete(ctx: click.Context, item_id: int) -> None:
    """Delete item ITEM_ID."""
    _render(ctx, InventorySession(_open_store(ctx)).delete(item_id))


@cli.command("clear-zero")
@click.pass_context
def clear_zero(ctx: click.Context) -> None:
    """Delete every item with zero stock."""
    _render(ctx, InventorySession(_open_store(ctx)).clear_zero_stock())


def _parse_id(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


@cli.command()
@click.pass_context
def interactive(ctx: click.Context) -> None:
    """Start an interactive session with filter and sort state."""
    session = InventorySession(_open_store(ctx), prompt=prompt_for_text)
    item_actions = {
        "inc": session.increase,
        "dec": session.decrease,
        "edit": session.edit,
        "del": session.delete,
    }
    
    console.print("[dim]Type 'help' for commands.[/dim]")
    _render(ctx, session.view())
    
    while True:
        line = prompt_for_text("stock", "")
        if line is None:
            break
        
        command, _, argument = line.strip().partition(" ")
        argument = argument.strip()
        
        if not command:
            continue
        if command in ("quit", "exit"):
            break
        if command == "help":
            console.print(INTERACTIVE_HELP, markup=False)
            continue
        
        if command == "add":
            quantity, _, name = argument.partition(" ")
            session.set_quantity_input(quantity)
            session.set_name_input(name)
            view = session.submit()
        elif command in item_actions:
            item_id = _parse_id(argument)
            if item_id is None:
                view = session.view()
            else:
                view = item_actions[command](item_id)
        elif command == "filter" and argument in FILTER_CHOICES:
            view = session.set_filter(argument)
        elif command == "sort" and argument in SORT_CHOICES:
            view = session.set_sort_order(argument)
        elif command == "clear":
            view = session.clear_zero_stock()
        elif command == "show":
            view = session.view()
        else:
            console.print(f"[yellow]Unknown command:[/yellow] {escape(line.strip())} (try 'help')")
            continue
        
        _render(ctx, view)


def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={})
