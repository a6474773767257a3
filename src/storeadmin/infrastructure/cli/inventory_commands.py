"""CLI commands for inventory management."""

from __future__ import annotations

import click

from storeadmin.application.payloads import inventory_quantity_payload
from storeadmin.domain.exceptions import DomainException
from storeadmin.domain.model import inventory
from storeadmin.domain.model.value_objects import ALL, FilterState
from storeadmin.infrastructure.cli.common import (
    Column,
    dispatch,
    load_list,
    page_option,
    page_size_option,
    pass_settings,
    report,
    run,
    search_option,
    show_list,
)
from storeadmin.infrastructure.config import Settings

INVENTORY_COLUMNS = [
    Column("ID", 6, lambda i: i.get("id")),
    Column("Product", 24, inventory.display_name),
    Column("Warehouse", 16, lambda i: (i.get("warehouse") or {}).get("name")),
    Column("Total", 8, lambda i: i.get("quantity"), right=True),
    Column("Reserved", 10, lambda i: i.get("reservedQuantity"), right=True),
    Column("Available", 10, lambda i: i.get("availableQuantity"), right=True),
    Column("Status", 12, inventory.stock_status),
]


@click.command("list")
@page_option
@page_size_option
@search_option
@click.option(
    "--status",
    default=ALL,
    show_default=True,
    type=click.Choice((ALL,) + inventory.STOCK_STATUSES, case_sensitive=False),
    help="Only items with this stock level.",
)
@pass_settings
def inventory_list(
    settings: Settings, page: int, page_size: int | None, search: str, status: str
) -> None:
    """Show current inventory levels."""
    filters = FilterState(search_term=search, status_filter=status)
    controller = run(load_list(settings, "inventory", page, page_size, filters))
    show_list(controller, INVENTORY_COLUMNS)


@click.command("set")
@click.option("--id", "item_id", required=True, type=int, help="Inventory record ID.")
@click.option("--quantity", required=True, type=int, help="Total quantity in stock.")
@pass_settings
def inventory_set(settings: Settings, item_id: int, quantity: int) -> None:
    """Set the stock quantity of an inventory record."""
    try:
        payload = inventory_quantity_payload(quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    result = run(dispatch(settings, "inventory", lambda d: d.patch(item_id, "quantity", payload)))
    report(result, f"Inventory {item_id} set to {quantity}")
