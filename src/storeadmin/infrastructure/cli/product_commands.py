"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storeadmin.application.payloads import product_payload
from storeadmin.domain.exceptions import DomainException
from storeadmin.domain.model import product
from storeadmin.domain.model.value_objects import FilterState
from storeadmin.infrastructure.cli.common import (
    Column,
    delete_command,
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

PRODUCT_COLUMNS = [
    Column("ID", 10, lambda p: p.get("id")),
    Column("Name", 28, lambda p: p.get("name")),
    Column("Category", 16, product.main_category),
    Column("Price", 12, lambda p: p.get("basePrice", p.get("price")), right=True),
    Column("Status", 12, product.status_label),
]


@click.command("list")
@page_option
@page_size_option
@search_option
@pass_settings
def product_list(settings: Settings, page: int, page_size: int | None, search: str) -> None:
    """List products in the catalog."""
    controller = run(
        load_list(settings, "product", page, page_size, FilterState(search_term=search))
    )
    show_list(controller, PRODUCT_COLUMNS)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--category-id", required=True, help="Category ID.")
@click.option("--price", "base_price", default="0", help="Base price.")
@click.option("--discount", default="0", help="Discount percentage.")
@click.option("--thumbnail-url", default="", help="Image URL (placeholder when blank).")
@click.option("--sku", default="", help="Base SKU.")
@click.option("--status", default="ACTIVE", show_default=True, help="Product status.")
@click.option("--description", default="", help="Description.")
@pass_settings
def product_add(
    settings: Settings,
    name: str,
    category_id: str,
    base_price: str,
    discount: str,
    thumbnail_url: str,
    sku: str,
    status: str,
    description: str,
) -> None:
    """Add a new product to the catalog."""
    categories = run(load_list(settings, "category"))
    if categories.error:
        raise click.ClickException(categories.error)

    try:
        payload = product_payload(
            name,
            category_id,
            categories.items,
            base_price=base_price,
            discount=discount,
            thumbnail_url=thumbnail_url,
            sku=sku,
            status=status,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    result = run(dispatch(settings, "product", lambda d: d.create(payload)))
    report(result, f"Product '{name}' created.")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", "base_price", default=None, type=float, help="New base price.")
@click.option("--status", default=None, help="New status.")
@pass_settings
def product_update(
    settings: Settings,
    product_id: str,
    name: str | None,
    base_price: float | None,
    status: str | None,
) -> None:
    """Update a product's name, price or status."""
    payload = {"name": name, "basePrice": base_price, "status": status}
    if all(v is None for v in payload.values()):
        raise click.ClickException("Nothing to update; pass --name, --price or --status")

    result = run(dispatch(settings, "product", lambda d: d.update(product_id, payload)))
    report(result, f"Product {product_id} updated.")


product_delete = delete_command("product", "product")
