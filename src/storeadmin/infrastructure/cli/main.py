from __future__ import annotations

import logging

import click

from storeadmin.domain.exceptions import DomainException
from storeadmin.infrastructure.cli.category_commands import (
    category_add,
    category_delete,
    category_list,
    category_update,
)
from storeadmin.infrastructure.cli.customer_commands import (
    customer_add,
    customer_delete,
    customer_list,
    customer_update,
)
from storeadmin.infrastructure.cli.inventory_commands import inventory_list, inventory_set
from storeadmin.infrastructure.cli.order_commands import (
    order_list,
    order_set_payment_status,
    order_set_status,
)
from storeadmin.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from storeadmin.infrastructure.cli.report_commands import report_inventory, report_sales
from storeadmin.infrastructure.config import Settings


@click.group()
@click.option("--base-url", default=None, help="Backend API base URL.")
@click.option("--token", default=None, help="Bearer token for the identity service.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log requests.")
@click.pass_context
def cli(ctx: click.Context, base_url: str | None, token: str | None, verbose: bool) -> None:
    """Store admin dashboard"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = Settings.from_env()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    ctx.obj = settings.override(base_url=base_url, api_token=token)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def inventory() -> None:
    """Manage inventory."""


@cli.group()
def report() -> None:
    """Sales and inventory reports."""


# Register subcommands
product.add_command(product_list)
product.add_command(product_add)
product.add_command(product_update)
product.add_command(product_delete)
category.add_command(category_list)
category.add_command(category_add)
category.add_command(category_update)
category.add_command(category_delete)
customer.add_command(customer_list)
customer.add_command(customer_add)
customer.add_command(customer_update)
customer.add_command(customer_delete)
order.add_command(order_list)
order.add_command(order_set_status)
order.add_command(order_set_payment_status)
inventory.add_command(inventory_list)
inventory.add_command(inventory_set)
report.add_command(report_sales)
report.add_command(report_inventory)
