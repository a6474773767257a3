"""CLI commands for sales and inventory reports."""

from __future__ import annotations

import click

from storeadmin.application.reports import inventory_summary, sales_summary, stock_level_breakdown
from storeadmin.infrastructure.cli.common import (
    load_list,
    page_option,
    page_size_option,
    pass_settings,
    run,
)
from storeadmin.infrastructure.config import Settings


@click.command("sales")
@page_option
@page_size_option
@pass_settings
def report_sales(settings: Settings, page: int, page_size: int | None) -> None:
    """Summarise the loaded page of orders."""
    controller = run(load_list(settings, "order", page, page_size))
    if controller.error:
        raise click.ClickException(controller.error)

    summary = sales_summary(controller.items)
    click.echo(f"{'Total sales':<22} {summary.total_sales:>14,.0f}")
    click.echo(f"{'Total orders':<22} {summary.total_orders:>14}")
    click.echo(f"{'Average order value':<22} {summary.average_order_value:>14,.0f}")
    click.echo(f"{'Pending orders':<22} {summary.pending_orders:>14}")


@click.command("inventory")
@page_option
@page_size_option
@pass_settings
def report_inventory(settings: Settings, page: int, page_size: int | None) -> None:
    """Summarise stock health of the loaded inventory page."""
    controller = run(load_list(settings, "inventory", page, page_size))
    if controller.error:
        raise click.ClickException(controller.error)

    summary = inventory_summary(controller.items)
    levels = stock_level_breakdown(controller.items)
    click.echo(f"{'Total products':<22} {summary.total_products:>14}")
    click.echo(f"{'Stock value':<22} {summary.stock_value:>14,.0f}")
    click.echo(f"{'Low stock items':<22} {summary.low_stock_items:>14}")
    click.echo(f"{'Out of stock items':<22} {summary.out_of_stock_items:>14}")
    click.echo()
    click.echo(f"Healthy {levels.healthy} / Low {levels.low} / Out {levels.out}")
