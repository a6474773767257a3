"""CLI commands for orders."""

from __future__ import annotations

import click

from storeadmin.application.payloads import order_status_payload, payment_status_payload
from storeadmin.domain.exceptions import DomainException
from storeadmin.domain.model import order
from storeadmin.domain.model.value_objects import ALL, FilterState
from storeadmin.domain.service.client_filter import DATE_RANGES
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

ORDER_COLUMNS = [
    Column("ID", 12, lambda o: o.get("id")),
    Column("Customer", 12, lambda o: o.get("userId")),
    Column("Items", 5, order.product_count, right=True),
    Column("Total", 12, lambda o: o.get("totalAmount"), right=True),
    Column("Status", 10, order.display_status),
    Column("Payment", 8, order.payment_method),
    Column("Address", 24, lambda o: o.get("shippingAddress")),
]

status_option = click.option(
    "--status",
    default=ALL,
    show_default=True,
    type=click.Choice((ALL,) + order.DISPLAY_STATUSES, case_sensitive=False),
    help="Only orders with this display status.",
)
date_range_option = click.option(
    "--date-range",
    default=ALL,
    show_default=True,
    type=click.Choice((ALL,) + DATE_RANGES, case_sensitive=False),
    help="Only orders created today, in the last 7 days or the last 30 days.",
)


def _filters(search: str, status: str, date_range: str) -> FilterState:
    return FilterState(search_term=search, status_filter=status, date_range_filter=date_range)


@click.command("list")
@page_option
@page_size_option
@search_option
@status_option
@date_range_option
@pass_settings
def order_list(
    settings: Settings,
    page: int,
    page_size: int | None,
    search: str,
    status: str,
    date_range: str,
) -> None:
    """List orders."""
    controller = run(
        load_list(settings, "order", page, page_size, _filters(search, status, date_range))
    )
    show_list(controller, ORDER_COLUMNS)


@click.command("set-status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--status", required=True, help="New status (e.g. SHIPPED).")
@pass_settings
def order_set_status(settings: Settings, order_id: str, status: str) -> None:
    """Change an order's workflow status."""
    try:
        payload = order_status_payload(status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    result = run(dispatch(settings, "order", lambda d: d.patch(order_id, "status", payload)))
    report(result, f"Order {order_id} status set to {payload['status']}.")


@click.command("set-payment-status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--payment-status", required=True, help="New payment status (e.g. PAID).")
@pass_settings
def order_set_payment_status(settings: Settings, order_id: str, payment_status: str) -> None:
    """Change an order's payment status."""
    try:
        payload = payment_status_payload(payment_status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    result = run(
        dispatch(settings, "order", lambda d: d.patch(order_id, "payment-status", payload))
    )
    report(result, f"Order {order_id} payment status set to {payload['paymentStatus']}.")
