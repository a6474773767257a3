"""CLI commands for customers (identity-service users)."""

from __future__ import annotations

import click

from storeadmin.application.payloads import customer_payload
from storeadmin.domain.exceptions import DomainException
from storeadmin.domain.model import customer
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

CUSTOMER_COLUMNS = [
    Column("Username", 16, lambda u: u.get("username")),
    Column("Name", 24, customer.full_name),
    Column("Email", 28, lambda u: u.get("email")),
    Column("Phone", 14, lambda u: u.get("phoneNumber")),
    Column("Points", 7, lambda u: u.get("points"), right=True),
]


@click.command("list")
@page_option
@page_size_option
@search_option
@pass_settings
def customer_list(settings: Settings, page: int, page_size: int | None, search: str) -> None:
    """List customers."""
    controller = run(
        load_list(settings, "customer", page, page_size, FilterState(search_term=search))
    )
    show_list(controller, CUSTOMER_COLUMNS)


@click.command("add")
@click.option("--username", required=True)
@click.option("--email", required=True)
@click.option("--first-name", default="")
@click.option("--last-name", default="")
@click.option("--phone", "phone_number", default=None)
@click.option("--password", default=None, prompt=True, hide_input=True)
@pass_settings
def customer_add(
    settings: Settings,
    username: str,
    email: str,
    first_name: str,
    last_name: str,
    phone_number: str | None,
    password: str | None,
) -> None:
    """Create a customer account."""
    try:
        payload = customer_payload(
            username,
            email,
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
            password=password,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    result = run(dispatch(settings, "customer", lambda d: d.create(payload)))
    report(result, f"Customer '{username}' created.")


@click.command("update")
@click.option("--id", "user_id", required=True, help="User ID.")
@click.option("--email", default=None)
@click.option("--first-name", default=None)
@click.option("--last-name", default=None)
@click.option("--phone", "phone_number", default=None)
@pass_settings
def customer_update(
    settings: Settings,
    user_id: str,
    email: str | None,
    first_name: str | None,
    last_name: str | None,
    phone_number: str | None,
) -> None:
    """Update a customer's contact details."""
    payload = {
        "email": email,
        "firstName": first_name,
        "lastName": last_name,
        "phoneNumber": phone_number,
    }
    if all(v is None for v in payload.values()):
        raise click.ClickException("Nothing to update")

    result = run(dispatch(settings, "customer", lambda d: d.update(user_id, payload)))
    report(result, f"Customer {user_id} updated.")


customer_delete = delete_command("customer", "customer")
