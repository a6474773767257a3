"""CLI commands for product categories."""

from __future__ import annotations

import click

from storeadmin.application.payloads import category_payload
from storeadmin.domain.exceptions import DomainException
from storeadmin.domain.model.value_objects import FilterState
from storeadmin.infrastructure.cli.common import (
    Column,
    delete_command,
    dispatch,
    load_list,
    pass_settings,
    report,
    run,
    search_option,
    show_list,
)
from storeadmin.infrastructure.config import Settings

CATEGORY_COLUMNS = [
    Column("ID", 6, lambda c: c.get("id")),
    Column("Name", 24, lambda c: c.get("name")),
    Column("SKU code", 10, lambda c: c.get("skuCode")),
    Column("Slug", 24, lambda c: c.get("slug")),
    Column("Parent", 6, lambda c: c.get("parentId"), right=True),
]


@click.command("list")
@search_option
@pass_settings
def category_list(settings: Settings, search: str) -> None:
    """List every category (fetched in one large page)."""
    controller = run(load_list(settings, "category", filters=FilterState(search_term=search)))
    show_list(controller, CATEGORY_COLUMNS)


@click.command("add")
@click.option("--name", required=True, help="Category name.")
@click.option("--sku-code", required=True, help="SKU code prefix.")
@click.option("--parent-id", default=None, type=int, help="Parent category ID.")
@pass_settings
def category_add(settings: Settings, name: str, sku_code: str, parent_id: int | None) -> None:
    """Add a category."""
    try:
        payload = category_payload(name, sku_code, parent_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    result = run(dispatch(settings, "category", lambda d: d.create(payload)))
    report(result, f"Category '{name}' created.")


@click.command("update")
@click.option("--id", "category_id", required=True, type=int, help="Category ID.")
@click.option("--name", required=True, help="Category name.")
@click.option("--sku-code", required=True, help="SKU code prefix.")
@click.option("--parent-id", default=None, type=int, help="Parent category ID.")
@pass_settings
def category_update(
    settings: Settings, category_id: int, name: str, sku_code: str, parent_id: int | None
) -> None:
    """Rename a category or move it under another parent."""
    try:
        payload = category_payload(name, sku_code, parent_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    result = run(dispatch(settings, "category", lambda d: d.update(category_id, payload)))
    report(result, f"Category {category_id} updated.")


category_delete = delete_command("category", "category", id_type=int)
