"""Shared plumbing for the CLI commands.

Every command opens a Session, drives a controller or a dispatcher to
completion and renders the resulting state.  Failures stored on the
controller are surfaced as ``click.ClickException``.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

import click

from storeadmin.application.list_controller import ListResourceController
from storeadmin.application.mutation_dispatcher import (
    Confirm,
    MutationDispatcher,
    MutationResult,
)
from storeadmin.domain.model.value_objects import FilterState
from storeadmin.infrastructure.bootstrap import Session
from storeadmin.infrastructure.config import ENV_TOKEN, Settings
from storeadmin.infrastructure.http.auth_redirect import Navigator

pass_settings = click.make_pass_decorator(Settings)

page_option = click.option(
    "--page", default=1, show_default=True, type=click.IntRange(min=1), help="Page number (1-based)."
)
page_size_option = click.option(
    "--page-size", default=None, type=click.IntRange(min=1), help="Rows per page."
)
search_option = click.option("--search", default="", help="Case-insensitive text filter.")
yes_option = click.option("--yes", "assume_yes", is_flag=True, default=False, help="Skip the confirmation prompt.")


@dataclass(frozen=True)
class Column:
    title: str
    width: int
    value: Callable[[Any], Any]
    right: bool = False

    def cell(self, item: Any) -> str:
        text = self.value(item)
        text = "" if text is None else str(text)
        if len(text) > self.width:
            text = text[: self.width - 1] + "~"
        return f"{text:>{self.width}}" if self.right else f"{text:<{self.width}}"

    def heading(self) -> str:
        return f"{self.title:>{self.width}}" if self.right else f"{self.title:<{self.width}}"


class CliNavigator(Navigator):
    """The terminal has no routes; a redirect becomes a sign-in hint."""

    @property
    def current_path(self) -> str:
        return "/"

    def redirect(self, path: str) -> None:
        click.echo(
            f"The server rejected the session. Sign in again and export {ENV_TOKEN}.",
            err=True,
        )


def run(coro: Awaitable[Any]) -> Any:
    return asyncio.run(coro)


def open_session(settings: Settings) -> Session:
    return Session(settings, navigator=CliNavigator())


def confirmer(assume_yes: bool) -> Confirm:
    if assume_yes:
        return lambda prompt: True
    return lambda prompt: click.confirm(prompt, default=False)


# --- Listing ------------------------------------------------------------------


async def load_list(
    settings: Settings,
    resource_name: str,
    page: int = 1,
    page_size: int | None = None,
    filters: FilterState | None = None,
) -> ListResourceController:
    async with open_session(settings) as session:
        controller = session.controller(resource_name, page=page, page_size=page_size)
        if filters is not None:
            controller.filters = filters
        await controller.load()
    return controller


def show_list(controller: ListResourceController, columns: list[Column]) -> None:
    if controller.error and not controller.items:
        raise click.ClickException(controller.error)
    if controller.error:
        click.echo(f"Warning: {controller.error}", err=True)

    rows = controller.filtered_items
    if not rows:
        click.echo(controller.resource.no_rows_message)
    else:
        header = " ".join(c.heading() for c in columns)
        click.echo(header)
        click.echo("-" * len(header))
        for item in rows:
            click.echo(" ".join(c.cell(item) for c in columns))

    info = controller.page_info
    if info.total_pages > 0:
        click.echo()
        click.echo(
            f"Showing {info.first_item_number} to {info.last_item_number} "
            f"of {info.total_items} {controller.resource.plural} | "
            f"Page {info.page} / {info.total_pages}"
        )


# --- Mutations ----------------------------------------------------------------


async def dispatch(
    settings: Settings,
    resource_name: str,
    action: Callable[[MutationDispatcher], Awaitable[MutationResult]],
    confirm: Confirm | None = None,
) -> MutationResult:
    async with open_session(settings) as session:
        controller = session.controller(resource_name)
        dispatcher = session.dispatcher(controller, confirm or confirmer(True))
        return await action(dispatcher)


def report(result: MutationResult, success: str) -> None:
    if result.cancelled:
        click.echo("Cancelled.")
        return
    if not result.ok:
        raise click.ClickException(result.message or "Request failed")
    click.echo(success)


def delete_command(resource_name: str, noun: str, id_type: Any = str) -> click.Command:
    """Build the ``delete`` subcommand shared by every resource."""

    @click.command("delete")
    @click.option("--id", "item_id", required=True, type=id_type, help=f"{noun.capitalize()} ID.")
    @yes_option
    @pass_settings
    def delete(settings: Settings, item_id: Any, assume_yes: bool) -> None:
        result = run(
            dispatch(
                settings,
                resource_name,
                lambda d: d.delete(item_id),
                confirm=confirmer(assume_yes),
            )
        )
        report(result, f"{noun.capitalize()} {item_id} deleted.")

    delete.help = f"Delete a {noun} (asks for confirmation)."
    return delete
