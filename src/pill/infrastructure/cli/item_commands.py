"""CLI commands for inventory items."""

from __future__ import annotations

from datetime import date, datetime

import click

from pill.application.add_item import AddItemHandler
from pill.application.delete_item import DeleteItemHandler
from pill.application.dto import BatchLineDTO
from pill.application.edit_item import EditItemHandler
from pill.application.expiring_items import ExpiringItemsHandler
from pill.application.find_items import FindItemsHandler
from pill.application.list_items import ListItemsHandler
from pill.application.restock_items import RestockItemsHandler
from pill.application.use_item import UseItemHandler
from pill.domain.exceptions import DomainException
from pill.domain.model.batch import Batch
from pill.domain.model.inventory import InventoryEmpty
from pill.infrastructure.bootstrap import inventory_repository, transaction_log

_DATE = click.DateTime(formats=["%Y-%m-%d"])


def _as_date(value: datetime | None) -> date | None:
    return value.date() if value is not None else None


def _describe(name: str, quantity: int, expiry_date: str | None) -> str:
    """Format a batch as 'Bandage: 20 in stock, expiring: 2025-01-31'."""
    text = f"{name}: {quantity} in stock"
    if expiry_date is not None:
        text += f", expiring: {expiry_date}"
    return text


def _describe_batch(batch: Batch) -> str:
    expiry = batch.expiry_date.isoformat() if batch.expiry_date else None
    return _describe(batch.name, batch.quantity, expiry)


def _display_lines(lines: list[BatchLineDTO]) -> None:
    for line in lines:
        click.echo(f"{line.index}. {_describe(line.name, line.quantity, line.expiry_date)}")


def _display_listing(listing: list[BatchLineDTO] | InventoryEmpty) -> None:
    """Shared formatting for the full listing and search results."""
    if isinstance(listing, InventoryEmpty):
        click.echo(listing.message)
        return
    click.echo("Listing all items:")
    _display_lines(listing)


@click.command("add")
@click.option("--name", required=True, help="Item name.")
@click.option("--quantity", required=True, type=int, help="Quantity to add.")
@click.option("--expiry", type=_DATE, default=None, help="Expiry date (YYYY-MM-DD).")
@click.pass_obj
def item_add(obj: dict, name: str, quantity: int, expiry: datetime | None) -> None:
    """Add stock of an item, merging with a batch of the same expiry."""
    handler = AddItemHandler(
        inventory_repo=inventory_repository(obj["data_dir"]),
        transaction_log=transaction_log(obj["data_dir"]),
    )

    try:
        batch = handler.handle(name=name, quantity=quantity, expiry_date=_as_date(expiry))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if batch.quantity > quantity:
        click.echo("Item already exists with the same expiry date. Updated quantity:")
    else:
        click.echo("Added the following item to the inventory:")
    click.echo(_describe_batch(batch))


@click.command("delete")
@click.option("--name", required=True, help="Item name.")
@click.option("--expiry", type=_DATE, default=None, help="Expiry date of the batch.")
@click.pass_obj
def item_delete(obj: dict, name: str, expiry: datetime | None) -> None:
    """Delete one batch of an item."""
    handler = DeleteItemHandler(
        inventory_repo=inventory_repository(obj["data_dir"]),
        transaction_log=transaction_log(obj["data_dir"]),
    )

    try:
        removed = handler.handle(name=name, expiry_date=_as_date(expiry))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Deleted the following item from the inventory:")
    click.echo(_describe_batch(removed))


@click.command("edit")
@click.option("--name", required=True, help="Item name.")
@click.option("--quantity", required=True, type=int, help="New quantity.")
@click.option("--expiry", type=_DATE, default=None, help="Expiry date of the batch.")
@click.pass_obj
def item_edit(obj: dict, name: str, quantity: int, expiry: datetime | None) -> None:
    """Set the quantity of an existing batch."""
    handler = EditItemHandler(
        inventory_repo=inventory_repository(obj["data_dir"]),
        transaction_log=transaction_log(obj["data_dir"]),
    )

    try:
        batch = handler.handle(name=name, quantity=quantity, expiry_date=_as_date(expiry))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Edited item: {_describe_batch(batch)}")


@click.command("use")
@click.option("--name", required=True, help="Item name.")
@click.option("--quantity", required=True, type=int, help="Quantity consumed.")
@click.option("--expiry", type=_DATE, default=None, help="Expiry date of the batch.")
@click.pass_obj
def item_use(obj: dict, name: str, quantity: int, expiry: datetime | None) -> None:
    """Consume stock from one batch."""
    handler = UseItemHandler(
        inventory_repo=inventory_repository(obj["data_dir"]),
        transaction_log=transaction_log(obj["data_dir"]),
    )

    try:
        batch = handler.handle(name=name, quantity=quantity, expiry_date=_as_date(expiry))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Used {quantity} of {name}. Remaining: {_describe_batch(batch)}")


@click.command("list")
@click.pass_obj
def item_list(obj: dict) -> None:
    """List every batch in the inventory."""
    handler = ListItemsHandler(inventory_repo=inventory_repository(obj["data_dir"]))

    try:
        listing = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_listing(listing)


@click.command("find")
@click.argument("keyword")
@click.pass_obj
def item_find(obj: dict, keyword: str) -> None:
    """Find items whose name contains KEYWORD (case-insensitive)."""
    handler = FindItemsHandler(inventory_repo=inventory_repository(obj["data_dir"]))

    try:
        listing = handler.handle(keyword)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_listing(listing)


def _show_expiring(obj: dict, cutoff: date) -> None:
    handler = ExpiringItemsHandler(inventory_repo=inventory_repository(obj["data_dir"]))

    try:
        report = handler.handle(cutoff)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not report.lines:
        if report.already_expired:
            click.echo("There are no items that have expired.")
        else:
            click.echo(f"There are no items expiring before {report.cutoff}.")
        return

    if report.already_expired:
        click.echo("Listing all items that have expired")
    else:
        click.echo(f"Listing all items expiring before {report.cutoff}")
    _display_lines(report.lines)


@click.command("expiring")
@click.option("--before", "before", required=True, type=_DATE, help="Cutoff date (YYYY-MM-DD).")
@click.pass_obj
def item_expiring(obj: dict, before: datetime) -> None:
    """List batches expiring strictly before a date."""
    _show_expiring(obj, before.date())


@click.command("expired")
@click.pass_obj
def item_expired(obj: dict) -> None:
    """List batches that have already expired."""
    _show_expiring(obj, date.today())


@click.command("restock")
@click.option("--threshold", required=True, type=int, help="Restock at or below this quantity.")
@click.pass_obj
def item_restock(obj: dict, threshold: int) -> None:
    """List batches that need restocking."""
    handler = RestockItemsHandler(inventory_repo=inventory_repository(obj["data_dir"]))

    try:
        lines = handler.handle(threshold)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo(f"There are no items with quantity {threshold} or less.")
        return
    click.echo(f"Listing all items that need to be restocked ({threshold} or less):")
    _display_lines(lines)
