import logging
from pathlib import Path

import click

from pill.infrastructure.bootstrap import DATA_DIR_ENV
from pill.infrastructure.cli.item_commands import (
    item_add,
    item_delete,
    item_edit,
    item_expired,
    item_expiring,
    item_find,
    item_list,
    item_restock,
    item_use,
)
from pill.infrastructure.cli.transaction_commands import transaction_list
from pill.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=DATA_DIR_ENV,
    default=None,
    help="Directory holding inventory.json and transactions.json.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write logs to this file instead of stderr.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, log_file: Path | None, verbose: bool) -> None:
    """PILL — inventory tracker for medical supplies"""
    configure_logging(logging.DEBUG if verbose else logging.WARNING, log_file)
    ctx.obj = {"data_dir": data_dir}


@cli.group()
def item() -> None:
    """Manage stocked items."""


@cli.group()
def transaction() -> None:
    """Inspect the transaction log."""


# Register subcommands
item.add_command(item_add)
item.add_command(item_delete)
item.add_command(item_edit)
item.add_command(item_expired)
item.add_command(item_expiring)
item.add_command(item_find)
item.add_command(item_list)
item.add_command(item_restock)
item.add_command(item_use)
transaction.add_command(transaction_list)
