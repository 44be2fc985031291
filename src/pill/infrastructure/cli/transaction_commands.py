"""CLI commands for the transaction log."""

from __future__ import annotations

import click

from pill.application.list_transactions import ListTransactionsHandler
from pill.infrastructure.bootstrap import transaction_log


@click.command("list")
@click.pass_obj
def transaction_list(obj: dict) -> None:
    """Show every recorded inventory change."""
    handler = ListTransactionsHandler(transaction_log=transaction_log(obj["data_dir"]))
    entries = handler.handle()

    if not entries:
        click.echo("No transactions recorded.")
        return

    click.echo(f"{'Timestamp':<24} {'Kind':<7} Description")
    click.echo("-" * 60)
    for entry in entries:
        click.echo(f"{entry.timestamp:<24} {entry.kind:<7} {entry.description}")
