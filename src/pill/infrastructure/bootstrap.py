"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from pill.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)
from pill.infrastructure.persistence.json_transaction_log import (
    JsonTransactionLog,
)

DATA_DIR_ENV = "PILL_DATA_DIR"


def data_dir(override: Path | None = None) -> Path:
    """Resolve the data directory: argument, then $PILL_DATA_DIR, then ./data."""
    if override is not None:
        return override
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(env)
    return Path.cwd() / "data"


def inventory_repository(directory: Path | None = None) -> JsonInventoryRepository:
    return JsonInventoryRepository(data_dir(directory) / "inventory.json")


def transaction_log(directory: Path | None = None) -> JsonTransactionLog:
    return JsonTransactionLog(data_dir(directory) / "transactions.json")
