"""Application service: Delete Item use case."""

from __future__ import annotations

from datetime import date

from pill.application.record_transactions import record_all
from pill.domain.model.batch import Batch
from pill.domain.model.transaction import Transaction
from pill.domain.repository.inventory_repository import InventoryRepository
from pill.domain.repository.transaction_log import TransactionLog


class DeleteItemHandler:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        transaction_log: TransactionLog,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._transaction_log = transaction_log

    def handle(self, name: str, expiry_date: date | None = None) -> Batch:
        """Remove one batch entirely, whatever its quantity."""
        store = self._inventory_repo.load()
        pending: list[Transaction] = []
        store.set_observer(pending.append)

        removed = store.delete(name, expiry_date)
        self._inventory_repo.save(store)
        record_all(self._transaction_log, pending)
        return removed
