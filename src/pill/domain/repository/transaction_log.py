"""Abstract transaction log — the audit trail of inventory mutations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pill.domain.model.transaction import Transaction


class TransactionLog(ABC):

    @abstractmethod
    def record(self, transaction: Transaction) -> None:
        """Append one transaction to the log."""

    @abstractmethod
    def list_all(self) -> list[Transaction]:
        """Return every recorded transaction, oldest first."""
