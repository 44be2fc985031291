"""Application service: List Transactions use case (query)."""

from __future__ import annotations

from pill.application.dto import TransactionDTO
from pill.domain.repository.transaction_log import TransactionLog


class ListTransactionsHandler:

    def __init__(self, transaction_log: TransactionLog) -> None:
        self._transaction_log = transaction_log

    def handle(self) -> list[TransactionDTO]:
        return [
            TransactionDTO(
                timestamp=t.timestamp.strftime("%Y-%m-%d %H:%M:%S UTC"),
                kind=t.kind.value,
                description=t.describe(),
            )
            for t in self._transaction_log.list_all()
        ]
