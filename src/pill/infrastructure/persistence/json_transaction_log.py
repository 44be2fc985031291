"""JSON-file-backed implementation of TransactionLog."""

from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path

from pill.domain.model.transaction import Transaction, TransactionKind
from pill.domain.repository.transaction_log import TransactionLog


class JsonTransactionLog(TransactionLog):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- TransactionLog interface ---------------------------------------------

    def record(self, transaction: Transaction) -> None:
        records = self._load_raw()
        records.append(self._to_raw(transaction))
        self._persist_raw(records)

    def list_all(self) -> list[Transaction]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(transaction: Transaction) -> dict:
        return {
            "kind": transaction.kind.value,
            "item_name": transaction.item_name,
            "quantity": transaction.quantity,
            "expiry_date": (
                transaction.expiry_date.isoformat()
                if transaction.expiry_date
                else None
            ),
            "timestamp": transaction.timestamp.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Transaction:
        expiry = raw.get("expiry_date")
        return Transaction(
            kind=TransactionKind(raw["kind"]),
            item_name=raw["item_name"],
            quantity=raw["quantity"],
            expiry_date=date.fromisoformat(expiry) if expiry else None,
            timestamp=datetime.fromisoformat(raw["timestamp"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
