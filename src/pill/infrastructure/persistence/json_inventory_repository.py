"""JSON-file-backed implementation of InventoryRepository."""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path

from pill.domain.model.batch import BatchRecord
from pill.domain.model.inventory import InventoryStore
from pill.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class JsonInventoryRepository(InventoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- InventoryRepository interface ----------------------------------------

    def load(self) -> InventoryStore:
        records = [self._to_domain(raw) for raw in self._load_raw()]
        store = InventoryStore.restore(records)
        logger.debug("Loaded %d batches from %s", store.size(), self._file_path)
        return store

    def save(self, store: InventoryStore) -> None:
        self._persist_raw([self._to_raw(record) for record in store.snapshot()])
        logger.debug("Saved %d batches to %s", store.size(), self._file_path)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(record: BatchRecord) -> dict:
        return {
            "name": record.name,
            "quantity": record.quantity,
            "expiry_date": (
                record.expiry_date.isoformat() if record.expiry_date else None
            ),
        }

    @staticmethod
    def _to_domain(raw: dict) -> BatchRecord:
        expiry = raw.get("expiry_date")
        return BatchRecord(
            name=raw["name"],
            quantity=raw["quantity"],
            expiry_date=date.fromisoformat(expiry) if expiry else None,
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
