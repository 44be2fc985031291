"""Application service: Restock Items use case (query)."""

from __future__ import annotations

from pill.application.dto import BatchLineDTO, to_lines
from pill.domain.repository.inventory_repository import InventoryRepository


class RestockItemsHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, threshold: int) -> list[BatchLineDTO]:
        """Return batches holding ``threshold`` units or fewer."""
        return to_lines(self._inventory_repo.load().to_restock(threshold))
