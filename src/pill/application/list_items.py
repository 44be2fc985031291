"""Application service: List Items use case (query)."""

from __future__ import annotations

from pill.application.dto import BatchLineDTO, to_lines
from pill.domain.model.inventory import InventoryEmpty
from pill.domain.repository.inventory_repository import InventoryRepository


class ListItemsHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self) -> list[BatchLineDTO] | InventoryEmpty:
        listing = self._inventory_repo.load().list_batches()
        if isinstance(listing, InventoryEmpty):
            return listing
        return to_lines(listing)
