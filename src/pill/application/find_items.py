"""Application service: Find Items use case (query).

Matches the keyword against item names only, ignoring case. The result
is listed the same way as the full inventory, including the empty
inventory marker when nothing matches.
"""

from __future__ import annotations

from pill.application.dto import BatchLineDTO, to_lines
from pill.domain.model.inventory import InventoryEmpty
from pill.domain.repository.inventory_repository import InventoryRepository


class FindItemsHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, keyword: str) -> list[BatchLineDTO] | InventoryEmpty:
        found = self._inventory_repo.load().find(keyword)
        listing = found.list_batches()
        if isinstance(listing, InventoryEmpty):
            return listing
        return to_lines(listing)
