"""Application service: Expiring Items use case (query)."""

from __future__ import annotations

from datetime import date

from pill.application.dto import ExpiryReportDTO, to_lines
from pill.domain.model.inventory import InventoryEmpty
from pill.domain.repository.inventory_repository import InventoryRepository


class ExpiringItemsHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, cutoff: date, today: date | None = None) -> ExpiryReportDTO:
        """Report batches expiring strictly before ``cutoff``.

        When ``cutoff`` is today the report is about batches that have
        already expired; the query itself is the same either way.
        """
        today = today or date.today()
        expiring = self._inventory_repo.load().expiring_before(cutoff)
        listing = expiring.list_batches()
        lines = [] if isinstance(listing, InventoryEmpty) else to_lines(listing)
        return ExpiryReportDTO(
            cutoff=cutoff.isoformat(),
            already_expired=cutoff == today,
            lines=lines,
        )
