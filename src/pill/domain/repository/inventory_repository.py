"""Abstract repository for the InventoryStore aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pill.domain.model.inventory import InventoryStore


class InventoryRepository(ABC):

    @abstractmethod
    def load(self) -> InventoryStore:
        """Return the persisted store, or an empty one if nothing is saved."""

    @abstractmethod
    def save(self, store: InventoryStore) -> None:
        """Persist a full snapshot of the store, replacing the previous one."""
