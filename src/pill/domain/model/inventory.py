"""InventoryStore aggregate — owns every batch and answers queries over them.

Batches are grouped by item name. Names keep their insertion order, and
the batches of one name are kept sorted by expiry date so that merge
lookups are a binary search and listings are deterministic.
"""

from __future__ import annotations

import logging
from bisect import bisect_left, insort
from collections.abc import Callable, Iterable, Iterator
from datetime import date

from pill.domain.exceptions import EntityNotFoundError, ValidationError
from pill.domain.model.batch import Batch, BatchRecord, ListedBatch, expiry_sort_key
from pill.domain.model.transaction import Transaction, TransactionKind

logger = logging.getLogger(__name__)

TransactionObserver = Callable[[Transaction], None]


class InventoryEmpty:
    """Marker returned instead of a listing when the store holds no batches."""

    message = "The inventory is empty."

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "INVENTORY_EMPTY"


INVENTORY_EMPTY = InventoryEmpty()


class InventoryStore:
    """Aggregate root for all stocked batches.

    Invariants:
    - at most one batch per (name, expiry_date); adding to an existing
      pair merges quantities
    - every stored batch has a positive quantity
    - a name is present only while it has at least one batch
    - name keys are never blank

    Mutations report each change to an optional observer (the
    transaction log). The ``*_silent`` path and all queries never do.
    """

    def __init__(self, observer: TransactionObserver | None = None) -> None:
        self._items: dict[str, list[Batch]] = {}
        self._observer = observer

    @classmethod
    def restore(cls, records: Iterable[BatchRecord]) -> InventoryStore:
        """Rebuild a store from snapshot records.

        Records are merged exactly as repeated adds would merge them, so
        their order does not affect the resulting quantities.
        """
        store = cls()
        for record in records:
            if not store.add_silent(record.name, record.quantity, record.expiry_date):
                raise ValidationError(f"Invalid inventory record: {record!r}")
        return store

    def set_observer(self, observer: TransactionObserver | None) -> None:
        self._observer = observer

    # --- Mutations ------------------------------------------------------------

    def add(self, name: str, quantity: int, expiry_date: date | None = None) -> Batch:
        """Add stock, merging into an existing batch with the same expiry.

        Raises ValidationError for a blank name or non-positive quantity.
        """
        name = self._validate(name, quantity)
        batch = self._merge(name, quantity, expiry_date)
        logger.info(
            "Added %d of %s (expiry=%s), batch now holds %d",
            quantity, name, expiry_date, batch.quantity,
        )
        self._emit(Transaction(TransactionKind.ADD, name, quantity, expiry_date))
        return batch

    def add_silent(
        self, name: str, quantity: int, expiry_date: date | None = None
    ) -> bool:
        """Same merge as ``add`` without notifying the observer.

        Used to populate derived stores. Returns False, leaving the store
        untouched, when the arguments are invalid.
        """
        try:
            name = self._validate(name, quantity)
        except ValidationError as exc:
            logger.debug("Silent add rejected: %s", exc)
            return False
        self._merge(name, quantity, expiry_date)
        return True

    def delete(self, name: str, expiry_date: date | None = None) -> Batch:
        """Remove the batch with exactly this name and expiry date."""
        name = self._validate_name(name)
        batches = self._items.get(name, [])
        pos = self._locate(batches, name, expiry_date)
        if pos is None:
            logger.warning("Delete of unknown batch %s (expiry=%s)", name, expiry_date)
            raise EntityNotFoundError(self._not_found_message(name, expiry_date))

        removed = batches.pop(pos)
        if not batches:
            del self._items[name]
        logger.info("Deleted %s", removed)
        self._emit(
            Transaction(TransactionKind.DELETE, name, removed.quantity, expiry_date)
        )
        return removed

    def edit(self, name: str, quantity: int, expiry_date: date | None = None) -> Batch:
        """Overwrite the quantity of an existing batch (absolute, not additive)."""
        name = self._validate(name, quantity)
        batch = self._find(name, expiry_date)
        batch.quantity = quantity
        logger.info("Edited %s", batch)
        self._emit(Transaction(TransactionKind.EDIT, name, quantity, expiry_date))
        return batch

    def use(self, name: str, quantity: int, expiry_date: date | None = None) -> Batch:
        """Consume stock from one batch.

        The remaining quantity is written back as an edit would write it,
        so a use that would leave zero or less is rejected. Removing a
        batch entirely is done with ``delete``.
        """
        name = self._validate(name, quantity)
        batch = self._find(name, expiry_date)
        remaining = batch.quantity - quantity
        if remaining < 0:
            raise ValidationError(
                f"Cannot use {quantity} of {name} "
                f"(only {batch.quantity} in stock)"
            )
        if remaining == 0:
            raise ValidationError(
                f"Using {quantity} of {name} would leave none in stock; "
                f"delete the batch instead"
            )
        batch.quantity = remaining
        logger.info("Used %d of %s, %d left", quantity, name, remaining)
        self._emit(Transaction(TransactionKind.USE, name, quantity, expiry_date))
        return batch

    def clear(self) -> None:
        self._items.clear()

    # --- Queries --------------------------------------------------------------

    def list_batches(self) -> list[ListedBatch] | InventoryEmpty:
        """Every batch, numbered from 1.

        Names appear in insertion order and each name's batches in expiry
        order. Returns INVENTORY_EMPTY when there is nothing to list.
        """
        if self.is_empty():
            return INVENTORY_EMPTY
        return [ListedBatch(i, batch) for i, batch in enumerate(self, start=1)]

    def find(self, keyword: str) -> InventoryStore:
        """Copy every batch whose item name contains ``keyword`` (any case)."""
        found = InventoryStore()
        if not keyword or not keyword.strip():
            logger.warning("Find called with a blank keyword")
            return found

        needle = keyword.strip().lower()
        for name, batches in self._items.items():
            if needle in name.lower():
                for batch in batches:
                    found.add_silent(batch.name, batch.quantity, batch.expiry_date)
        logger.info("Found %d batches matching %r", found.size(), keyword)
        return found

    def expiring_before(self, cutoff: date) -> InventoryStore:
        """Copy every dated batch expiring strictly before ``cutoff``."""
        expiring = InventoryStore()
        for batch in self:
            if batch.is_expiring_before(cutoff):
                expiring.add_silent(batch.name, batch.quantity, batch.expiry_date)
        return expiring

    def to_restock(self, threshold: int) -> list[ListedBatch]:
        """Batches whose quantity is at or below ``threshold``, numbered from 1."""
        if threshold < 0:
            raise ValidationError("Restock threshold cannot be negative")
        low = [batch for batch in self if batch.quantity <= threshold]
        return [ListedBatch(i, batch) for i, batch in enumerate(low, start=1)]

    def lookup(self, name: str) -> list[Batch]:
        """The batches stored under ``name``; empty when the name is unknown.

        The name is stripped the same way the mutations strip it.
        """
        if not name:
            return []
        return list(self._items.get(name.strip(), []))

    def names(self) -> list[str]:
        return list(self._items)

    def size(self) -> int:
        return sum(len(batches) for batches in self._items.values())

    def is_empty(self) -> bool:
        return not self._items

    def snapshot(self) -> list[BatchRecord]:
        return [BatchRecord(b.name, b.quantity, b.expiry_date) for b in self]

    # --- Dunder ---------------------------------------------------------------

    def __iter__(self) -> Iterator[Batch]:
        for batches in self._items.values():
            yield from batches

    def __len__(self) -> int:
        return self.size()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InventoryStore):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"InventoryStore({self.snapshot()!r})"

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _validate_name(name: str) -> str:
        if not name or not name.strip():
            raise ValidationError("Item name is required")
        return name.strip()

    def _validate(self, name: str, quantity: int) -> str:
        name = self._validate_name(name)
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(quantity).__name__}"
            )
        if quantity <= 0:
            raise ValidationError("Quantity must be positive")
        return name

    def _merge(self, name: str, quantity: int, expiry_date: date | None) -> Batch:
        batches = self._items.setdefault(name, [])
        pos = self._locate(batches, name, expiry_date)
        if pos is not None:
            batches[pos].quantity += quantity
            return batches[pos]
        batch = Batch(name, quantity, expiry_date)
        insort(batches, batch, key=lambda b: b.sort_key)
        return batch

    def _find(self, name: str, expiry_date: date | None) -> Batch:
        batches = self._items.get(name, [])
        pos = self._locate(batches, name, expiry_date)
        if pos is None:
            logger.warning("Lookup of unknown batch %s (expiry=%s)", name, expiry_date)
            raise EntityNotFoundError(self._not_found_message(name, expiry_date))
        return batches[pos]

    @staticmethod
    def _locate(
        batches: list[Batch], name: str, expiry_date: date | None
    ) -> int | None:
        key = expiry_sort_key(expiry_date)
        pos = bisect_left(batches, key, key=lambda b: b.sort_key)
        if pos < len(batches) and batches[pos].matches(name, expiry_date):
            return pos
        return None

    @staticmethod
    def _not_found_message(name: str, expiry_date: date | None) -> str:
        if expiry_date is None:
            return f"Item not found: {name} (no expiry date)"
        return f"Item not found: {name} (expiring {expiry_date.isoformat()})"

    def _emit(self, transaction: Transaction) -> None:
        if self._observer is None:
            return
        try:
            self._observer(transaction)
        except Exception:
            # The mutation has already happened and must stand.
            logger.exception("Failed to record transaction: %s", transaction.describe())
