"""Batch — the addressable unit of inventory.

A batch is one stocked quantity of a named item, tied to an optional
expiry date. ``name`` and ``expiry_date`` form its identity; only the
quantity changes over its lifetime.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


def expiry_sort_key(expiry_date: date | None) -> tuple[bool, date]:
    """Ordering key for expiry dates; a missing date sorts after every real one."""
    return (expiry_date is None, expiry_date or date.max)


@dataclass
class Batch:
    """A quantity of one item sharing a single expiry date.

    Ordering within a name is by expiry date ascending, and a batch
    without an expiry date sorts after every dated batch. Quantity is
    not part of the sort key, so changing it never requires re-sorting.
    """

    name: str
    quantity: int
    expiry_date: date | None = None

    @property
    def sort_key(self) -> tuple[bool, date]:
        return expiry_sort_key(self.expiry_date)

    def matches(self, name: str, expiry_date: date | None) -> bool:
        """True if this batch has exactly the given identity.

        A missing expiry date only matches a missing expiry date.
        """
        return self.name == name and self.expiry_date == expiry_date

    def is_expiring_before(self, cutoff: date) -> bool:
        return self.expiry_date is not None and self.expiry_date < cutoff


@dataclass(frozen=True)
class BatchRecord:
    """Flat (name, quantity, expiry_date) triple used for snapshots."""

    name: str
    quantity: int
    expiry_date: date | None = None


@dataclass(frozen=True)
class ListedBatch:
    """A batch together with its 1-based position in a listing."""

    index: int
    batch: Batch
