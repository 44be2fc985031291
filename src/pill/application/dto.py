"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from pill.domain.model.batch import ListedBatch


@dataclass(frozen=True)
class BatchLineDTO:
    """Output: one numbered batch as displayed to the user."""

    index: int
    name: str
    quantity: int
    expiry_date: str | None  # ISO formatted, None when the batch never expires


@dataclass(frozen=True)
class ExpiryReportDTO:
    """Output: batches expiring before a cutoff date."""

    cutoff: str
    already_expired: bool  # cutoff is today, so the batches have expired
    lines: list[BatchLineDTO]


@dataclass(frozen=True)
class TransactionDTO:
    """Output: a single transaction log entry."""

    timestamp: str
    kind: str
    description: str


def to_lines(entries: list[ListedBatch]) -> list[BatchLineDTO]:
    return [
        BatchLineDTO(
            index=entry.index,
            name=entry.batch.name,
            quantity=entry.batch.quantity,
            expiry_date=(
                entry.batch.expiry_date.isoformat()
                if entry.batch.expiry_date is not None
                else None
            ),
        )
        for entry in entries
    ]
