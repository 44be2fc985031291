"""Transaction records emitted by the inventory store on every mutation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum


class TransactionKind(Enum):
    ADD = "ADD"
    DELETE = "DELETE"
    EDIT = "EDIT"
    USE = "USE"


@dataclass(frozen=True)
class Transaction:
    """An audit record describing one successful mutation.

    ``quantity`` is the amount added or used for ADD / USE, the new
    absolute value for EDIT, and the quantity removed for DELETE.
    """

    kind: TransactionKind
    item_name: str
    quantity: int
    expiry_date: date | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def describe(self) -> str:
        verb = {
            TransactionKind.ADD: "added",
            TransactionKind.DELETE: "deleted",
            TransactionKind.EDIT: "set to",
            TransactionKind.USE: "used",
        }[self.kind]
        if self.kind == TransactionKind.EDIT:
            text = f"{self.item_name} {verb} {self.quantity}"
        else:
            text = f"{verb} {self.quantity} of {self.item_name}"
        if self.expiry_date is not None:
            text += f" (expiring {self.expiry_date.isoformat()})"
        return text
