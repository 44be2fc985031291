"""Deliver buffered transactions to the log once the store is saved.

Mutating handlers collect the store's transactions in a list while the
operation runs and hand them over here only after the repository save
succeeded, so the log never describes a change that was not persisted.
"""

from __future__ import annotations

import logging

from pill.domain.model.transaction import Transaction
from pill.domain.repository.transaction_log import TransactionLog

logger = logging.getLogger(__name__)


def record_all(transaction_log: TransactionLog, transactions: list[Transaction]) -> None:
    """Record each transaction; a log failure never undoes the saved change."""
    for transaction in transactions:
        try:
            transaction_log.record(transaction)
        except Exception:
            logger.exception("Failed to record transaction: %s", transaction.describe())
