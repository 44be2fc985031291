"""Unit tests for the read-only InventoryStore queries."""

from datetime import date

import pytest

from pill.domain.exceptions import ValidationError
from pill.domain.model.batch import Batch
from pill.domain.model.inventory import INVENTORY_EMPTY, InventoryEmpty, InventoryStore


def _store(*entries):
    store = InventoryStore()
    for entry in entries:
        store.add(*entry)
    return store


class TestListBatches:

    def test_empty_store_returns_marker(self):
        listing = InventoryStore().list_batches()
        assert listing is INVENTORY_EMPTY
        assert isinstance(listing, InventoryEmpty)
        assert listing.message == "The inventory is empty."

    def test_lists_in_insertion_order(self):
        listing = _store(("Bandage", 20), ("Syringe", 10)).list_batches()
        assert [(e.index, e.batch.name, e.batch.quantity) for e in listing] == [
            (1, "Bandage", 20),
            (2, "Syringe", 10),
        ]

    def test_batches_of_one_name_listed_by_expiry(self):
        store = _store(
            ("Bandage", 1),
            ("Syringe", 2, date(2025, 1, 1)),
            ("Bandage", 3, date(2025, 5, 1)),
            ("Bandage", 4, date(2025, 2, 1)),
        )
        listing = store.list_batches()
        assert [(e.batch.name, e.batch.quantity) for e in listing] == [
            ("Bandage", 4),
            ("Bandage", 3),
            ("Bandage", 1),
            ("Syringe", 2),
        ]
        assert [e.index for e in listing] == [1, 2, 3, 4]


class TestFind:

    def test_case_insensitive_substring(self):
        store = _store(("Bandage", 20), ("Syringe", 10), ("Band-aid", 5))
        found = store.find("band")
        assert found.names() == ["Bandage", "Band-aid"]
        assert found.lookup("Bandage") == [Batch("Bandage", 20)]
        assert found.lookup("Band-aid") == [Batch("Band-aid", 5)]
        assert found.lookup("Syringe") == []

    def test_copies_every_batch_of_a_match(self):
        store = _store(("Gauze", 1, date(2025, 1, 1)), ("Gauze", 2))
        assert store.find("GAUZE").size() == 2

    def test_result_is_independent_copy(self):
        store = _store(("Bandage", 20))
        found = store.find("band")
        found.edit("Bandage", 1)
        assert store.lookup("Bandage") == [Batch("Bandage", 20)]

    def test_no_match_lists_as_empty_inventory(self):
        found = _store(("Bandage", 20)).find("abc")
        assert found.list_batches() is INVENTORY_EMPTY

    def test_blank_keyword_finds_nothing(self):
        assert _store(("Bandage", 20)).find("  ").is_empty()


class TestExpiringBefore:

    def test_only_strictly_earlier_dated_batches(self):
        cutoff = date(2025, 6, 1)
        store = _store(
            ("Gauze", 1, date(2025, 5, 31)),
            ("Gauze", 2, date(2025, 6, 1)),
            ("Gauze", 3, date(2025, 6, 2)),
            ("Gauze", 4),
            ("Syringe", 5, date(2024, 1, 1)),
        )
        expiring = store.expiring_before(cutoff)
        assert list(expiring) == [
            Batch("Gauze", 1, date(2025, 5, 31)),
            Batch("Syringe", 5, date(2024, 1, 1)),
        ]
        assert all(b.expiry_date < cutoff for b in expiring)

    def test_undated_batches_never_included(self):
        assert _store(("Gauze", 4)).expiring_before(date.max).is_empty()

    def test_result_does_not_share_batches(self):
        store = _store(("Gauze", 1, date(2025, 1, 1)))
        expiring = store.expiring_before(date(2026, 1, 1))
        expiring.edit("Gauze", 50, date(2025, 1, 1))
        assert store.lookup("Gauze")[0].quantity == 1


class TestToRestock:

    def test_threshold_is_inclusive(self):
        store = _store(("Bandage", 20), ("Syringe", 10), ("Gauze", 15))
        low = store.to_restock(15)
        assert [(e.index, e.batch.name) for e in low] == [(1, "Syringe"), (2, "Gauze")]

    def test_returns_only_low_stock(self):
        low = _store(("Bandage", 20), ("Syringe", 10)).to_restock(15)
        assert [e.batch for e in low] == [Batch("Syringe", 10)]

    def test_flattens_across_names_in_list_order(self):
        store = _store(
            ("Bandage", 2, date(2025, 2, 1)),
            ("Syringe", 1),
            ("Bandage", 3, date(2025, 1, 1)),
        )
        low = store.to_restock(5)
        assert [(e.batch.name, e.batch.quantity) for e in low] == [
            ("Bandage", 3),
            ("Bandage", 2),
            ("Syringe", 1),
        ]

    def test_nothing_low_is_plain_empty_list(self):
        assert _store(("Bandage", 20)).to_restock(0) == []

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _store(("Bandage", 20)).to_restock(-1)


class TestLookup:

    def test_unknown_name_returns_empty_list(self):
        assert InventoryStore().lookup("Ghost") == []

    def test_name_is_stripped_like_mutations(self):
        store = _store((" Bandage ", 3))
        assert store.lookup(" Bandage ") == [Batch("Bandage", 3)]
        assert store.lookup("Bandage") == [Batch("Bandage", 3)]

    def test_blank_name_returns_empty_list(self):
        assert _store(("Bandage", 3)).lookup("") == []
