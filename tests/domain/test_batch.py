"""Unit tests for the Batch value type."""

from datetime import date

from pill.domain.model.batch import Batch, expiry_sort_key


class TestBatchIdentity:

    def test_matches_same_name_and_expiry(self):
        b = Batch("Bandage", 5, date(2025, 1, 1))
        assert b.matches("Bandage", date(2025, 1, 1))

    def test_missing_expiry_only_matches_missing(self):
        dated = Batch("Bandage", 5, date(2025, 1, 1))
        undated = Batch("Bandage", 5)
        assert not dated.matches("Bandage", None)
        assert not undated.matches("Bandage", date(2025, 1, 1))
        assert undated.matches("Bandage", None)

    def test_equality_includes_quantity(self):
        assert Batch("Bandage", 5) == Batch("Bandage", 5)
        assert Batch("Bandage", 5) != Batch("Bandage", 6)


class TestBatchOrdering:

    def test_earlier_expiry_sorts_first(self):
        early = Batch("Syringe", 1, date(2024, 6, 1))
        late = Batch("Syringe", 1, date(2025, 6, 1))
        assert early.sort_key < late.sort_key

    def test_undated_sorts_after_every_dated_batch(self):
        undated = Batch("Syringe", 1)
        far_future = Batch("Syringe", 1, date.max)
        assert far_future.sort_key < undated.sort_key

    def test_sort_key_is_the_shared_expiry_key(self):
        assert Batch("Syringe", 1).sort_key == expiry_sort_key(None)
        assert Batch("Syringe", 1, date(2025, 1, 1)).sort_key == expiry_sort_key(
            date(2025, 1, 1)
        )


class TestBatchExpiry:

    def test_expiring_before_is_strict(self):
        b = Batch("Gauze", 3, date(2025, 3, 10))
        assert b.is_expiring_before(date(2025, 3, 11))
        assert not b.is_expiring_before(date(2025, 3, 10))

    def test_undated_never_expires(self):
        assert not Batch("Gauze", 3).is_expiring_before(date.max)
