"""
Tests for the Listing Store

Tests verifying:
- Duplicate listings are stored once
- Iteration order is deterministic and independent of insertion order
- Standard and prefab variants with the same base attributes stay distinct
- Listings discounted while stored are matched and ordered by their new price
"""

import pytest
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.store import ListingStore
from core.valuation import Category, Listing, PrefabListing, apply_discount


@pytest.fixture
def store():
    """Fresh store per test."""
    return ListingStore()


class TestUniqueness:
    """Tests for set semantics."""

    def test_identical_listings_stored_once(self, store):
        assert store.add(Listing("Budapest", 250000, 100, 4, Category.FLAT)) is True
        assert store.add(Listing("Budapest", 250000, 100, 4, Category.FLAT)) is False

        assert len(store) == 1

    def test_numeric_representation_does_not_matter(self, store):
        store.add(Listing("Budapest", 250000, 100, 4, Category.FLAT))
        store.add(Listing("Budapest", "250000.00", 100.0, 4, Category.FLAT))

        assert len(store) == 1

    def test_variants_with_same_base_attributes_are_distinct(self, store):
        store.add(Listing("Debrecen", 120000, 35, 2, Category.FLAT))
        store.add(PrefabListing("Debrecen", 120000, 35, 2, Category.FLAT, 0, True))

        assert len(store) == 2

    def test_prefabs_differing_only_by_floor_are_distinct(self, store):
        store.add(PrefabListing("Debrecen", 120000, 35, 2, Category.FLAT, 0, True))
        store.add(PrefabListing("Debrecen", 120000, 35, 2, Category.FLAT, 1, True))

        assert len(store) == 2

    def test_extend_counts_inserted(self, store):
        listing = Listing("Szeged", 90000, 40, 1, Category.FLAT)

        added = store.extend([listing, Listing("Szeged", 90000, 40, 1, Category.FLAT)])

        assert added == 1

    def test_discounted_listing_matches_its_new_price(self, store):
        discounted = Listing("Szeged", 100000, 40, 1, Category.FLAT)
        store.add(discounted)

        apply_discount(discounted, 10)

        assert store.add(Listing("Szeged", 90000, 40, 1, Category.FLAT)) is False
        assert len(store) == 1


class TestOrdering:
    """Tests for deterministic iteration order."""

    def test_sorted_by_location_then_price(self, store):
        store.add(Listing("Szeged", 90000, 40, 1, Category.FLAT))
        store.add(Listing("Budapest", 300000, 90, 3, Category.FLAT))
        store.add(Listing("Budapest", 200000, 90, 3, Category.FLAT))

        locations_and_prices = [(l.location, int(l.base_price)) for l in store.all()]

        assert locations_and_prices == [
            ("Budapest", 200000),
            ("Budapest", 300000),
            ("Szeged", 90000),
        ]

    def test_order_follows_discounted_price(self, store):
        pricier = Listing("Budapest", 300000, 90, 3, Category.FLAT)
        store.add(Listing("Budapest", 200000, 90, 3, Category.FLAT))
        store.add(pricier)

        apply_discount(pricier, 50)

        assert store.all()[0] is pricier

    def test_order_independent_of_insertion(self):
        listings = [
            Listing("Szeged", 90000, 40, 1, Category.FLAT),
            Listing("Budapest", 250000, 100, 4, Category.FAMILY_HOUSE),
            PrefabListing("Debrecen", 120000, 35, 2, Category.FLAT, 0, True),
            Listing("Budapest", 250000, 100, 4, Category.FARM),
        ]

        forward = ListingStore(listings).all()
        backward = ListingStore(reversed(listings)).all()

        assert forward == backward

    def test_iteration_matches_all(self, store):
        store.extend([
            Listing("Szeged", 90000, 40, 1, Category.FLAT),
            Listing("Budapest", 250000, 100, 4, Category.FLAT),
        ])

        assert list(store) == store.all()


class TestEmptiness:
    """Tests for empty and cleared stores."""

    def test_new_store_is_empty(self, store):
        assert store.is_empty()
        assert store.all() == []

    def test_clear(self, store):
        store.add(Listing("Szeged", 90000, 40, 1, Category.FLAT))

        store.clear()

        assert store.is_empty()
        assert len(store) == 0
