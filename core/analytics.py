"""
Analytics Engine

Computes the five report facts over a listing store:
1. Average unit price (mean base price)
2. Cheapest listing by final price
3. Most expensive listing in the target city, with its area per room
4. Total valuation (sum of final prices)
5. Affordable flats (final price at or below the mean final price)
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Tuple

from core.store import ListingStore
from core.valuation.models import Category, Listing
from core.valuation.pricing import (
    average_area_per_room,
    final_price,
    normalise_location,
)


logger = logging.getLogger(__name__)


DEFAULT_TARGET_CITY = "Budapest"

EMPTY_COLLECTION_MESSAGE = "No properties loaded. Cannot display results."


@dataclass(frozen=True)
class PricedListing:
    """A listing paired with the final price computed for this run."""
    listing: Listing
    final_price: int


@dataclass(frozen=True)
class AnalyticsReport:
    """
    The five facts of one analytics run.

    Immutable; computed once by AnalyticsEngine.run.
    """
    listing_count: int

    # 1. Mean of base prices
    average_base_price: Decimal

    # 2. Cheapest by final price (None only for an empty collection)
    cheapest: Optional[PricedListing]

    # 3. Most expensive in the target city
    target_city: str
    target_city_top: Optional[PricedListing]
    target_city_area_per_room: Optional[Decimal]

    # 4. Sum of final prices
    total_valuation: int

    # 5. Flats at or below the mean final price
    average_final_price: Decimal
    affordable_flats: Tuple[PricedListing, ...]


class AnalyticsEngine:
    """
    Aggregates, ranks and filters the listings of a store.

    Final prices are computed once per listing per run and shared by
    every fact, so the facts are mutually consistent.
    """

    def __init__(self, target_city: str = DEFAULT_TARGET_CITY):
        """
        Initialize analytics engine.

        Args:
            target_city: City for the most-expensive-listing fact
        """
        self._target_city = target_city

    @property
    def target_city(self) -> str:
        return self._target_city

    def run(self, store: ListingStore) -> Optional[AnalyticsReport]:
        """
        Compute all report facts.

        Args:
            store: Listings to analyse

        Returns:
            AnalyticsReport, or None if the store is empty
        """
        if store.is_empty():
            logger.info(EMPTY_COLLECTION_MESSAGE)
            return None

        priced = [PricedListing(listing, final_price(listing)) for listing in store.all()]

        average_final = self._average_final_price(priced)
        target_top = self._most_expensive_in_city(priced)

        report = AnalyticsReport(
            listing_count=len(priced),
            average_base_price=self._average_base_price(priced),
            cheapest=self._cheapest(priced),
            target_city=self._target_city,
            target_city_top=target_top,
            target_city_area_per_room=(
                average_area_per_room(target_top.listing) if target_top else None
            ),
            total_valuation=self._total_valuation(priced),
            average_final_price=average_final,
            affordable_flats=self._affordable_flats(priced, average_final),
        )

        logger.info(
            "Analysed %d listings: total valuation %d, %d affordable flats",
            report.listing_count,
            report.total_valuation,
            len(report.affordable_flats),
        )
        return report

    def _average_base_price(self, priced: List[PricedListing]) -> Decimal:
        """Mean of raw base prices (not final prices)."""
        total = sum((p.listing.base_price for p in priced), Decimal("0"))
        return total / len(priced)

    def _cheapest(self, priced: List[PricedListing]) -> Optional[PricedListing]:
        """Minimum final price; first in iteration order wins ties."""
        return min(priced, key=lambda p: p.final_price, default=None)

    def _most_expensive_in_city(
        self,
        priced: List[PricedListing],
    ) -> Optional[PricedListing]:
        """Maximum final price among target-city listings; first wins ties."""
        target = normalise_location(self._target_city)
        in_city = [
            p for p in priced
            if normalise_location(p.listing.location) == target
        ]
        if not in_city:
            return None
        return max(in_city, key=lambda p: p.final_price)

    def _total_valuation(self, priced: List[PricedListing]) -> int:
        return sum(p.final_price for p in priced)

    def _average_final_price(self, priced: List[PricedListing]) -> Decimal:
        return Decimal(self._total_valuation(priced)) / len(priced)

    def _affordable_flats(
        self,
        priced: List[PricedListing],
        average_final: Decimal,
    ) -> Tuple[PricedListing, ...]:
        return tuple(
            p for p in priced
            if p.listing.category is Category.FLAT and p.final_price <= average_final
        )
