"""
Listing store.

Holds a batch of listings with set semantics and a deterministic
iteration order, so the same input always yields the same report.
"""

import logging
from typing import Iterable, Iterator, List

from core.valuation.models import Listing


logger = logging.getLogger(__name__)


class ListingStore:
    """
    Ordered set of listings.

    Uniqueness and order both follow Listing.sort_key, read at the time
    of each call. A listing discounted while stored is compared and
    sorted by its new price.
    """

    def __init__(self, listings: Iterable[Listing] = ()):
        self._listings: List[Listing] = []
        self.extend(listings)

    def add(self, listing: Listing) -> bool:
        """
        Add a listing.

        Returns:
            True if inserted, False if an equal listing was already present
        """
        key = listing.sort_key
        if any(existing.sort_key == key for existing in self._listings):
            logger.debug("Duplicate listing ignored: %s", listing.location)
            return False
        self._listings.append(listing)
        return True

    def extend(self, listings: Iterable[Listing]) -> int:
        """Add many listings, returning how many were actually inserted."""
        return sum(1 for listing in listings if self.add(listing))

    def all(self) -> List[Listing]:
        """All listings in sort-key order."""
        return sorted(self._listings, key=lambda listing: listing.sort_key)

    def is_empty(self) -> bool:
        return not self._listings

    def clear(self) -> None:
        self._listings.clear()

    def __len__(self) -> int:
        return len(self._listings)

    def __iter__(self) -> Iterator[Listing]:
        return iter(self.all())
