"""
Sample listings for demonstration runs.

Used when no input file is available and sample data is enabled.
"""

import logging
from typing import List

from core.store import ListingStore
from core.valuation.models import Category, Listing, PrefabListing


logger = logging.getLogger(__name__)


def create_sample_listings() -> List[Listing]:
    """Create the fixed demonstration dataset (fresh objects every call)."""
    return [
        Listing("Budapest", 250000, 100, 4, Category.FLAT),
        Listing("Debrecen", 220000, 120, 5, Category.FAMILY_HOUSE),
        Listing("Nyíregyháza", 110000, 60, 2, Category.FARM),
        Listing("Nyíregyháza", 250000, 160, 6, Category.FAMILY_HOUSE),
        Listing("Kisvárda", 150000, 50, 2, Category.FLAT),
        PrefabListing("Nyíregyháza", 150000, 68, 4, Category.FLAT, 4, True),
        PrefabListing("Budapest", 180000, 70, 3, Category.FLAT, 4, False),
        PrefabListing("Debrecen", 120000, 35, 2, Category.FLAT, 0, True),
        PrefabListing("Tiszaújváros", 120000, 750, 3, Category.FLAT, 10, False),
        PrefabListing("Nyíregyháza", 170000, 80, 3, Category.FLAT, 7, False),
    ]


def load_sample_data(store: ListingStore) -> int:
    """
    Add the sample listings to a store.

    Returns:
        Number of listings inserted
    """
    added = store.extend(create_sample_listings())
    logger.info("Sample data loaded: %d properties.", added)
    return added
