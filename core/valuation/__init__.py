"""
Valuation Model

Listing variants and the pure pricing functions that turn them into
final prices and per-room metrics.
"""

from .models import (
    Category,
    ListingKind,
    Listing,
    PrefabListing,
)
from .pricing import (
    adjusted_price,
    apply_discount,
    average_area_per_room,
    describe,
    final_price,
    location_multiplier,
    room_price,
    same_final_price,
)

__all__ = [
    # Models
    "Category",
    "ListingKind",
    "Listing",
    "PrefabListing",
    # Pricing
    "adjusted_price",
    "apply_discount",
    "average_area_per_room",
    "describe",
    "final_price",
    "location_multiplier",
    "room_price",
    "same_final_price",
]
