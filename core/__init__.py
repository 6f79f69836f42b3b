"""
Real Estate Agent - Core Business Logic

This module provides the valuation and analytics pipeline:
1. Ingestion ('#'-delimited records -> Listing variants)
2. Collection (ListingStore: ordered, duplicate-free)
3. Valuation (location and prefab adjustments, per-room metrics)
4. Analytics (the five report facts)
"""

from .errors import (
    RealEstateError,
    InputNotFoundError,
    InputReadError,
    MalformedRecordError,
    UnknownRecordTypeError,
    InvalidDiscountError,
    OutputWriteError,
)

# Valuation Model
from .valuation import (
    Category,
    ListingKind,
    Listing,
    PrefabListing,
    adjusted_price,
    apply_discount,
    average_area_per_room,
    describe,
    final_price,
    location_multiplier,
    room_price,
    same_final_price,
)

# Collection Store
from .store import ListingStore

# Analytics Engine
from .analytics import (
    AnalyticsEngine,
    AnalyticsReport,
    PricedListing,
    EMPTY_COLLECTION_MESSAGE,
)

# Ingestion Layer
from .ingestion import (
    LoadResult,
    RecordLoader,
    RejectionRecord,
    parse_record,
    load_sample_data,
)

__all__ = [
    # Errors
    "RealEstateError",
    "InputNotFoundError",
    "InputReadError",
    "MalformedRecordError",
    "UnknownRecordTypeError",
    "InvalidDiscountError",
    "OutputWriteError",
    # Valuation Model
    "Category",
    "ListingKind",
    "Listing",
    "PrefabListing",
    "adjusted_price",
    "apply_discount",
    "average_area_per_room",
    "describe",
    "final_price",
    "location_multiplier",
    "room_price",
    "same_final_price",
    # Collection Store
    "ListingStore",
    # Analytics Engine
    "AnalyticsEngine",
    "AnalyticsReport",
    "PricedListing",
    "EMPTY_COLLECTION_MESSAGE",
    # Ingestion Layer
    "LoadResult",
    "RecordLoader",
    "RejectionRecord",
    "parse_record",
    "load_sample_data",
]
