"""
Ingestion Layer

Turns '#'-delimited listing records into Listing variants and loads
them into a ListingStore. Also provides the demonstration dataset.

Usage:
    from core.ingestion import RecordLoader
    from core.store import ListingStore

    store = ListingStore()
    result = RecordLoader().load_file("realestates.txt", store)
"""

from .records import (
    REJECTION_CODES,
    LoadResult,
    RecordLoader,
    RejectionRecord,
    parse_record,
)
from .sample import create_sample_listings, load_sample_data

__all__ = [
    # Records
    "REJECTION_CODES",
    "LoadResult",
    "RecordLoader",
    "RejectionRecord",
    "parse_record",
    # Sample data
    "create_sample_listings",
    "load_sample_data",
]
