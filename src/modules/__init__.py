"""Modules package - Domain modules with repository pattern."""

from src.modules.listings import (
    DataUnavailable,
    Listing,
    ListingStore,
    get_listing_store,
)

__all__ = [
    # Listings
    "Listing",
    "ListingStore",
    "DataUnavailable",
    "get_listing_store",
]
