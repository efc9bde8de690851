"""Listings module."""

from src.modules.listings.models import Listing
from src.modules.listings.repository import (
    DataUnavailable,
    FileListingSource,
    HttpListingSource,
    ListingSource,
    ListingStore,
    get_listing_store,
    parse_listings,
)

__all__ = [
    "Listing",
    "DataUnavailable",
    "ListingSource",
    "FileListingSource",
    "HttpListingSource",
    "ListingStore",
    "get_listing_store",
    "parse_listings",
]
