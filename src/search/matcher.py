"""
Listing matching logic.

This module provides functions to match listings against a parsed
SearchQuery: per-field keyword tests, the non-keyword condition filter,
and the strict AND filter used before any fallback ranking.
"""

from loguru import logger

from src.modules.listings import Listing
from src.search.models import SearchQuery

matcher_log = logger.bind(module="Matcher")


def keyword_matches_listing(keyword: str, listing: Listing) -> bool:
    """
    Check if a keyword appears in a listing's district, neighborhood or complex name.

    The free-text address is not consulted: street names such as "역삼로"
    would otherwise match the neighborhood keyword "역삼".

    Args:
        keyword: Single keyword token
        listing: Listing to test

    Returns:
        True if the keyword is contained in any of the three fields
    """
    if listing.district and keyword in listing.district:
        return True

    # "역삼동_남동" -> "역삼동"
    if listing.neighborhood and keyword in listing.neighborhood_base:
        return True

    if listing.complex_name and keyword in listing.complex_name:
        return True

    return False


def match_price(
    price: float,
    min_price: float | None,
    max_price: float | None,
) -> bool:
    """
    Match a parsed price against a price range.

    Args:
        price: Listing price in 억 (0 = unknown)
        min_price: Minimum price (inclusive), None = no limit
        max_price: Maximum price (inclusive), None = no limit

    Returns:
        True if price is in range or unknown
    """
    if price <= 0:
        return True  # Unknown price, don't filter

    if min_price is not None and price < min_price:
        return False
    if max_price is not None and price > max_price:
        return False
    return True


def match_conditions(listing: Listing, query: SearchQuery) -> bool:
    """
    Check the non-keyword conditions (price, building type, transaction type).

    Args:
        listing: Listing to test
        query: Parsed search query

    Returns:
        True if listing satisfies every condition present in the query
    """
    if query.has_price_range:
        if not match_price(listing.price_value, query.min_price, query.max_price):
            return False

    if query.building_type and query.building_type not in listing.building_use:
        return False

    if query.transaction_type and query.transaction_type not in listing.transaction_type:
        return False

    return True


def match_listing(listing: Listing, query: SearchQuery) -> bool:
    """
    Check if a listing satisfies every keyword and every condition.

    Args:
        listing: Listing to test
        query: Parsed search query

    Returns:
        True if listing matches all criteria
    """
    if query.keywords:
        if not all(keyword_matches_listing(k, listing) for k in query.keywords):
            return False

    return match_conditions(listing, query)


def sort_by_price(listings: list[Listing]) -> list[Listing]:
    """Sort listings ascending by parsed price."""
    return sorted(listings, key=lambda listing: listing.price_value)


def strict_filter(listings: list[Listing], query: SearchQuery) -> list[Listing]:
    """
    Filter listings that match every keyword and condition.

    Args:
        listings: All listings
        query: Parsed search query

    Returns:
        Matching listings sorted ascending by price
    """
    matched = [listing for listing in listings if match_listing(listing, query)]
    matcher_log.debug(f"Strict filter: {len(matched)}/{len(listings)} matched")
    return sort_by_price(matched)
