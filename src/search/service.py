"""
Listing Search Service.

Entry point used by the chat channels and the HTTP API: answers a
free-text message with a greeting, the usage guide, or search results.
"""

import re
from typing import Optional

from loguru import logger

from src.modules.listings import DataUnavailable, ListingStore, get_listing_store
from src.search.formatter import (
    DATA_UNAVAILABLE_MESSAGE,
    GREETING_MESSAGE,
    HELP_MESSAGE,
    format_exact_results,
    format_similar_results,
)
from src.search.matcher import strict_filter
from src.search.models import SearchOutcome
from src.search.query_parser import parse_search_query
from src.search.ranker import find_similar

search_log = logger.bind(module="Search")

GREETING_PATTERN = re.compile(r"안녕|반가|처음|시작")
HELP_PATTERN = re.compile(r"도움|사용법|어떻게")


def match_intercept(text: str) -> Optional[str]:
    """
    Return a fixed template for greeting/help messages.

    Args:
        text: Raw user message

    Returns:
        Template text, or None if the message should be searched
    """
    if not text or not text.strip():
        return HELP_MESSAGE
    if GREETING_PATTERN.search(text):
        return GREETING_MESSAGE
    if HELP_PATTERN.search(text):
        return HELP_MESSAGE
    return None


class ListingSearchService:
    """Local keyword search over the cached listing dump."""

    def __init__(self, store: ListingStore):
        """
        Initialize service.

        Args:
            store: Listing store (loaded on first search)
        """
        self._store = store

    @property
    def store(self) -> ListingStore:
        return self._store

    async def search(self, raw_query: str) -> SearchOutcome:
        """
        Run the search pipeline for one query.

        The fallback ranking only runs when the strict filter is empty.

        Args:
            raw_query: Free-text query

        Returns:
            SearchOutcome with strict matches or fallback results

        Raises:
            DataUnavailable: If listings cannot be loaded or the dump is empty
        """
        listings = await self._store.get()
        if not listings:
            raise DataUnavailable("Listing dump is empty")

        query = parse_search_query(raw_query)
        matches = strict_filter(listings, query)
        if matches:
            search_log.debug(f"{raw_query!r}: {len(matches)} exact matches")
            return SearchOutcome(query=query, matches=matches)

        search_log.debug(f"{raw_query!r}: no exact match, ranking similar listings")
        return SearchOutcome(query=query, fallback=find_similar(listings, query))

    async def search_listings(self, raw_query: str) -> str:
        """
        Search and render the response text.

        Raises:
            DataUnavailable: If listings cannot be loaded
        """
        outcome = await self.search(raw_query)
        if outcome.fallback is None:
            return format_exact_results(raw_query, outcome.query, outcome.matches)
        return format_similar_results(raw_query, outcome.query, outcome.fallback)

    async def handle_user_query(self, text: str) -> str:
        """
        Answer a user message. Never raises.

        Args:
            text: Raw user message

        Returns:
            Response text
        """
        template = match_intercept(text)
        if template is not None:
            return template

        try:
            return await self.search_listings(text)
        except DataUnavailable as e:
            search_log.warning(f"Data unavailable for {text!r}: {e}")
            return DATA_UNAVAILABLE_MESSAGE
        except Exception:
            search_log.exception(f"Search failed for {text!r}")
            return DATA_UNAVAILABLE_MESSAGE


# Singleton instance
_service: Optional[ListingSearchService] = None


def get_search_service() -> ListingSearchService:
    """Get ListingSearchService singleton."""
    global _service
    if _service is None:
        _service = ListingSearchService(get_listing_store())
    return _service
