"""
Listing Repository Module.

Loads the listing dump from a static resource and memoizes it for the
lifetime of the process.
"""

import asyncio
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

import requests
from loguru import logger
from pydantic import ValidationError

from config.settings import get_settings
from src.modules.listings.models import Listing

store_log = logger.bind(module="ListingStore")


class DataUnavailable(Exception):
    """Raised when the listing dump cannot be fetched or parsed."""


def parse_listings(data: Any) -> list[Listing]:
    """
    Validate a decoded JSON document into listings.

    Records that fail validation are skipped; the rest are kept.

    Args:
        data: Decoded JSON (expected: array of listing records)

    Returns:
        List of valid Listing records

    Raises:
        DataUnavailable: If the document is not an array
    """
    if not isinstance(data, list):
        raise DataUnavailable(f"Listing data must be an array, got {type(data).__name__}")

    listings: list[Listing] = []
    skipped = 0
    for record in data:
        try:
            listings.append(Listing.model_validate(record))
        except ValidationError as e:
            skipped += 1
            store_log.debug(f"Skipping invalid listing record: {e.error_count()} errors")

    if skipped:
        store_log.warning(f"Skipped {skipped:,} of {len(data):,} invalid listing records")
    return listings


class ListingSource(ABC):
    """Base class for listing data sources."""

    @abstractmethod
    async def load(self) -> list[Listing]:
        """
        Load all listings.

        Returns:
            List of Listing

        Raises:
            DataUnavailable: On transport or parse failure
        """
        pass


class FileListingSource(ListingSource):
    """Listing source backed by a local JSON file."""

    def __init__(self, path: str | Path):
        """
        Initialize file source.

        Args:
            path: Path to the JSON listing dump
        """
        self._path = Path(path)

    async def load(self) -> list[Listing]:
        """Read and parse the JSON file."""
        try:
            text = await asyncio.to_thread(self._path.read_text, encoding="utf-8")
            data = json.loads(text)
        except (OSError, json.JSONDecodeError) as e:
            raise DataUnavailable(f"Failed to read {self._path}: {e}") from e

        return parse_listings(data)

    def __repr__(self) -> str:
        return f"FileListingSource({str(self._path)!r})"


class HttpListingSource(ListingSource):
    """Listing source fetched over HTTP."""

    DEFAULT_HEADERS = {
        "Accept": "application/json",
        "Accept-Language": "ko-KR,ko;q=0.9,en;q=0.8",
    }

    def __init__(self, url: str, timeout: float = 10.0):
        """
        Initialize HTTP source.

        Args:
            url: URL of the JSON listing dump
            timeout: Request timeout in seconds
        """
        self._url = url
        self._timeout = timeout

    def _fetch(self) -> Any:
        """Fetch and decode the document (blocking)."""
        resp = requests.get(self._url, headers=self.DEFAULT_HEADERS, timeout=self._timeout)
        resp.raise_for_status()
        return resp.json()

    async def load(self) -> list[Listing]:
        """Fetch and parse the JSON document."""
        try:
            data = await asyncio.to_thread(self._fetch)
        except (requests.RequestException, ValueError) as e:
            raise DataUnavailable(f"Failed to fetch {self._url}: {e}") from e

        return parse_listings(data)

    def __repr__(self) -> str:
        return f"HttpListingSource({self._url!r})"


class ListingStore:
    """
    Init-once listing cache.

    The collection is loaded on first use and reused afterwards. A failed
    load leaves the cache empty, so the next call retries the fetch.
    """

    def __init__(self, source: ListingSource):
        """
        Initialize store.

        Args:
            source: Where listings are loaded from
        """
        self._source = source
        self._listings: Optional[list[Listing]] = None

    @property
    def is_loaded(self) -> bool:
        """Whether the collection has been loaded."""
        return self._listings is not None

    async def get(self) -> list[Listing]:
        """
        Get all listings, loading them on first use.

        Returns:
            Cached list of Listing

        Raises:
            DataUnavailable: If loading fails (cache stays unset)
        """
        if self._listings is not None:
            return self._listings

        try:
            listings = await self._source.load()
        except DataUnavailable as e:
            store_log.error(f"Listing load failed from {self._source!r}: {e}")
            raise

        self._listings = listings
        store_log.info(f"Loaded {len(listings):,} listings from {self._source!r}")
        return listings

    def clear(self) -> None:
        """Drop the cached collection (next get() reloads)."""
        self._listings = None


# Singleton instance
_store: Optional[ListingStore] = None


def build_source() -> ListingSource:
    """Build the listing source from settings."""
    settings = get_settings().listings
    if settings.use_http:
        return HttpListingSource(settings.source_url, timeout=settings.timeout)
    return FileListingSource(settings.source_path)


def get_listing_store() -> ListingStore:
    """Get ListingStore singleton."""
    global _store
    if _store is None:
        _store = ListingStore(build_source())
    return _store
