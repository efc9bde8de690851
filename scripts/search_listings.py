#!/usr/bin/env python3
"""
Run a listing search against a local JSON dump.

Usage:
    uv run python scripts/search_listings.py "강남구 10억대 아파트"
    uv run python scripts/search_listings.py "마포구 전세 5억 이하" --data data/listings.json
    uv run python scripts/search_listings.py "래미안 전세" "안녕"
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.modules.listings import FileListingSource, ListingStore
from src.search import ListingSearchService, parse_search_query


async def main(queries: list[str], data_path: str, show_query: bool):
    """Answer each query with the search service."""
    service = ListingSearchService(ListingStore(FileListingSource(data_path)))

    for query in queries:
        print(f"\n{'=' * 60}")
        print(f"Query: {query}")
        if show_query:
            print(f"Parsed: {parse_search_query(query)}")
        print(f"{'=' * 60}\n")

        print(await service.handle_user_query(query))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Search listings from a local JSON dump")
    parser.add_argument("queries", nargs="+", help="Free-text queries")
    parser.add_argument(
        "--data",
        default="data/listings.json",
        help="Path to listing JSON dump (default: data/listings.json)",
    )
    parser.add_argument(
        "--show-query",
        action="store_true",
        help="Print the parsed query before the response",
    )
    args = parser.parse_args()

    asyncio.run(main(args.queries, args.data, args.show_query))
