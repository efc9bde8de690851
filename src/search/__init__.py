"""
Search module for local listing search.

This module parses free-text queries, filters and ranks listings, and
renders the response text.
"""

from src.search.formatter import (
    DATA_UNAVAILABLE_MESSAGE,
    GREETING_MESSAGE,
    HELP_MESSAGE,
    format_conditions,
    format_exact_results,
    format_listing,
    format_similar_results,
)
from src.search.matcher import (
    keyword_matches_listing,
    match_conditions,
    match_listing,
    match_price,
    strict_filter,
)
from src.search.models import ScoredMatch, SearchOutcome, SearchQuery, SimilarResult
from src.search.query_parser import parse_search_query
from src.search.ranker import find_similar, keyword_match_score, rank_listings
from src.search.service import (
    ListingSearchService,
    get_search_service,
    match_intercept,
)

__all__ = [
    # Models
    "SearchQuery",
    "ScoredMatch",
    "SimilarResult",
    "SearchOutcome",
    # Parsing
    "parse_search_query",
    # Matching
    "keyword_matches_listing",
    "match_price",
    "match_conditions",
    "match_listing",
    "strict_filter",
    # Ranking
    "keyword_match_score",
    "rank_listings",
    "find_similar",
    # Formatting
    "GREETING_MESSAGE",
    "HELP_MESSAGE",
    "DATA_UNAVAILABLE_MESSAGE",
    "format_conditions",
    "format_listing",
    "format_exact_results",
    "format_similar_results",
    # Service
    "ListingSearchService",
    "get_search_service",
    "match_intercept",
]
