"""
Fallback ranking for queries with no exact match.

Scores partial keyword matches per listing and derives "similar" and
"nearby" result sets.
"""

from collections import Counter

from loguru import logger

from src.modules.listings import Listing
from src.search.matcher import match_conditions, sort_by_price
from src.search.models import ScoredMatch, SearchQuery, SimilarResult

ranker_log = logger.bind(module="Ranker")

# Field weights (district/neighborhood > complex name > address)
DISTRICT_EXACT = 10
DISTRICT_PARTIAL = 8
NEIGHBORHOOD_EXACT = 10
NEIGHBORHOOD_PARTIAL = 7
COMPLEX_PARTIAL = 5
ADDRESS_PARTIAL = 1

SIMILAR_LIMIT = 5
NEARBY_LIMIT = 5
LOCATION_SAMPLE = 10


def keyword_match_score(keyword: str, listing: Listing) -> int:
    """
    Score how well a keyword matches a listing.

    Args:
        keyword: Single keyword token
        listing: Listing to score

    Returns:
        Best score over the district, neighborhood, complex name and
        address checks (0 = no match)
    """
    score = 0

    if listing.district:
        if listing.district == keyword:
            score = max(score, DISTRICT_EXACT)
        elif keyword in listing.district:
            score = max(score, DISTRICT_PARTIAL)

    if listing.neighborhood:
        base = listing.neighborhood_base
        if base == keyword:
            score = max(score, NEIGHBORHOOD_EXACT)
        elif keyword in base:
            score = max(score, NEIGHBORHOOD_PARTIAL)

    if listing.complex_name and keyword in listing.complex_name:
        score = max(score, COMPLEX_PARTIAL)

    if listing.address and keyword in listing.address:
        score = max(score, ADDRESS_PARTIAL)

    return score


def score_listing(listing: Listing, keywords: list[str]) -> ScoredMatch | None:
    """
    Sum keyword scores for a listing.

    Returns:
        ScoredMatch, or None if no keyword matched
    """
    total = 0
    matched: list[str] = []
    for keyword in keywords:
        score = keyword_match_score(keyword, listing)
        if score > 0:
            total += score
            matched.append(keyword)

    if not matched:
        return None
    return ScoredMatch(listing=listing, score=total, matched=matched)


def rank_listings(listings: list[Listing], query: SearchQuery) -> list[ScoredMatch]:
    """
    Score every listing passing the non-keyword conditions.

    Returns:
        Scored matches sorted by score (desc), then price (asc)
    """
    scored = []
    for listing in listings:
        if not match_conditions(listing, query):
            continue
        match = score_listing(listing, query.keywords)
        if match:
            scored.append(match)

    scored.sort(key=lambda m: (-m.score, m.listing.price_value))
    return scored


def find_nearby_location(
    scored: list[ScoredMatch],
    listings: list[Listing],
    keywords: list[str],
) -> str:
    """
    Pick the district to search for nearby listings.

    Uses the most frequent district among the top scored matches; without
    any scored match, the district of the first listing whose district
    contains a query keyword.

    Returns:
        District name, or "" if none could be derived
    """
    district_counts: Counter[str] = Counter(
        m.listing.district for m in scored[:LOCATION_SAMPLE] if m.listing.district
    )

    if not district_counts:
        for keyword in keywords:
            found = next(
                (listing for listing in listings if listing.district and keyword in listing.district),
                None,
            )
            if found:
                district_counts[found.district] = 1
                break

    if not district_counts:
        return ""

    # most_common keeps first-seen order for ties
    return district_counts.most_common(1)[0][0]


def find_similar(listings: list[Listing], query: SearchQuery) -> SimilarResult:
    """
    Find similar and nearby listings when the strict filter found nothing.

    Args:
        listings: All listings
        query: Parsed search query

    Returns:
        SimilarResult with at most 5 similar and 5 nearby listings
    """
    scored = rank_listings(listings, query)

    similar = [m.listing for m in scored[:SIMILAR_LIMIT]]
    matched_keywords = list(scored[0].matched) if scored else []

    nearby_location = find_nearby_location(scored, listings, query.keywords)
    nearby: list[Listing] = []
    if nearby_location:
        similar_ids = {listing.listing_no for listing in similar}
        nearby = sort_by_price([
            listing
            for listing in listings
            if listing.district == nearby_location
            and listing.listing_no not in similar_ids
            and match_conditions(listing, query)
        ])[:NEARBY_LIMIT]

    ranker_log.debug(
        f"Fallback: {len(scored)} scored, {len(similar)} similar, "
        f"{len(nearby)} nearby in {nearby_location or '-'}"
    )
    return SimilarResult(
        similar=similar,
        matched_keywords=matched_keywords,
        nearby=nearby,
        nearby_location=nearby_location,
    )
