"""
Search Models.

Structured query and result types produced by the search pipeline.
"""

from dataclasses import dataclass, field
from typing import Optional

from src.modules.listings import Listing


@dataclass
class SearchQuery:
    """
    Structured filter parsed from a free-text query.

    Attributes:
        keywords: Residual keyword tokens, in extraction order
        min_price: Minimum price in 억 (None = unbounded)
        max_price: Maximum price in 억 (None = unbounded)
        building_type: Building-use category (아파트, 오피스텔, ...)
        transaction_type: 매매, 전세 or 월세
    """
    keywords: list[str] = field(default_factory=list)
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    building_type: Optional[str] = None
    transaction_type: Optional[str] = None

    @property
    def has_price_range(self) -> bool:
        return self.min_price is not None or self.max_price is not None


@dataclass
class ScoredMatch:
    """A listing with its fallback match score and contributing keywords."""
    listing: Listing
    score: int
    matched: list[str] = field(default_factory=list)


@dataclass
class SimilarResult:
    """Fallback results when no listing matches every condition."""
    similar: list[Listing] = field(default_factory=list)
    matched_keywords: list[str] = field(default_factory=list)
    nearby: list[Listing] = field(default_factory=list)
    nearby_location: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.similar and not self.nearby


@dataclass
class SearchOutcome:
    """
    Result of running the search pipeline for one query.

    Exactly one of the branches is populated: ``matches`` when the strict
    filter found listings, otherwise ``fallback``.
    """
    query: SearchQuery
    matches: list[Listing] = field(default_factory=list)
    fallback: Optional[SimilarResult] = None

    @property
    def exact(self) -> bool:
        return self.fallback is None
