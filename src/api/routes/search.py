"""Listing search routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from loguru import logger
from pydantic import BaseModel, Field

from src.modules.listings import Listing
from src.search import (
    ListingSearchService,
    SearchQuery,
    get_search_service,
)
from src.search.formatter import DISPLAY_LIMIT

search_log = logger.bind(module="SearchAPI")

router = APIRouter(prefix="/search", tags=["Search"])

SearchService = Annotated[ListingSearchService, Depends(get_search_service)]


class ChatRequest(BaseModel):
    """Chat message from the advisor UI."""

    message: str = Field(min_length=1, max_length=500)


class ChatResponse(BaseModel):
    """Response text for the advisor UI."""

    success: bool = True
    message: str


class ListingItem(BaseModel):
    """Listing summary returned by the structured search endpoint."""

    listing_no: str
    name: str
    district: str
    neighborhood: str
    address: str
    building_use: str
    transaction_type: str
    price: str
    price_value: float
    area: str | None = None
    floor: str | None = None
    direction: str | None = None
    feature: str | None = None
    detail_url: str | None = None

    @classmethod
    def from_listing(cls, listing: Listing) -> "ListingItem":
        return cls(
            listing_no=listing.listing_no,
            name=listing.display_name,
            district=listing.district,
            neighborhood=listing.neighborhood_base,
            address=listing.address,
            building_use=listing.building_use,
            transaction_type=listing.transaction_type,
            price=listing.price,
            price_value=listing.price_value,
            area=listing.area,
            floor=listing.floor,
            direction=listing.direction,
            feature=listing.feature,
            detail_url=listing.detail_url,
        )


class ParsedQuery(BaseModel):
    """Structured conditions extracted from the query text."""

    keywords: list[str]
    min_price: float | None = None
    max_price: float | None = None
    building_type: str | None = None
    transaction_type: str | None = None

    @classmethod
    def from_query(cls, query: SearchQuery) -> "ParsedQuery":
        return cls(
            keywords=query.keywords,
            min_price=query.min_price,
            max_price=query.max_price,
            building_type=query.building_type,
            transaction_type=query.transaction_type,
        )


class SearchResponse(BaseModel):
    """Structured search result."""

    success: bool = True
    query: ParsedQuery
    exact: bool
    total: int = 0
    listings: list[ListingItem] = Field(default_factory=list)
    matched_keywords: list[str] = Field(default_factory=list)
    similar: list[ListingItem] = Field(default_factory=list)
    nearby: list[ListingItem] = Field(default_factory=list)
    nearby_location: str = ""


@router.post("/chat", response_model=ChatResponse)
async def chat(body: ChatRequest, service: SearchService) -> ChatResponse:
    """Answer an advisor chat message (greeting, help or search)."""
    response = await service.handle_user_query(body.message)
    return ChatResponse(message=response)


@router.get("/listings", response_model=SearchResponse)
async def search_listings(
    service: SearchService,
    q: Annotated[str, Query(min_length=1, max_length=500)],
) -> SearchResponse:
    """
    Run the listing search and return structured results.

    Responds 503 when the listing dump cannot be loaded.
    """
    outcome = await service.search(q)
    parsed = ParsedQuery.from_query(outcome.query)
    search_log.debug(f"{q!r}: exact={outcome.exact}, {len(outcome.matches)} matches")

    if outcome.fallback is None:
        return SearchResponse(
            query=parsed,
            exact=True,
            total=len(outcome.matches),
            listings=[ListingItem.from_listing(listing) for listing in outcome.matches[:DISPLAY_LIMIT]],
        )

    fallback = outcome.fallback
    return SearchResponse(
        query=parsed,
        exact=False,
        matched_keywords=fallback.matched_keywords,
        similar=[ListingItem.from_listing(listing) for listing in fallback.similar],
        nearby=[ListingItem.from_listing(listing) for listing in fallback.nearby],
        nearby_location=fallback.nearby_location,
    )
