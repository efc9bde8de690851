"""Health check routes."""

from fastapi import APIRouter

from src.modules.listings import get_listing_store

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health() -> dict:
    """Health check endpoint (reports whether listings are cached)."""
    return {"status": True, "listings_loaded": get_listing_store().is_loaded}
