"""Health check routes."""

from fastapi import APIRouter

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health() -> dict:
    """Health check endpoint (no database or cache access)."""
    return {"status": True, "service": "room-match"}
