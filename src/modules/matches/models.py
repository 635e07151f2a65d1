"""
Match Models.

Response models for recommended matches.
"""

from pydantic import BaseModel

from src.modules.listings import Listing


class RecommendedMatch(BaseModel):
    """Listing with its compatibility score."""

    listing: Listing
    score: int
    reasons: list[str]


class Pagination(BaseModel):
    """Pagination info of a match page."""

    page: int
    limit: int
    total: int
    pages: int


class RecommendedMatchesResponse(BaseModel):
    """Response model for recommended matches."""

    matches: list[RecommendedMatch]
    pagination: Pagination
