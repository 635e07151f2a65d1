"""
Match result models.

Value objects produced by the scorer and the ranking step.
"""

from pydantic import BaseModel, ConfigDict, Field


class MatchResult(BaseModel):
    """Compatibility score of one listing for one seeker."""

    model_config = ConfigDict(frozen=True)

    listing_id: str
    score: int = Field(..., ge=0, le=100)
    reasons: list[str] = Field(default_factory=list, max_length=3)


class MatchPage(BaseModel):
    """One page of ranked match results."""

    matches: list[MatchResult]
    page: int
    limit: int
    total: int
    pages: int
