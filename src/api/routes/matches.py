"""Recommended matches routes."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query

from config.settings import get_settings
from src.api.dependencies import CurrentUserId, MatchServiceDep
from src.modules.matches import PreferencesNotSetError, RecommendedMatchesResponse

router = APIRouter(prefix="/matches", tags=["Matches"])

_settings = get_settings().matching


@router.get("/recommended", response_model=RecommendedMatchesResponse)
async def recommended_matches(
    user_id: CurrentUserId,
    service: MatchServiceDep,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=_settings.max_page_size)] = _settings.default_page_size,
) -> RecommendedMatchesResponse:
    """
    Get personalized listing recommendations.

    Listings failing the user's hard constraints are excluded; the rest
    are ranked by compatibility score.

    Args:
        page: 1-based page number
        limit: Page size
    """
    try:
        return await service.recommend(user_id, page=page, limit=limit)
    except PreferencesNotSetError:
        raise HTTPException(status_code=400, detail="Please complete your preferences first")
