"""Seeker preferences routes."""

from fastapi import APIRouter
from loguru import logger
from redis.exceptions import RedisError

from src.api.dependencies import CurrentUserId, MatchCache, PreferencesRepo
from src.modules.preferences import PreferencesResponse, PreferencesUpdate

prefs_log = logger.bind(module="Preferences")

router = APIRouter(prefix="/preferences", tags=["Preferences"])


@router.get("/me", response_model=PreferencesResponse)
async def get_my_preferences(
    user_id: CurrentUserId,
    repo: PreferencesRepo,
) -> PreferencesResponse:
    """
    Get current user's preferences.

    Returns empty objects if the user has not set any.
    """
    record = await repo.get_by_user(user_id)
    return PreferencesResponse.from_record(record)


@router.put("/me", response_model=PreferencesResponse)
async def update_my_preferences(
    data: PreferencesUpdate,
    user_id: CurrentUserId,
    repo: PreferencesRepo,
    cache: MatchCache,
) -> PreferencesResponse:
    """
    Replace current user's preferences.

    Cached match scores of the user are dropped.

    Args:
        data: New hard constraints and compatibility preferences
    """
    stored = data.to_record()
    record = await repo.upsert(
        user_id,
        hard_constraints=stored["hard_constraints"],
        compatibility=stored["compatibility"],
    )
    prefs_log.info(f"Updated preferences for user {user_id}")

    if cache:
        try:
            await cache.clear_matches(user_id)
        except RedisError as e:
            prefs_log.warning(f"Failed to clear match cache for {user_id}: {e}")

    return PreferencesResponse.from_record(record)
