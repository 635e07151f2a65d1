"""
API Dependencies.

Shared dependencies for API routes (caller identity, repositories, services).
"""

from typing import Annotated, Optional

import jwt
from fastapi import Depends, HTTPException, Header
from loguru import logger
from redis.exceptions import RedisError

from config.settings import get_settings
from src.connections.postgres import get_postgres
from src.connections.redis import RedisConnection, get_redis
from src.modules.listings import ListingRepository
from src.modules.matches import MatchService
from src.modules.preferences import PreferencesRepository

deps_log = logger.bind(module="Auth")


def decode_token(token: str) -> Optional[dict]:
    """
    Decode and verify a JWT access token.

    Args:
        token: JWT token string

    Returns:
        Token payload or None if invalid/expired
    """
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError:
        deps_log.debug("Token expired")
        return None
    except jwt.InvalidTokenError as e:
        deps_log.debug(f"Invalid token: {e}")
        return None


async def get_current_user_id(
    authorization: Annotated[str | None, Header()] = None
) -> str:
    """
    Get the calling user's ID from the bearer token.

    Args:
        authorization: Authorization header (Bearer token)

    Returns:
        User ID (token "sub" claim)

    Raises:
        HTTPException: If not authenticated
    """
    if not authorization:
        raise HTTPException(
            status_code=401,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # Parse Bearer token
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(
            status_code=401,
            detail="Invalid authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_token(parts[1])
    if not payload or not payload.get("sub"):
        raise HTTPException(
            status_code=401,
            detail="Token is invalid or expired",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return str(payload["sub"])


async def get_preferences_repository() -> PreferencesRepository:
    """Get preferences repository instance."""
    postgres = await get_postgres()
    return PreferencesRepository(postgres.pool)


async def get_listing_repository() -> ListingRepository:
    """Get listing repository instance."""
    postgres = await get_postgres()
    return ListingRepository(postgres.pool)


async def get_match_cache() -> Optional[RedisConnection]:
    """Get Redis match cache, or None if caching is off or Redis is down."""
    if not get_settings().matching.cache_enabled:
        return None
    try:
        return await get_redis()
    except (RedisError, OSError) as e:
        deps_log.warning(f"Match cache unavailable: {e}")
        return None


async def get_match_service(
    preferences_repo: Annotated[PreferencesRepository, Depends(get_preferences_repository)],
    listing_repo: Annotated[ListingRepository, Depends(get_listing_repository)],
    cache: Annotated[Optional[RedisConnection], Depends(get_match_cache)],
) -> MatchService:
    """Get match service instance."""
    return MatchService(preferences_repo, listing_repo, cache)


# Type aliases for dependency injection
CurrentUserId = Annotated[str, Depends(get_current_user_id)]
PreferencesRepo = Annotated[PreferencesRepository, Depends(get_preferences_repository)]
MatchCache = Annotated[Optional[RedisConnection], Depends(get_match_cache)]
MatchServiceDep = Annotated[MatchService, Depends(get_match_service)]
