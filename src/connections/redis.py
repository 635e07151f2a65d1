"""
Redis Connection Module.

Manages Redis connection for caching computed match scores.
"""

import json
from typing import Optional

import redis.asyncio as redis
from loguru import logger
from pydantic import ValidationError

from config.settings import get_settings
from src.matching import MatchResult

redis_log = logger.bind(module="Redis")


class RedisConnection:
    """Redis connection manager."""

    def __init__(self):
        """Initialize Redis connection."""
        self.settings = get_settings().redis
        self.ttl_match = get_settings().matching.cache_ttl_seconds
        self._client: Optional[redis.Redis] = None

    async def connect(self) -> None:
        """Connect to Redis."""
        redis_log.info(f"Connecting to Redis at {self.settings.host}:{self.settings.port}")
        self._client = redis.from_url(self.settings.url, decode_responses=True)
        # Test connection
        await self._client.ping()
        redis_log.info("Redis connected successfully")

    async def close(self) -> None:
        """Close Redis connection."""
        if self._client:
            await self._client.aclose()
            redis_log.info("Redis connection closed")

    @property
    def client(self) -> redis.Redis:
        """Get Redis client."""
        if not self._client:
            raise RuntimeError("Redis not connected. Call connect() first.")
        return self._client

    # ========== Key Generators ==========

    def _match_key(self, seeker_id: str, listing_id: str) -> str:
        """Generate key for a cached match score."""
        return f"match:{seeker_id}:{listing_id}"

    # ========== Match Cache Operations ==========

    async def get_cached_matches(
        self, seeker_id: str, fingerprints: dict[str, str]
    ) -> dict[str, MatchResult]:
        """
        Get cached match results that are still valid.

        Args:
            seeker_id: Seeker user ID
            fingerprints: listing_id -> fingerprint of current inputs

        Returns:
            listing_id -> MatchResult for entries whose stored
            fingerprint equals the current one
        """
        if not fingerprints:
            return {}

        listing_ids = list(fingerprints)
        keys = [self._match_key(seeker_id, listing_id) for listing_id in listing_ids]
        values = await self.client.mget(keys)

        cached = {}
        for listing_id, data in zip(listing_ids, values):
            if not data:
                continue
            try:
                entry = json.loads(data)
                if entry.get("fingerprint") != fingerprints[listing_id]:
                    continue
                cached[listing_id] = MatchResult(
                    listing_id=listing_id,
                    score=entry["score"],
                    reasons=entry["reasons"],
                )
            except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValidationError) as e:
                # Treated as a miss; the fresh score overwrites it
                redis_log.debug(f"Ignoring corrupt match cache entry {seeker_id}/{listing_id}: {e}")

        redis_log.debug(f"Match cache: {len(cached)}/{len(listing_ids)} hits for {seeker_id}")
        return cached

    async def save_matches(
        self, seeker_id: str, entries: list[tuple[MatchResult, str]]
    ) -> None:
        """
        Save computed match results with TTL.

        Args:
            seeker_id: Seeker user ID
            entries: (MatchResult, fingerprint) pairs
        """
        if not entries:
            return

        pipe = self.client.pipeline()
        for result, fingerprint in entries:
            key = self._match_key(seeker_id, result.listing_id)
            value = {
                "fingerprint": fingerprint,
                "score": result.score,
                "reasons": result.reasons,
            }
            pipe.set(key, json.dumps(value, ensure_ascii=False), ex=self.ttl_match)
        await pipe.execute()
        redis_log.debug(f"Saved {len(entries)} match scores for {seeker_id}")

    async def clear_matches(self, seeker_id: str) -> int:
        """
        Delete all cached match results of a seeker.

        Args:
            seeker_id: Seeker user ID

        Returns:
            Number of deleted keys
        """
        keys = [key async for key in self.client.scan_iter(match=f"match:{seeker_id}:*")]
        if not keys:
            return 0
        deleted = await self.client.delete(*keys)
        redis_log.debug(f"Cleared {deleted} match scores for {seeker_id}")
        return deleted


# Singleton instance
_redis: Optional[RedisConnection] = None


async def get_redis() -> RedisConnection:
    """Get Redis connection singleton."""
    global _redis
    if _redis is None:
        connection = RedisConnection()
        await connection.connect()
        _redis = connection
    return _redis


async def close_redis() -> None:
    """Close Redis connection."""
    global _redis
    if _redis:
        await _redis.close()
        _redis = None
