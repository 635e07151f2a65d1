"""
Match Service.

Builds a seeker's recommended listings from stored preferences and
published listings, serving unchanged scores from the Redis cache.
"""

from typing import Optional

from loguru import logger
from redis.exceptions import RedisError

from config.settings import get_settings
from src.connections.redis import RedisConnection
from src.matching import (
    MatchResult,
    apply_hard_constraints,
    calculate_match_score,
    match_fingerprint,
    paginate,
    sort_matches,
)
from src.modules.listings import Listing, ListingRepository
from src.modules.matches.models import (
    Pagination,
    RecommendedMatch,
    RecommendedMatchesResponse,
)
from src.modules.preferences import PreferencesRepository

match_log = logger.bind(module="Matches")


class PreferencesNotSetError(Exception):
    """Raised when a seeker asks for matches before setting preferences."""

    def __init__(self, seeker_id: str):
        super().__init__(f"Seeker {seeker_id} has no preferences")
        self.seeker_id = seeker_id


class MatchService:
    """Recommends listings to seekers."""

    def __init__(
        self,
        preferences_repo: PreferencesRepository,
        listing_repo: ListingRepository,
        cache: Optional[RedisConnection] = None,
    ):
        """
        Initialize MatchService.

        Args:
            preferences_repo: Preferences data access
            listing_repo: Listing data access
            cache: Redis connection for match scores (None = no caching)
        """
        self.settings = get_settings().matching
        self._preferences_repo = preferences_repo
        self._listing_repo = listing_repo
        self._cache = cache if self.settings.cache_enabled else None

    async def recommend(
        self, seeker_id: str, page: int = 1, limit: Optional[int] = None
    ) -> RecommendedMatchesResponse:
        """
        Get one page of recommended listings for a seeker.

        Args:
            seeker_id: Seeker user ID
            page: 1-based page number
            limit: Page size (default from settings)

        Returns:
            Ranked listings with scores, reasons and pagination

        Raises:
            PreferencesNotSetError: If the seeker has no preferences
        """
        limit = limit or self.settings.default_page_size

        preferences = await self._preferences_repo.get_by_user(seeker_id)
        if preferences is None:
            raise PreferencesNotSetError(seeker_id)

        listings = await self._listing_repo.get_candidates(
            seeker_id, self.settings.candidate_limit
        )
        if len(listings) >= self.settings.candidate_limit:
            match_log.warning(
                f"Seeker {seeker_id}: candidates truncated at {self.settings.candidate_limit}, "
                f"older listings are not ranked"
            )
        candidates = apply_hard_constraints(listings, preferences.get("hard_constraints"))

        fingerprints = {
            str(listing.get("id")): match_fingerprint(preferences, listing)
            for listing in candidates
        }
        cached = await self._read_cache(seeker_id, fingerprints)

        fresh: list[tuple[MatchResult, str]] = []
        results = []
        for listing in candidates:
            listing_id = str(listing.get("id"))
            result = cached.get(listing_id)
            if result is None:
                result = calculate_match_score(preferences, listing)
                fresh.append((result, fingerprints[listing_id]))
            results.append(result)

        await self._write_cache(seeker_id, fresh)

        match_page = paginate(sort_matches(results), page, limit)
        by_id = {str(listing.get("id")): listing for listing in candidates}

        match_log.info(
            f"Seeker {seeker_id}: {len(listings)} candidates, "
            f"{match_page.total} matched, {len(cached)} cached, page {match_page.page}"
        )

        return RecommendedMatchesResponse(
            matches=[
                RecommendedMatch(
                    listing=Listing.model_validate(by_id[m.listing_id]),
                    score=m.score,
                    reasons=m.reasons,
                )
                for m in match_page.matches
            ],
            pagination=Pagination(
                page=match_page.page,
                limit=match_page.limit,
                total=match_page.total,
                pages=match_page.pages,
            ),
        )

    async def _read_cache(
        self, seeker_id: str, fingerprints: dict[str, str]
    ) -> dict[str, MatchResult]:
        """Read valid cached scores; cache failures count as misses."""
        if not self._cache or not fingerprints:
            return {}
        try:
            return await self._cache.get_cached_matches(seeker_id, fingerprints)
        except RedisError as e:
            match_log.warning(f"Match cache read failed for {seeker_id}: {e}")
            return {}

    async def _write_cache(
        self, seeker_id: str, entries: list[tuple[MatchResult, str]]
    ) -> None:
        """Write freshly computed scores; failures are logged only."""
        if not self._cache or not entries:
            return
        try:
            await self._cache.save_matches(seeker_id, entries)
        except RedisError as e:
            match_log.warning(f"Match cache write failed for {seeker_id}: {e}")
