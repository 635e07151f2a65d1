"""
Listing Repository.

Data access layer for candidate listings.

Table: listings (id UUID PK, host_user_id, status, city, neighborhood,
price_monthly, deposit, room_type, furnished, utilities_included,
min_stay_months, available_from, rules JSONB, photos JSONB,
created_at, updated_at)
"""

from asyncpg import Pool

# camelCase rule keys written by older clients
RULE_KEY_ALIASES = {
    "quietHours": "quiet_hours",
    "guestPolicy": "guests",
}


def normalize_rules(rules) -> dict:
    """
    Normalize stored house rules to snake_case keys.

    Args:
        rules: Stored rules value (may be malformed)

    Returns:
        Rules dict, empty if malformed
    """
    if not isinstance(rules, dict):
        return {}
    return {RULE_KEY_ALIASES.get(key, key): value for key, value in rules.items()}


class ListingRepository:
    """Repository for listing database operations."""

    def __init__(self, pool: Pool):
        """
        Initialize repository with database connection pool.

        Args:
            pool: asyncpg connection pool
        """
        self._pool = pool

    async def get_candidates(self, seeker_id: str, limit: int = 1000) -> list[dict]:
        """
        Get listings a seeker may be matched with.

        Only published listings not owned by the seeker, newest first.

        Args:
            seeker_id: Seeker user ID
            limit: Maximum number of listings

        Returns:
            List of listing records with normalized rules
        """
        query = """
        SELECT
            id, host_user_id, status, city, neighborhood,
            price_monthly, deposit, room_type, furnished, utilities_included,
            min_stay_months, available_from, rules, photos, created_at
        FROM listings
        WHERE status = 'PUBLISHED'
          AND host_user_id <> $1
        ORDER BY created_at DESC
        LIMIT $2
        """
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(query, seeker_id, limit)

        listings = []
        for row in rows:
            listing = dict(row)
            listing["id"] = str(listing["id"])
            listing["host_user_id"] = str(listing["host_user_id"])
            listing["rules"] = normalize_rules(listing.get("rules"))
            listings.append(listing)
        return listings
