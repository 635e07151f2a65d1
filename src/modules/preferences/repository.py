"""
Preferences Repository.

Data access layer for seeker preferences.

Table: preferences (user_id PK, hard_constraints JSONB,
compatibility JSONB, created_at, updated_at)
"""

from typing import Optional

from asyncpg import Pool


class PreferencesRepository:
    """Repository for preferences database operations."""

    def __init__(self, pool: Pool):
        """
        Initialize repository with database connection pool.

        Args:
            pool: asyncpg connection pool
        """
        self._pool = pool

    async def get_by_user(self, user_id: str) -> Optional[dict]:
        """
        Get preferences of a seeker.

        Args:
            user_id: Seeker user ID

        Returns:
            Preferences record or None if the seeker has none
        """
        query = """
        SELECT user_id, hard_constraints, compatibility, updated_at
        FROM preferences
        WHERE user_id = $1
        """
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(query, user_id)
            return dict(row) if row else None

    async def upsert(
        self, user_id: str, hard_constraints: dict, compatibility: dict
    ) -> dict:
        """
        Create or replace preferences of a seeker.

        Args:
            user_id: Seeker user ID
            hard_constraints: Hard constraints (snake_case keys)
            compatibility: Compatibility preferences (snake_case keys)

        Returns:
            Stored preferences record
        """
        query = """
        INSERT INTO preferences (user_id, hard_constraints, compatibility)
        VALUES ($1, $2, $3)
        ON CONFLICT (user_id) DO UPDATE SET
            hard_constraints = EXCLUDED.hard_constraints,
            compatibility = EXCLUDED.compatibility,
            updated_at = NOW()
        RETURNING user_id, hard_constraints, compatibility, updated_at
        """
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(query, user_id, hard_constraints, compatibility)
            return dict(row)
