"""
Unit tests for src/modules/listings
"""

import asyncio
import uuid
from unittest.mock import AsyncMock, MagicMock

from src.modules.listings import Listing, ListingRepository
from src.modules.listings.repository import normalize_rules


class TestNormalizeRules:
    """Tests for normalize_rules function."""

    def test_camel_case_keys(self):
        """camelCase rule keys are renamed."""
        rules = {"quietHours": "22:00", "guestPolicy": "anytime", "smoking": "no"}
        assert normalize_rules(rules) == {
            "quiet_hours": "22:00",
            "guests": "anytime",
            "smoking": "no",
        }

    def test_snake_case_unchanged(self):
        rules = {"quiet_hours": "22:00", "guests": "anytime"}
        assert normalize_rules(rules) == rules

    def test_malformed(self):
        assert normalize_rules(None) == {}
        assert normalize_rules("no smoking") == {}


class TestListingModel:
    """Tests for Listing model."""

    def test_uuid_ids(self):
        """UUID values from the database are stringified."""
        listing_id = uuid.uuid4()
        listing = Listing.model_validate({"id": listing_id, "host_user_id": uuid.uuid4()})
        assert listing.id == str(listing_id)

    def test_malformed_rules_and_photos(self):
        listing = Listing.model_validate(
            {"id": "l1", "rules": "none", "photos": ["a.jpg", None, 3]}
        )
        assert listing.rules == {}
        assert listing.photos == ["a.jpg"]

    def test_camel_case_output(self, sample_listing):
        body = Listing.model_validate(sample_listing).model_dump(by_alias=True)
        assert body["priceMonthly"] == 120000
        assert body["minStayMonths"] == 6
        assert body["roomType"] == "ENSUITE"


class TestListingRepository:
    """Tests for ListingRepository.get_candidates method."""

    def test_rows_normalized(self):
        """Ids are stringified and rules normalized."""
        listing_id, host_id = uuid.uuid4(), uuid.uuid4()
        conn = AsyncMock()
        conn.fetch.return_value = [
            {"id": listing_id, "host_user_id": host_id, "rules": {"quietHours": "23:00"}},
        ]
        pool = MagicMock()
        pool.acquire.return_value.__aenter__.return_value = conn

        listings = asyncio.run(ListingRepository(pool).get_candidates("seeker-1", limit=50))

        assert listings == [
            {"id": str(listing_id), "host_user_id": str(host_id), "rules": {"quiet_hours": "23:00"}},
        ]
        _, seeker_id, limit = conn.fetch.await_args.args
        assert seeker_id == "seeker-1"
        assert limit == 50
