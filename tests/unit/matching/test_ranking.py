"""
Unit tests for src/matching/ranking.py
"""

from src.matching.models import MatchResult
from src.matching.ranking import paginate, rank_listings, sort_matches

# Import fixtures
pytest_plugins = ["tests.fixtures.matching"]


def make_matches(count: int) -> list[MatchResult]:
    """Matches with strictly descending scores."""
    return [MatchResult(listing_id=f"l{i}", score=100 - i) for i in range(count)]


# ============================================================
# sort_matches tests
# ============================================================


class TestSortMatches:
    """Tests for sort_matches function."""

    def test_descending(self):
        """Higher scores come first."""
        matches = [
            MatchResult(listing_id="a", score=40),
            MatchResult(listing_id="b", score=90),
            MatchResult(listing_id="c", score=65),
        ]
        assert [m.listing_id for m in sort_matches(matches)] == ["b", "c", "a"]

    def test_ties_keep_input_order(self):
        """Equal scores keep their relative input order."""
        matches = [
            MatchResult(listing_id="a", score=70),
            MatchResult(listing_id="b", score=80),
            MatchResult(listing_id="c", score=70),
            MatchResult(listing_id="d", score=70),
        ]
        assert [m.listing_id for m in sort_matches(matches)] == ["b", "a", "c", "d"]

    def test_empty(self):
        assert sort_matches([]) == []


# ============================================================
# paginate tests
# ============================================================


class TestPaginate:
    """Tests for paginate function."""

    def test_second_page(self):
        """Page 2 of 25 with limit 10 holds results 11-20."""
        result = paginate(make_matches(25), page=2, limit=10)
        assert [m.listing_id for m in result.matches] == [f"l{i}" for i in range(10, 20)]
        assert result.page == 2
        assert result.limit == 10
        assert result.total == 25
        assert result.pages == 3

    def test_last_partial_page(self):
        result = paginate(make_matches(25), page=3, limit=10)
        assert len(result.matches) == 5

    def test_page_past_end(self):
        """Pages past the end are empty but keep totals."""
        result = paginate(make_matches(25), page=4, limit=10)
        assert result.matches == []
        assert result.total == 25
        assert result.pages == 3

    def test_empty(self):
        """No matches give zero pages."""
        result = paginate([], page=1, limit=20)
        assert result.matches == []
        assert result.total == 0
        assert result.pages == 0

    def test_clamps_invalid_page_and_limit(self):
        """Page and limit below 1 are treated as 1."""
        result = paginate(make_matches(3), page=0, limit=-5)
        assert result.page == 1
        assert result.limit == 1
        assert [m.listing_id for m in result.matches] == ["l0"]
        assert result.pages == 3

    def test_exact_multiple(self):
        result = paginate(make_matches(20), page=1, limit=10)
        assert result.pages == 2


# ============================================================
# rank_listings tests
# ============================================================


class TestRankListings:
    """Tests for rank_listings function."""

    def test_ranked_order(self, ranked_listings, sample_preferences):
        """Listings are filtered and ranked by score."""
        result = rank_listings(ranked_listings, sample_preferences)
        assert [(m.listing_id, m.score) for m in result.matches] == [
            ("lst-001", 98),
            ("lst-004", 85),
            ("lst-002", 76),
        ]
        assert result.total == 3
        assert result.pages == 1

    def test_over_budget_never_returned(self, ranked_listings, sample_preferences):
        """Excluded listings appear on no page."""
        ids = {
            m.listing_id
            for page in (1, 2, 3)
            for m in rank_listings(ranked_listings, sample_preferences, page=page, limit=1).matches
        }
        assert "lst-003" not in ids
        assert ids == {"lst-001", "lst-002", "lst-004"}

    def test_strictly_non_increasing(self, listing_factory, sample_preferences):
        """Scores never increase down the ranking."""
        rules = [
            {"guests": "anytime"},
            {"guests": "occasional", "smoking": "no"},
            {},
            {"quiet_hours": "18:00", "pets": "all"},
            {"guests": "occasional", "quiet_hours": "22:00"},
        ]
        listings = [listing_factory(f"l{i}", rules=r) for i, r in enumerate(rules)]
        scores = [m.score for m in rank_listings(listings, sample_preferences).matches]
        assert scores == sorted(scores, reverse=True)

    def test_no_constraints(self, listing_factory):
        """Missing hard constraints filter nothing."""
        listings = [listing_factory(f"l{i}", price_monthly=10**7) for i in range(3)]
        result = rank_listings(listings, {"compatibility": {}})
        assert result.total == 3
        assert all(m.score == 0 for m in result.matches)

    def test_no_listings(self, sample_preferences):
        result = rank_listings([], sample_preferences)
        assert result.matches == []
        assert result.pages == 0
