"""
Ranking and pagination of match results.

Combines the hard-constraint filter with the compatibility scorer over
a candidate set and returns one page of results.
"""

import math
from typing import Iterable

from src.matching.constraints import apply_hard_constraints
from src.matching.models import MatchPage, MatchResult
from src.matching.scorer import calculate_match_score
from src.matching.values import as_mapping


def sort_matches(matches: Iterable[MatchResult]) -> list[MatchResult]:
    """Sort by score descending; ties keep input order."""
    return sorted(matches, key=lambda m: m.score, reverse=True)


def paginate(matches: list[MatchResult], page: int, limit: int) -> MatchPage:
    """
    Slice one page out of ranked matches.

    Args:
        matches: Ranked matches
        page: 1-based page number (values below 1 are treated as 1)
        limit: Page size (values below 1 are treated as 1)

    Returns:
        MatchPage with results [(page-1)*limit, page*limit) and totals
    """
    page = max(page, 1)
    limit = max(limit, 1)
    total = len(matches)
    start = (page - 1) * limit

    return MatchPage(
        matches=matches[start:start + limit],
        page=page,
        limit=limit,
        total=total,
        pages=math.ceil(total / limit),
    )


def rank_listings(
    listings: Iterable[dict],
    preferences: dict,
    page: int = 1,
    limit: int = 20,
) -> MatchPage:
    """
    Filter, score, rank and paginate candidate listings for a seeker.

    Preferences must not be None; callers handle seekers without
    preferences before ranking.

    Args:
        listings: Candidate listings
        preferences: Seeker preferences ("hard_constraints", "compatibility")
        page: 1-based page number
        limit: Page size

    Returns:
        MatchPage of ranked results
    """
    constraints = as_mapping(preferences).get("hard_constraints")
    candidates = apply_hard_constraints(listings, constraints)
    matches = sort_matches(
        calculate_match_score(preferences, listing) for listing in candidates
    )
    return paginate(matches, page, limit)
