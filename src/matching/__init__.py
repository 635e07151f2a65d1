"""
Matching module for listing recommendations.

This module provides functions to filter listings against a seeker's
hard constraints and rank them by lifestyle compatibility.
"""

from src.matching.constraints import (
    apply_hard_constraints,
    match_budget,
    passes_hard_constraints,
)
from src.matching.fingerprint import match_fingerprint
from src.matching.models import MatchPage, MatchResult
from src.matching.ranking import paginate, rank_listings, sort_matches
from src.matching.scorer import (
    WEIGHTS,
    DimensionScore,
    calculate_match_score,
    placeholder_credit,
    score_dimensions,
    score_quiet_hours,
)

__all__ = [
    # Models
    "MatchResult",
    "MatchPage",
    # Hard constraints
    "match_budget",
    "passes_hard_constraints",
    "apply_hard_constraints",
    # Scoring
    "WEIGHTS",
    "DimensionScore",
    "placeholder_credit",
    "score_quiet_hours",
    "score_dimensions",
    "calculate_match_score",
    # Ranking
    "sort_matches",
    "paginate",
    "rank_listings",
    # Caching
    "match_fingerprint",
]
