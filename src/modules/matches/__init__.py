"""Matches module."""

from src.modules.matches.models import (
    Pagination,
    RecommendedMatch,
    RecommendedMatchesResponse,
)
from src.modules.matches.service import MatchService, PreferencesNotSetError

__all__ = [
    "RecommendedMatch",
    "Pagination",
    "RecommendedMatchesResponse",
    "MatchService",
    "PreferencesNotSetError",
]
