"""Modules package - Domain modules with repository pattern."""

from src.modules.listings import Listing, ListingRepository
from src.modules.matches import (
    MatchService,
    PreferencesNotSetError,
    RecommendedMatchesResponse,
)
from src.modules.preferences import (
    Compatibility,
    HardConstraints,
    PreferencesRepository,
    PreferencesResponse,
    PreferencesUpdate,
)

__all__ = [
    # Preferences
    "HardConstraints",
    "Compatibility",
    "PreferencesUpdate",
    "PreferencesResponse",
    "PreferencesRepository",
    # Listings
    "Listing",
    "ListingRepository",
    # Matches
    "RecommendedMatchesResponse",
    "MatchService",
    "PreferencesNotSetError",
]
