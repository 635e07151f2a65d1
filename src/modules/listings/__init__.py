"""Listings module."""

from src.modules.listings.models import Listing
from src.modules.listings.repository import ListingRepository, normalize_rules

__all__ = [
    "Listing",
    "ListingRepository",
    "normalize_rules",
]
