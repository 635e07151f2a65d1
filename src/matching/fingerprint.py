"""
Content fingerprints for cached match scores.

A cached score is valid only while the fingerprint of its inputs is
unchanged, so any edit to the seeker's preferences or the listing
invalidates it.
"""

import hashlib
import json

from src.matching.values import as_mapping

# Listing fields that feed the filter or the scorer
LISTING_FIELDS = (
    "id",
    "price_monthly",
    "room_type",
    "min_stay_months",
    "available_from",
    "neighborhood",
    "rules",
)


def match_fingerprint(preferences: dict, listing: dict) -> str:
    """
    Hash the inputs of a match score.

    Args:
        preferences: Seeker preferences
        listing: Listing record

    Returns:
        Hex SHA-256 digest
    """
    preferences = as_mapping(preferences)
    payload = {
        "hard_constraints": preferences.get("hard_constraints"),
        "compatibility": preferences.get("compatibility"),
        "listing": {key: listing.get(key) for key in LISTING_FIELDS},
    }
    canonical = json.dumps(payload, sort_keys=True, ensure_ascii=False, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()
