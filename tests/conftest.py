"""
Shared pytest fixtures for all tests.
"""

import pytest


# ============================================================
# Preferences Fixtures
# ============================================================


@pytest.fixture
def sample_hard_constraints() -> dict:
    """Sample hard constraints (stored format)."""
    return {
        "budget_min": 50000,
        "budget_max": 150000,
        "neighborhoods": ["Yaba", "Surulere", "Lekki Phase 1"],
        "move_in_from": "2025-03-01",
        "min_stay": 12,
        "room_types": ["ENSUITE", "SHARED_BATH"],
    }


@pytest.fixture
def sample_compatibility() -> dict:
    """
    Sample compatibility preferences (stored format).

    Placeholder dimensions give 20 + 12 + 8 + 8 = 48 points.
    """
    return {
        "cleanliness": 4,
        "guest_policy": "occasional",
        "quiet_hours": "22:00",
        "work_schedule": "day",
        "smoking": "no",
        "alcohol": "occasionally",
        "cooking_frequency": "few_times_weekly",
        "pets": "ok_cats",
    }


@pytest.fixture
def sample_preferences(sample_hard_constraints, sample_compatibility) -> dict:
    """Sample seeker preferences record."""
    return {
        "user_id": "seeker-1",
        "hard_constraints": sample_hard_constraints,
        "compatibility": sample_compatibility,
    }


# ============================================================
# Listing Fixtures
# ============================================================


@pytest.fixture
def sample_listing() -> dict:
    """Sample listing matching sample_preferences on every dimension."""
    return {
        "id": "lst-001",
        "host_user_id": "host-1",
        "status": "PUBLISHED",
        "city": "Lagos",
        "neighborhood": "Yaba",
        "price_monthly": 120000,
        "room_type": "ENSUITE",
        "min_stay_months": 6,
        "available_from": "2025-02-15",
        "rules": {
            "guests": "occasional",
            "quiet_hours": "22:00",
            "smoking": "no",
            "pets": "cats",
        },
        "photos": [],
    }
