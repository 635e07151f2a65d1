"""
Lifestyle compatibility scoring.

Scores a listing against a seeker's compatibility preferences on
eight weighted dimensions (weights sum to 100) and explains the
strongest comparisons as human-readable reasons.
"""

import math
import re
from dataclasses import dataclass
from typing import Any

from loguru import logger

from src.matching.affinity import (
    GUEST_POLICY_AFFINITY,
    PETS_AFFINITY,
    SMOKING_AFFINITY,
    AlcoholStance,
    CookingFrequency,
    GuestPolicy,
    PetRule,
    PetTolerance,
    SmokingPolicy,
    WorkSchedule,
    lookup_affinity,
    parse_enum,
)
from src.matching.models import MatchResult
from src.matching.values import as_mapping, to_number

scorer_log = logger.bind(module="Scorer")

WEIGHTS = {
    "cleanliness": 20,
    "guest_policy": 15,
    "quiet_hours": 15,
    "work_schedule": 15,
    "smoking": 10,
    "alcohol": 10,
    "cooking_frequency": 10,
    "pets": 10,
}

# Fraction of a dimension's weight needed to emit a reason
STRONG_MATCH_RATIO = 0.7
MAX_REASONS = 3

# Flat credit for dimensions without a listing-side attribute
PLACEHOLDER_RATIOS = {
    "cleanliness": 1.0,
    "work_schedule": 0.8,
    "alcohol": 0.8,
    "cooking_frequency": 0.8,
}

REASONS = {
    "guest_policy": "Aligned guest policy",
    "quiet_hours": "Similar quiet hours preference",
    "smoking": "Compatible smoking policy",
    "pets": "Pet preferences aligned",
}

FLEXIBLE = "flexible"

_HOUR_PATTERN = re.compile(r"^\s*(\d{1,2})(?::\d{2})?\s*$")


@dataclass
class DimensionScore:
    """
    Contribution of one compatibility dimension.

    Attributes:
        dimension: Dimension name (key of WEIGHTS)
        points: Points contributed, 0 to the dimension weight
        compared: Whether the score came from comparing both sides
    """
    dimension: str
    points: float
    compared: bool = True

    @property
    def weight(self) -> int:
        return WEIGHTS[self.dimension]

    @property
    def is_strong(self) -> bool:
        """Whether points reach the strong match threshold."""
        return self.points >= self.weight * STRONG_MATCH_RATIO


# ============================================================
# Placeholder dimensions
# ============================================================


def _valid_cleanliness(value: Any) -> bool:
    number = to_number(value)
    return number is not None and 1 <= number <= 5


def placeholder_credit(compatibility: dict) -> list[DimensionScore]:
    """
    Flat credit for dimensions the listing side does not describe.

    Hosts do not record cleanliness, work schedule, alcohol or cooking
    habits, so these dimensions are not compared. Any valid seeker
    preference earns a fixed share of the weight (PLACEHOLDER_RATIOS);
    a missing or invalid preference earns nothing. These scores are
    low fidelity and never produce reasons.

    Args:
        compatibility: Seeker's compatibility preferences

    Returns:
        One DimensionScore per placeholder dimension
    """
    expressed = {
        "cleanliness": _valid_cleanliness(compatibility.get("cleanliness")),
        "work_schedule": parse_enum(WorkSchedule, compatibility.get("work_schedule")) is not None,
        "alcohol": parse_enum(AlcoholStance, compatibility.get("alcohol")) is not None,
        "cooking_frequency": parse_enum(
            CookingFrequency, compatibility.get("cooking_frequency")
        ) is not None,
    }

    scores = []
    for dimension, ratio in PLACEHOLDER_RATIOS.items():
        points = WEIGHTS[dimension] * ratio if expressed[dimension] else 0.0
        scores.append(DimensionScore(dimension, points, compared=False))
    return scores


# ============================================================
# Compared dimensions
# ============================================================


def parse_quiet_hour(value: Any) -> int | str | None:
    """
    Parse the hour component of a quiet-hours value.

    Args:
        value: String like "22:00", "7" or "flexible"

    Returns:
        Hour 0-23, FLEXIBLE, or None if unparseable

    Examples:
        >>> parse_quiet_hour("22:00")
        22
        >>> parse_quiet_hour("Flexible")
        'flexible'
        >>> parse_quiet_hour("late")
        None
    """
    if not isinstance(value, str):
        return None
    if value.strip().lower() == FLEXIBLE:
        return FLEXIBLE

    match = _HOUR_PATTERN.match(value)
    if not match:
        return None
    hour = int(match.group(1))
    return hour if 0 <= hour <= 23 else None


def score_quiet_hours(seeker_hours: Any, listing_hours: Any) -> float | None:
    """
    Score quiet-hours compatibility as a fraction of the weight.

    - Exact string match or "flexible" on either side: 1.0
    - Hours within 1 of each other: 0.8
    - Within 2: 0.5
    - Otherwise: 0.2

    Hour distance wraps around midnight (23 and 0 are 1 hour apart).

    Returns:
        Fraction in [0, 1], or None if either side is unusable
    """
    if not isinstance(seeker_hours, str) or not isinstance(listing_hours, str):
        return None
    if seeker_hours == listing_hours:
        return 1.0

    seeker_hour = parse_quiet_hour(seeker_hours)
    listing_hour = parse_quiet_hour(listing_hours)
    if seeker_hour == FLEXIBLE or listing_hour == FLEXIBLE:
        return 1.0
    if seeker_hour is None or listing_hour is None:
        return None

    diff = abs(seeker_hour - listing_hour)
    diff = min(diff, 24 - diff)

    if diff <= 1:
        return 0.8
    if diff <= 2:
        return 0.5
    return 0.2


def _compared(
    dimension: str,
    fraction: float | None,
    seeker_value: Any,
    listing_value: Any,
) -> DimensionScore:
    if fraction is None:
        if seeker_value is not None and listing_value is not None:
            scorer_log.debug(
                f"Unusable {dimension} values: seeker={seeker_value!r} listing={listing_value!r}"
            )
        return DimensionScore(dimension, 0.0)
    return DimensionScore(dimension, WEIGHTS[dimension] * fraction)


def compared_scores(compatibility: dict, rules: dict) -> list[DimensionScore]:
    """
    Score dimensions that compare seeker preferences with listing rules.

    Args:
        compatibility: Seeker's compatibility preferences
        rules: Listing house rules

    Returns:
        DimensionScores for guest policy, quiet hours, smoking and pets
    """
    seeker_guests = compatibility.get("guest_policy")
    listing_guests = rules.get("guests")
    guests = lookup_affinity(
        GUEST_POLICY_AFFINITY,
        parse_enum(GuestPolicy, seeker_guests),
        parse_enum(GuestPolicy, listing_guests),
    )

    seeker_quiet = compatibility.get("quiet_hours")
    listing_quiet = rules.get("quiet_hours")
    quiet = score_quiet_hours(seeker_quiet, listing_quiet)

    seeker_smoking = compatibility.get("smoking")
    listing_smoking = rules.get("smoking")
    smoking = lookup_affinity(
        SMOKING_AFFINITY,
        parse_enum(SmokingPolicy, seeker_smoking),
        parse_enum(SmokingPolicy, listing_smoking),
    )

    seeker_pets = compatibility.get("pets")
    listing_pets = rules.get("pets")
    pets = lookup_affinity(
        PETS_AFFINITY,
        parse_enum(PetTolerance, seeker_pets),
        parse_enum(PetRule, listing_pets),
    )

    return [
        _compared("guest_policy", guests, seeker_guests, listing_guests),
        _compared("quiet_hours", quiet, seeker_quiet, listing_quiet),
        _compared("smoking", smoking, seeker_smoking, listing_smoking),
        _compared("pets", pets, seeker_pets, listing_pets),
    ]


# ============================================================
# Match score
# ============================================================


def score_dimensions(compatibility: Any, rules: Any) -> list[DimensionScore]:
    """Score all eight dimensions, in WEIGHTS order."""
    compatibility = as_mapping(compatibility)
    rules = as_mapping(rules)

    by_dimension = {
        s.dimension: s
        for s in placeholder_credit(compatibility) + compared_scores(compatibility, rules)
    }
    return [by_dimension[dimension] for dimension in WEIGHTS]


def select_reasons(scores: list[DimensionScore]) -> list[str]:
    """
    Pick up to MAX_REASONS reasons from strong compared dimensions.

    Heavier dimensions come first; equal weights keep WEIGHTS order.
    """
    strong = [s for s in scores if s.compared and s.is_strong]
    strong.sort(key=lambda s: s.weight, reverse=True)
    return [REASONS[s.dimension] for s in strong[:MAX_REASONS]]


def round_score(total: float) -> int:
    """Clamp to [0, 100] and round half up."""
    clamped = min(100.0, max(0.0, total))
    return int(math.floor(clamped + 0.5))


def calculate_match_score(preferences: dict, listing: dict) -> MatchResult:
    """
    Calculate the compatibility score of a listing for a seeker.

    Args:
        preferences: Seeker preferences with "compatibility" mapping
        listing: Listing record with "id" and "rules"

    Returns:
        MatchResult with integer score 0-100 and up to 3 reasons
    """
    scores = score_dimensions(
        as_mapping(preferences).get("compatibility"),
        listing.get("rules"),
    )

    return MatchResult(
        listing_id=str(listing.get("id")),
        score=round_score(sum(s.points for s in scores)),
        reasons=select_reasons(scores),
    )
