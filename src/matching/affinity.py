"""
Lifestyle enums and affinity tables.

Each table maps (seeker value, listing value) to a fraction of the
dimension weight. Values outside the enums have no affinity.
"""

from enum import Enum
from typing import Any, TypeVar

E = TypeVar("E", bound=Enum)


class GuestPolicy(str, Enum):
    """Guest policy, shared by seekers and listing rules."""

    NO_GUESTS = "no_guests"
    OCCASIONAL = "occasional"
    WEEKENDS = "weekends"
    ANYTIME = "anytime"


class SmokingPolicy(str, Enum):
    """Smoking stance, shared by seekers and listing rules."""

    NO = "no"
    OUTSIDE_ONLY = "outside_only"
    YES = "yes"


class PetTolerance(str, Enum):
    """Pets a seeker can live with."""

    NO_PETS = "no_pets"
    OK_CATS = "ok_cats"
    OK_DOGS = "ok_dogs"
    OK_ALL = "ok_all"


class PetRule(str, Enum):
    """Pets a listing allows."""

    NO_PETS = "no_pets"
    CATS = "cats"
    DOGS = "dogs"
    ALL = "all"


class WorkSchedule(str, Enum):
    DAY = "day"
    HYBRID = "hybrid"
    NIGHT = "night"
    IRREGULAR = "irregular"


class AlcoholStance(str, Enum):
    NO = "no"
    OCCASIONALLY = "occasionally"
    YES = "yes"


class CookingFrequency(str, Enum):
    RARE = "rare"
    FEW_TIMES_WEEKLY = "few_times_weekly"
    DAILY = "daily"


class RoomType(str, Enum):
    ENSUITE = "ENSUITE"
    SHARED_BATH = "SHARED_BATH"
    STUDIO_ROOM = "STUDIO_ROOM"


GUEST_POLICY_AFFINITY: dict[GuestPolicy, dict[GuestPolicy, float]] = {
    GuestPolicy.NO_GUESTS: {
        GuestPolicy.NO_GUESTS: 1.0,
        GuestPolicy.OCCASIONAL: 0.3,
        GuestPolicy.WEEKENDS: 0.2,
        GuestPolicy.ANYTIME: 0.0,
    },
    GuestPolicy.OCCASIONAL: {
        GuestPolicy.NO_GUESTS: 0.3,
        GuestPolicy.OCCASIONAL: 1.0,
        GuestPolicy.WEEKENDS: 0.8,
        GuestPolicy.ANYTIME: 0.6,
    },
    GuestPolicy.WEEKENDS: {
        GuestPolicy.NO_GUESTS: 0.2,
        GuestPolicy.OCCASIONAL: 0.8,
        GuestPolicy.WEEKENDS: 1.0,
        GuestPolicy.ANYTIME: 0.8,
    },
    GuestPolicy.ANYTIME: {
        GuestPolicy.NO_GUESTS: 0.0,
        GuestPolicy.OCCASIONAL: 0.6,
        GuestPolicy.WEEKENDS: 0.8,
        GuestPolicy.ANYTIME: 1.0,
    },
}

SMOKING_AFFINITY: dict[SmokingPolicy, dict[SmokingPolicy, float]] = {
    SmokingPolicy.NO: {
        SmokingPolicy.NO: 1.0,
        SmokingPolicy.OUTSIDE_ONLY: 0.6,
        SmokingPolicy.YES: 0.0,
    },
    SmokingPolicy.OUTSIDE_ONLY: {
        SmokingPolicy.NO: 0.6,
        SmokingPolicy.OUTSIDE_ONLY: 1.0,
        SmokingPolicy.YES: 0.5,
    },
    SmokingPolicy.YES: {
        SmokingPolicy.NO: 0.0,
        SmokingPolicy.OUTSIDE_ONLY: 0.5,
        SmokingPolicy.YES: 1.0,
    },
}

# Not symmetric: the seeker side is a tolerance, the listing side a rule.
PETS_AFFINITY: dict[PetTolerance, dict[PetRule, float]] = {
    PetTolerance.NO_PETS: {
        PetRule.NO_PETS: 1.0,
        PetRule.CATS: 0.3,
        PetRule.DOGS: 0.3,
        PetRule.ALL: 0.0,
    },
    PetTolerance.OK_CATS: {
        PetRule.NO_PETS: 0.3,
        PetRule.CATS: 1.0,
        PetRule.DOGS: 0.5,
        PetRule.ALL: 1.0,
    },
    PetTolerance.OK_DOGS: {
        PetRule.NO_PETS: 0.3,
        PetRule.CATS: 0.5,
        PetRule.DOGS: 1.0,
        PetRule.ALL: 1.0,
    },
    PetTolerance.OK_ALL: {
        PetRule.NO_PETS: 0.0,
        PetRule.CATS: 1.0,
        PetRule.DOGS: 1.0,
        PetRule.ALL: 1.0,
    },
}


def parse_enum(enum_cls: type[E], value: Any) -> E | None:
    """
    Convert a raw stored value to an enum member.

    Args:
        enum_cls: Target enum class
        value: Raw value (string, enum member or anything else)

    Returns:
        Enum member, or None if value is not a valid member

    Examples:
        >>> parse_enum(GuestPolicy, "weekends")
        <GuestPolicy.WEEKENDS: 'weekends'>
        >>> parse_enum(GuestPolicy, "parties")
        None
    """
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


def lookup_affinity(
    table: dict[Any, dict[Any, float]],
    seeker_value: Enum | None,
    listing_value: Enum | None,
) -> float | None:
    """
    Look up the affinity fraction for a pair of enum values.

    Returns:
        Fraction in [0, 1], or None if either side is missing
    """
    if seeker_value is None or listing_value is None:
        return None
    return table[seeker_value][listing_value]
