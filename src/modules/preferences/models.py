"""
Preferences Models.

Pydantic models for reading and updating seeker preferences.
"""

import re
from datetime import date
from typing import Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from src.matching.affinity import (
    AlcoholStance,
    CookingFrequency,
    GuestPolicy,
    PetTolerance,
    RoomType,
    SmokingPolicy,
    WorkSchedule,
)
from src.modules.common import CamelModel

QUIET_HOURS_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class HardConstraints(CamelModel):
    """Non-negotiable criteria; a listing failing any is excluded."""

    budget_min: Optional[int] = Field(None, ge=0, description="Minimum monthly budget")
    budget_max: Optional[int] = Field(None, ge=0, description="Maximum monthly budget")
    neighborhoods: Optional[list[str]] = Field(None, description="Accepted neighborhoods")
    move_in_from: Optional[date] = Field(None, description="Desired move-in date")
    move_in_to: Optional[date] = Field(None, description="Latest move-in date")
    min_stay: Optional[int] = Field(
        None,
        ge=1,
        validation_alias=AliasChoices("minStay", "minStayMonths", "min_stay"),
        description="Longest minimum stay (months) the seeker accepts",
    )
    room_types: Optional[list[RoomType]] = Field(
        None,
        validation_alias=AliasChoices("roomType", "roomTypes", "room_types"),
        serialization_alias="roomType",
        description="Accepted room types (ENSUITE, SHARED_BATH, STUDIO_ROOM)",
    )

    @model_validator(mode="after")
    def validate_ranges(self) -> "HardConstraints":
        """Validate budget and move-in ranges are not inverted."""
        if (
            self.budget_min is not None
            and self.budget_max is not None
            and self.budget_min > self.budget_max
        ):
            raise ValueError("budgetMin must not exceed budgetMax")
        if (
            self.move_in_from is not None
            and self.move_in_to is not None
            and self.move_in_to < self.move_in_from
        ):
            raise ValueError("moveInTo must not be before moveInFrom")
        return self


class Compatibility(CamelModel):
    """Lifestyle preferences used for compatibility scoring."""

    cleanliness: Optional[int] = Field(None, ge=1, le=5, description="1 (relaxed) to 5 (spotless)")
    guest_policy: Optional[GuestPolicy] = None
    quiet_hours: Optional[str] = Field(None, description="HH:MM or 'flexible'")
    work_schedule: Optional[WorkSchedule] = None
    smoking: Optional[SmokingPolicy] = None
    alcohol: Optional[AlcoholStance] = None
    cooking_frequency: Optional[CookingFrequency] = None
    pets: Optional[PetTolerance] = None

    @field_validator("quiet_hours")
    @classmethod
    def validate_quiet_hours(cls, v: Optional[str]) -> Optional[str]:
        """Validate quiet hours is 'HH:MM' or 'flexible'."""
        if v is None or v == "flexible" or QUIET_HOURS_PATTERN.match(v):
            return v
        raise ValueError("quietHours must be 'HH:MM' or 'flexible'")


class PreferencesUpdate(CamelModel):
    """Model for replacing a seeker's preferences."""

    hard_constraints: HardConstraints = Field(default_factory=HardConstraints)
    compatibility: Compatibility = Field(default_factory=Compatibility)

    def to_record(self) -> dict:
        """Convert to the stored (snake_case, JSON-safe) representation."""
        return {
            "hard_constraints": self.hard_constraints.model_dump(mode="json", exclude_none=True),
            "compatibility": self.compatibility.model_dump(mode="json", exclude_none=True),
        }


class PreferencesResponse(BaseModel):
    """Response model for seeker preferences."""

    hard_constraints: dict = Field(default_factory=dict, serialization_alias="hardConstraints")
    compatibility: dict = Field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Optional[dict]) -> "PreferencesResponse":
        """
        Build response from a stored record.

        Stored values are returned in camelCase. A seeker without a
        record gets empty objects.
        """
        if not record:
            return cls()

        hard = record.get("hard_constraints") or {}
        compat = record.get("compatibility") or {}
        return cls(
            hard_constraints=_to_camel_keys(hard, {"room_types": "roomType", "min_stay": "minStay"}),
            compatibility=_to_camel_keys(compat),
        )


def _to_camel_keys(data: dict, overrides: Optional[dict] = None) -> dict:
    overrides = overrides or {}
    return {overrides.get(key, to_camel(key)): value for key, value in data.items()}
