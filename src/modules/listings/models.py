"""
Listing Models.

Pydantic models for listings presented alongside match results.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from src.modules.common import CamelModel


class Listing(CamelModel):
    """Published room listing."""

    id: str
    host_user_id: Optional[str] = None
    status: str = "PUBLISHED"
    city: Optional[str] = None
    neighborhood: Optional[str] = None
    price_monthly: Optional[int] = Field(None, description="Monthly rent")
    deposit: Optional[int] = None
    room_type: Optional[str] = Field(None, description="ENSUITE, SHARED_BATH or STUDIO_ROOM")
    furnished: bool = False
    utilities_included: bool = False
    min_stay_months: Optional[int] = None
    available_from: Optional[datetime] = None
    rules: dict = Field(
        default_factory=dict,
        description="House rules (guests, quietHours, smoking, pets)",
    )
    photos: list[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    @field_validator("id", "host_user_id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> Optional[str]:
        """Accept UUID values from the database."""
        return str(v) if v is not None else None

    @field_validator("rules", mode="before")
    @classmethod
    def parse_rules(cls, v: Any) -> dict:
        """Treat malformed rules as no rules."""
        return v if isinstance(v, dict) else {}

    @field_validator("photos", mode="before")
    @classmethod
    def parse_photos(cls, v: Any) -> list:
        """Treat malformed photos as no photos."""
        if not isinstance(v, list):
            return []
        return [p for p in v if isinstance(p, str)]
