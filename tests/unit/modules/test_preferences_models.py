"""
Unit tests for src/modules/preferences/models.py
"""

import pytest
from pydantic import ValidationError

from src.modules.preferences import (
    Compatibility,
    HardConstraints,
    PreferencesResponse,
    PreferencesUpdate,
)


# ============================================================
# HardConstraints tests
# ============================================================


class TestHardConstraints:
    """Tests for HardConstraints model."""

    def test_camel_case_input(self):
        """camelCase keys from the client are accepted."""
        data = HardConstraints.model_validate(
            {
                "budgetMin": 50000,
                "budgetMax": 150000,
                "neighborhoods": ["Yaba"],
                "moveInFrom": "2025-03-01",
                "minStay": 12,
                "roomType": ["ENSUITE", "SHARED_BATH"],
            }
        )
        assert data.budget_max == 150000
        assert data.min_stay == 12
        assert data.room_types == ["ENSUITE", "SHARED_BATH"]
        assert str(data.move_in_from) == "2025-03-01"

    def test_alternative_keys(self):
        """minStayMonths and roomTypes are accepted as well."""
        data = HardConstraints.model_validate({"minStayMonths": 6, "roomTypes": ["STUDIO_ROOM"]})
        assert data.min_stay == 6
        assert data.room_types == ["STUDIO_ROOM"]

    def test_all_optional(self):
        data = HardConstraints()
        assert data.model_dump(exclude_none=True) == {}

    def test_inverted_budget(self):
        """budgetMin above budgetMax is rejected."""
        with pytest.raises(ValidationError):
            HardConstraints.model_validate({"budgetMin": 200000, "budgetMax": 100000})

    def test_equal_budget(self):
        data = HardConstraints.model_validate({"budgetMin": 100000, "budgetMax": 100000})
        assert data.budget_min == data.budget_max

    def test_negative_budget(self):
        with pytest.raises(ValidationError):
            HardConstraints.model_validate({"budgetMax": -1})

    def test_inverted_move_in(self):
        """moveInTo before moveInFrom is rejected."""
        with pytest.raises(ValidationError):
            HardConstraints.model_validate({"moveInFrom": "2025-03-01", "moveInTo": "2025-02-01"})

    @pytest.mark.parametrize(
        "room_type", ["PENTHOUSE", "SHARED_APARTMENT", "ONE_BEDROOM", "TWO_BEDROOM"]
    )
    def test_unknown_room_type(self, room_type):
        """Only ENSUITE, SHARED_BATH and STUDIO_ROOM are accepted."""
        with pytest.raises(ValidationError):
            HardConstraints.model_validate({"roomType": [room_type]})

    def test_zero_min_stay(self):
        with pytest.raises(ValidationError):
            HardConstraints.model_validate({"minStay": 0})


# ============================================================
# Compatibility tests
# ============================================================


class TestCompatibility:
    """Tests for Compatibility model."""

    def test_valid(self):
        data = Compatibility.model_validate(
            {
                "cleanliness": 4,
                "guestPolicy": "occasional",
                "quietHours": "22:00",
                "workSchedule": "day",
                "smoking": "no",
                "alcohol": "occasionally",
                "cookingFrequency": "few_times_weekly",
                "pets": "ok_cats",
            }
        )
        assert data.guest_policy == "occasional"
        assert data.quiet_hours == "22:00"

    def test_flexible_quiet_hours(self):
        assert Compatibility.model_validate({"quietHours": "flexible"}).quiet_hours == "flexible"

    @pytest.mark.parametrize("value", ["24:00", "10pm", "7:00", "late"])
    def test_invalid_quiet_hours(self, value):
        with pytest.raises(ValidationError):
            Compatibility.model_validate({"quietHours": value})

    @pytest.mark.parametrize("value", [0, 6])
    def test_cleanliness_out_of_range(self, value):
        with pytest.raises(ValidationError):
            Compatibility.model_validate({"cleanliness": value})

    def test_unknown_enum(self):
        with pytest.raises(ValidationError):
            Compatibility.model_validate({"guestPolicy": "parties"})


# ============================================================
# PreferencesUpdate / PreferencesResponse tests
# ============================================================


class TestPreferencesUpdate:
    """Tests for PreferencesUpdate.to_record method."""

    def test_to_record_snake_case(self):
        """Stored records use snake_case keys and drop unset fields."""
        data = PreferencesUpdate.model_validate(
            {
                "hardConstraints": {
                    "budgetMax": 150000,
                    "moveInFrom": "2025-03-01",
                    "roomType": ["ENSUITE"],
                },
                "compatibility": {"guestPolicy": "weekends", "pets": "ok_all"},
            }
        )
        assert data.to_record() == {
            "hard_constraints": {
                "budget_max": 150000,
                "move_in_from": "2025-03-01",
                "room_types": ["ENSUITE"],
            },
            "compatibility": {"guest_policy": "weekends", "pets": "ok_all"},
        }

    def test_empty_body(self):
        assert PreferencesUpdate.model_validate({}).to_record() == {
            "hard_constraints": {},
            "compatibility": {},
        }


class TestPreferencesResponse:
    """Tests for PreferencesResponse.from_record method."""

    def test_camel_case_output(self, sample_preferences):
        response = PreferencesResponse.from_record(sample_preferences)
        body = response.model_dump(by_alias=True)

        assert body["hardConstraints"]["budgetMax"] == 150000
        assert body["hardConstraints"]["minStay"] == 12
        assert body["hardConstraints"]["roomType"] == ["ENSUITE", "SHARED_BATH"]
        assert body["compatibility"]["guestPolicy"] == "occasional"
        assert body["compatibility"]["cookingFrequency"] == "few_times_weekly"

    def test_no_record(self):
        """A seeker without preferences gets empty objects."""
        body = PreferencesResponse.from_record(None).model_dump(by_alias=True)
        assert body == {"hardConstraints": {}, "compatibility": {}}

    def test_null_columns(self):
        body = PreferencesResponse.from_record(
            {"hard_constraints": None, "compatibility": None}
        ).model_dump(by_alias=True)
        assert body == {"hardConstraints": {}, "compatibility": {}}
