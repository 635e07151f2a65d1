"""Preferences module."""

from src.modules.preferences.models import (
    Compatibility,
    HardConstraints,
    PreferencesResponse,
    PreferencesUpdate,
)
from src.modules.preferences.repository import PreferencesRepository

__all__ = [
    "HardConstraints",
    "Compatibility",
    "PreferencesUpdate",
    "PreferencesResponse",
    "PreferencesRepository",
]
