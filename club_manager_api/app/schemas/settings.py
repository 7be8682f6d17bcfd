"""Pydantic models for the club settings singleton."""

from typing import Optional

from .base import CamelModel


class ClubSettings(CamelModel):
    club_name: str
    club_description: str
    maintenance_mode: bool = False


class SettingsUpdate(CamelModel):
    """Partial settings update; omitted fields keep their value."""

    club_name: Optional[str] = None
    club_description: Optional[str] = None
    maintenance_mode: Optional[bool] = None


class SettingsEnvelope(CamelModel):
    success: bool = True
    settings: ClubSettings
