"""
Settings endpoints for API v1.

The club settings (name, description, maintenance flag) can only be
read and changed by the owner.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from club_manager_api.app.core.security import require_roles
from club_manager_api.app.schemas.settings import ClubSettings, SettingsEnvelope, SettingsUpdate
from club_manager_api.app.services.settings_service import SettingsService


router = APIRouter()


@router.get("", response_model=ClubSettings)
async def get_settings(current_user: Dict[str, Any] = Depends(require_roles("owner"))) -> ClubSettings:
    return await SettingsService.get_settings()


@router.put("", response_model=SettingsEnvelope)
async def update_settings(
    updates: SettingsUpdate,
    current_user: Dict[str, Any] = Depends(require_roles("owner")),
) -> SettingsEnvelope:
    """Partially update the settings; omitted fields are unchanged."""
    return SettingsEnvelope(settings=await SettingsService.update_settings(updates))
