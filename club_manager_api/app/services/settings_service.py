"""
Service layer for club settings.

The settings are a single object in the club document holding the
club name, its description and the maintenance flag.  Only the owner
reads or changes them; access control is enforced in the API layer.
"""

import logging

from club_manager_api.app.core.store import DEFAULT_SETTINGS, get_store
from club_manager_api.app.schemas.settings import ClubSettings, SettingsUpdate


class SettingsService:
    """Service for reading and updating club settings."""

    @classmethod
    async def get_settings(cls) -> ClubSettings:
        document = get_store().load()
        return ClubSettings.model_validate({**DEFAULT_SETTINGS, **document["settings"]})

    @classmethod
    async def update_settings(cls, updates: SettingsUpdate) -> ClubSettings:
        """Merge the supplied fields into the stored settings.

        Fields left out of ``updates`` keep their current value, so
        ``{"maintenanceMode": true}`` toggles maintenance without
        touching the club name or description.
        """
        logger = logging.getLogger(__name__)
        changes = updates.model_dump(by_alias=True, exclude_none=True)
        with get_store().transaction() as document:
            document["settings"] = {**document["settings"], **changes}
            merged = {**DEFAULT_SETTINGS, **document["settings"]}
        if "maintenanceMode" in changes:
            logger.warning("Maintenance mode %s", "enabled" if changes["maintenanceMode"] else "disabled")
        logger.info("Settings updated: %s", ", ".join(sorted(changes)) or "no changes")
        return ClubSettings.model_validate(merged)
