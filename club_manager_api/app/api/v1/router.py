"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under one prefix.  When a
new domain is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import (
    auth,
    events,
    bookings,
    notifications,
    settings,
    users,
)

router = APIRouter()

# Login, logout and /me live at the root of the prefix.
router.include_router(auth.router, tags=["auth"])
router.include_router(settings.router, prefix="/settings", tags=["settings"])
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
router.include_router(notifications.router, prefix="/notifications", tags=["notifications"])
router.include_router(users.router, prefix="/users", tags=["users"])
