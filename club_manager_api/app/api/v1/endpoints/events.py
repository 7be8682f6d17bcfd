"""
Event endpoints for API v1.

Reading events requires a session and is blocked for plain users while
the club is in maintenance mode.  Creating, updating and deleting
events is reserved for administrators and the owner.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from club_manager_api.app.core.security import PRIVILEGED_ROLES, require_active_club, require_roles
from club_manager_api.app.schemas.common import SuccessResponse
from club_manager_api.app.schemas.event import EventCreate, EventEnvelope, EventRead, EventUpdate
from club_manager_api.app.services.event_service import EventService


router = APIRouter()


@router.get("", response_model=List[EventRead])
async def list_events(current_user: Dict[str, Any] = Depends(require_active_club)) -> List[EventRead]:
    return await EventService.list_events()


@router.get("/{event_id}", response_model=EventRead)
async def get_event(
    event_id: int,
    current_user: Dict[str, Any] = Depends(require_active_club),
) -> EventRead:
    return await EventService.get_event(event_id)


@router.post("", response_model=EventEnvelope, status_code=status.HTTP_201_CREATED)
async def create_event(
    event: EventCreate,
    current_user: Dict[str, Any] = Depends(require_roles(*PRIVILEGED_ROLES)),
) -> EventEnvelope:
    return EventEnvelope(event=await EventService.create_event(event, current_user))


@router.put("/{event_id}", response_model=EventEnvelope)
async def update_event(
    event_id: int,
    updates: EventUpdate,
    current_user: Dict[str, Any] = Depends(require_roles(*PRIVILEGED_ROLES)),
) -> EventEnvelope:
    """Update an existing event.

    Partial updates are supported; unspecified fields remain unchanged.
    """
    return EventEnvelope(event=await EventService.update_event(event_id, updates))


@router.delete("/{event_id}", response_model=SuccessResponse)
async def delete_event(
    event_id: int,
    current_user: Dict[str, Any] = Depends(require_roles(*PRIVILEGED_ROLES)),
) -> SuccessResponse:
    """Delete an event.  Existing bookings for it are kept."""
    await EventService.delete_event(event_id)
    return SuccessResponse()
