"""
Business logic for events.

Events are created, changed and removed by administrators and the
owner; everyone signed in may read them.  Deleting an event leaves its
bookings in place so the booking history stays intact; those rows are
shown with an "Unknown Event" name afterwards.
"""

import logging
from typing import Any, Dict, List, Optional

from club_manager_api.app.core.errors import CapacityExceeded, NotFound
from club_manager_api.app.core.store import get_store, utc_now_iso
from club_manager_api.app.schemas.event import EventCreate, EventRead, EventUpdate


logger = logging.getLogger(__name__)


def find_event(document: Dict[str, Any], event_id: int) -> Optional[Dict[str, Any]]:
    return next((e for e in document["events"] if e.get("id") == event_id), None)


def booked_tickets(document: Dict[str, Any], event_id: int) -> int:
    """Tickets held by non‑cancelled bookings for ``event_id``."""
    return sum(
        b.get("tickets", 0)
        for b in document["bookings"]
        if b.get("eventId") == event_id and b.get("status") != "cancelled"
    )


class EventService:
    """Service for managing club events."""

    @classmethod
    async def list_events(cls) -> List[EventRead]:
        document = get_store().load()
        return [EventRead.model_validate(e) for e in document["events"]]

    @classmethod
    async def get_event(cls, event_id: int) -> EventRead:
        event = find_event(get_store().load(), event_id)
        if not event:
            raise NotFound("Event not found")
        return EventRead.model_validate(event)

    @classmethod
    async def create_event(cls, data: EventCreate, current_user: Dict[str, Any]) -> EventRead:
        """Create a new event stamped with its creator and creation time."""
        store = get_store()
        with store.transaction() as document:
            event = {
                "id": store.next_id(document),
                **data.model_dump(by_alias=True),
                "createdBy": current_user.get("id"),
                "createdAt": utc_now_iso(),
            }
            document["events"].append(event)
        logger.info("Event %s '%s' created by %s", event["id"], event["name"], current_user.get("username"))
        return EventRead.model_validate(event)

    @classmethod
    async def update_event(cls, event_id: int, updates: EventUpdate) -> EventRead:
        """Apply a partial update to an event.

        Only supplied fields change.  The capacity may not drop below
        the number of tickets already sold.
        """
        changes = updates.model_dump(by_alias=True, exclude_none=True)
        with get_store().transaction() as document:
            event = find_event(document, event_id)
            if not event:
                raise NotFound("Event not found")
            if "capacity" in changes:
                sold = booked_tickets(document, event_id)
                if changes["capacity"] < sold:
                    raise CapacityExceeded(
                        f"Capacity cannot be lower than the {sold} ticket(s) already booked"
                    )
            event.update(changes)
        logger.info("Event %s updated: %s", event_id, ", ".join(sorted(changes)) or "no changes")
        return EventRead.model_validate(event)

    @classmethod
    async def delete_event(cls, event_id: int) -> None:
        with get_store().transaction() as document:
            if not find_event(document, event_id):
                raise NotFound("Event not found")
            document["events"] = [e for e in document["events"] if e.get("id") != event_id]
        logger.info("Event %s deleted", event_id)
