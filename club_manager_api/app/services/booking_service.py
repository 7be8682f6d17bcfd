"""
Business logic for bookings.

The ``BookingService`` enforces the capacity rule: the tickets of all
non‑cancelled bookings for an event never exceed the event capacity.
The check and the insert run inside one store transaction, so two
requests in the same process cannot both take the last seat.

Cancelling is a status change only.  Tickets and price stay on the
booking and the freed seats become available because cancelled
bookings are left out of the capacity sum.
"""

import logging
from typing import Any, Dict, List

from club_manager_api.app.core.errors import CapacityExceeded, Forbidden, InvalidRequest, NotFound
from club_manager_api.app.core.store import get_store, utc_now_iso
from club_manager_api.app.schemas.booking import BookingCreate, BookingDetail, BookingRead
from club_manager_api.app.services.event_service import booked_tickets, find_event


class BookingService:
    """Service for creating, cancelling and listing bookings."""

    @classmethod
    async def create_booking(cls, booking: BookingCreate, current_user: Dict[str, Any]) -> BookingRead:
        """Book tickets for an event.

        On success the booking is confirmed and paid, and a
        confirmation notification for the caller is written in the same
        save.

        Raises
        ------
        NotFound
            The event does not exist.
        InvalidRequest
            Fewer than one ticket was requested.
        CapacityExceeded
            The event does not have enough seats left.
        """
        logger = logging.getLogger(__name__)
        if booking.tickets < 1:
            raise InvalidRequest("At least one ticket is required")
        store = get_store()
        with store.transaction() as document:
            event = find_event(document, booking.event_id)
            if not event:
                raise NotFound("Event not found")
            current_booked = booked_tickets(document, booking.event_id)
            if current_booked + booking.tickets > event.get("capacity", 0):
                logger.info(
                    "Booking of %s ticket(s) for event %s refused: %s of %s taken",
                    booking.tickets, booking.event_id, current_booked, event.get("capacity"),
                )
                raise CapacityExceeded()

            created_at = utc_now_iso()
            record = {
                "id": store.next_id(document),
                "userId": current_user.get("id"),
                "eventId": booking.event_id,
                "tickets": booking.tickets,
                "totalPrice": event.get("price", 0) * booking.tickets,
                "status": "confirmed",
                "paymentStatus": "paid",
                "createdAt": created_at,
            }
            document["bookings"].append(record)
            document["notifications"].append(
                {
                    "id": store.next_id(document),
                    "userId": current_user.get("id"),
                    "message": f"Booking confirmed for {event.get('name')} - {booking.tickets} ticket(s)",
                    "read": False,
                    "createdAt": created_at,
                }
            )
        logger.info(
            "Booking %s: %s ticket(s) for event %s by %s",
            record["id"], booking.tickets, booking.event_id, current_user.get("username"),
        )
        return BookingRead.model_validate(record)

    @classmethod
    async def cancel_booking(cls, booking_id: int, current_user: Dict[str, Any]) -> BookingRead:
        """Mark a booking as cancelled.

        Plain users may only cancel their own bookings; administrators
        and the owner may cancel any booking.
        """
        logger = logging.getLogger(__name__)
        with get_store().transaction() as document:
            booking = next((b for b in document["bookings"] if b.get("id") == booking_id), None)
            if not booking:
                raise NotFound("Booking not found")
            if current_user.get("role") == "user" and booking.get("userId") != current_user.get("id"):
                raise Forbidden()
            booking["status"] = "cancelled"
        logger.info("Booking %s cancelled by %s", booking_id, current_user.get("username"))
        return BookingRead.model_validate(booking)

    @classmethod
    async def list_bookings(cls, current_user: Dict[str, Any]) -> List[BookingDetail]:
        """List bookings visible to the caller with event and user names."""
        document = get_store().load()
        bookings = document["bookings"]
        if current_user.get("role") == "user":
            bookings = [b for b in bookings if b.get("userId") == current_user.get("id")]

        event_names = {e.get("id"): e.get("name") for e in document["events"]}
        user_names = {u.get("id"): u.get("name") for u in document["users"]}
        return [
            BookingDetail.model_validate(
                {
                    **b,
                    "eventName": event_names.get(b.get("eventId")) or "Unknown Event",
                    "userName": user_names.get(b.get("userId")) or "Unknown User",
                }
            )
            for b in bookings
        ]
