"""
Pydantic models for event bookings.

A booking holds a number of tickets for one event.  ``total_price`` is
computed once when the booking is made and never recalculated.
"""

from typing import Literal

from pydantic import Field

from .base import CamelModel


class BookingCreate(CamelModel):
    event_id: int = Field(..., examples=[4])
    tickets: int = Field(1, ge=1, examples=[2])


class BookingRead(CamelModel):
    id: int
    user_id: int
    event_id: int
    tickets: int
    total_price: float
    status: Literal["confirmed", "cancelled"]
    payment_status: Literal["paid"] = "paid"
    created_at: str


class BookingDetail(BookingRead):
    """Booking row enriched with the event and user display names."""

    event_name: str
    user_name: str


class BookingEnvelope(CamelModel):
    success: bool = True
    booking: BookingRead
