"""
Booking endpoints for API v1.

Plain users see and cancel only their own bookings; administrators and
the owner see and may cancel all of them.  Listing and creating
bookings is blocked for plain users during maintenance, cancelling is
not.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from club_manager_api.app.core.security import get_current_user, require_active_club
from club_manager_api.app.schemas.booking import BookingCreate, BookingDetail, BookingEnvelope
from club_manager_api.app.schemas.common import SuccessResponse
from club_manager_api.app.services.booking_service import BookingService


router = APIRouter()


@router.get("", response_model=List[BookingDetail])
async def list_bookings(current_user: Dict[str, Any] = Depends(require_active_club)) -> List[BookingDetail]:
    return await BookingService.list_bookings(current_user)


@router.post("", response_model=BookingEnvelope, status_code=status.HTTP_201_CREATED)
async def create_booking(
    booking: BookingCreate,
    current_user: Dict[str, Any] = Depends(require_active_club),
) -> BookingEnvelope:
    """Book tickets for an event.

    Returns 400 ``capacity_exceeded`` if the event does not have
    enough seats left.
    """
    return BookingEnvelope(booking=await BookingService.create_booking(booking, current_user))


@router.delete("/{booking_id}", response_model=SuccessResponse)
async def cancel_booking(
    booking_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> SuccessResponse:
    await BookingService.cancel_booking(booking_id, current_user)
    return SuccessResponse()
