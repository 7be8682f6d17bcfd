"""Pydantic models for user notifications."""

from typing import List, Optional

from pydantic import Field

from .base import CamelModel


class NotificationCreate(CamelModel):
    """Broadcast request.

    When ``user_ids`` is omitted the message goes to every account with
    the ``user`` role.
    """

    message: str = Field(..., min_length=1, examples=["Doors open at 19:00 tonight"])
    user_ids: Optional[List[int]] = None


class NotificationRead(CamelModel):
    id: int
    user_id: int
    message: str
    read: bool = False
    created_at: str


class BroadcastResult(CamelModel):
    success: bool = True
    count: int
