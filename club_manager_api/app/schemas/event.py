"""
Pydantic models for event data.

``EventBase`` holds the fields an administrator supplies;
``EventRead`` adds the identifier and creation stamps assigned by the
service.  ``EventUpdate`` makes every field optional for partial
updates.
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel


class EventBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["Wine Tasting"])
    description: str = Field("", examples=["An evening of regional wines"])
    date: str = Field(..., examples=["2026-11-20"])
    time: str = Field(..., examples=["19:30"])
    price: float = Field(..., ge=0, examples=[25.0])
    capacity: int = Field(..., gt=0, examples=[40])


class EventCreate(EventBase):
    """Schema for creating an event."""
    pass


class EventUpdate(CamelModel):
    """Schema for updating an event.

    All fields are optional; only provided fields will be updated.
    """

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    capacity: Optional[int] = Field(None, gt=0)


class EventRead(EventBase):
    id: int
    created_by: Optional[int] = None
    created_at: str


class EventEnvelope(CamelModel):
    success: bool = True
    event: EventRead
