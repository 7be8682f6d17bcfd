"""
Pydantic models for user data.

``UserRead`` is the public projection of a stored user and never
includes the password hash.
"""

from typing import Literal

from pydantic import Field

from .base import CamelModel


Role = Literal["owner", "admin", "user"]


class LoginRequest(CamelModel):
    username: str
    password: str


class UserCreate(CamelModel):
    """Schema for creating a user (owner only)."""

    username: str = Field(..., min_length=1, examples=["jane"])
    password: str = Field(..., min_length=1)
    role: Role = "user"
    name: str = Field(..., min_length=1, examples=["Jane Doe"])


class UserRead(CamelModel):
    id: int
    username: str
    role: Role
    name: str


class UserEnvelope(CamelModel):
    success: bool = True
    user: UserRead


class MeResponse(CamelModel):
    user: UserRead
