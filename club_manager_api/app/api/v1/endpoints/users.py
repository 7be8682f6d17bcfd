"""
User management endpoints for API v1.

All routes are reserved for the owner.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from club_manager_api.app.core.security import require_roles
from club_manager_api.app.schemas.common import SuccessResponse
from club_manager_api.app.schemas.user import UserCreate, UserEnvelope, UserRead
from club_manager_api.app.services.user_service import UserService


router = APIRouter()


@router.get("", response_model=List[UserRead])
async def list_users(current_user: Dict[str, Any] = Depends(require_roles("owner"))) -> List[UserRead]:
    return await UserService.list_users()


@router.post("", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
async def create_user(
    user: UserCreate,
    current_user: Dict[str, Any] = Depends(require_roles("owner")),
) -> UserEnvelope:
    """Create an account.  Returns 409 if the username is taken."""
    return UserEnvelope(user=await UserService.create_user(user, current_user))


@router.delete("/{user_id}", response_model=SuccessResponse)
async def delete_user(
    user_id: int,
    current_user: Dict[str, Any] = Depends(require_roles("owner")),
) -> SuccessResponse:
    """Delete an account.  The owner cannot delete their own account."""
    await UserService.delete_user(user_id, current_user)
    return SuccessResponse()
