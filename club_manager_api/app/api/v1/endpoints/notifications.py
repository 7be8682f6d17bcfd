"""
Notification endpoints for API v1.

Every user reads and acknowledges their own notifications.
Administrators and the owner can broadcast a message to chosen users
or, by default, to every account with the ``user`` role.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from club_manager_api.app.core.security import (
    PRIVILEGED_ROLES,
    get_current_user,
    require_active_club,
    require_roles,
)
from club_manager_api.app.schemas.common import SuccessResponse
from club_manager_api.app.schemas.notification import BroadcastResult, NotificationCreate, NotificationRead
from club_manager_api.app.services.notification_service import NotificationService


router = APIRouter()


@router.get("", response_model=List[NotificationRead])
async def list_notifications(
    current_user: Dict[str, Any] = Depends(require_active_club),
) -> List[NotificationRead]:
    return await NotificationService.list_notifications(current_user)


@router.post("", response_model=BroadcastResult, status_code=status.HTTP_201_CREATED)
async def send_notification(
    payload: NotificationCreate,
    current_user: Dict[str, Any] = Depends(require_roles(*PRIVILEGED_ROLES)),
) -> BroadcastResult:
    count = await NotificationService.send_notification(payload, current_user)
    return BroadcastResult(count=count)


@router.put("/{notification_id}/read", response_model=SuccessResponse)
async def mark_notification_read(
    notification_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> SuccessResponse:
    await NotificationService.mark_read(notification_id, current_user)
    return SuccessResponse()
