"""
Service layer for notifications.

Notifications are short messages addressed to a single user.  They are
written by the booking service when a booking is confirmed and by
administrators through broadcasts, which fan out into one row per
recipient.  Users can only read and acknowledge their own
notifications; rows are never deleted.
"""

import logging
from typing import Any, Dict, List

from club_manager_api.app.core.errors import InvalidRequest, NotFound
from club_manager_api.app.core.store import get_store, utc_now_iso
from club_manager_api.app.schemas.notification import NotificationCreate, NotificationRead


class NotificationService:
    """Service for sending and reading notifications."""

    @classmethod
    async def list_notifications(cls, current_user: Dict[str, Any]) -> List[NotificationRead]:
        """Return the caller's notifications in creation order."""
        document = get_store().load()
        return [
            NotificationRead.model_validate(n)
            for n in document["notifications"]
            if n.get("userId") == current_user.get("id")
        ]

    @classmethod
    async def send_notification(cls, payload: NotificationCreate, current_user: Dict[str, Any]) -> int:
        """Create one unread notification per recipient.

        Without explicit ``user_ids`` the message is sent to every
        account with the ``user`` role.  All rows of one broadcast share
        the same timestamp.  Returns the number of notifications
        created.
        """
        logger = logging.getLogger(__name__)
        message = payload.message.strip()
        if not message:
            raise InvalidRequest("Message must not be empty")
        store = get_store()
        with store.transaction() as document:
            if payload.user_ids is None:
                targets = [u["id"] for u in document["users"] if u.get("role") == "user"]
            else:
                targets = list(payload.user_ids)
            created_at = utc_now_iso()
            for user_id in targets:
                document["notifications"].append(
                    {
                        "id": store.next_id(document),
                        "userId": user_id,
                        "message": message,
                        "read": False,
                        "createdAt": created_at,
                    }
                )
        logger.info("Notification sent to %s user(s) by %s", len(targets), current_user.get("username"))
        return len(targets)

    @classmethod
    async def mark_read(cls, notification_id: int, current_user: Dict[str, Any]) -> NotificationRead:
        """Mark one of the caller's notifications as read.

        Marking an already read notification succeeds without changes.
        A notification owned by someone else is reported as missing.
        """
        with get_store().transaction() as document:
            notification = next(
                (n for n in document["notifications"] if n.get("id") == notification_id),
                None,
            )
            if not notification or notification.get("userId") != current_user.get("id"):
                raise NotFound("Notification not found")
            notification["read"] = True
        return NotificationRead.model_validate(notification)
