"""
Business logic for users.

The ``UserService`` handles login and the owner's account management.
Passwords are stored as salted PBKDF2 hashes and never leave the
service: every public result is a ``UserRead`` projection.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional

from club_manager_api.app.core.errors import Conflict, InvalidCredentials, InvalidRequest, NotFound
from club_manager_api.app.core.security import hash_password, identity_from_user, verify_password
from club_manager_api.app.core.store import get_store
from club_manager_api.app.schemas.user import UserCreate, UserRead


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password("not-a-real-password")


def find_user_by_username(document: Dict[str, Any], username: str) -> Optional[Dict[str, Any]]:
    return next((u for u in document["users"] if u.get("username") == username), None)


class UserService:
    """Service for authentication and user management."""

    @classmethod
    async def authenticate(cls, username: str, password: str) -> Dict[str, Any]:
        """Check credentials and return the caller identity.

        An unknown username and a wrong password raise the same
        ``InvalidCredentials`` error.  A dummy hash is verified for
        unknown usernames so both paths cost the same.
        """
        logger = logging.getLogger(__name__)
        user = find_user_by_username(get_store().load(), username)
        if user is None:
            verify_password(password, _dummy_hash())
            logger.info("Failed login for %r", username)
            raise InvalidCredentials()
        if not verify_password(password, user.get("password")):
            logger.info("Failed login for %r", username)
            raise InvalidCredentials()
        logger.info("User %s logged in", username)
        return identity_from_user(user)

    @classmethod
    async def list_users(cls) -> List[UserRead]:
        """Return every account without password hashes."""
        document = get_store().load()
        return [UserRead.model_validate(identity_from_user(u)) for u in document["users"]]

    @classmethod
    async def create_user(cls, data: UserCreate, current_user: Dict[str, Any]) -> UserRead:
        """Create an account with a hashed password.

        Raises ``Conflict`` if the username is taken; the document is
        not written in that case.
        """
        logger = logging.getLogger(__name__)
        store = get_store()
        with store.transaction() as document:
            if find_user_by_username(document, data.username):
                raise Conflict("Username already exists")
            user = {
                "id": store.next_id(document),
                "username": data.username,
                "password": hash_password(data.password),
                "role": data.role,
                "name": data.name,
            }
            document["users"].append(user)
        logger.info(
            "User %s (%s) created by %s", data.username, data.role, current_user.get("username")
        )
        return UserRead.model_validate(identity_from_user(user))

    @classmethod
    async def delete_user(cls, user_id: int, current_user: Dict[str, Any]) -> None:
        """Delete an account.

        The caller cannot delete their own account.  Bookings and
        notifications of the deleted user are kept.
        """
        logger = logging.getLogger(__name__)
        if user_id == current_user.get("id"):
            raise InvalidRequest("Cannot delete yourself")
        with get_store().transaction() as document:
            if not any(u.get("id") == user_id for u in document["users"]):
                raise NotFound("User not found")
            document["users"] = [u for u in document["users"] if u.get("id") != user_id]
        logger.info("User %s deleted by %s", user_id, current_user.get("username"))
