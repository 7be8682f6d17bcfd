"""
Authentication endpoints for API v1.

Login issues a signed session token, returned in the body for API
clients and set as an HTTP‑only cookie for browsers.  Logout only
clears the cookie: tokens are not tracked server side and remain
valid until they expire.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Response

from club_manager_api.app.core.config import settings
from club_manager_api.app.core.security import create_access_token, get_current_user
from club_manager_api.app.schemas.common import SuccessResponse
from club_manager_api.app.schemas.user import LoginRequest, MeResponse, UserRead
from club_manager_api.app.services.user_service import UserService


router = APIRouter()


@router.post("/login")
async def login(credentials: LoginRequest, response: Response) -> Dict[str, Any]:
    """Authenticate with username and password.

    Any failure returns the same 401 ``invalid_credentials`` error.
    """
    identity = await UserService.authenticate(credentials.username, credentials.password)
    token = create_access_token(identity)
    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        httponly=True,
        max_age=settings.access_token_expire_minutes * 60,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    return {
        "success": True,
        "user": UserRead.model_validate(identity).model_dump(by_alias=True),
        "access_token": token,
        "token_type": "bearer",
    }


@router.post("/logout", response_model=SuccessResponse)
async def logout(response: Response) -> SuccessResponse:
    response.delete_cookie(settings.cookie_name)
    return SuccessResponse()


@router.get("/me", response_model=MeResponse)
async def me(current_user: Dict[str, Any] = Depends(get_current_user)) -> MeResponse:
    """Return the identity embedded in the caller's token."""
    return MeResponse(user=UserRead.model_validate(current_user))
