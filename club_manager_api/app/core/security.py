"""
Security helpers for password hashing and session tokens.

This module implements a lightweight JSON Web Token (JWT) mechanism
using HMAC‑SHA256 signatures and base64url encoding.  Tokens embed the
caller identity (``id``, ``username``, ``role``, ``name``) and an
expiration timestamp (``exp``).  Passwords are hashed with PBKDF2‑HMAC
SHA‑256 and a random per‑password salt.

It also provides the FastAPI dependencies that form the guard chain:
``get_current_user`` (authentication), ``require_roles``
(authorization) and ``require_active_club`` (maintenance gate).
"""

import base64
import hashlib
import hmac
import json
import os
import time
from typing import Any, Callable, Dict, Iterable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings
from .errors import Forbidden, Unauthenticated, Unavailable


PRIVILEGED_ROLES = ("admin", "owner")
IDENTITY_FIELDS = ("id", "username", "role", "name")

_HASH_SCHEME = "pbkdf2_sha256"


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = '=' * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC‑SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def identity_from_user(user: Dict[str, Any]) -> Dict[str, Any]:
    """Project a stored user record onto the public identity fields."""
    return {field: user.get(field) for field in IDENTITY_FIELDS}


def create_access_token(identity: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Create a signed token carrying the caller identity.

    Parameters
    ----------
    identity : dict
        Claims to embed; only ``id``, ``username``, ``role`` and
        ``name`` are kept.
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.

    Returns
    -------
    str
        A token of the form ``header.payload.signature``.
    """
    to_encode = identity_from_user(identity)
    exp_seconds = expires_delta or settings.access_token_expire_minutes * 60
    to_encode["exp"] = int(time.time()) + exp_seconds
    header = {"alg": settings.algorithm, "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(',', ':')).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(',', ':')).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify and decode a token.

    Returns the payload if the signature matches and ``exp`` lies in
    the future, otherwise ``None``.
    """
    parts = token.split('.')
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    try:
        signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
        expected_sig = _sign(signing_input, settings.secret_key)
        actual_sig = _b64_url_decode(signature_b64)
        # Constant‑time comparison to prevent timing attacks
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
        if not isinstance(data, dict):
            return None
        if data.get("exp") is None or int(data["exp"]) < int(time.time()):
            return None
    except (ValueError, TypeError):
        return None
    if any(field not in data for field in IDENTITY_FIELDS):
        return None
    return data


def hash_password(password: str, iterations: Optional[int] = None) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.  The result
    stores scheme, iteration count, salt and digest separated by ``$``
    so verification keeps working when the configured work factor
    changes.
    """
    iterations = iterations or settings.password_hash_iterations
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt, iterations)
    return f"{_HASH_SCHEME}${iterations}${salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored hash string."""
    try:
        scheme, iterations, salt_hex, hash_hex = hashed_password.split('$')
        if scheme != _HASH_SCHEME:
            return False
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
        dk = hashlib.pbkdf2_hmac('sha256', plain_password.encode('utf-8'), salt, int(iterations))
    except (AttributeError, TypeError, ValueError):
        return False
    return hmac.compare_digest(dk, stored_hash)


security = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Dict[str, Any]:
    """Dependency that authenticates the caller.

    The token is taken from the ``Authorization: Bearer`` header or,
    failing that, from the session cookie set at login.  The identity
    embedded in the token is trusted as is; there is no revocation
    list, so a token stays usable until it expires.
    """
    token = credentials.credentials if credentials else request.cookies.get(settings.cookie_name)
    if not token:
        raise Unauthenticated()
    payload = decode_access_token(token)
    if not payload:
        raise Unauthenticated("Invalid or expired token")
    return identity_from_user(payload)


def authorize(current_user: Dict[str, Any], roles: Iterable[str]) -> None:
    """Raise ``Forbidden`` unless the caller holds one of ``roles``."""
    if current_user.get("role") not in tuple(roles):
        raise Forbidden("Insufficient permissions")


def check_maintenance(current_user: Dict[str, Any], club_settings: Dict[str, Any]) -> None:
    """Block plain users while the club is in maintenance mode."""
    if club_settings.get("maintenanceMode") and current_user.get("role") == "user":
        raise Unavailable()


def require_roles(*roles: str) -> Callable[..., Dict[str, Any]]:
    """Dependency factory enforcing that the caller has one of ``roles``.

    Use as ``Depends(require_roles("admin", "owner"))``.
    """

    def _role_dependency(current_user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
        authorize(current_user, roles)
        return current_user

    return _role_dependency


def require_active_club(current_user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
    """Dependency that authenticates and applies the maintenance gate."""
    from .store import get_store

    check_maintenance(current_user, get_store().load()["settings"])
    return current_user
