"""Club Manager API client.

This module defines a small client wrapper around the Club Manager
HTTP API.  It uses the ``requests`` library internally and mirrors the
routes one method per operation:

* :meth:`ClubClient.login` / :meth:`ClubClient.logout` / :meth:`ClubClient.me`
* events: list, get, create, update, delete
* bookings: list, book, cancel
* notifications: list, send, mark read
* settings: get, update
* users: list, create, delete

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list for
listing calls) and ``error`` is a dictionary with ``status_code`` and
``message`` keys, where ``message`` is the server's ``error`` text.

After a successful :meth:`ClubClient.login` the returned token is sent
as ``Authorization: Bearer <token>`` on every following request.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ClubClient:
    """Client for interacting with the Club Manager API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api",
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server URL, e.g. ``http://localhost:3000``.
            prefix: Path prefix the API is mounted under.
            token: Optional session token obtained earlier.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + prefix.rstrip("/")
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/events``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def _field(self, method: str, path: str, field: str, json_body: Any | None = None) -> Tuple[Any, Optional[Error]]:
        """Perform a request and unwrap ``field`` from the response envelope."""
        data, error = self._request(method, path, json_body=json_body)
        if error:
            return None, error
        return (data or {}).get(field), None

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------
    def login(self, username: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Log in and remember the session token.

        Returns:
            A tuple ``(user, error)``.
        """
        data, error = self._request("POST", "/login", json_body={"username": username, "password": password})
        if error:
            return None, error
        self.token = data.get("access_token")
        return data.get("user"), None

    def logout(self) -> Tuple[bool, Optional[Error]]:
        data, error = self._request("POST", "/logout")
        self.token = None
        if error:
            return False, error
        return bool(data and data.get("success")), None

    def me(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._field("GET", "/me", "user")

    # ------------------------------------------------------------------
    # Event operations
    # ------------------------------------------------------------------
    def list_events(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/events")

    def get_event(self, event_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/events/{event_id}")

    def create_event(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._field("POST", "/events", "event", payload)

    def update_event(self, event_id: int, changes: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._field("PUT", f"/events/{event_id}", "event", changes)

    def delete_event(self, event_id: int) -> Tuple[bool, Optional[Error]]:
        success, error = self._field("DELETE", f"/events/{event_id}", "success")
        return bool(success), error

    # ------------------------------------------------------------------
    # Booking operations
    # ------------------------------------------------------------------
    def list_bookings(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/bookings")

    def book(self, event_id: int, tickets: int = 1) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Book ``tickets`` seats for an event.

        A full event comes back as an error with status 400 and the
        message ``"Not enough capacity"``.
        """
        return self._field("POST", "/bookings", "booking", {"eventId": event_id, "tickets": tickets})

    def cancel_booking(self, booking_id: int) -> Tuple[bool, Optional[Error]]:
        success, error = self._field("DELETE", f"/bookings/{booking_id}", "success")
        return bool(success), error

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------
    def list_notifications(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/notifications")

    def send_notification(
        self, message: str, user_ids: Optional[List[int]] = None
    ) -> Tuple[Optional[int], Optional[Error]]:
        """Broadcast a message; returns the number of notifications created."""
        payload: Dict[str, Any] = {"message": message}
        if user_ids is not None:
            payload["userIds"] = user_ids
        return self._field("POST", "/notifications", "count", payload)

    def mark_notification_read(self, notification_id: int) -> Tuple[bool, Optional[Error]]:
        success, error = self._field("PUT", f"/notifications/{notification_id}/read", "success")
        return bool(success), error

    # ------------------------------------------------------------------
    # Settings and users (owner only)
    # ------------------------------------------------------------------
    def get_settings(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/settings")

    def update_settings(self, changes: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._field("PUT", "/settings", "settings", changes)

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/users")

    def create_user(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._field("POST", "/users", "user", payload)

    def delete_user(self, user_id: int) -> Tuple[bool, Optional[Error]]:
        success, error = self._field("DELETE", f"/users/{user_id}", "success")
        return bool(success), error
