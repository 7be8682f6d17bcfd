"""
JSON document storage.

All club data (users, events, bookings, notifications and settings)
lives in one JSON document.  Every operation reads the whole document
from disk and writers replace the whole file; there is no in‑memory
cache, so a request always sees the latest saved state.

Writers go through ``JsonStore.transaction`` which holds a process‑wide
lock across load, mutation and save.  Within one server process this
makes the capacity check and the booking insert atomic.  Separate
processes sharing the same file are not coordinated.
"""

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator

from .config import settings
from .errors import StorageError


logger = logging.getLogger(__name__)

COLLECTIONS = ("users", "events", "bookings", "notifications")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "maintenanceMode": False,
    "clubName": "Elite Club",
    "clubDescription": "Premium events and experiences",
}

# (username, password, role, display name) for a brand new document.
SEED_USERS = (
    ("owner", "owner123", "owner", "Club Owner"),
    ("admin", "admin123", "admin", "Club Admin"),
    ("user", "user123", "user", "John Doe"),
)

# One lock for every store instance: instances are cheap and created per
# call, the file they point at is what needs protecting.
_write_lock = threading.RLock()


def utc_now_iso() -> str:
    """Timestamp format used for every ``createdAt`` field."""
    return datetime.now(timezone.utc).isoformat()


def get_database_path() -> str:
    """Compute the path to the JSON document.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def build_seed_document() -> Dict[str, Any]:
    """Return the initial document with the three default accounts."""
    from .security import hash_password

    users = [
        {
            "id": index,
            "username": username,
            "password": hash_password(password),
            "role": role,
            "name": name,
        }
        for index, (username, password, role, name) in enumerate(SEED_USERS, start=1)
    ]
    return {
        "users": users,
        "events": [],
        "bookings": [],
        "notifications": [],
        "settings": dict(DEFAULT_SETTINGS),
        "nextId": len(users) + 1,
    }


class JsonStore:
    """Whole‑document persistence backed by a single JSON file."""

    def __init__(self, path: str) -> None:
        self.path = path

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def initialize(self) -> bool:
        """Create the seeded document if the file does not exist yet.

        Returns ``True`` when a new file was written.
        """
        with _write_lock:
            if self.exists():
                return False
            self.save(build_seed_document())
            logger.info("Created club database at %s with default accounts", self.path)
            return True

    def load(self) -> Dict[str, Any]:
        """Read and validate the whole document.

        Raises
        ------
        StorageError
            If the file cannot be read, is not valid JSON or lacks one
            of the expected collections.
        """
        self.initialize()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error("Failed to read club database %s: %s", self.path, exc)
            raise StorageError(f"Could not read database: {exc}") from exc

        if not isinstance(document, dict):
            raise StorageError("Database document must be a JSON object")
        for key in COLLECTIONS:
            if not isinstance(document.get(key), list):
                raise StorageError(f"Database document is missing the '{key}' collection")
        if not isinstance(document.get("settings"), dict):
            raise StorageError("Database document is missing the 'settings' object")
        return document

    def save(self, document: Dict[str, Any]) -> None:
        """Replace the file contents with ``document``.

        The JSON is written to a temporary file in the same directory
        and renamed over the target, so readers never observe a
        partially written document.
        """
        directory = os.path.dirname(self.path) or "."
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=".club-", suffix=".json", dir=directory)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(document, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Failed to write club database %s: %s", self.path, exc)
            raise StorageError(f"Could not write database: {exc}") from exc

    @contextmanager
    def transaction(self) -> Iterator[Dict[str, Any]]:
        """Load the document, yield it for mutation and save it.

        The save is skipped if the block raises, leaving the file
        untouched.
        """
        with _write_lock:
            document = self.load()
            yield document
            self.save(document)

    @staticmethod
    def next_id(document: Dict[str, Any]) -> int:
        """Return a fresh entity id and advance the document counter."""
        current = document.get("nextId")
        if not isinstance(current, int):
            # Documents written without a counter resume after the
            # highest id in use.
            ids = [
                item["id"]
                for key in COLLECTIONS
                for item in document.get(key, [])
                if isinstance(item.get("id"), int)
            ]
            current = max(ids, default=0) + 1
        document["nextId"] = current + 1
        return current


def get_store() -> JsonStore:
    """Return a store bound to the currently configured database path."""
    return JsonStore(get_database_path())


def init_db() -> None:
    """Create the database file on first start."""
    get_store().initialize()
