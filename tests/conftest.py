import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from club_manager_api.app.core.config import settings
from club_manager_api.app.core.security import create_access_token
from club_manager_api.app.core.store import get_store, utc_now_iso
from club_manager_api.app.main import app


OWNER = {"id": 1, "username": "owner", "role": "owner", "name": "Club Owner"}
ADMIN = {"id": 2, "username": "admin", "role": "admin", "name": "Club Admin"}
MEMBER = {"id": 3, "username": "user", "role": "user", "name": "John Doe"}


@pytest.fixture(autouse=True)
def club_db(tmp_path, monkeypatch):
    """Give every test its own seeded JSON document.

    The PBKDF2 work factor is lowered so seeding and logins stay fast.
    """
    path = tmp_path / "database.json"
    monkeypatch.setattr(settings, "database_url", str(path))
    monkeypatch.setattr(settings, "password_hash_iterations", 1000)
    return path


@pytest.fixture
def store(club_db):
    store = get_store()
    store.initialize()
    return store


@pytest.fixture
def owner():
    return dict(OWNER)


@pytest.fixture
def admin():
    return dict(ADMIN)


@pytest.fixture
def member():
    return dict(MEMBER)


@pytest.fixture
def make_event(store):
    """Insert an event straight into the document and return it."""

    def _make_event(name="Jazz Night", capacity=10, price=20.0, **extra):
        with store.transaction() as document:
            event = {
                "id": store.next_id(document),
                "name": name,
                "description": extra.pop("description", ""),
                "date": extra.pop("date", "2026-12-01"),
                "time": extra.pop("time", "20:00"),
                "price": price,
                "capacity": capacity,
                "createdBy": 1,
                "createdAt": utc_now_iso(),
                **extra,
            }
            document["events"].append(event)
        return event

    return _make_event


@pytest.fixture
def make_user(store):
    """Insert an account (with an unusable password) and return its identity."""

    def _make_user(username, role="user", name=None):
        with store.transaction() as document:
            user = {
                "id": store.next_id(document),
                "username": username,
                "password": "!",
                "role": role,
                "name": name or username.title(),
            }
            document["users"].append(user)
        return {k: user[k] for k in ("id", "username", "role", "name")}

    return _make_user


@pytest.fixture
def auth_headers():
    def _auth_headers(identity):
        return {"Authorization": f"Bearer {create_access_token(identity)}"}

    return _auth_headers


@pytest_asyncio.fixture
async def api_client(store):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
