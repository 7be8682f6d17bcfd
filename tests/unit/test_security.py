import pytest

from club_manager_api.app.core.config import settings
from club_manager_api.app.core.errors import Forbidden, Unavailable
from club_manager_api.app.core.security import (
    authorize,
    check_maintenance,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_token_round_trip_carries_identity(member):
    payload = decode_access_token(create_access_token({**member, "password": "secret"}))

    assert {k: payload[k] for k in ("id", "username", "role", "name")} == member
    assert "password" not in payload
    assert payload["exp"] > 0


def test_token_expires_after_configured_window(member, monkeypatch):
    monkeypatch.setattr("club_manager_api.app.core.security.time.time", lambda: 1_000_000)
    payload = decode_access_token(create_access_token(member))
    assert payload["exp"] == 1_000_000 + settings.access_token_expire_minutes * 60

    monkeypatch.setattr("club_manager_api.app.core.security.time.time", lambda: payload["exp"] + 1)
    token = create_access_token(member, expires_delta=60)
    monkeypatch.setattr("club_manager_api.app.core.security.time.time", lambda: payload["exp"] + 120)
    assert decode_access_token(token) is None


def test_tampered_token_is_rejected(member):
    header, payload, signature = create_access_token(member).split(".")
    forged = create_access_token({**member, "role": "owner"}).split(".")[1]

    assert decode_access_token(f"{header}.{forged}.{signature}") is None


def test_token_signed_with_other_secret_is_rejected(member, monkeypatch):
    token = create_access_token(member)
    monkeypatch.setattr(settings, "secret_key", "another-secret")
    assert decode_access_token(token) is None


@pytest.mark.parametrize("token", ["", "abc", "a.b", "a.b.c", "....", "%%%.%%%.%%%"])
def test_malformed_tokens_are_rejected(token):
    assert decode_access_token(token) is None


def test_password_hash_is_salted_and_verifiable():
    first = hash_password("owner123")
    second = hash_password("owner123")

    assert first != second
    assert first.startswith(f"pbkdf2_sha256${settings.password_hash_iterations}$")
    assert verify_password("owner123", first)
    assert verify_password("owner123", second)
    assert not verify_password("owner124", first)


def test_hash_keeps_its_own_work_factor(monkeypatch):
    hashed = hash_password("pw", iterations=1500)
    monkeypatch.setattr(settings, "password_hash_iterations", 2000)
    assert verify_password("pw", hashed)


@pytest.mark.parametrize("stored", [None, "", "plain", "md5$1$00$00", "pbkdf2_sha256$x$zz$zz"])
def test_verify_password_rejects_unusable_hashes(stored):
    assert verify_password("anything", stored) is False


def test_authorize(admin, member):
    authorize(admin, ("admin", "owner"))
    with pytest.raises(Forbidden):
        authorize(member, ("admin", "owner"))


def test_maintenance_blocks_only_plain_users(owner, admin, member):
    on = {"maintenanceMode": True}
    off = {"maintenanceMode": False}

    with pytest.raises(Unavailable):
        check_maintenance(member, on)
    check_maintenance(admin, on)
    check_maintenance(owner, on)
    check_maintenance(member, off)
