import pytest

from club_manager_api.app.core.errors import InvalidRequest, NotFound
from club_manager_api.app.schemas.notification import NotificationCreate
from club_manager_api.app.services.notification_service import NotificationService


@pytest.mark.asyncio
async def test_broadcast_reaches_every_plain_user(store, owner, make_user):
    # Seed data already holds owner, admin and one user.
    make_user("erin")
    make_user("frank")
    make_user("grace", role="admin")

    count = await NotificationService.send_notification(NotificationCreate(message="Pool closed"), owner)

    notifications = store.load()["notifications"]
    assert count == 3
    assert len(notifications) == 3
    assert all(not n["read"] for n in notifications)
    assert {n["message"] for n in notifications} == {"Pool closed"}
    assert len({n["createdAt"] for n in notifications}) == 1
    roles = {u["id"]: u["role"] for u in store.load()["users"]}
    assert {roles[n["userId"]] for n in notifications} == {"user"}


@pytest.mark.asyncio
async def test_fan_out_ids_are_unique(store, admin, make_user):
    for i in range(20):
        make_user(f"member{i}")

    count = await NotificationService.send_notification(NotificationCreate(message="Hi"), admin)

    ids = [n["id"] for n in store.load()["notifications"]]
    assert count == 21
    assert len(set(ids)) == len(ids) == 21


@pytest.mark.asyncio
async def test_explicit_targets(store, admin, owner):
    count = await NotificationService.send_notification(
        NotificationCreate(message="Staff meeting", user_ids=[1, 2]), admin
    )

    assert count == 2
    assert sorted(n["userId"] for n in store.load()["notifications"]) == [1, 2]
    assert [n.message for n in await NotificationService.list_notifications(owner)] == ["Staff meeting"]


@pytest.mark.asyncio
async def test_blank_message_is_rejected(store, admin):
    with pytest.raises(InvalidRequest):
        await NotificationService.send_notification(NotificationCreate(message="   "), admin)
    assert store.load()["notifications"] == []


@pytest.mark.asyncio
async def test_user_sees_only_own_notifications(store, admin, member, make_user):
    other = make_user("heidi")
    await NotificationService.send_notification(NotificationCreate(message="For you", user_ids=[member["id"]]), admin)
    await NotificationService.send_notification(NotificationCreate(message="Not yours", user_ids=[other["id"]]), admin)

    mine = await NotificationService.list_notifications(member)

    assert [n.message for n in mine] == ["For you"]


@pytest.mark.asyncio
async def test_mark_read_is_idempotent(store, admin, member):
    await NotificationService.send_notification(NotificationCreate(message="Ping", user_ids=[member["id"]]), admin)
    [note] = await NotificationService.list_notifications(member)

    first = await NotificationService.mark_read(note.id, member)
    second = await NotificationService.mark_read(note.id, member)

    assert first.read is True
    assert second.read is True
    assert store.load()["notifications"][0]["read"] is True


@pytest.mark.asyncio
async def test_cannot_mark_someone_elses_notification(store, admin, member, owner):
    await NotificationService.send_notification(NotificationCreate(message="Ping", user_ids=[member["id"]]), admin)
    [note] = await NotificationService.list_notifications(member)

    with pytest.raises(NotFound):
        await NotificationService.mark_read(note.id, owner)
    with pytest.raises(NotFound):
        await NotificationService.mark_read(9999, member)
    assert store.load()["notifications"][0]["read"] is False
