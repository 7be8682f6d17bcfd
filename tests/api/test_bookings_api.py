import pytest


@pytest.mark.asyncio
async def test_capacity_scenario_over_http(api_client, member, make_user, auth_headers, make_event):
    event = make_event(name="Gala", capacity=2, price=50.0)
    other = make_user("judy")

    first = await api_client.post("/api/bookings", json={"eventId": event["id"], "tickets": 1}, headers=auth_headers(member))
    second = await api_client.post("/api/bookings", json={"eventId": event["id"], "tickets": 1}, headers=auth_headers(other))
    assert first.status_code == second.status_code == 201
    booking = first.json()["booking"]
    assert booking["totalPrice"] == 50.0
    assert booking["status"] == "confirmed"
    assert booking["paymentStatus"] == "paid"

    refused = await api_client.post("/api/bookings", json={"eventId": event["id"], "tickets": 1}, headers=auth_headers(member))
    assert refused.status_code == 400
    assert refused.json() == {"error": "Not enough capacity", "code": "capacity_exceeded"}

    cancelled = await api_client.delete(f"/api/bookings/{booking['id']}", headers=auth_headers(member))
    assert cancelled.json() == {"success": True}

    retry = await api_client.post("/api/bookings", json={"eventId": event["id"], "tickets": 1}, headers=auth_headers(member))
    assert retry.status_code == 201


@pytest.mark.asyncio
async def test_booking_unknown_event(api_client, member, auth_headers):
    resp = await api_client.post("/api/bookings", json={"eventId": 4040, "tickets": 1}, headers=auth_headers(member))
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_zero_tickets_is_invalid(api_client, member, auth_headers, make_event):
    event = make_event()
    resp = await api_client.post("/api/bookings", json={"eventId": event["id"], "tickets": 0}, headers=auth_headers(member))

    assert resp.status_code == 400
    assert resp.json()["code"] == "invalid_request"


@pytest.mark.asyncio
async def test_bookings_are_scoped_by_role(api_client, admin, member, make_user, auth_headers, make_event):
    event = make_event(name="Quiz")
    other = make_user("ken", name="Ken")
    await api_client.post("/api/bookings", json={"eventId": event["id"], "tickets": 2}, headers=auth_headers(member))
    await api_client.post("/api/bookings", json={"eventId": event["id"], "tickets": 1}, headers=auth_headers(other))

    mine = (await api_client.get("/api/bookings", headers=auth_headers(member))).json()
    everything = (await api_client.get("/api/bookings", headers=auth_headers(admin))).json()

    assert [(b["userId"], b["eventName"], b["userName"]) for b in mine] == [(member["id"], "Quiz", "John Doe")]
    assert sorted(b["userName"] for b in everything) == ["John Doe", "Ken"]


@pytest.mark.asyncio
async def test_user_cannot_cancel_other_booking(api_client, member, make_user, auth_headers, make_event, owner):
    event = make_event()
    other = make_user("lena")
    created = await api_client.post("/api/bookings", json={"eventId": event["id"], "tickets": 1}, headers=auth_headers(other))
    booking_id = created.json()["booking"]["id"]

    forbidden = await api_client.delete(f"/api/bookings/{booking_id}", headers=auth_headers(member))
    by_owner = await api_client.delete(f"/api/bookings/{booking_id}", headers=auth_headers(owner))
    missing = await api_client.delete("/api/bookings/31337", headers=auth_headers(owner))

    assert forbidden.status_code == 403
    assert by_owner.status_code == 200
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_cancel_still_allowed_during_maintenance(api_client, owner, member, auth_headers, make_event):
    event = make_event()
    created = await api_client.post("/api/bookings", json={"eventId": event["id"], "tickets": 1}, headers=auth_headers(member))
    await api_client.put("/api/settings", json={"maintenanceMode": True}, headers=auth_headers(owner))

    listing = await api_client.get("/api/bookings", headers=auth_headers(member))
    booking = await api_client.post("/api/bookings", json={"eventId": event["id"], "tickets": 1}, headers=auth_headers(member))
    cancel = await api_client.delete(f"/api/bookings/{created.json()['booking']['id']}", headers=auth_headers(member))

    assert listing.status_code == booking.status_code == 503
    assert cancel.status_code == 200
