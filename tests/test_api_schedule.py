"""API tests for schedule days and their events."""

from uuid import uuid4

API = "/api/v1/schedule"


async def create_day(client, title, date="January 30, 2025"):
    response = await client.post(f"{API}/days", json={"title": title, "date": date})
    assert response.status_code == 201
    return response.json()


async def create_event(client, day_id, title, time="9:00 AM"):
    response = await client.post(
        f"{API}/days/{day_id}/events",
        json={"time": time, "title": title, "location": "Main Hall"},
    )
    assert response.status_code == 201
    return response.json()


def titles(items):
    return [item["title"] for item in items]


class TestDays:
    async def test_days_are_ordered(self, admin_client):
        await create_day(admin_client, "Day 1: Thursday")
        await create_day(admin_client, "Day 2: Friday")

        response = await admin_client.post(f"{API}/days/move", json={"from_index": 1, "to_index": 0})

        assert titles(response.json()) == ["Day 2: Friday", "Day 1: Thursday"]

    async def test_update_day(self, admin_client):
        day = await create_day(admin_client, "Day 1")
        response = await admin_client.put(f"{API}/days/{day['id']}", json={"title": "Day 1: Thursday"})
        assert response.json()["title"] == "Day 1: Thursday"
        assert response.json()["date"] == "January 30, 2025"

    async def test_delete_day_removes_events(self, admin_client):
        day = await create_day(admin_client, "Day 1")
        await create_event(admin_client, day["id"], "Registration")

        response = await admin_client.delete(f"{API}/days/{day['id']}")
        assert response.status_code == 204

        response = await admin_client.get(API)
        assert response.json() == []
        response = await admin_client.get(f"{API}/days/{day['id']}/events")
        assert response.status_code == 404


class TestEvents:
    async def test_events_append_within_their_day(self, admin_client):
        day_one = await create_day(admin_client, "Day 1")
        day_two = await create_day(admin_client, "Day 2")

        first = await create_event(admin_client, day_one["id"], "Registration")
        second = await create_event(admin_client, day_one["id"], "Opening Ceremony")
        other = await create_event(admin_client, day_two["id"], "Committee Session")

        assert (first["position"], second["position"], other["position"]) == (0, 1, 0)

    async def test_reorder_events(self, admin_client):
        day = await create_day(admin_client, "Day 1")
        first = await create_event(admin_client, day["id"], "Registration")
        second = await create_event(admin_client, day["id"], "Opening Ceremony")

        response = await admin_client.put(
            f"{API}/days/{day['id']}/events/reorder",
            json={"items": [
                {"id": second["id"], "position": 0},
                {"id": first["id"], "position": 1},
            ]},
        )

        assert response.status_code == 200
        assert titles(response.json()) == ["Opening Ceremony", "Registration"]

    async def test_reorder_with_event_of_another_day_is_404(self, admin_client):
        day_one = await create_day(admin_client, "Day 1")
        day_two = await create_day(admin_client, "Day 2")
        mine = await create_event(admin_client, day_one["id"], "Registration")
        theirs = await create_event(admin_client, day_two["id"], "Closing")

        response = await admin_client.put(
            f"{API}/days/{day_one['id']}/events/reorder",
            json={"items": [
                {"id": mine["id"], "position": 0},
                {"id": theirs["id"], "position": 1},
            ]},
        )
        assert response.status_code == 404

    async def test_move_event_to_another_day(self, admin_client):
        day_one = await create_day(admin_client, "Day 1")
        day_two = await create_day(admin_client, "Day 2")
        event = await create_event(admin_client, day_one["id"], "Registration")
        await create_event(admin_client, day_two["id"], "Committee Session")

        response = await admin_client.put(
            f"{API}/days/{day_one['id']}/events/{event['id']}",
            json={"day_id": day_two["id"]},
        )

        assert response.status_code == 200
        assert response.json()["day_id"] == day_two["id"]
        assert response.json()["position"] == 1

        response = await admin_client.get(f"{API}/days/{day_two['id']}/events")
        assert titles(response.json()) == ["Committee Session", "Registration"]

    async def test_unknown_day_is_404(self, admin_client):
        response = await admin_client.post(
            f"{API}/days/{uuid4()}/events",
            json={"time": "9:00", "title": "Registration"},
        )
        assert response.status_code == 404

    async def test_full_schedule(self, admin_client):
        day = await create_day(admin_client, "Day 1: Thursday")
        await create_event(admin_client, day["id"], "Registration", time="2:00 PM - 5:00 PM")

        response = await admin_client.get(API)

        [schedule_day] = response.json()
        assert schedule_day["title"] == "Day 1: Thursday"
        assert titles(schedule_day["events"]) == ["Registration"]
        assert schedule_day["events"][0]["time"] == "2:00 PM - 5:00 PM"
