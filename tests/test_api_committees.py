"""API tests for committees and the country matrix."""

API = "/api/v1"


class TestCommittees:
    async def test_create_and_update(self, admin_client):
        response = await admin_client.post(
            f"{API}/committees",
            json={
                "name": "Security Council",
                "chair": {"name": "Jane Doe", "bio": "Chair", "image_url": ""},
                "topics": ["Cyber security", "  ", "Nuclear disarmament "],
            },
        )
        assert response.status_code == 201
        committee = response.json()
        assert committee["topics"] == ["Cyber security", "Nuclear disarmament"]
        assert committee["chair"]["name"] == "Jane Doe"

        response = await admin_client.put(
            f"{API}/committees/{committee['id']}",
            json={"chair": {"name": "John Roe"}},
        )
        assert response.json()["chair"]["name"] == "John Roe"
        assert response.json()["name"] == "Security Council"

    async def test_listed_alphabetically(self, admin_client):
        for name in ("UNSC", "DISEC", "UNEP"):
            await admin_client.post(f"{API}/committees", json={"name": name})

        response = await admin_client.get(f"{API}/public/committees")

        assert [c["name"] for c in response.json()] == ["DISEC", "UNEP", "UNSC"]


class TestCountries:
    async def test_assign_and_release(self, admin_client):
        response = await admin_client.post(
            f"{API}/countries",
            json={"name": "France", "committee": "UNSC"},
        )
        country = response.json()
        assert country["status"] == "Available"

        response = await admin_client.patch(
            f"{API}/countries/{country['id']}/status",
            json={"status": "Assigned"},
        )
        assert response.json()["status"] == "Assigned"

        response = await admin_client.patch(
            f"{API}/countries/{country['id']}/status",
            json={"status": "Reserved"},
        )
        assert response.status_code == 422

    async def test_delete(self, admin_client):
        response = await admin_client.post(
            f"{API}/countries",
            json={"name": "Kenya", "committee": "UNEP"},
        )
        country_id = response.json()["id"]

        assert (await admin_client.delete(f"{API}/countries/{country_id}")).status_code == 204
        assert (await admin_client.delete(f"{API}/countries/{country_id}")).status_code == 404
