"""API tests for the ordered collections (gallery, secretariat, highlights, documents)."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

API = "/api/v1"


async def create_gallery_items(client, *titles):
    items = []
    for title in titles:
        response = await client.post(
            f"{API}/gallery",
            json={"title": title, "url": f"https://img.test/{title}.png"},
        )
        assert response.status_code == 201
        items.append(response.json())
    return items


def titles(items):
    return [item["title"] for item in items]


class TestAuthRequired:
    @pytest.mark.parametrize("path", ["gallery", "secretariat", "highlights", "documents"])
    async def test_list_requires_login(self, client, path):
        response = await client.get(f"{API}/{path}")
        assert response.status_code == 401

    async def test_reorder_requires_login(self, client):
        response = await client.put(f"{API}/gallery/reorder", json={"items": []})
        assert response.status_code == 401


class TestGallery:
    async def test_create_appends(self, admin_client):
        items = await create_gallery_items(admin_client, "Opening", "Debate", "Closing")

        assert [item["position"] for item in items] == [0, 1, 2]
        response = await admin_client.get(f"{API}/gallery")
        assert titles(response.json()) == ["Opening", "Debate", "Closing"]

    async def test_image_and_video_urls(self, admin_client):
        response = await admin_client.post(
            f"{API}/gallery",
            json={
                "title": "Highlights reel",
                "media_type": "video",
                "display": "16:9",
                "url": "https://video.test/reel.mp4",
            },
        )
        data = response.json()
        assert data["video_url"] == "https://video.test/reel.mp4"
        assert data["image_url"] is None
        assert data["url"] == data["video_url"]

        response = await admin_client.put(
            f"{API}/gallery/{data['id']}",
            json={"media_type": "image"},
        )
        data = response.json()
        assert data["image_url"] == "https://video.test/reel.mp4"
        assert data["video_url"] is None

    async def test_google_drive_link_converted(self, admin_client):
        response = await admin_client.post(
            f"{API}/gallery",
            json={"title": "Drive photo", "url": "https://drive.google.com/file/d/abc123XYZ/view"},
        )
        assert response.json()["image_url"] == "https://lh3.googleusercontent.com/d/abc123XYZ"

    async def test_invalid_url_rejected(self, admin_client):
        response = await admin_client.post(f"{API}/gallery", json={"title": "Bad", "url": "nope"})
        assert response.status_code == 422

    async def test_reorder_returns_new_order(self, admin_client):
        a, b, c = await create_gallery_items(admin_client, "Alpha", "Bravo", "Charlie")

        response = await admin_client.put(
            f"{API}/gallery/reorder",
            json={"items": [
                {"id": c["id"], "position": 0},
                {"id": a["id"], "position": 1},
                {"id": b["id"], "position": 2},
            ]},
        )

        assert response.status_code == 200
        assert titles(response.json()) == ["Charlie", "Alpha", "Bravo"]
        response = await admin_client.get(f"{API}/gallery")
        assert titles(response.json()) == ["Charlie", "Alpha", "Bravo"]

    async def test_reorder_with_unknown_id_is_404(self, admin_client):
        a, b = await create_gallery_items(admin_client, "Alpha", "Bravo")

        response = await admin_client.put(
            f"{API}/gallery/reorder",
            json={"items": [
                {"id": b["id"], "position": 0},
                {"id": a["id"], "position": 1},
                {"id": str(uuid4()), "position": 2},
            ]},
        )

        assert response.status_code == 404
        response = await admin_client.get(f"{API}/gallery")
        assert titles(response.json()) == ["Alpha", "Bravo"]

    async def test_reorder_missing_item_is_400(self, admin_client):
        a, _, _ = await create_gallery_items(admin_client, "Alpha", "Bravo", "Charlie")

        response = await admin_client.put(
            f"{API}/gallery/reorder",
            json={"items": [{"id": a["id"], "position": 0}]},
        )
        assert response.status_code == 400

    async def test_reorder_duplicate_positions_is_422(self, admin_client):
        a, b = await create_gallery_items(admin_client, "Alpha", "Bravo")

        response = await admin_client.put(
            f"{API}/gallery/reorder",
            json={"items": [
                {"id": a["id"], "position": 1},
                {"id": b["id"], "position": 1},
            ]},
        )
        assert response.status_code == 422

    async def test_reorder_database_failure_is_503(self, admin_client, monkeypatch):
        a, b, c = await create_gallery_items(admin_client, "Alpha", "Bravo", "Charlie")

        async def failing_commit(self):
            raise OperationalError("UPDATE", {}, Exception("database is locked"))

        monkeypatch.setattr(AsyncSession, "commit", failing_commit)
        response = await admin_client.put(
            f"{API}/gallery/reorder",
            json={"items": [
                {"id": c["id"], "position": 0},
                {"id": b["id"], "position": 1},
                {"id": a["id"], "position": 2},
            ]},
        )
        monkeypatch.undo()

        assert response.status_code == 503
        response = await admin_client.get(f"{API}/gallery")
        assert titles(response.json()) == ["Alpha", "Bravo", "Charlie"]

    async def test_move(self, admin_client):
        await create_gallery_items(admin_client, "Alpha", "Bravo", "Charlie", "Delta")

        response = await admin_client.post(
            f"{API}/gallery/move",
            json={"from_index": 3, "to_index": 0},
        )

        assert response.status_code == 200
        assert titles(response.json()) == ["Delta", "Alpha", "Bravo", "Charlie"]
        assert [item["position"] for item in response.json()] == [0, 1, 2, 3]

    async def test_move_out_of_range_is_400(self, admin_client):
        await create_gallery_items(admin_client, "Alpha")
        response = await admin_client.post(
            f"{API}/gallery/move",
            json={"from_index": 0, "to_index": 3},
        )
        assert response.status_code == 400

    async def test_delete_leaves_gap(self, admin_client):
        a, b, c = await create_gallery_items(admin_client, "Alpha", "Bravo", "Charlie")

        response = await admin_client.delete(f"{API}/gallery/{b['id']}")
        assert response.status_code == 204

        response = await admin_client.get(f"{API}/gallery")
        assert [(i["title"], i["position"]) for i in response.json()] == [("Alpha", 0), ("Charlie", 2)]

        [d] = await create_gallery_items(admin_client, "Delta")
        assert d["position"] == 3

    async def test_unknown_item_is_404(self, admin_client):
        response = await admin_client.get(f"{API}/gallery/{uuid4()}")
        assert response.status_code == 404
        response = await admin_client.delete(f"{API}/gallery/{uuid4()}")
        assert response.status_code == 404


class TestSecretariat:
    async def test_crud(self, admin_client):
        response = await admin_client.post(
            f"{API}/secretariat",
            json={"name": "James Harrison", "role": "Secretary-General"},
        )
        assert response.status_code == 201
        member = response.json()

        response = await admin_client.put(
            f"{API}/secretariat/{member['id']}",
            json={"bio": "Senior studying Government."},
        )
        assert response.json()["bio"] == "Senior studying Government."
        assert response.json()["role"] == "Secretary-General"

        response = await admin_client.get(f"{API}/secretariat/{member['id']}")
        assert response.json()["name"] == "James Harrison"


class TestHighlights:
    @pytest.mark.parametrize(
        "icon,expected",
        [("MapPin", "MapPin"), ("map-pin", "MapPin"), ("TROPHY", "Trophy"), ("Rocket", "HelpCircle")],
    )
    async def test_icon_resolution(self, admin_client, icon, expected):
        response = await admin_client.post(
            f"{API}/highlights",
            json={"icon": icon, "title": "Venue"},
        )
        assert response.status_code == 201
        assert response.json()["icon"] == expected

    async def test_update_keeps_icon_when_omitted(self, admin_client):
        response = await admin_client.post(
            f"{API}/highlights",
            json={"icon": "Calendar", "title": "Dates"},
        )
        highlight = response.json()

        response = await admin_client.put(
            f"{API}/highlights/{highlight['id']}",
            json={"description": "January 30 - February 2"},
        )
        assert response.json()["icon"] == "Calendar"


class TestDocuments:
    async def test_reorder_documents(self, admin_client):
        ids = []
        for title in ("Handbook", "Background Guide"):
            response = await admin_client.post(
                f"{API}/documents",
                json={"title": title, "url": "#"},
            )
            ids.append(response.json()["id"])

        response = await admin_client.post(
            f"{API}/documents/move",
            json={"from_index": 1, "to_index": 0},
        )
        assert titles(response.json()) == ["Background Guide", "Handbook"]
