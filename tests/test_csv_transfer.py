"""Tests for CSV export and import."""

import csv
import io

import pytest

from confsite.models import CountryStatus, DisplayStyle, MediaType
from confsite.services.csv_transfer import CSVTransferService, TransferDataset, split_topics

API = "/api/v1/transfer"

COMMITTEES_CSV = (
    "name,chairName,chairBio,chairImageUrl,topics,backgroundGuideUrl\n"
    'UNSC,Jane Doe,Chair bio,https://img.test/jane.png,"Cyber security\\nNuclear disarmament",#\n'
    '\n'
    'UNEP,John Roe,,,"Ocean plastics\nClimate finance",\n'
)

SECRETARIAT_CSV = (
    "name,role,bio,imageUrl,order\n"
    "Chloe Davis,Director-General,,,2\n"
    "James Harrison,Secretary-General,,,1\n"
    "Alex Kim,Chief of Staff,,,2\n"
)


def read_csv(data: bytes) -> list[dict]:
    return list(csv.DictReader(io.StringIO(data.decode("utf-8"))))


class TestParse:
    def setup_method(self):
        self.service = CSVTransferService(db=None)

    def test_topics_accept_literal_and_real_newlines(self):
        assert split_topics("A\\nB") == ["A", "B"]
        assert split_topics("A\nB\n\n") == ["A", "B"]
        assert split_topics("") == []

    def test_committees(self):
        records = self.service.parse(TransferDataset.COMMITTEES, COMMITTEES_CSV)

        assert [r["name"] for r in records] == ["UNSC", "UNEP"]
        assert records[0]["topics"] == ["Cyber security", "Nuclear disarmament"]
        assert records[0]["chair_name"] == "Jane Doe"
        assert records[1]["topics"] == ["Ocean plastics", "Climate finance"]

    def test_secretariat_order_normalized_stable(self):
        records = self.service.parse(TransferDataset.SECRETARIAT, SECRETARIAT_CSV.encode())

        assert [(r["name"], r["position"]) for r in records] == [
            ("James Harrison", 0),
            ("Chloe Davis", 1),
            ("Alex Kim", 2),
        ]

    def test_countries_status(self):
        records = self.service.parse(
            TransferDataset.COUNTRIES,
            "name,committee,status\nFrance,UNSC,Assigned\nKenya,UNEP,whatever\n",
        )
        assert [r["status"] for r in records] == [CountryStatus.ASSIGNED, CountryStatus.AVAILABLE]

    def test_gallery_row(self):
        records = self.service.parse(
            TransferDataset.GALLERY,
            "title,type,display,columnSpan,url,order\n"
            "Reel,video,9:16,2,https://video.test/reel.mp4,1\n"
            "Photo,image,panorama,3,https://img.test/p.png,0\n",
        )

        photo, reel = records
        assert photo["display"] == DisplayStyle.STANDARD
        assert photo["column_span"] == 1
        assert photo["image_url"] == "https://img.test/p.png"
        assert reel["media_type"] == MediaType.VIDEO
        assert reel["video_url"] == "https://video.test/reel.mp4"
        assert reel["image_url"] is None
        assert reel["column_span"] == 2

    def test_missing_columns(self):
        with pytest.raises(ValueError, match="must have columns"):
            self.service.parse(TransferDataset.COUNTRIES, "country,seat\nFrance,1\n")

    def test_not_utf8(self):
        with pytest.raises(ValueError, match="UTF-8"):
            self.service.parse(TransferDataset.COUNTRIES, b"name\n\xff\xfe\n")


class TestImportExport:
    async def test_import_replaces_collection(self, session):
        service = CSVTransferService(session)
        await service.import_csv(TransferDataset.SECRETARIAT, SECRETARIAT_CSV)
        count = await service.import_csv(
            TransferDataset.SECRETARIAT,
            "name,role,bio,imageUrl,order\nOnly One,Secretary-General,,,5\n",
        )

        assert count == 1
        rows = read_csv(await service.export_csv(TransferDataset.SECRETARIAT))
        assert rows == [
            {"name": "Only One", "role": "Secretary-General", "bio": "", "imageUrl": "", "order": "0"}
        ]

    async def test_committee_export_joins_topics(self, session):
        service = CSVTransferService(session)
        await service.import_csv(TransferDataset.COMMITTEES, COMMITTEES_CSV)

        rows = read_csv(await service.export_csv(TransferDataset.COMMITTEES))

        assert [row["name"] for row in rows] == ["UNEP", "UNSC"]
        assert rows[1]["topics"] == "Cyber security\\nNuclear disarmament"
        assert rows[1]["chairImageUrl"] == "https://img.test/jane.png"


class TestTransferAPI:
    async def test_upload_and_download(self, admin_client):
        response = await admin_client.post(
            f"{API}/countries/import",
            files={"file": ("countries.csv", b"name,committee,status\nFrance,UNSC,Assigned\n", "text/csv")},
        )
        assert response.status_code == 200
        assert response.json() == {"dataset": "countries", "imported": 1}

        response = await admin_client.get(f"{API}/countries/export")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "countries.csv" in response.headers["content-disposition"]
        assert read_csv(response.content) == [
            {"name": "France", "committee": "UNSC", "status": "Assigned"}
        ]

    async def test_imported_gallery_is_ordered(self, admin_client):
        await admin_client.post(
            f"{API}/gallery/import",
            files={"file": (
                "gallery.csv",
                b"title,type,display,columnSpan,url,order\n"
                b"Second,image,4:3,1,https://img.test/2.png,2\n"
                b"First,image,4:3,1,https://img.test/1.png,1\n",
                "text/csv",
            )},
        )

        response = await admin_client.get("/api/v1/gallery")

        assert [(i["title"], i["position"]) for i in response.json()] == [("First", 0), ("Second", 1)]

    async def test_bad_file_is_400_and_keeps_data(self, admin_client):
        await admin_client.post("/api/v1/countries", json={"name": "Kenya", "committee": "UNEP"})

        response = await admin_client.post(
            f"{API}/countries/import",
            files={"file": ("countries.csv", b"wrong,header\n1,2\n", "text/csv")},
        )

        assert response.status_code == 400
        response = await admin_client.get("/api/v1/countries")
        assert [c["name"] for c in response.json()] == ["Kenya"]

    async def test_unknown_dataset(self, admin_client):
        response = await admin_client.get(f"{API}/posts/export")
        assert response.status_code == 422
