"""CSV export and bulk import for committees, countries, secretariat and gallery."""

import csv
import enum
import io
import logging
from typing import Any, Callable

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from confsite.models import (
    Committee,
    Country,
    CountryStatus,
    DisplayStyle,
    GalleryItem,
    MediaType,
    SecretariatMember,
)
from confsite.schemas.committee import clean_topics
from confsite.services.gallery_service import media_urls

logger = logging.getLogger(__name__)


class TransferDataset(str, enum.Enum):
    """Collections that can be exported to and imported from CSV."""

    COMMITTEES = "committees"
    COUNTRIES = "countries"
    SECRETARIAT = "secretariat"
    GALLERY = "gallery"

    @property
    def filename(self) -> str:
        return f"{self.value}.csv"


COLUMNS: dict[TransferDataset, list[str]] = {
    TransferDataset.COMMITTEES: [
        "name", "chairName", "chairBio", "chairImageUrl", "topics", "backgroundGuideUrl",
    ],
    TransferDataset.COUNTRIES: ["name", "committee", "status"],
    TransferDataset.SECRETARIAT: ["name", "role", "bio", "imageUrl", "order"],
    TransferDataset.GALLERY: ["title", "type", "display", "columnSpan", "url", "order"],
}

MODELS: dict[TransferDataset, type] = {
    TransferDataset.COMMITTEES: Committee,
    TransferDataset.COUNTRIES: Country,
    TransferDataset.SECRETARIAT: SecretariatMember,
    TransferDataset.GALLERY: GalleryItem,
}

# Topics are exported joined by a literal backslash-n so they stay on one line
TOPIC_SEPARATOR = "\\n"


def _text(row: dict[str, Any], column: str) -> str:
    return (row.get(column) or "").strip()


def _int(value: Any, default: int = 0) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return default


def split_topics(value: str) -> list[str]:
    """Topics cell to a list. Accepts real newlines and literal ``\\n``."""
    return clean_topics(value.replace(TOPIC_SEPARATOR, "\n").split("\n"))


# --- Row transformers (CSV row -> model column values) ---


def committee_from_row(row: dict[str, Any]) -> dict[str, Any]:
    return {
        "name": _text(row, "name"),
        "chair_name": _text(row, "chairName"),
        "chair_bio": _text(row, "chairBio"),
        "chair_image_url": _text(row, "chairImageUrl"),
        "topics": split_topics(row.get("topics") or ""),
        "background_guide_url": _text(row, "backgroundGuideUrl"),
    }


def country_from_row(row: dict[str, Any]) -> dict[str, Any]:
    status = CountryStatus.ASSIGNED if _text(row, "status") == "Assigned" else CountryStatus.AVAILABLE
    return {
        "name": _text(row, "name"),
        "committee": _text(row, "committee"),
        "status": status,
    }


def secretariat_from_row(row: dict[str, Any]) -> dict[str, Any]:
    return {
        "name": _text(row, "name"),
        "role": _text(row, "role"),
        "bio": _text(row, "bio"),
        "image_url": _text(row, "imageUrl"),
    }


def gallery_from_row(row: dict[str, Any]) -> dict[str, Any]:
    media_type = MediaType.VIDEO if _text(row, "type") == "video" else MediaType.IMAGE
    try:
        display = DisplayStyle(_text(row, "display"))
    except ValueError:
        display = DisplayStyle.STANDARD
    return {
        "title": _text(row, "title"),
        "media_type": media_type,
        "display": display,
        "column_span": 2 if _int(row.get("columnSpan"), 1) == 2 else 1,
        **media_urls(media_type, _text(row, "url") or None),
    }


TRANSFORMERS: dict[TransferDataset, Callable[[dict[str, Any]], dict[str, Any]]] = {
    TransferDataset.COMMITTEES: committee_from_row,
    TransferDataset.COUNTRIES: country_from_row,
    TransferDataset.SECRETARIAT: secretariat_from_row,
    TransferDataset.GALLERY: gallery_from_row,
}

ORDERED = {TransferDataset.SECRETARIAT, TransferDataset.GALLERY}


# --- Export (model -> CSV row) ---


def committee_to_row(committee: Committee) -> dict[str, Any]:
    return {
        "name": committee.name,
        "chairName": committee.chair_name,
        "chairBio": committee.chair_bio,
        "chairImageUrl": committee.chair_image_url,
        "topics": TOPIC_SEPARATOR.join(committee.topics or []),
        "backgroundGuideUrl": committee.background_guide_url,
    }


def country_to_row(country: Country) -> dict[str, Any]:
    return {
        "name": country.name,
        "committee": country.committee,
        "status": country.status.value,
    }


def secretariat_to_row(member: SecretariatMember) -> dict[str, Any]:
    return {
        "name": member.name,
        "role": member.role,
        "bio": member.bio,
        "imageUrl": member.image_url,
        "order": member.position,
    }


def gallery_to_row(item: GalleryItem) -> dict[str, Any]:
    return {
        "title": item.title,
        "type": item.media_type.value,
        "display": item.display.value,
        "columnSpan": item.column_span,
        "url": item.url or "",
        "order": item.position,
    }


SERIALIZERS: dict[TransferDataset, Callable[[Any], dict[str, Any]]] = {
    TransferDataset.COMMITTEES: committee_to_row,
    TransferDataset.COUNTRIES: country_to_row,
    TransferDataset.SECRETARIAT: secretariat_to_row,
    TransferDataset.GALLERY: gallery_to_row,
}


class CSVTransferService:
    """Service for moving whole collections in and out as CSV."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _rows(self, dataset: TransferDataset) -> list[Any]:
        model = MODELS[dataset]
        query = select(model)
        if dataset in ORDERED:
            query = query.order_by(model.position, model.id)
        elif dataset == TransferDataset.COUNTRIES:
            query = query.order_by(Country.committee, Country.name)
        else:
            query = query.order_by(Committee.name)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def export_csv(self, dataset: TransferDataset) -> bytes:
        """Export a collection as CSV with a header row."""
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=COLUMNS[dataset])
        writer.writeheader()

        serialize = SERIALIZERS[dataset]
        for item in await self._rows(dataset):
            writer.writerow(serialize(item))

        return output.getvalue().encode("utf-8")

    def parse(self, dataset: TransferDataset, content: bytes | str) -> list[dict[str, Any]]:
        """Parse CSV into model column values, in display order.

        Blank lines are skipped. For ordered collections the ``order`` column
        decides the sequence (file order on ties) and positions become
        0..n-1.
        """
        if isinstance(content, bytes):
            try:
                content = content.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise ValueError("CSV file must be UTF-8 encoded") from e

        reader = csv.DictReader(io.StringIO(content))
        required = COLUMNS[dataset][0]
        if not reader.fieldnames or required not in reader.fieldnames:
            raise ValueError(
                f"CSV for {dataset.value} must have columns: {', '.join(COLUMNS[dataset])}"
            )

        rows = [
            row for row in reader
            if any(isinstance(value, str) and value.strip() for value in row.values())
        ]

        if dataset in ORDERED:
            rows = sorted(rows, key=lambda row: _int(row.get("order")))

        transform = TRANSFORMERS[dataset]
        records = []
        for index, row in enumerate(rows):
            record = transform(row)
            if dataset in ORDERED:
                record["position"] = index
            records.append(record)
        return records

    async def import_csv(self, dataset: TransferDataset, content: bytes | str) -> int:
        """Replace a whole collection with the rows of a CSV file.

        The file is parsed before anything is deleted. Deletion and inserts
        share the caller's transaction, so a failure leaves the old data.
        """
        records = self.parse(dataset, content)
        model = MODELS[dataset]

        await self.db.execute(delete(model))
        self.db.add_all([model(**record) for record in records])
        await self.db.flush()

        logger.info(f"Imported {len(records)} {dataset.value} rows from CSV")
        return len(records)
