"""Service for keyed site content documents."""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from confsite.models import ContentKey, SiteContent
from confsite.schemas.site_content import CONTENT_SCHEMAS

logger = logging.getLogger(__name__)


class SiteContentService:
    """Reads and merges page copy and site configuration."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get_row(self, key: ContentKey) -> SiteContent | None:
        result = await self.db.execute(select(SiteContent).where(SiteContent.key == key))
        return result.scalar_one_or_none()

    async def get(self, key: ContentKey) -> dict[str, Any]:
        """Stored document over the schema defaults.

        Fields no longer in the schema are dropped instead of failing the read.
        """
        schema = CONTENT_SCHEMAS[key]
        row = await self._get_row(key)
        stored = row.data if row else {}
        known = {k: v for k, v in stored.items() if k in schema.model_fields}
        return schema.model_validate(known).model_dump()

    async def update(self, key: ContentKey, changes: dict[str, Any]) -> dict[str, Any]:
        """Merge changes into a document and validate the result.

        Raises pydantic.ValidationError when the merged document is invalid.
        """
        schema = CONTENT_SCHEMAS[key]
        merged = {**await self.get(key), **changes}
        document = schema.model_validate(merged).model_dump()

        row = await self._get_row(key)
        if row is None:
            row = SiteContent(key=key, data=document)
            self.db.add(row)
        else:
            row.data = document

        await self.db.flush()
        logger.info(f"Updated site content '{key.value}' ({', '.join(sorted(changes))})")
        return document

    async def exists(self, key: ContentKey) -> bool:
        return await self._get_row(key) is not None
