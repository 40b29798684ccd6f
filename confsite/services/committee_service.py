"""Service for committee operations."""

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from confsite.models import Committee
from confsite.schemas.committee import ChairInfo, CommitteeCreate, CommitteeUpdate


def chair_columns(chair: ChairInfo) -> dict[str, Any]:
    """Flatten the nested chair object into committee columns."""
    return {
        "chair_name": chair.name,
        "chair_bio": chair.bio,
        "chair_image_url": chair.image_url,
    }


class CommitteeService:
    """Service for committee CRUD operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[Committee]:
        """List committees alphabetically."""
        result = await self.db.execute(select(Committee).order_by(Committee.name))
        return list(result.scalars().all())

    async def get_by_id(self, committee_id: UUID) -> Committee | None:
        result = await self.db.execute(select(Committee).where(Committee.id == committee_id))
        return result.scalar_one_or_none()

    async def create(self, data: CommitteeCreate) -> Committee:
        """Create a committee."""
        committee = Committee(
            name=data.name,
            topics=data.topics,
            background_guide_url=data.background_guide_url,
            **chair_columns(data.chair),
        )
        self.db.add(committee)
        await self.db.flush()
        await self.db.refresh(committee)
        return committee

    async def update(self, committee_id: UUID, data: CommitteeUpdate) -> Committee | None:
        """Update a committee."""
        committee = await self.get_by_id(committee_id)
        if not committee:
            return None

        update_data = data.model_dump(exclude_unset=True, exclude_none=True, exclude={"chair"})
        if data.chair is not None:
            update_data.update(chair_columns(data.chair))

        for field, value in update_data.items():
            setattr(committee, field, value)

        await self.db.flush()
        await self.db.refresh(committee)
        return committee

    async def delete(self, committee_id: UUID) -> bool:
        """Delete a committee. Its countries keep the committee name."""
        committee = await self.get_by_id(committee_id)
        if not committee:
            return False

        await self.db.delete(committee)
        await self.db.flush()
        return True
