"""Service for the country matrix."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from confsite.models import Country, CountryStatus
from confsite.schemas.country import CountryCreate


class CountryService:
    """Service for country CRUD and assignment status."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self, committee: str | None = None) -> list[Country]:
        """List countries grouped by committee, then by name."""
        query = select(Country).order_by(Country.committee, Country.name)
        if committee:
            query = query.where(Country.committee == committee)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_by_id(self, country_id: UUID) -> Country | None:
        result = await self.db.execute(select(Country).where(Country.id == country_id))
        return result.scalar_one_or_none()

    async def create(self, data: CountryCreate) -> Country:
        country = Country(**data.model_dump())
        self.db.add(country)
        await self.db.flush()
        await self.db.refresh(country)
        return country

    async def set_status(self, country_id: UUID, status: CountryStatus) -> Country | None:
        """Mark a country as assigned or available."""
        country = await self.get_by_id(country_id)
        if not country:
            return None

        country.status = status
        await self.db.flush()
        await self.db.refresh(country)
        return country

    async def delete(self, country_id: UUID) -> bool:
        country = await self.get_by_id(country_id)
        if not country:
            return False

        await self.db.delete(country)
        await self.db.flush()
        return True
