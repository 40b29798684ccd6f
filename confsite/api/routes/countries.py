"""Country matrix admin routes."""

from uuid import UUID

from fastapi import APIRouter, Query, status

from confsite.api.deps import CurrentUser, DBSession
from confsite.api.errors import not_found
from confsite.models import Country
from confsite.schemas.country import CountryCreate, CountryResponse, CountryStatusUpdate
from confsite.services.country_service import CountryService

router = APIRouter(prefix="/countries", tags=["countries"])


@router.get("", response_model=list[CountryResponse])
async def list_countries(
    current_user: CurrentUser,
    db: DBSession,
    committee: str | None = Query(None, description="Only countries of this committee"),
) -> list[Country]:
    return await CountryService(db).list_all(committee)


@router.post("", response_model=CountryResponse, status_code=status.HTTP_201_CREATED)
async def create_country(
    data: CountryCreate,
    current_user: CurrentUser,
    db: DBSession,
) -> Country:
    return await CountryService(db).create(data)


@router.patch("/{country_id}/status", response_model=CountryResponse)
async def set_country_status(
    country_id: UUID,
    data: CountryStatusUpdate,
    current_user: CurrentUser,
    db: DBSession,
) -> Country:
    """Mark a country as assigned or available."""
    country = await CountryService(db).set_status(country_id, data.status)
    if not country:
        raise not_found("Country")
    return country


@router.delete("/{country_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_country(
    country_id: UUID,
    current_user: CurrentUser,
    db: DBSession,
) -> None:
    deleted = await CountryService(db).delete(country_id)
    if not deleted:
        raise not_found("Country")
