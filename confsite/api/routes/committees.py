"""Committee admin routes."""

from uuid import UUID

from fastapi import APIRouter, status

from confsite.api.deps import CurrentUser, DBSession
from confsite.api.errors import not_found
from confsite.models import Committee
from confsite.schemas.committee import CommitteeCreate, CommitteeResponse, CommitteeUpdate
from confsite.services.committee_service import CommitteeService

router = APIRouter(prefix="/committees", tags=["committees"])


@router.get("", response_model=list[CommitteeResponse])
async def list_committees(current_user: CurrentUser, db: DBSession) -> list[Committee]:
    """List committees alphabetically."""
    return await CommitteeService(db).list_all()


@router.post("", response_model=CommitteeResponse, status_code=status.HTTP_201_CREATED)
async def create_committee(
    data: CommitteeCreate,
    current_user: CurrentUser,
    db: DBSession,
) -> Committee:
    return await CommitteeService(db).create(data)


@router.get("/{committee_id}", response_model=CommitteeResponse)
async def get_committee(
    committee_id: UUID,
    current_user: CurrentUser,
    db: DBSession,
) -> Committee:
    committee = await CommitteeService(db).get_by_id(committee_id)
    if not committee:
        raise not_found("Committee")
    return committee


@router.put("/{committee_id}", response_model=CommitteeResponse)
async def update_committee(
    committee_id: UUID,
    data: CommitteeUpdate,
    current_user: CurrentUser,
    db: DBSession,
) -> Committee:
    committee = await CommitteeService(db).update(committee_id, data)
    if not committee:
        raise not_found("Committee")
    return committee


@router.delete("/{committee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_committee(
    committee_id: UUID,
    current_user: CurrentUser,
    db: DBSession,
) -> None:
    deleted = await CommitteeService(db).delete(committee_id)
    if not deleted:
        raise not_found("Committee")
