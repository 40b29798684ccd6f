"""Site content admin routes (page copy and site configuration)."""

from typing import Any

from fastapi import APIRouter, Body

from confsite.api.deps import CurrentUser, DBSession
from confsite.api.errors import service_errors
from confsite.models import ContentKey
from confsite.services.site_content_service import SiteContentService

router = APIRouter(prefix="/site-content", tags=["site-content"])


@router.get("/{key}")
async def get_content(key: ContentKey, current_user: CurrentUser, db: DBSession) -> dict[str, Any]:
    return await SiteContentService(db).get(key)


@router.put("/{key}")
async def update_content(
    key: ContentKey,
    current_user: CurrentUser,
    db: DBSession,
    changes: dict[str, Any] = Body(...),
) -> dict[str, Any]:
    """Merge the given fields into a content document."""
    with service_errors():
        return await SiteContentService(db).update(key, changes)
