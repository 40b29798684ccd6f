"""Public read-only routes for the conference website (no authentication)."""

from typing import Any
from uuid import UUID

from fastapi import APIRouter

from confsite.api.deps import DBSession
from confsite.api.errors import not_found
from confsite.models import (
    Committee,
    ContentKey,
    Country,
    DownloadableDocument,
    GalleryItem,
    Post,
    PostType,
    SecretariatMember,
)
from confsite.schemas.committee import CommitteeResponse
from confsite.schemas.country import CountryResponse
from confsite.schemas.document import DocumentResponse
from confsite.schemas.gallery import GalleryItemPublicResponse
from confsite.schemas.post import PostResponse
from confsite.schemas.schedule import ScheduleDayWithEvents
from confsite.schemas.secretariat import SecretariatMemberResponse
from confsite.services.committee_service import CommitteeService
from confsite.services.country_service import CountryService
from confsite.services.document_service import DocumentService
from confsite.services.gallery_service import GalleryService
from confsite.services.highlight_service import HighlightService
from confsite.services.post_service import PostService
from confsite.services.schedule_service import ScheduleService
from confsite.services.secretariat_service import SecretariatService
from confsite.services.site_content_service import SiteContentService

router = APIRouter(prefix="/public", tags=["public"])


@router.get("/site-config")
async def get_site_config(db: DBSession) -> dict[str, Any]:
    """Countdown date, footer, social links and navigation visibility."""
    return await SiteContentService(db).get(ContentKey.SITE_CONFIG)


@router.get("/home")
async def get_home(db: DBSession) -> dict[str, Any]:
    """Home page copy with its highlight cards in display order."""
    content = await SiteContentService(db).get(ContentKey.HOME_PAGE)
    highlights = await HighlightService(db).list_all()
    content["highlights"] = [
        {
            "id": str(highlight.id),
            "icon": highlight.icon.value,
            "title": highlight.title,
            "description": highlight.description,
        }
        for highlight in highlights
    ]
    return content


@router.get("/about")
async def get_about(db: DBSession) -> dict[str, Any]:
    return await SiteContentService(db).get(ContentKey.ABOUT_PAGE)


@router.get("/registration")
async def get_registration(db: DBSession) -> dict[str, Any]:
    return await SiteContentService(db).get(ContentKey.REGISTRATION_PAGE)


@router.get("/documents")
async def get_documents(db: DBSession) -> dict[str, Any]:
    """Documents page copy with the downloadable files in order."""
    content = await SiteContentService(db).get(ContentKey.DOCUMENTS_PAGE)
    documents: list[DownloadableDocument] = await DocumentService(db).list_all()
    content["documents"] = [
        DocumentResponse.model_validate(document).model_dump(mode="json")
        for document in documents
    ]
    return content


@router.get("/gallery")
async def get_gallery(db: DBSession) -> dict[str, Any]:
    """Gallery page copy with the gallery items in order."""
    content = await SiteContentService(db).get(ContentKey.GALLERY_PAGE)
    items: list[GalleryItem] = await GalleryService(db).list_all()
    content["items"] = [
        GalleryItemPublicResponse.model_validate(item).model_dump(mode="json")
        for item in items
    ]
    return content


@router.get("/committees", response_model=list[CommitteeResponse])
async def get_committees(db: DBSession) -> list[Committee]:
    return await CommitteeService(db).list_all()


@router.get("/countries", response_model=list[CountryResponse])
async def get_countries(db: DBSession, committee: str | None = None) -> list[Country]:
    return await CountryService(db).list_all(committee)


@router.get("/schedule", response_model=list[ScheduleDayWithEvents])
async def get_schedule(db: DBSession) -> list[dict]:
    return await ScheduleService(db).get_schedule()


@router.get("/secretariat", response_model=list[SecretariatMemberResponse])
async def get_secretariat(db: DBSession) -> list[SecretariatMember]:
    return await SecretariatService(db).list_all()


@router.get("/news", response_model=list[PostResponse])
async def get_news(db: DBSession) -> list[Post]:
    return await PostService(db).list_posts(PostType.NEWS)


@router.get("/sg-notes", response_model=list[PostResponse])
async def get_sg_notes(db: DBSession) -> list[Post]:
    return await PostService(db).list_posts(PostType.SG_NOTE)


@router.get("/posts/{post_id}", response_model=PostResponse)
async def get_post(post_id: UUID, db: DBSession) -> Post:
    post = await PostService(db).get_by_id(post_id)
    if not post:
        raise not_found("Post")
    return post
