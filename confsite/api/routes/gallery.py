"""Gallery admin routes."""

from confsite.api.routes.ordered import ordered_collection_router
from confsite.schemas.gallery import (
    GalleryItemCreate,
    GalleryItemResponse,
    GalleryItemUpdate,
)
from confsite.services.gallery_service import GalleryService

router = ordered_collection_router(
    prefix="/gallery",
    tag="gallery",
    noun="Gallery item",
    service_class=GalleryService,
    create_schema=GalleryItemCreate,
    update_schema=GalleryItemUpdate,
    response_schema=GalleryItemResponse,
)
