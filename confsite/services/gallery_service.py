"""Service for gallery operations."""

from typing import Any

from confsite.models import GalleryItem, MediaType
from confsite.schemas.gallery import GalleryItemCreate, GalleryItemUpdate
from confsite.services.collections import OrderedCollectionService


def media_urls(media_type: MediaType, url: str | None) -> dict[str, str | None]:
    """Place a single media URL into the image or the video column."""
    if media_type == MediaType.VIDEO:
        return {"image_url": None, "video_url": url}
    return {"image_url": url, "video_url": None}


class GalleryService(OrderedCollectionService[GalleryItem]):
    """Service for gallery CRUD and ordering."""

    model = GalleryItem

    def _create_fields(self, data: GalleryItemCreate) -> dict[str, Any]:
        fields = data.model_dump(exclude={"url"})
        fields.update(media_urls(data.media_type, data.url))
        return fields

    def _update_fields(self, item: GalleryItem, data: GalleryItemUpdate) -> dict[str, Any]:
        fields = data.model_dump(exclude_unset=True, exclude_none=True, exclude={"url"})
        if data.url is not None or data.media_type is not None:
            media_type = data.media_type or item.media_type
            url = data.url if data.url is not None else item.url
            if not url:
                raise ValueError(f"A URL is required for {media_type.value} items")
            fields.update(media_urls(media_type, url))
        return fields
