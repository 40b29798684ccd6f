from confsite.models.base import Base
from confsite.models.user import AdminUser
from confsite.models.gallery import GalleryItem, MediaType, DisplayStyle
from confsite.models.schedule import ScheduleDay, ScheduleEvent
from confsite.models.secretariat import SecretariatMember
from confsite.models.highlight import Highlight, HighlightIcon
from confsite.models.document import DownloadableDocument
from confsite.models.committee import Committee
from confsite.models.country import Country, CountryStatus
from confsite.models.post import Post, PostType
from confsite.models.site_content import SiteContent, ContentKey

__all__ = [
    "Base",
    "AdminUser",
    # Ordered collections
    "GalleryItem",
    "MediaType",
    "DisplayStyle",
    "ScheduleDay",
    "ScheduleEvent",
    "SecretariatMember",
    "Highlight",
    "HighlightIcon",
    "DownloadableDocument",
    # Other content
    "Committee",
    "Country",
    "CountryStatus",
    "Post",
    "PostType",
    "SiteContent",
    "ContentKey",
]
