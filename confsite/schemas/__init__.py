from confsite.schemas.auth import (
    AdminUserCreate,
    AdminLogin,
    AdminUserResponse,
    ChangePasswordRequest,
)
from confsite.schemas.ordering import (
    PositionUpdate,
    ReorderRequest,
    MoveRequest,
)
from confsite.schemas.gallery import (
    GalleryItemCreate,
    GalleryItemUpdate,
    GalleryItemResponse,
    GalleryItemPublicResponse,
)
from confsite.schemas.schedule import (
    ScheduleDayCreate,
    ScheduleDayUpdate,
    ScheduleDayResponse,
    ScheduleEventCreate,
    ScheduleEventUpdate,
    ScheduleEventResponse,
    ScheduleDayWithEvents,
)
from confsite.schemas.secretariat import (
    SecretariatMemberCreate,
    SecretariatMemberUpdate,
    SecretariatMemberResponse,
)
from confsite.schemas.highlight import (
    HighlightCreate,
    HighlightUpdate,
    HighlightResponse,
)
from confsite.schemas.document import (
    DocumentCreate,
    DocumentUpdate,
    DocumentResponse,
)
from confsite.schemas.committee import (
    ChairInfo,
    CommitteeCreate,
    CommitteeUpdate,
    CommitteeResponse,
)
from confsite.schemas.country import (
    CountryCreate,
    CountryStatusUpdate,
    CountryResponse,
)
from confsite.schemas.post import (
    PostCreate,
    PostUpdate,
    PostResponse,
)
from confsite.schemas.site_content import (
    CONTENT_SCHEMAS,
    HomePageContent,
    AboutPageContent,
    RegistrationPageContent,
    DocumentsPageContent,
    GalleryPageContent,
    SiteConfig,
)

__all__ = [
    "AdminUserCreate",
    "AdminLogin",
    "AdminUserResponse",
    "ChangePasswordRequest",
    # Ordering
    "PositionUpdate",
    "ReorderRequest",
    "MoveRequest",
    # Ordered collections
    "GalleryItemCreate",
    "GalleryItemUpdate",
    "GalleryItemResponse",
    "GalleryItemPublicResponse",
    "ScheduleDayCreate",
    "ScheduleDayUpdate",
    "ScheduleDayResponse",
    "ScheduleEventCreate",
    "ScheduleEventUpdate",
    "ScheduleEventResponse",
    "ScheduleDayWithEvents",
    "SecretariatMemberCreate",
    "SecretariatMemberUpdate",
    "SecretariatMemberResponse",
    "HighlightCreate",
    "HighlightUpdate",
    "HighlightResponse",
    "DocumentCreate",
    "DocumentUpdate",
    "DocumentResponse",
    # Other content
    "ChairInfo",
    "CommitteeCreate",
    "CommitteeUpdate",
    "CommitteeResponse",
    "CountryCreate",
    "CountryStatusUpdate",
    "CountryResponse",
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    "CONTENT_SCHEMAS",
    "HomePageContent",
    "AboutPageContent",
    "RegistrationPageContent",
    "DocumentsPageContent",
    "GalleryPageContent",
    "SiteConfig",
]
