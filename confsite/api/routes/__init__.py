from confsite.api.routes.auth import router as auth_router
from confsite.api.routes.gallery import router as gallery_router
from confsite.api.routes.secretariat import router as secretariat_router
from confsite.api.routes.highlights import router as highlights_router
from confsite.api.routes.documents import router as documents_router
from confsite.api.routes.schedule import router as schedule_router
from confsite.api.routes.committees import router as committees_router
from confsite.api.routes.countries import router as countries_router
from confsite.api.routes.posts import router as posts_router
from confsite.api.routes.site_content import router as site_content_router
from confsite.api.routes.transfer import router as transfer_router
from confsite.api.routes.public import router as public_router

__all__ = [
    "auth_router",
    # Ordered collections
    "gallery_router",
    "secretariat_router",
    "highlights_router",
    "documents_router",
    "schedule_router",
    # Other content
    "committees_router",
    "countries_router",
    "posts_router",
    "site_content_router",
    "transfer_router",
    "public_router",
]
