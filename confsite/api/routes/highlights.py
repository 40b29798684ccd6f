"""Home page highlight admin routes."""

from confsite.api.routes.ordered import ordered_collection_router
from confsite.schemas.highlight import HighlightCreate, HighlightResponse, HighlightUpdate
from confsite.services.highlight_service import HighlightService

router = ordered_collection_router(
    prefix="/highlights",
    tag="highlights",
    noun="Highlight",
    service_class=HighlightService,
    create_schema=HighlightCreate,
    update_schema=HighlightUpdate,
    response_schema=HighlightResponse,
)
