"""Downloadable document admin routes."""

from confsite.api.routes.ordered import ordered_collection_router
from confsite.schemas.document import DocumentCreate, DocumentResponse, DocumentUpdate
from confsite.services.document_service import DocumentService

router = ordered_collection_router(
    prefix="/documents",
    tag="documents",
    noun="Document",
    service_class=DocumentService,
    create_schema=DocumentCreate,
    update_schema=DocumentUpdate,
    response_schema=DocumentResponse,
)
