"""Secretariat admin routes."""

from confsite.api.routes.ordered import ordered_collection_router
from confsite.schemas.secretariat import (
    SecretariatMemberCreate,
    SecretariatMemberResponse,
    SecretariatMemberUpdate,
)
from confsite.services.secretariat_service import SecretariatService

router = ordered_collection_router(
    prefix="/secretariat",
    tag="secretariat",
    noun="Secretariat member",
    service_class=SecretariatService,
    create_schema=SecretariatMemberCreate,
    update_schema=SecretariatMemberUpdate,
    response_schema=SecretariatMemberResponse,
)
