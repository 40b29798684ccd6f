"""Router factory for ordered collections.

Every ordered collection exposes the same admin surface: read-all in
display order, CRUD by id, a full write-batch at ``PUT /reorder`` and a
single drag at ``POST /move``.
"""

from uuid import UUID

from fastapi import APIRouter, status
from pydantic import BaseModel

from confsite.api.deps import CurrentUser, DBSession
from confsite.api.errors import not_found, service_errors
from confsite.schemas.ordering import MoveRequest, ReorderRequest
from confsite.services.collections import OrderedCollectionService


def ordered_collection_router(
    *,
    prefix: str,
    tag: str,
    noun: str,
    service_class: type[OrderedCollectionService],
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    response_schema: type[BaseModel],
) -> APIRouter:
    """Build the admin router for one ordered collection."""
    router = APIRouter(prefix=prefix, tags=[tag])

    @router.get("", response_model=list[response_schema])
    async def list_items(current_user: CurrentUser, db: DBSession):
        """List items in display order."""
        return await service_class(db).list_all()

    @router.post("", response_model=response_schema, status_code=status.HTTP_201_CREATED)
    async def create_item(data: create_schema, current_user: CurrentUser, db: DBSession):
        """Create an item at the end of the collection."""
        with service_errors():
            return await service_class(db).create(data)

    @router.put("/reorder", response_model=list[response_schema])
    async def reorder_items(data: ReorderRequest, current_user: CurrentUser, db: DBSession):
        """Persist a full ordered list of positions."""
        with service_errors():
            return await service_class(db).reorder(data)

    @router.post("/move", response_model=list[response_schema])
    async def move_item(data: MoveRequest, current_user: CurrentUser, db: DBSession):
        """Move one item from an index to another."""
        with service_errors():
            return await service_class(db).move(data)

    @router.get("/{item_id}", response_model=response_schema)
    async def get_item(item_id: UUID, current_user: CurrentUser, db: DBSession):
        item = await service_class(db).get_by_id(item_id)
        if not item:
            raise not_found(noun)
        return item

    @router.put("/{item_id}", response_model=response_schema)
    async def update_item(
        item_id: UUID, data: update_schema, current_user: CurrentUser, db: DBSession
    ):
        with service_errors():
            item = await service_class(db).update(item_id, data)
        if not item:
            raise not_found(noun)
        return item

    @router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_item(item_id: UUID, current_user: CurrentUser, db: DBSession) -> None:
        """Delete an item. Other positions are left unchanged."""
        deleted = await service_class(db).delete(item_id)
        if not deleted:
            raise not_found(noun)

    return router
