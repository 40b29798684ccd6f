"""Base service for CRUD on ordered collections."""

import logging
from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from confsite.schemas.ordering import MoveRequest, ReorderRequest
from confsite.services.ordering import OrderedItemStore

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class OrderedCollectionService(Generic[ModelT]):
    """CRUD plus reorder/move for a model with a ``position`` column."""

    model: type[ModelT]

    def __init__(self, db: AsyncSession):
        self.db = db

    def store(self) -> OrderedItemStore[ModelT]:
        return OrderedItemStore(self.db, self.model)

    def _create_fields(self, data: BaseModel) -> dict[str, Any]:
        """Column values for a new row."""
        return data.model_dump()

    def _update_fields(self, item: ModelT, data: BaseModel) -> dict[str, Any]:
        """Column values to change on an existing row."""
        return data.model_dump(exclude_unset=True, exclude_none=True)

    async def list_all(self) -> list[ModelT]:
        """List items in display order."""
        return await self.store().read_all()

    async def get_by_id(self, item_id: UUID) -> ModelT | None:
        return await self.store().get(item_id)

    async def create(self, data: BaseModel) -> ModelT:
        """Create an item at the end of the collection."""
        item = self.model(**self._create_fields(data))
        return await self.store().append(item)

    async def update(self, item_id: UUID, data: BaseModel) -> ModelT | None:
        """Update an item's attributes. Position is only changed by reorder."""
        item = await self.get_by_id(item_id)
        if not item:
            return None

        for field, value in self._update_fields(item, data).items():
            setattr(item, field, value)

        await self.db.flush()
        await self.db.refresh(item)
        return item

    async def delete(self, item_id: UUID) -> bool:
        """Delete an item. Remaining positions are left as they are."""
        item = await self.get_by_id(item_id)
        if not item:
            return False

        await self.db.delete(item)
        await self.db.flush()

        logger.info(f"Deleted {self.model.__tablename__} item {item_id}")
        return True

    async def reorder(self, request: ReorderRequest) -> list[ModelT]:
        """Apply a full ordered list of positions."""
        return await self.store().write_batch(request.items)

    async def move(self, request: MoveRequest) -> list[ModelT]:
        """Move one item from an index to another."""
        return await self.store().move(request.from_index, request.to_index)
