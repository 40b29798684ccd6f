"""Ordered collections: the reorder reducer and the position store.

Every orderable model carries an integer ``position``. A write-batch leaves
the positions of a collection scope unique and strictly increasing in read
order. Creating an item appends it after the current maximum, deleting one
leaves a gap, and a reorder rewrites the positions of the whole scope in a
single transaction.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Generic, Protocol, TypeVar
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from confsite.schemas.ordering import PositionUpdate

logger = logging.getLogger(__name__)

T = TypeVar("T")
ModelT = TypeVar("ModelT")


class PositionLike(Protocol):
    id: Any
    position: int


class OrderingError(ValueError):
    """A write-batch does not describe a valid order for the collection."""


class UnknownItemError(OrderingError):
    """A write-batch or move referenced ids that are not in the collection."""

    def __init__(self, ids: Iterable[Any]):
        self.ids = list(ids)
        joined = ", ".join(str(item_id) for item_id in self.ids)
        super().__init__(f"Items not found in this collection: {joined}")


class StoreWriteError(RuntimeError):
    """The backing store failed to persist a write-batch."""


def reorder(sequence: Sequence[T], from_index: int, to_index: int) -> list[T]:
    """Return a copy of ``sequence`` with one element moved.

    The element at ``from_index`` is removed and reinserted at ``to_index``;
    everything else keeps its relative order. Negative indices are not
    accepted.

    >>> reorder(["A", "B", "C", "D"], 0, 2)
    ['B', 'C', 'A', 'D']
    """
    length = len(sequence)
    for name, index in (("from_index", from_index), ("to_index", to_index)):
        if not 0 <= index < length:
            raise IndexError(f"{name} {index} out of range for {length} items")

    items = list(sequence)
    items.insert(to_index, items.pop(from_index))
    return items


def sequential_positions(ids: Iterable[Any]) -> list[PositionUpdate]:
    """Positions 0..n-1 for ids in the given order."""
    return [PositionUpdate(id=item_id, position=idx) for idx, item_id in enumerate(ids)]


def check_batch(updates: Sequence[PositionLike], existing_ids: Iterable[Any]) -> None:
    """Validate a write-batch against the ids currently in the collection.

    Raises before anything is written, so a rejected batch never leaves a
    partial reorder behind.
    """
    ids = [update.id for update in updates]
    if len(set(ids)) != len(ids):
        raise OrderingError("Each item may appear only once in a reorder")

    positions = [update.position for update in updates]
    if any(position < 0 for position in positions):
        raise OrderingError("Positions must not be negative")
    if any(b <= a for a, b in zip(positions, positions[1:])):
        raise OrderingError("Positions must strictly increase in list order")

    existing = set(existing_ids)
    unknown = [item_id for item_id in ids if item_id not in existing]
    if unknown:
        raise UnknownItemError(unknown)

    missing = existing.difference(ids)
    if missing:
        raise OrderingError(
            f"Reorder must include every item in the collection ({len(missing)} missing)"
        )


class OrderedItemStore(Generic[ModelT]):
    """Position persistence for one ordered collection.

    ``scope`` narrows the collection to rows matching the given column
    values, e.g. ``{"day_id": day.id}`` for the events of one schedule day.
    """

    def __init__(
        self,
        db: AsyncSession,
        model: type[ModelT],
        scope: dict[str, Any] | None = None,
    ):
        self.db = db
        self.model = model
        self.scope = scope or {}

    @property
    def label(self) -> str:
        return self.model.__tablename__

    def _scoped(self, query):
        for column, value in self.scope.items():
            query = query.where(getattr(self.model, column) == value)
        return query

    async def read_all(self) -> list[ModelT]:
        """All items of the scope, sorted by position ascending."""
        result = await self.db.execute(
            self._scoped(select(self.model)).order_by(self.model.position, self.model.id)
        )
        return list(result.scalars().all())

    async def get(self, item_id: UUID) -> ModelT | None:
        """Get one item if it belongs to this scope."""
        result = await self.db.execute(
            self._scoped(select(self.model)).where(self.model.id == item_id)
        )
        return result.scalar_one_or_none()

    async def next_position(self) -> int:
        """Get the next available position at the end of the scope."""
        result = await self.db.execute(
            self._scoped(select(func.coalesce(func.max(self.model.position), -1) + 1))
        )
        return result.scalar() or 0

    async def append(self, item: ModelT) -> ModelT:
        """Add a new item after the current last one.

        Two concurrent appends can read the same maximum and share a
        position. Reads break the tie by id and the next move or reorder
        rewrites the scope as 0..n-1.
        """
        for column, value in self.scope.items():
            setattr(item, column, value)
        item.position = await self.next_position()

        self.db.add(item)
        await self.db.flush()
        await self.db.refresh(item)

        logger.info(f"Appended {self.label} item {item.id} at position {item.position}")
        return item

    async def write_batch(self, updates: Sequence[PositionLike]) -> list[ModelT]:
        """Persist a full ordered list of positions atomically.

        Either every position is updated or none is. Returns the collection
        as read back after the commit.
        """
        try:
            items = {item.id: item for item in await self.read_all()}
            check_batch(updates, items.keys())

            for update in updates:
                items[update.id].position = update.position

            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Reorder of {self.label} failed: {e}", exc_info=True)
            raise StoreWriteError(f"Could not save the new {self.label} order") from e

        logger.info(f"Reordered {len(updates)} {self.label} items")
        return await self.read_all()

    async def move(self, from_index: int, to_index: int) -> list[ModelT]:
        """Move one item within the current order and persist the result."""
        items = await self.read_all()
        try:
            moved = reorder(items, from_index, to_index)
        except IndexError as e:
            raise OrderingError(str(e)) from e

        if from_index == to_index:
            return items
        return await self.write_batch(sequential_positions(item.id for item in moved))
