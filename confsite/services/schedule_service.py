"""Service for the conference schedule (days and their events)."""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select

from confsite.models import ScheduleDay, ScheduleEvent
from confsite.schemas.ordering import MoveRequest, ReorderRequest
from confsite.schemas.schedule import (
    ScheduleDayCreate,
    ScheduleDayUpdate,
    ScheduleEventCreate,
    ScheduleEventUpdate,
)
from confsite.services.collections import OrderedCollectionService
from confsite.services.ordering import OrderedItemStore

logger = logging.getLogger(__name__)


class DayNotFoundError(LookupError):
    """The schedule day an operation refers to does not exist."""


class ScheduleService(OrderedCollectionService[ScheduleDay]):
    """Days are an ordered collection; each day's events are another one."""

    model = ScheduleDay

    def event_store(self, day_id: UUID) -> OrderedItemStore[ScheduleEvent]:
        return OrderedItemStore(self.db, ScheduleEvent, scope={"day_id": day_id})

    async def _require_day(self, day_id: UUID) -> ScheduleDay:
        day = await self.get_by_id(day_id)
        if not day:
            raise DayNotFoundError("Schedule day not found")
        return day

    async def get_schedule(self) -> list[dict[str, Any]]:
        """All days in order, each with its events in order."""
        days = await self.list_all()

        result = await self.db.execute(
            select(ScheduleEvent).order_by(ScheduleEvent.position, ScheduleEvent.id)
        )
        events_by_day: dict[UUID, list[ScheduleEvent]] = {}
        for event in result.scalars().all():
            events_by_day.setdefault(event.day_id, []).append(event)

        return [
            {
                "id": day.id,
                "title": day.title,
                "date": day.date,
                "position": day.position,
                "events": events_by_day.get(day.id, []),
            }
            for day in days
        ]

    async def create_day(self, data: ScheduleDayCreate) -> ScheduleDay:
        return await self.create(data)

    async def update_day(self, day_id: UUID, data: ScheduleDayUpdate) -> ScheduleDay | None:
        return await self.update(day_id, data)

    async def delete_day(self, day_id: UUID) -> bool:
        """Delete a day together with all of its events."""
        day = await self.get_by_id(day_id)
        if not day:
            return False

        result = await self.db.execute(
            delete(ScheduleEvent).where(ScheduleEvent.day_id == day_id)
        )
        await self.db.delete(day)
        await self.db.flush()

        logger.info(f"Deleted schedule day {day_id} and {result.rowcount} events")
        return True

    async def list_events(self, day_id: UUID) -> list[ScheduleEvent]:
        await self._require_day(day_id)
        return await self.event_store(day_id).read_all()

    async def get_event(self, day_id: UUID, event_id: UUID) -> ScheduleEvent | None:
        return await self.event_store(day_id).get(event_id)

    async def create_event(self, day_id: UUID, data: ScheduleEventCreate) -> ScheduleEvent:
        """Add an event at the end of a day."""
        await self._require_day(day_id)
        event = ScheduleEvent(**data.model_dump())
        return await self.event_store(day_id).append(event)

    async def update_event(
        self, day_id: UUID, event_id: UUID, data: ScheduleEventUpdate
    ) -> ScheduleEvent | None:
        """Update an event; moving it to another day appends it there."""
        event = await self.get_event(day_id, event_id)
        if not event:
            return None

        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        new_day_id = update_data.pop("day_id", day_id)
        if new_day_id != day_id:
            await self._require_day(new_day_id)
            position = await self.event_store(new_day_id).next_position()
            event.day_id = new_day_id
            event.position = position

        for field, value in update_data.items():
            setattr(event, field, value)

        await self.db.flush()
        await self.db.refresh(event)
        return event

    async def delete_event(self, day_id: UUID, event_id: UUID) -> bool:
        event = await self.get_event(day_id, event_id)
        if not event:
            return False

        await self.db.delete(event)
        await self.db.flush()
        return True

    async def reorder_events(self, day_id: UUID, request: ReorderRequest) -> list[ScheduleEvent]:
        await self._require_day(day_id)
        return await self.event_store(day_id).write_batch(request.items)

    async def move_event(self, day_id: UUID, request: MoveRequest) -> list[ScheduleEvent]:
        await self._require_day(day_id)
        return await self.event_store(day_id).move(request.from_index, request.to_index)
