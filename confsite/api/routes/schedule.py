"""Schedule admin routes: days and the events within each day."""

from uuid import UUID

from fastapi import APIRouter, status

from confsite.api.deps import CurrentUser, DBSession
from confsite.api.errors import not_found, service_errors
from confsite.models import ScheduleDay, ScheduleEvent
from confsite.schemas.ordering import MoveRequest, ReorderRequest
from confsite.schemas.schedule import (
    ScheduleDayCreate,
    ScheduleDayResponse,
    ScheduleDayUpdate,
    ScheduleDayWithEvents,
    ScheduleEventCreate,
    ScheduleEventResponse,
    ScheduleEventUpdate,
)
from confsite.services.schedule_service import ScheduleService

router = APIRouter(prefix="/schedule", tags=["schedule"])


@router.get("", response_model=list[ScheduleDayWithEvents])
async def get_schedule(current_user: CurrentUser, db: DBSession) -> list[dict]:
    """Full schedule: days in order, each with its events in order."""
    return await ScheduleService(db).get_schedule()


# --- Days ---


@router.get("/days", response_model=list[ScheduleDayResponse])
async def list_days(current_user: CurrentUser, db: DBSession) -> list[ScheduleDay]:
    return await ScheduleService(db).list_all()


@router.post("/days", response_model=ScheduleDayResponse, status_code=status.HTTP_201_CREATED)
async def create_day(
    data: ScheduleDayCreate,
    current_user: CurrentUser,
    db: DBSession,
) -> ScheduleDay:
    """Add a day after the last one."""
    return await ScheduleService(db).create_day(data)


@router.put("/days/reorder", response_model=list[ScheduleDayResponse])
async def reorder_days(
    data: ReorderRequest,
    current_user: CurrentUser,
    db: DBSession,
) -> list[ScheduleDay]:
    with service_errors():
        return await ScheduleService(db).reorder(data)


@router.post("/days/move", response_model=list[ScheduleDayResponse])
async def move_day(
    data: MoveRequest,
    current_user: CurrentUser,
    db: DBSession,
) -> list[ScheduleDay]:
    with service_errors():
        return await ScheduleService(db).move(data)


@router.get("/days/{day_id}", response_model=ScheduleDayResponse)
async def get_day(day_id: UUID, current_user: CurrentUser, db: DBSession) -> ScheduleDay:
    day = await ScheduleService(db).get_by_id(day_id)
    if not day:
        raise not_found("Schedule day")
    return day


@router.put("/days/{day_id}", response_model=ScheduleDayResponse)
async def update_day(
    day_id: UUID,
    data: ScheduleDayUpdate,
    current_user: CurrentUser,
    db: DBSession,
) -> ScheduleDay:
    day = await ScheduleService(db).update_day(day_id, data)
    if not day:
        raise not_found("Schedule day")
    return day


@router.delete("/days/{day_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_day(day_id: UUID, current_user: CurrentUser, db: DBSession) -> None:
    """Delete a day and all of its events."""
    deleted = await ScheduleService(db).delete_day(day_id)
    if not deleted:
        raise not_found("Schedule day")


# --- Events ---


@router.get("/days/{day_id}/events", response_model=list[ScheduleEventResponse])
async def list_events(
    day_id: UUID,
    current_user: CurrentUser,
    db: DBSession,
) -> list[ScheduleEvent]:
    with service_errors():
        return await ScheduleService(db).list_events(day_id)


@router.post(
    "/days/{day_id}/events",
    response_model=ScheduleEventResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_event(
    day_id: UUID,
    data: ScheduleEventCreate,
    current_user: CurrentUser,
    db: DBSession,
) -> ScheduleEvent:
    """Add an event at the end of a day."""
    with service_errors():
        return await ScheduleService(db).create_event(day_id, data)


@router.put("/days/{day_id}/events/reorder", response_model=list[ScheduleEventResponse])
async def reorder_events(
    day_id: UUID,
    data: ReorderRequest,
    current_user: CurrentUser,
    db: DBSession,
) -> list[ScheduleEvent]:
    with service_errors():
        return await ScheduleService(db).reorder_events(day_id, data)


@router.post("/days/{day_id}/events/move", response_model=list[ScheduleEventResponse])
async def move_event(
    day_id: UUID,
    data: MoveRequest,
    current_user: CurrentUser,
    db: DBSession,
) -> list[ScheduleEvent]:
    with service_errors():
        return await ScheduleService(db).move_event(day_id, data)


@router.get("/days/{day_id}/events/{event_id}", response_model=ScheduleEventResponse)
async def get_event(
    day_id: UUID,
    event_id: UUID,
    current_user: CurrentUser,
    db: DBSession,
) -> ScheduleEvent:
    event = await ScheduleService(db).get_event(day_id, event_id)
    if not event:
        raise not_found("Schedule event")
    return event


@router.put("/days/{day_id}/events/{event_id}", response_model=ScheduleEventResponse)
async def update_event(
    day_id: UUID,
    event_id: UUID,
    data: ScheduleEventUpdate,
    current_user: CurrentUser,
    db: DBSession,
) -> ScheduleEvent:
    """Update an event. Setting ``day_id`` moves it to the end of that day."""
    with service_errors():
        event = await ScheduleService(db).update_event(day_id, event_id, data)
    if not event:
        raise not_found("Schedule event")
    return event


@router.delete("/days/{day_id}/events/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    day_id: UUID,
    event_id: UUID,
    current_user: CurrentUser,
    db: DBSession,
) -> None:
    deleted = await ScheduleService(db).delete_event(day_id, event_id)
    if not deleted:
        raise not_found("Schedule event")
