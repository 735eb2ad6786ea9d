"""Analytics endpoints: the same CRUD surface for views, actions and goals."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from mythic.application.record_event import (
    RecordEventHandler,
    RemoveEventHandler,
    ReplaceEventHandler,
)
from mythic.application.show_event import GoalDetailsHandler, ListEventsHandler, ShowEventHandler
from mythic.domain.model.event import EventKind
from mythic.domain.repository.unit_of_work import UnitOfWork
from mythic.infrastructure.api.dependencies import get_uow
from mythic.infrastructure.api.schemas import EventIn, EventOut, GoalDetailsOut


def _label(kind: EventKind, body: EventIn) -> str | None:
    if kind.label_field is None:
        return None
    return getattr(body, kind.label_field)


def build_event_router(kind: EventKind) -> APIRouter:
    """CRUD routes for one event kind, mounted at ``/<kind>s``."""
    router = APIRouter()

    @router.post("", response_model=EventOut, status_code=201, response_model_exclude_none=True)
    def record(body: EventIn, uow: UnitOfWork = Depends(get_uow)) -> EventOut:
        dto = RecordEventHandler(uow).handle(
            kind, body.source, body.url, body.visitor, _label(kind, body), body.created_at, body.meta
        )
        return EventOut.from_dto(dto)

    @router.get("", response_model=List[EventOut], response_model_exclude_none=True)
    def list_all(uow: UnitOfWork = Depends(get_uow)) -> List[EventOut]:
        return [EventOut.from_dto(e) for e in ListEventsHandler(uow).handle(kind)]

    @router.get("/{event_id}", response_model=EventOut, response_model_exclude_none=True)
    def show(event_id: str, uow: UnitOfWork = Depends(get_uow)) -> EventOut:
        return EventOut.from_dto(ShowEventHandler(uow).handle(kind, event_id))

    @router.put("/{event_id}", response_model=EventOut, response_model_exclude_none=True)
    def replace(event_id: str, body: EventIn, uow: UnitOfWork = Depends(get_uow)) -> EventOut:
        dto = ReplaceEventHandler(uow).handle(
            kind, event_id, body.source, body.url, body.visitor,
            _label(kind, body), body.created_at, body.meta,
        )
        return EventOut.from_dto(dto)

    @router.delete("/{event_id}", response_model=EventOut, response_model_exclude_none=True)
    def remove(event_id: str, uow: UnitOfWork = Depends(get_uow)) -> EventOut:
        return EventOut.from_dto(RemoveEventHandler(uow).handle(kind, event_id))

    if kind is EventKind.GOAL:

        @router.get(
            "/{event_id}/details", response_model=GoalDetailsOut, response_model_exclude_none=True
        )
        def details(event_id: str, uow: UnitOfWork = Depends(get_uow)) -> GoalDetailsOut:
            return GoalDetailsOut.from_details(GoalDetailsHandler(uow).handle(event_id))

    return router
