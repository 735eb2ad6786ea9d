"""Application services: record, replace and remove analytics events."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from mythic.application.dto import EventDTO
from mythic.application.mapping import event_dto
from mythic.domain.exceptions import NotFoundError
from mythic.domain.model.event import AnalyticsEvent, EventKind
from mythic.domain.repository.unit_of_work import UnitOfWork


class RecordEventHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        kind: EventKind,
        source: str,
        url: str,
        visitor: str,
        label: str | None = None,
        created_at: datetime | None = None,
        meta: dict[str, Any] | None = None,
    ) -> EventDTO:
        event = AnalyticsEvent.record(kind, source, url, visitor, label, created_at, meta)
        with self._uow:
            self._uow.events.save(event)
            self._uow.commit()
        return event_dto(event)


class ReplaceEventHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        kind: EventKind,
        event_id: str,
        source: str,
        url: str,
        visitor: str,
        label: str | None = None,
        created_at: datetime | None = None,
        meta: dict[str, Any] | None = None,
    ) -> EventDTO:
        with self._uow:
            event = self._uow.events.get_by_id(kind, event_id)
            if event is None:
                raise NotFoundError(f"{kind.value.capitalize()} {event_id} not found")
            event.replace(source, url, visitor, label, created_at, meta)
            self._uow.events.save(event)
            self._uow.commit()
        return event_dto(event)


class RemoveEventHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, kind: EventKind, event_id: str) -> EventDTO:
        with self._uow:
            event = self._uow.events.get_by_id(kind, event_id)
            if event is None:
                raise NotFoundError(f"{kind.value.capitalize()} {event_id} not found")
            self._uow.events.delete(kind, event_id)
            self._uow.commit()
        return event_dto(event)
