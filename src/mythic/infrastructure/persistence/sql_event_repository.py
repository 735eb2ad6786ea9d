"""SQLAlchemy-backed analytics event repository (one table, all kinds)."""

from __future__ import annotations

from sqlalchemy.orm import Session

from mythic.domain.model.event import AnalyticsEvent, EventKind
from mythic.domain.repository.event_repository import EventRepository
from mythic.infrastructure.persistence.errors import translate_errors
from mythic.infrastructure.persistence.orm import EventRow


class SqlEventRepository(EventRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, kind: EventKind, event_id: str) -> AnalyticsEvent | None:
        with translate_errors(f"load {kind.value}"):
            row = self._session.get(EventRow, event_id)
        if row is None or row.kind != kind.value:
            return None
        return self._to_domain(row)

    def list_by_kind(self, kind: EventKind) -> list[AnalyticsEvent]:
        with translate_errors(f"list {kind.value}s"):
            rows = (
                self._session.query(EventRow)
                .filter(EventRow.kind == kind.value)
                .order_by(EventRow.created_at, EventRow.id)
                .all()
            )
        return [self._to_domain(r) for r in rows]

    def list_by_visitor(self, kind: EventKind, visitor: str) -> list[AnalyticsEvent]:
        with translate_errors(f"list {kind.value}s"):
            rows = (
                self._session.query(EventRow)
                .filter(EventRow.kind == kind.value, EventRow.visitor == visitor)
                .order_by(EventRow.created_at, EventRow.id)
                .all()
            )
        return [self._to_domain(r) for r in rows]

    def save(self, event: AnalyticsEvent) -> None:
        with translate_errors(f"save {event.kind.value} {event.id}"):
            self._session.merge(
                EventRow(
                    id=event.id,
                    kind=event.kind.value,
                    source=event.source,
                    url=event.url,
                    visitor=event.visitor,
                    label=event.label,
                    created_at=event.created_at,
                    meta=dict(event.meta),
                )
            )
            self._session.flush()

    def delete(self, kind: EventKind, event_id: str) -> None:
        with translate_errors(f"delete {kind.value} {event_id}"):
            self._session.query(EventRow).filter(
                EventRow.id == event_id, EventRow.kind == kind.value
            ).delete()

    @staticmethod
    def _to_domain(row: EventRow) -> AnalyticsEvent:
        return AnalyticsEvent(
            id=row.id,
            kind=EventKind(row.kind),
            source=row.source,
            url=row.url,
            visitor=row.visitor,
            label=row.label,
            created_at=row.created_at,
            meta=dict(row.meta or {}),
        )
